"""Toolkit-independent state and behaviour of a draggable, typeable value slider."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

Number = TypeVar("Number", int, float)

PADDING = 12
BLINKER_INTERVAL_MS = 500
# How "fine" fine-tuning is: with the control modifier held, the pointer
# must travel this many pixels to move the value by a single step.
FINE_TUNING_THRESHOLD = 64
DEFAULT_WIDTH = 100

CURSOR_BLANK = "blank"
CURSOR_IBEAM = "ibeam"
CURSOR_SIZE_HOR = "size_hor"


class BoundMode(enum.Enum):
    """Which of the slider's bounds are enforced on its value."""

    UNCHECKED = enum.auto()
    UPPER_ONLY = enum.auto()
    LOWER_ONLY = enum.auto()
    UPPER_LOWER = enum.auto()


class Key(enum.Enum):
    """Keys the slider treats specially while text is being typed."""

    ESCAPE = enum.auto()
    RETURN = enum.auto()
    ENTER = enum.auto()
    BACKSPACE = enum.auto()
    OTHER = enum.auto()


def _clamp(value, lower, upper):
    return max(lower, min(value, upper))


class ValueSlider(ABC, Generic[Number]):
    """A named value that can be dragged with the pointer or typed in.

    The slider also models a progress bar: ``bar_minimum``, ``bar_maximum``
    and ``bar_value`` hold the bar's integer range and fill, in the units
    produced by :meth:`transform`.
    """

    def __init__(
        self,
        name: str,
        value: Number,
        minimum: Number | None = None,
        maximum: Number | None = None,
        bound_mode: BoundMode = BoundMode.UPPER_LOWER,
    ) -> None:
        if (minimum is None) != (maximum is None):
            raise TypeError("minimum and maximum must be given together")
        if minimum is None or maximum is None:
            bound_mode = BoundMode.UNCHECKED
            if value > 0:
                minimum, maximum = value - value, value * 2
            elif value < 0:
                minimum, maximum = value * 2, value - value
            else:
                minimum, maximum = value - 1, value + 1
        elif minimum > maximum:
            raise ValueError(
                "ValueSlider min val cannot be greater than max val.\n"
                f"Min: {minimum}\nMax: {maximum}\n"
            )

        self.name = name
        self._value: Number = value
        self.lower: Number = minimum
        self.upper: Number = maximum
        self.bound_mode = bound_mode
        self.width = DEFAULT_WIDTH

        self.value_updated: list[Callable[[Number], None]] = []
        self.edit_ended: list[Callable[[], None]] = []
        self.changed: list[Callable[[], None]] = []

        self.has_focus = False
        self.typing = False
        self.typed_input = ""
        self.blinker_visible = False
        self.blinker_running = False
        self.mouse_moved = False
        self.press_x = 0
        self._old_pos = 0
        self._pending_diff = 0
        self.under_mouse = False
        self.sliding_hover = False
        self.cursor_stack: list[str] = []

        self.bar_minimum = self.transform(self.lower)
        self.bar_maximum = self.transform(self.upper)
        if self.bound_mode is BoundMode.UPPER_LOWER:
            self.bar_value = _clamp(self.transform(value), self.bar_minimum, self.bar_maximum)
        else:
            self.bar_value = self.bar_minimum

    # ----- conversions supplied by concrete sliders -----

    @abstractmethod
    def transform(self, val: Number) -> int:
        """Map a value onto the integer scale of the bar."""

    @abstractmethod
    def convert_string(self, string: str) -> Number:
        """Parse typed text; raise ValueError if it is not a valid value."""

    @abstractmethod
    def create_string(self, val: Number) -> str:
        """Format a value for display."""

    @abstractmethod
    def value_by_position(self, x: int) -> Number:
        """The value that a horizontal drag of ``x`` pixels leads to."""

    # ----- value -----

    @property
    def value(self) -> Number:
        return self._value

    def bound_val(self, value: Number) -> Number:
        """Return ``value`` limited according to the bound mode."""
        if self.bound_mode is BoundMode.LOWER_ONLY:
            return max(value, self.lower)
        if self.bound_mode is BoundMode.UPPER_ONLY:
            return min(value, self.upper)
        if self.bound_mode is BoundMode.UPPER_LOWER:
            return _clamp(value, self.lower, self.upper)
        return value

    def set_val(self, value: Number) -> None:
        """Set the value, bounded, and notify listeners."""
        if self._value == value:
            return
        self._value = self.bound_val(value)
        if self.bound_mode is BoundMode.UPPER_LOWER:
            self.bar_value = _clamp(self.transform(self._value), self.bar_minimum, self.bar_maximum)
        for callback in list(self.value_updated):
            callback(self._value)
        self._update()

    # ----- pointer -----

    def mouse_press(self, x: int, left_button: bool = True) -> None:
        self.has_focus = True
        if self.typing:
            return
        if left_button:
            self.cursor_stack.append(CURSOR_BLANK)
            self.press_x = x
            self._old_pos = x
            self.mouse_moved = False

    def mouse_move(self, x: int, left_button: bool = True, control: bool = False) -> None:
        """Handle pointer motion; the pointer is assumed warped back to ``press_x`` after each step."""
        if self.typing or not left_button:
            return
        diff = x - self._old_pos
        if control:
            self._pending_diff += diff
            if abs(self._pending_diff) < FINE_TUNING_THRESHOLD:
                return
            diff = 1 if self._pending_diff > 0 else -1
        self._pending_diff = 0
        if diff != 0:
            self.set_val(self.value_by_position(diff))
        self.mouse_moved = True

    def mouse_release(self, left_button: bool = True) -> None:
        if self.mouse_moved:
            if left_button:
                self._emit_edit_ended()
            self._restore_cursor()
        else:
            self._restore_cursor()
            if not self.typing:
                self._start_typing()

    def mouse_double_click(self, left_button: bool = True) -> None:
        if left_button and not self.typing:
            self._start_typing()

    def enter(self) -> None:
        self.under_mouse = True
        if not self.typing and not self.sliding_hover:
            self.cursor_stack.append(CURSOR_SIZE_HOR)
            self.sliding_hover = True

    def leave(self) -> None:
        self.under_mouse = False
        if not self.typing:
            self._restore_cursor()
            self.sliding_hover = False

    # ----- keyboard and focus -----

    def key_press(self, key: Key, text: str = "") -> bool:
        """Handle a key while typing; return whether it was consumed."""
        if not self.typing:
            return False
        if key is Key.ESCAPE:
            self._stop_typing()
        elif key in (Key.RETURN, Key.ENTER):
            self._submit_typed_input()
        elif key is Key.BACKSPACE:
            self.typed_input = self.typed_input[:-1]
            self._update()
        else:
            self.typed_input += text
            self._update()
        return True

    def focus_out(self) -> None:
        if self.typing:
            self._submit_typed_input()
        self.has_focus = False
        self._restore_cursor()
        self.sliding_hover = False

    def toggle_blinker(self) -> None:
        self.blinker_visible = not self.blinker_visible
        self._update()

    def display_text(self) -> tuple[str, str]:
        """Return the left-aligned and right-aligned texts to draw."""
        if self.typing:
            return (self.typed_input or self._plain_number(self._value), "")
        return (self.name, self.create_string(self._value))

    # ----- internals -----

    @staticmethod
    def _plain_number(val) -> str:
        return format(val, "g") if isinstance(val, float) else str(val)

    def _update(self) -> None:
        for callback in list(self.changed):
            callback()

    def _emit_edit_ended(self) -> None:
        for callback in list(self.edit_ended):
            callback()

    def _restore_cursor(self) -> None:
        if self.cursor_stack:
            self.cursor_stack.pop()

    def _start_typing(self) -> None:
        self.has_focus = True
        self.cursor_stack.append(CURSOR_IBEAM)
        self.typed_input = ""
        self.typing = True
        self.blinker_running = True
        self._update()

    def _stop_typing(self) -> None:
        self._restore_cursor()
        self.blinker_running = False
        self.typing = False
        self.set_val(self._value)
        self._update()

    def _submit_typed_input(self) -> None:
        try:
            new_value = self.convert_string(self.typed_input)
        except ValueError:
            pass
        else:
            self.set_val(new_value)
        self._stop_typing()
        self._restore_cursor()
        if self.under_mouse and not self.sliding_hover:
            self.cursor_stack.append(CURSOR_SIZE_HOR)
            self.sliding_hover = True
        else:
            self.sliding_hover = False
        self._emit_edit_ended()