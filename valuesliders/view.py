"""Tk presentation of value sliders, and a small demo window."""

from __future__ import annotations

import tkinter

from .base import (
    BLINKER_INTERVAL_MS,
    CURSOR_BLANK,
    CURSOR_IBEAM,
    CURSOR_SIZE_HOR,
    PADDING,
    Key,
    ValueSlider,
)
from .double_slider import DoubleSlider
from .int_slider import IntSlider

DEFAULT_HEIGHT = 28
FONT = ("Lato", -14)

TROUGH_COLOR = "#e4e4e4"
FILL_COLOR = "#9ec9ea"
HIGHLIGHT_COLOR = "#3d8fd6"
TEXT_COLOR = "#000000"

_TK_CURSORS = {
    CURSOR_BLANK: "none",
    CURSOR_IBEAM: "xterm",
    CURSOR_SIZE_HOR: "sb_h_double_arrow",
}

_KEYSYMS = {
    "Escape": Key.ESCAPE,
    "Return": Key.RETURN,
    "KP_Enter": Key.ENTER,
    "BackSpace": Key.BACKSPACE,
}

_BUTTON1_MASK = 0x0100
_CONTROL_MASK = 0x0004


class SliderView:
    """Draws a slider on a Tk canvas and feeds it pointer and keyboard events."""

    def __init__(self, master, slider: ValueSlider) -> None:
        self.slider = slider
        self._height = DEFAULT_HEIGHT
        self._cursor = ""
        self._blink_job = None
        self.canvas = tkinter.Canvas(
            master,
            width=slider.width,
            height=self._height,
            highlightthickness=0,
            takefocus=1,
        )
        bindings = {
            "<ButtonPress>": self._on_press,
            "<Motion>": self._on_motion,
            "<ButtonRelease>": self._on_release,
            "<Double-Button-1>": self._on_double_click,
            "<Key>": self._on_key,
            "<FocusOut>": self._on_focus_out,
            "<Enter>": self._on_enter,
            "<Leave>": self._on_leave,
            "<Configure>": self._on_configure,
            "<Destroy>": self._on_destroy,
        }
        for sequence, handler in bindings.items():
            self.canvas.bind(sequence, handler)
        slider.changed.append(self.redraw)
        self.redraw()

    def redraw(self) -> None:
        """Repaint the bar and its texts from the slider's current state."""
        slider = self.slider
        canvas = self.canvas
        width, height = slider.width, self._height
        canvas.delete("all")
        canvas.create_rectangle(0, 0, width, height, fill=TROUGH_COLOR, outline="", tags="trough")

        span = slider.bar_maximum - slider.bar_minimum
        if span > 0:
            fill_width = round(width * (slider.bar_value - slider.bar_minimum) / span)
            if fill_width > 0:
                canvas.create_rectangle(
                    0, 0, fill_width, height, fill=FILL_COLOR, outline="", tags="fill"
                )

        left_text, right_text = slider.display_text()
        middle = height / 2
        text_id = canvas.create_text(
            PADDING, middle, anchor="w", text=left_text, font=FONT, fill=TEXT_COLOR, tags="text"
        )
        if slider.typing:
            x0, _, x1, _ = canvas.bbox(text_id)
            box_left = PADDING // 2
            box_right = box_left + (x1 - x0) + PADDING
            if not slider.typed_input:
                canvas.create_rectangle(
                    box_left, 0, box_right, height,
                    fill=HIGHLIGHT_COLOR, outline="", tags="highlight",
                )
            if slider.blinker_visible:
                blink_x = box_right - PADDING // 2
                canvas.create_rectangle(
                    blink_x, 0, blink_x + 2, height,
                    fill=TEXT_COLOR, outline="", tags="blinker",
                )
            canvas.tag_raise(text_id)
        else:
            canvas.create_text(
                width - PADDING, middle, anchor="e", text=right_text,
                font=FONT, fill=TEXT_COLOR, tags="value",
            )

        self._sync_cursor()
        self._sync_blinker()

    # ----- synchronisation with the slider's state -----

    def _sync_cursor(self) -> None:
        stack = self.slider.cursor_stack
        cursor = _TK_CURSORS.get(stack[-1], "") if stack else ""
        if cursor != self._cursor:
            self._cursor = cursor
            self.canvas.configure(cursor=cursor)

    def _sync_blinker(self) -> None:
        running = self.slider.blinker_running
        if running and self._blink_job is None:
            self._blink_job = self.canvas.after(BLINKER_INTERVAL_MS, self._blink)
        elif not running and self._blink_job is not None:
            self.canvas.after_cancel(self._blink_job)
            self._blink_job = None

    def _blink(self) -> None:
        self._blink_job = None
        self.slider.toggle_blinker()

    # ----- event handlers -----

    def _on_press(self, event) -> None:
        self.canvas.focus_set()
        self.slider.mouse_press(event.x, event.num == 1)
        self.redraw()

    def _on_motion(self, event) -> None:
        slider = self.slider
        left_button = bool(event.state & _BUTTON1_MASK)
        control = bool(event.state & _CONTROL_MASK)
        before = slider.value
        slider.mouse_move(event.x, left_button, control)
        stepped = not control or slider.value != before
        if left_button and not slider.typing and event.x != slider.press_x and stepped:
            # Keep the pointer where the drag started so it never runs out of room.
            self.canvas.event_generate("<Motion>", warp=True, x=slider.press_x, y=event.y)
        self.redraw()

    def _on_release(self, event) -> None:
        self.slider.mouse_release(event.num == 1)
        self.redraw()

    def _on_double_click(self, event) -> None:
        self.slider.mouse_double_click(True)
        self.redraw()

    def _on_key(self, event):
        key = _KEYSYMS.get(event.keysym, Key.OTHER)
        consumed = self.slider.key_press(key, event.char)
        self.redraw()
        return "break" if consumed else None

    def _on_focus_out(self, event) -> None:
        self.slider.focus_out()
        self.redraw()

    def _on_enter(self, event) -> None:
        self.slider.enter()
        self.redraw()

    def _on_leave(self, event) -> None:
        self.slider.leave()
        self.redraw()

    def _on_configure(self, event) -> None:
        self.slider.width = max(1, event.width)
        self._height = max(1, event.height)
        self.redraw()

    def _on_destroy(self, event) -> None:
        if self.redraw in self.slider.changed:
            self.slider.changed.remove(self.redraw)
        if self._blink_job is not None:
            self.canvas.after_cancel(self._blink_job)
            self._blink_job = None


def demo_sliders() -> list[ValueSlider]:
    """The sliders shown by the demo window."""
    return [
        DoubleSlider("Double", 10.0),
        IntSlider("Integer", 10),
        DoubleSlider("Bounded Double", 50, 0, 100),
        IntSlider("Custom Name", 0, -50, 50),
    ]


def main(argv=None) -> int:
    """Open a window showing a few sliders."""
    root = tkinter.Tk()
    root.title("Value Slider Demo")
    frame = tkinter.Frame(root, padx=10, pady=10)
    frame.pack(fill="both", expand=True)
    tkinter.Label(frame, text="This is a small demo program:", font=FONT, anchor="w").pack(fill="x")
    for slider in demo_sliders():
        SliderView(frame, slider).canvas.pack(fill="x", pady=4)
    root.mainloop()
    return 0