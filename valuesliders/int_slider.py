"""A slider over integer values."""

from __future__ import annotations

import math

from .base import BoundMode, ValueSlider

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


class IntSlider(ValueSlider[int]):
    """Slider over whole numbers; drags accumulate fractional movement."""

    def __init__(
        self,
        name: str,
        value: int,
        minimum: int | None = None,
        maximum: int | None = None,
        bound_mode: BoundMode = BoundMode.UPPER_LOWER,
    ) -> None:
        super().__init__(name, value, minimum, maximum, bound_mode)
        self._move_value = float(self.value)

    def transform(self, val: int) -> int:
        return val

    def convert_string(self, string: str) -> int:
        if "_" in string:
            raise ValueError(f"not an integer: {string!r}")
        number = int(string, 10)
        if not _INT_MIN <= number <= _INT_MAX:
            raise ValueError(f"integer out of range: {string!r}")
        return number

    def create_string(self, val: int) -> str:
        return str(val)

    def value_by_position(self, x: int) -> int:
        ratio = x / self.width
        self._move_value += ratio * (self.bar_maximum - self.bar_minimum)
        if self.bound_mode is BoundMode.LOWER_ONLY:
            self._move_value = max(self._move_value, self.lower - 1.0)
        elif self.bound_mode is BoundMode.UPPER_ONLY:
            self._move_value = min(self._move_value, self.upper - 1.0)
        elif self.bound_mode is BoundMode.UPPER_LOWER:
            self._move_value = max(self.lower - 1.0, min(self._move_value, self.upper + 1.0))
        return _round_half_away(self._move_value)

    def mouse_press(self, x: int, left_button: bool = True) -> None:
        super().mouse_press(x, left_button)
        self._move_value = float(self.value)