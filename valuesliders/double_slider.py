"""A slider over floating-point values, shown with three decimals."""

from __future__ import annotations

import math

from .base import BoundMode, ValueSlider


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


class DoubleSlider(ValueSlider[float]):
    """Slider whose bar works in hundredths of the value."""

    def __init__(
        self,
        name: str,
        value: float,
        minimum: float | None = None,
        maximum: float | None = None,
        bound_mode: BoundMode = BoundMode.UPPER_LOWER,
    ) -> None:
        super().__init__(
            name,
            float(value),
            None if minimum is None else float(minimum),
            None if maximum is None else float(maximum),
            bound_mode,
        )

    def transform(self, val: float) -> int:
        return _round_half_away(val * 100.0)

    def convert_string(self, string: str) -> float:
        if "_" in string:
            raise ValueError(f"not a number: {string!r}")
        return float(string)

    def create_string(self, val: float) -> str:
        return f"{val:.3f}"

    def value_by_position(self, x: int) -> float:
        ratio = x / self.width
        delta = ratio * (self.bar_maximum - self.bar_minimum)
        return self.value + delta / 100.0