# valuesliders

Numeric value sliders that show a name on the left and the current value on
the right. Drag horizontally to change the value, and hold Control while
dragging for fine tuning: the pointer must then travel 64 pixels to move the
value by one step. Click without dragging, or double-click, to type a new
value. Enter submits the typed text, Escape cancels it, and Backspace deletes
the last character. Text that does not parse as a value is ignored on submit.
Losing focus while typing submits the text as well.

The slider logic does not depend on any GUI toolkit. A Tk view is included
for showing sliders on screen.

## Modules

- `valuesliders.base`: `ValueSlider`, the abstract base with the value,
  bounds, pointer, keyboard and focus handling; `BoundMode`; and `Key`, the
  keys treated specially while typing (`ESCAPE`, `RETURN`, `ENTER`,
  `BACKSPACE`, `OTHER`).
- `valuesliders.double_slider`: `DoubleSlider`, a floating-point slider shown
  with three decimals (`create_string(2.5)` gives `"2.500"`). Its bar works in
  hundredths of the value.
- `valuesliders.int_slider`: `IntSlider`, an integer slider. Typed input must
  be a base-10 integer within the 32-bit signed range.
- `valuesliders.view`: `SliderView`, which draws a slider on a Tk canvas and
  feeds it events; `demo_sliders()`; and `main()`, the demo window.

## Bounds

A slider built with a minimum and a maximum uses a `BoundMode`:

- `BoundMode.UNCHECKED`: no bounds are enforced.
- `BoundMode.LOWER_ONLY`: values below the minimum are raised to it.
- `BoundMode.UPPER_ONLY`: values above the maximum are lowered to it.
- `BoundMode.UPPER_LOWER` (the default): values are clamped to both bounds.

A minimum greater than the maximum raises `ValueError`, and giving only one
of the two raises `TypeError`.

If you give only a value, the range is derived from it: a positive value
gives `0 .. 2*value`, a negative value gives `2*value .. 0`, and zero gives
`-1 .. 1`. That range only sets the scale of the bar; the bound mode is then
`UNCHECKED`, so the value itself is not limited.

## Usage

```python
from valuesliders.base import BoundMode
from valuesliders.double_slider import DoubleSlider
from valuesliders.int_slider import IntSlider

ratio = DoubleSlider("Ratio", 50.0, 0.0, 100.0)
ratio.set_val(120.0)
print(ratio.value)                  # 100.0
print(ratio.create_string(2.5))     # "2.500"

count = IntSlider("Count", 0, -50, 50, BoundMode.LOWER_ONLY)
count.value_updated.append(lambda v: print("now", v))
count.set_val(500)                  # prints "now 500"
print(count.value)                  # 500
```

Each slider has three lists of callbacks:

- `value_updated` is called with the new value whenever `set_val` changes it.
- `edit_ended` is called when a drag or a typed edit finishes.
- `changed` is called whenever the slider needs repainting.

`display_text()` returns the left-aligned and right-aligned texts to draw.
These are the name and the formatted value, or the typed input while typing.

To show a slider in a Tk window, wrap it in `SliderView(master, slider)`
and pack or grid its `canvas`.

## Demo

After installing, run:

```
valuesliders-demo
```

This opens a Tk window with four example sliders. Python must have Tk
available.