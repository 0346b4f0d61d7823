import pytest

from valuesliders.base import BoundMode
from valuesliders.double_slider import DoubleSlider


def test_constructor_default_positive():
    slider = DoubleSlider("Test Slider", 10.0)
    assert slider.value == 10.0
    assert slider.bar_minimum == 0
    assert slider.bar_maximum == 2 * 10.0 * 100


def test_constructor_default_negative():
    slider = DoubleSlider("Test Slider", -10.0)
    assert slider.value == -10.0
    assert slider.bar_minimum == 2 * -10.0 * 100
    assert slider.bar_maximum == 0


def test_constructor_default_zero():
    slider = DoubleSlider("Test Slider", 0.0)
    assert slider.value == 0.0
    assert slider.bar_minimum == -100
    assert slider.bar_maximum == 100


def test_constructor_bound():
    slider = DoubleSlider("Test Slider", 10.0, -5.0, 30.0)
    assert slider.value == 10.0
    assert slider.bar_minimum == -5.0 * 100
    assert slider.bar_maximum == 30.0 * 100


def test_constructor_bound_must_be_valid():
    with pytest.raises(ValueError):
        DoubleSlider("Test Slider", 10.0, 10.0, 0.0)


@pytest.mark.parametrize(
    "mode, given, expected",
    [
        (BoundMode.UPPER_LOWER, 15.0, 15.0),
        (BoundMode.UPPER_LOWER, -5.0, 0.0),
        (BoundMode.UPPER_LOWER, 25.0, 20.0),
        (BoundMode.UPPER_ONLY, 15.0, 15.0),
        (BoundMode.UPPER_ONLY, -5.0, -5.0),
        (BoundMode.UPPER_ONLY, 25.0, 20.0),
        (BoundMode.LOWER_ONLY, 15.0, 15.0),
        (BoundMode.LOWER_ONLY, -5.0, 0.0),
        (BoundMode.LOWER_ONLY, 25.0, 25.0),
        (BoundMode.UNCHECKED, 15.0, 15.0),
        (BoundMode.UNCHECKED, -5.0, -5.0),
        (BoundMode.UNCHECKED, 25.0, 25.0),
    ],
)
def test_set_val(mode, given, expected):
    slider = DoubleSlider("Test Slider", 10.0, 0.0, 20.0, mode)
    slider.set_val(given)
    assert slider.value == pytest.approx(expected)


def test_transform():
    slider = DoubleSlider("Test Slider", 10.0, 0.0, 20.0, BoundMode.UNCHECKED)
    assert slider.transform(0) == 0
    assert slider.transform(1) == 100
    assert slider.transform(25.0) == 2500
    assert slider.transform(-25.0) == -2500


def test_convert_string():
    slider = DoubleSlider("Test Slider", 10.0, 0.0, 20.0, BoundMode.UNCHECKED)
    assert slider.convert_string("15.5") == pytest.approx(15.5)
    assert slider.convert_string("-5.5") == pytest.approx(-5.5)
    with pytest.raises(ValueError):
        slider.convert_string("abc")


def test_create_string():
    slider = DoubleSlider("Test Slider", 10.0, 0.0, 20.0, BoundMode.UNCHECKED)
    assert slider.create_string(10.0) == "10.000"
    assert slider.create_string(-5.5) == "-5.500"
    assert slider.create_string(0.0) == "0.000"


def test_drag_far_right_clamps_to_upper_bound():
    slider = DoubleSlider("Test Slider", 10.0, 0.0, 20.0)
    slider.mouse_press(0)
    slider.mouse_move(1000)
    assert slider.value == 20.0
    assert slider.bar_value == slider.bar_maximum


def test_typed_value_is_accepted():
    slider = DoubleSlider("Test Slider", 10.0, 0.0, 20.0)
    slider.mouse_double_click()
    for char in "15.5":
        slider.key_press(slider_key_other(), char)
    slider.key_press(return_key())
    assert slider.value == pytest.approx(15.5)
    assert slider.display_text() == ("Test Slider", "15.500")


def slider_key_other():
    from valuesliders.base import Key

    return Key.OTHER


def return_key():
    from valuesliders.base import Key

    return Key.RETURN