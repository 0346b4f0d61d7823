"""Numeric value sliders with dragging, typed input and optional bounds, and a Tk view."""

__version__ = "1.0.0"
__all__ = ["base", "double_slider", "int_slider", "view"]