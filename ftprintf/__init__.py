"""A printf-style formatter producing bytes, with flags, width, precision and length modifiers."""

__version__ = "0.1.0"
__all__ = ["spec", "numbers", "padding", "values", "conversions", "printer"]