"""A decimal type with a 96-bit mantissa: arithmetic, comparison, rounding and conversions."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "comparison", "convert", "rounding", "value", "wide"]