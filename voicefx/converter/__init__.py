"""External audio converter."""

from .sox import BASE_ARGS, FALLBACK_PRESET, ConversionError, SoxConverter

__all__ = ["BASE_ARGS", "FALLBACK_PRESET", "ConversionError", "SoxConverter"]
