"""Numeric limits, error records, byte-buffer utilities and typed dynamic arrays."""

__version__ = "1.0.0"
__all__ = ["numeric", "error", "memory", "options", "typed", "array"]