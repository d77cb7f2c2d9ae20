"""Integer type limits for fixed-width, native, size and address types."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass

_SUPPORTED_POINTER_SIZES = (1, 2, 4, 8)


def _check_bits(bits: int) -> int:
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"bit width must be an int, got {type(bits).__name__}")
    if bits <= 0 or bits % 8:
        raise ValueError(f"bit width must be a positive multiple of 8, got {bits}")
    return bits


def signed_min(bits: int) -> int:
    """Smallest value of a two's complement signed integer of ``bits`` bits."""
    return -(1 << (_check_bits(bits) - 1))


def signed_max(bits: int) -> int:
    """Largest value of a two's complement signed integer of ``bits`` bits."""
    return (1 << (_check_bits(bits) - 1)) - 1


def unsigned_min(bits: int) -> int:
    """Smallest value of an unsigned integer of ``bits`` bits (always zero)."""
    _check_bits(bits)
    return 0


def unsigned_max(bits: int) -> int:
    """Largest value of an unsigned integer of ``bits`` bits (all bits set)."""
    return (1 << _check_bits(bits)) - 1


@dataclass(frozen=True)
class Limits:
    """Range and width of one integer type."""

    bits: int
    signed: bool
    minimum: int
    maximum: int

    @property
    def size(self) -> int:
        """Width of the type in bytes."""
        return self.bits // 8

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.minimum <= value <= self.maximum

    def cast(self, value: int) -> int:
        """Convert ``value`` to this type with wrap-around, as a C cast does."""
        wrapped = value & unsigned_max(self.bits)
        if self.signed and wrapped > self.maximum:
            wrapped -= 1 << self.bits
        return wrapped


def limits(bits: int, signed: bool) -> Limits:
    """Describe the integer type of ``bits`` bits and the given signedness."""
    if signed:
        return Limits(bits, True, signed_min(bits), signed_max(bits))
    return Limits(bits, False, unsigned_min(bits), unsigned_max(bits))


def _native(fmt: str, signed: bool) -> Limits:
    return limits(struct.calcsize(fmt) * 8, signed)


# Native C types.
UCHAR = _native("B", False)
USHORT = _native("H", False)
UINT = _native("I", False)
ULONG = _native("L", False)
ULLONG = _native("Q", False)
SCHAR = _native("b", True)
SSHORT = _native("h", True)
SINT = _native("i", True)
SLONG = _native("l", True)
SLLONG = _native("q", True)
CHAR = SCHAR

# Fixed-width types.
U8 = limits(8, False)
U16 = limits(16, False)
U32 = limits(32, False)
U64 = limits(64, False)
S8 = limits(8, True)
S16 = limits(16, True)
S32 = limits(32, True)
S64 = limits(64, True)

POINTER_SIZE = struct.calcsize("P")


def _size_bits() -> int:
    if sys.platform == "win32":
        return 64 if POINTER_SIZE == 8 else UINT.bits
    return ULONG.bits


def _address_bits() -> int:
    if POINTER_SIZE not in _SUPPORTED_POINTER_SIZES:
        raise RuntimeError(f"unsupported pointer size {POINTER_SIZE}")
    return POINTER_SIZE * 8


USIZE = limits(_size_bits(), False)
SSIZE = limits(_size_bits(), True)
UADDR = limits(_address_bits(), False)
SADDR = limits(_address_bits(), True)