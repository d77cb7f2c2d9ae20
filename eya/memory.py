"""Byte-buffer operations: copies, fills, comparisons and searches.

Every operation that takes two buffers works on the first ``min(len(a), len(b))``
bytes. Positions are returned as offsets into the first buffer.
"""

from __future__ import annotations

from typing import Optional


def _readable(buffer: object) -> memoryview:
    if buffer is None:
        raise TypeError("buffer must not be None")
    return memoryview(buffer).cast("B")


def _writable(buffer: object) -> memoryview:
    view = _readable(buffer)
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    return view


def _prepare(dst: object, src: object) -> tuple[memoryview, bytes, int]:
    target = _writable(dst)
    source = _readable(src)
    n = min(len(target), len(source))
    return target, bytes(source[:n]), n


def copy(dst, src) -> int:
    """Copy bytes from ``src`` to ``dst``; return the offset just past the last written."""
    target, data, n = _prepare(dst, src)
    target[:n] = data
    return n


def copy_rev(dst, src) -> int:
    """Copy bytes from ``src`` to ``dst`` in reversed order; return the end offset."""
    target, data, n = _prepare(dst, src)
    target[:n] = data[::-1]
    return n


def rcopy(dst, src) -> int:
    """Copy bytes from ``src`` to ``dst`` back to front; return the offset where writing stopped (0)."""
    target, data, n = _prepare(dst, src)
    target[:n] = data
    return 0


def move(dst, src) -> int:
    """Copy bytes between possibly overlapping buffers; return the end offset."""
    target, data, n = _prepare(dst, src)
    target[:n] = data
    return n


def fill(dst, value: int) -> int:
    """Set every byte of ``dst`` to ``value``; return the number of bytes written."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    target = _writable(dst)
    target[:] = bytes((value,)) * len(target)
    return len(target)


def set_pattern(dst, pattern) -> int:
    """Fill ``dst`` by repeating ``pattern``; return the number of bytes written.

    Nothing is written, and 0 returned, when either buffer is empty.
    """
    target = _writable(dst)
    source = bytes(_readable(pattern))
    if not target or not source:
        return 0
    full, rest = divmod(len(target), len(source))
    target[:] = source * full + source[:rest]
    return len(target)


def compare(lhs, rhs) -> Optional[int]:
    """Return the offset of the first differing byte, or None if the compared bytes match."""
    left = _readable(lhs)
    right = _readable(rhs)
    n = min(len(left), len(right))
    a, b = bytes(left[:n]), bytes(right[:n])
    if a == b:
        return None
    return next(i for i, (x, y) in enumerate(zip(a, b)) if x != y)


def rcompare(lhs, rhs) -> Optional[int]:
    """Compare the trailing bytes of both buffers from the end.

    Returns the offset in ``lhs`` of the last differing byte, or None if they match.
    """
    left = _readable(lhs)
    right = _readable(rhs)
    n = min(len(left), len(right))
    start = len(left) - n
    a = bytes(left[start:])
    b = bytes(right[len(right) - n:])
    if a == b:
        return None
    last = next(i for i in reversed(range(n)) if a[i] != b[i])
    return start + last


def find(haystack, needle) -> Optional[int]:
    """Return the first offset in ``haystack`` where ``needle`` matches.

    Near the end of ``haystack`` a match of only the leading part of ``needle``
    that fits is accepted. Returns None when nothing matches or either is empty.
    """
    hay = bytes(_readable(haystack))
    pat = bytes(_readable(needle))
    if not hay or not pat:
        return None
    index = hay.find(pat)
    if index >= 0:
        return index
    for i in range(max(0, len(hay) - len(pat) + 1), len(hay)):
        if pat.startswith(hay[i:]):
            return i
    return None


def rfind(haystack, needle) -> Optional[int]:
    """Return the last offset in ``haystack`` where ``needle`` matches.

    Near the start of ``haystack`` a match of only the trailing part of ``needle``
    is accepted; the offset returned then lies before the start and is negative.
    Returns None when nothing matches or either is empty.
    """
    hay = bytes(_readable(haystack))
    pat = bytes(_readable(needle))
    if not hay or not pat:
        return None
    index = hay.rfind(pat)
    if index >= 0:
        return index
    for end in range(min(len(hay), len(pat) - 1), 0, -1):
        if pat.endswith(hay[:end]):
            return end - len(pat)
    return None