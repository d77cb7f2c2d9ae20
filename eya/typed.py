"""Typed views over byte buffers and a growable, element-typed allocation."""

from __future__ import annotations

from typing import Optional

from eya.numeric import USIZE


class TypedMemoryError(Exception):
    """Base class for errors raised by typed memory operations."""


class ZeroElementSizeError(TypedMemoryError, ValueError):
    """The element size is zero where a positive size is required."""


class ExceedsMaxSizeError(TypedMemoryError, ValueError):
    """The requested element count exceeds what the size type can address."""


class DifferentElementSizeError(TypedMemoryError, ValueError):
    """Two typed ranges that must agree have different element sizes."""


class SizeNotMultipleError(TypedMemoryError, ValueError):
    """The byte length of a range is not a multiple of its element size."""


class OutOfRangeError(TypedMemoryError, IndexError):
    """An element index lies outside the range."""


def _check_element_size(element_size: int) -> int:
    if isinstance(element_size, bool) or not isinstance(element_size, int):
        raise TypeError(f"element size must be an int, got {type(element_size).__name__}")
    if element_size < 0:
        raise ValueError(f"element size must not be negative, got {element_size}")
    return element_size


class TypedMemory:
    """A byte buffer seen as a sequence of fixed-size elements.

    ``data`` is any object supporting the buffer protocol, or None for an
    uninitialized range. Elements are returned as memoryview slices, so writes
    through them reach the underlying buffer.
    """

    def __init__(self, data, element_size: int) -> None:
        self.data = data
        self.element_size = _check_element_size(element_size)

    def _view(self) -> memoryview:
        if self.data is None:
            return memoryview(b"")
        return memoryview(self.data).cast("B")

    @property
    def nbytes(self) -> int:
        """Length of the range in bytes."""
        return len(self._view())

    def __len__(self) -> int:
        if self.element_size == 0:
            raise ZeroElementSizeError("element size is zero")
        count, rest = divmod(self.nbytes, self.element_size)
        if rest:
            raise SizeNotMultipleError(
                f"range of {self.nbytes} bytes is not a multiple of element size "
                f"{self.element_size}"
            )
        return count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedMemory):
            return NotImplemented
        return self.element_size == other.element_size and bytes(self._view()) == bytes(
            other._view()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nbytes={self.nbytes}, element_size={self.element_size})"

    def is_valid(self) -> bool:
        """Whether the range exists, has a positive element size and whole elements."""
        return (
            self.data is not None
            and self.element_size > 0
            and self.nbytes % self.element_size == 0
        )

    def is_empty(self) -> bool:
        """Whether the range holds no elements."""
        return len(self) == 0

    def is_valid_index(self, index: int) -> bool:
        """Whether ``index`` addresses an element of the range."""
        return 0 <= index < len(self)

    def offset_of(self, index: int) -> int:
        """Byte offset of the element at ``index``."""
        if not self.is_valid_index(index):
            raise OutOfRangeError(f"index {index} out of range")
        return index * self.element_size

    def at_from_front(self, index: int) -> memoryview:
        """Element at ``index`` counted from the front."""
        offset = self.offset_of(index)
        return self._view()[offset : offset + self.element_size]

    def at_from_back(self, index: int) -> memoryview:
        """Element at ``index`` counted from the back."""
        size = len(self)
        if not 0 <= index < size:
            raise OutOfRangeError(f"index {index} out of range")
        return self.at_from_front(size - (index + 1))

    def at(self, index: int, reversed: bool = False) -> memoryview:
        """Element at ``index``, counted from the back when ``reversed`` is true."""
        return self.at_from_back(index) if reversed else self.at_from_front(index)

    def front(self) -> memoryview:
        """First element."""
        return self.at(0, False)

    def back(self) -> memoryview:
        """Last element."""
        return self.at(0, True)

    def is_equal_element_size_to(self, element_size: int) -> bool:
        """Whether the element size equals ``element_size``."""
        return self.element_size == element_size

    def is_equal_element_size(self, other: TypedMemory) -> bool:
        """Whether the element size equals that of ``other``."""
        return self.is_equal_element_size_to(_require(other).element_size)

    def _check_same_element_size(self, other: TypedMemory) -> None:
        if not self.is_equal_element_size(other):
            raise DifferentElementSizeError(
                f"element sizes differ: {self.element_size} and {other.element_size}"
            )

    def swap(self, other: TypedMemory) -> None:
        """Swap the buffers of two ranges with the same element size."""
        self._check_same_element_size(other)
        self.data, other.data = other.data, self.data

    def exchange(self, other: TypedMemory) -> None:
        """Take over the buffer of ``other``, which is left empty."""
        self._check_same_element_size(other)
        self.data = other.data
        other.data = bytearray()


def _require(other: object) -> TypedMemory:
    if not isinstance(other, TypedMemory):
        raise TypeError(f"expected a TypedMemory, got {type(other).__name__}")
    return other


class AllocatedArray(TypedMemory):
    """An owned, resizable buffer of fixed-size elements.

    It starts unallocated; resizing to zero elements releases the storage.
    """

    def __init__(self, element_size: int) -> None:
        super().__init__(None, element_size)

    def __len__(self) -> int:
        if self.data is None:
            return 0
        return super().__len__()

    def max_size(self) -> int:
        """Largest element count whose byte size fits the size type."""
        if self.element_size == 0:
            raise ZeroElementSizeError("element size is zero")
        return USIZE.maximum // self.element_size

    def is_max_size_exceeds(self, size: int) -> bool:
        """Whether ``size`` elements would exceed :meth:`max_size`."""
        return size > self.max_size()

    def resize(self, size: int) -> None:
        """Reallocate to hold exactly ``size`` elements, keeping existing bytes."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if self.is_max_size_exceeds(size):
            raise ExceedsMaxSizeError(f"{size} elements exceed the maximum size")
        nbytes = size * self.element_size
        if nbytes == 0:
            self.data = None
            return
        storage = bytearray(nbytes)
        old = self._view()
        keep = min(len(old), nbytes)
        storage[:keep] = old[:keep]
        self.data = storage

    def exchange(self, other: AllocatedArray) -> None:
        """Release own storage and swap with ``other``, which is left unallocated."""
        self._check_same_element_size(other)
        self.clear()
        self.data, other.data = other.data, self.data

    def clear(self) -> None:
        """Release the storage."""
        self.data = None

    def is_uninitialized(self) -> bool:
        """Whether no storage is allocated."""
        return self.data is None