"""Growable array of fixed-size elements with separate size and capacity."""

from __future__ import annotations

from typing import Iterator, Optional

from eya.options import GROWTH_RATIO_SCALE, LibraryOptions, default_options
from eya.typed import AllocatedArray, OutOfRangeError


class Array:
    """A dynamic array of raw elements of ``element_size`` bytes each.

    The array tracks how many elements are in use (its length) apart from
    how many fit in the allocated storage (its capacity). Elements are
    returned as writable memoryview slices of the storage.
    """

    def __init__(
        self,
        element_size: int,
        size: int = 0,
        options: Optional[LibraryOptions] = None,
    ) -> None:
        if not element_size:
            raise ValueError("element size must not be zero")
        self._options = options if options is not None else default_options()
        self._storage = AllocatedArray(element_size)
        self._size = 0
        if size:
            self.resize(size)

    @property
    def element_size(self) -> int:
        """Size of one element in bytes."""
        return self._storage.element_size

    @property
    def options(self) -> LibraryOptions:
        """Options governing resizing, growth and shrinking."""
        return self._options

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(element_size={self.element_size}, "
            f"size={self._size}, capacity={self.capacity()})"
        )

    def __getitem__(self, index: int) -> memoryview:
        if index < 0:
            index += self._size
        return self.at_from_front(index)

    def __setitem__(self, index: int, value) -> None:
        element = self[index]
        data = memoryview(value).cast("B")
        if len(data) != self.element_size:
            raise ValueError(
                f"value of {len(data)} bytes does not match element size {self.element_size}"
            )
        element[:] = data

    def __iter__(self) -> Iterator[memoryview]:
        for index in range(self._size):
            yield self.at_from_front(index)

    def to_bytes(self) -> bytes:
        """Bytes of the elements in use."""
        if self._storage.data is None:
            return b""
        return bytes(memoryview(self._storage.data).cast("B")[: self.total_size()])

    def capacity(self) -> int:
        """Number of elements the storage holds without reallocation."""
        return len(self._storage)

    def resize(self, size: int) -> None:
        """Set the number of elements in use.

        With ``array_optimize_resize`` the storage is reallocated only when it
        is too small; otherwise it is reallocated to exactly ``size`` every time.
        """
        if not self._options.array_optimize_resize or self.capacity() < size:
            self._storage.resize(size)
        self._size = size

    def is_full(self) -> bool:
        """Whether the size has reached the capacity."""
        return self._size == self.capacity()

    def is_valid_index(self, index: int) -> bool:
        """Whether ``index`` addresses an element in use."""
        return 0 <= index < self._size

    def at_from_front(self, index: int) -> memoryview:
        """Element at ``index`` counted from the front."""
        if not self.is_valid_index(index):
            raise OutOfRangeError(f"index {index} out of range")
        return self._storage.at_from_front(index)

    def at_from_back(self, index: int) -> memoryview:
        """Element at ``index`` counted from the back."""
        if not self.is_valid_index(index):
            raise OutOfRangeError(f"index {index} out of range")
        return self.at_from_front(self._size - (index + 1))

    def at(self, index: int, reversed: bool = False) -> memoryview:
        """Element at ``index``, counted from the back when ``reversed`` is true."""
        return self.at_from_back(index) if reversed else self.at_from_front(index)

    def front(self) -> memoryview:
        """First element."""
        return self.at(0, False)

    def back(self) -> memoryview:
        """Last element."""
        return self.at(0, True)

    def is_empty(self) -> bool:
        """Whether no elements are in use."""
        return self._size == 0

    def clear(self) -> None:
        """Drop all elements, as a resize to zero."""
        self.resize(0)

    def total_size(self) -> int:
        """Bytes taken by the elements in use."""
        return self._size * self.element_size

    def available_size(self) -> int:
        """Largest addressable element count less the bytes in use."""
        return self._storage.max_size() - self.total_size()

    def shrink(self) -> None:
        """Fit the storage to the size when enough of the capacity is unused."""
        if self._size <= self.capacity() // self._options.array_shrink_ratio:
            self.resize(self._size)

    def reserve(self, size: int) -> None:
        """Make room for ``size`` more elements without changing the size."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        capacity = self.capacity()
        needed = self._size + size
        if capacity < needed:
            if capacity == 0:
                grown = needed
            else:
                grown = capacity * self._options.array_growth_ratio // GROWTH_RATIO_SCALE
            self._storage.resize(max(grown, needed))

    def free(self) -> None:
        """Release the storage and reset the size to zero."""
        self._storage.resize(0)
        self._size = 0