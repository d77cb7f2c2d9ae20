# eya

Small building blocks for working with raw bytes and fixed-width integers.

## Modules

- `eya.numeric` gives the range of two's complement and unsigned integers of
  a given bit width: `signed_min`, `signed_max`, `unsigned_min` and
  `unsigned_max`. `limits(bits, signed)` returns a `Limits` record with
  `bits`, `signed`, `minimum`, `maximum`, a `size` in bytes, an `in` test
  and `cast()`, which wraps a value around as a C cast does. The module also
  has ready-made records for fixed-width types (`U8` to `U64`, `S8` to `S64`),
  for the native C types of the running platform (`UCHAR`, `SINT`, `ULONG`
  and so on), and for size and address types (`USIZE`, `SSIZE`, `UADDR`,
  `SADDR`).
- `eya.error` has `Error`, a mutable record of a numeric `code` and an
  optional `desc`, with methods to unpack, set, assign, clear and compare.
  A code of `ERROR_CODE_NONE` (zero) means "no error"; `is_ok()` tests it.
- `eya.memory` works on objects that support the buffer protocol: `copy`,
  `copy_rev`, `rcopy`, `move`, `fill`, `set_pattern`, `compare`, `rcompare`,
  `find` and `rfind`. Operations on two buffers use the first
  `min(len(a), len(b))` bytes. Positions are returned as offsets into the
  first buffer, and comparisons and searches return `None` when nothing
  differs or nothing is found.
- `eya.options` holds the library tunables in the frozen dataclass
  `LibraryOptions`, such as `array_optimize_resize`, `array_shrink_ratio`
  (default 2) and `array_growth_ratio` (default 1500, in thousandths).
  `default_options()` returns the defaults and `with_changes()` a modified
  copy.
- `eya.typed` has `TypedMemory`, a byte buffer seen as elements of a fixed
  size, and `AllocatedArray`, an owned, resizable buffer of such elements.
  Misuse raises subclasses of `TypedMemoryError`: `ZeroElementSizeError`,
  `ExceedsMaxSizeError`, `DifferentElementSizeError`, `SizeNotMultipleError`
  and `OutOfRangeError`.
- `eya.array` has `Array`, a growable array of fixed-size elements. It keeps
  its size apart from its capacity and has `resize`, `reserve`, `shrink`,
  `clear` and `free`. Elements are returned as writable memoryview slices;
  indexing, assignment of whole elements and iteration are supported.

## Example

```python
from eya.array import Array
from eya.memory import find
from eya.numeric import signed_min, unsigned_max

assert unsigned_max(8) == 255
assert signed_min(16) == -32768

arr = Array(4, 3)
arr[0] = b"\x01\x00\x00\x00"
assert len(arr) == 3
arr.reserve(10)
assert arr.capacity() >= 13

assert find(b"hello world", b"world") == 6
```

## What it does not do

This is a library only: it has no command-line tool. Storage is plain Python
`bytearray` objects; there is no pluggable allocator and no custom exception
runtime — errors are ordinary Python exceptions.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`.