"""Library configuration options and their defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace

GROWTH_RATIO_SCALE = 1000
"""Fixed-point scale of the growth ratio: 1000 means a factor of 1.0."""


@dataclass(frozen=True)
class LibraryOptions:
    """Build and runtime options of the library; all switches are off by default."""

    shared_build: bool = False
    static_build: bool = False
    thread_local: bool = False
    memory_allocator_init_allocated: bool = False
    array_optimize_resize: bool = False
    array_shrink_ratio: int = 2
    array_growth_ratio: int = 1500
    runtime_exception_catch_stack_max: int = 255
    runtime_allocator_use_stdlib: bool = False
    runtime_terminate_use_stdlib: bool = False

    def __post_init__(self) -> None:
        if self.shared_build and self.static_build:
            raise ValueError("shared and static builds are mutually exclusive")
        if self.array_shrink_ratio <= 0:
            raise ValueError("array shrink ratio must be positive")
        if self.array_growth_ratio <= 0:
            raise ValueError("array growth ratio must be positive")
        if self.runtime_exception_catch_stack_max <= 0:
            raise ValueError("exception catch stack depth must be positive")

    @property
    def growth_factor(self) -> float:
        """Growth ratio as a plain multiplier."""
        return self.array_growth_ratio / GROWTH_RATIO_SCALE

    def with_changes(self, **changes) -> LibraryOptions:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


def default_options() -> LibraryOptions:
    """Return the options with every default value."""
    return LibraryOptions()