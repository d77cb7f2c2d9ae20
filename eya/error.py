"""Error value holding a numeric code and an optional description."""

from __future__ import annotations

from dataclasses import dataclass

ERROR_CODE_NONE = 0
"""Code of an error value that carries no error."""


def _require(other: object) -> Error:
    if not isinstance(other, Error):
        raise TypeError(f"expected an Error, got {type(other).__name__}")
    return other


@dataclass
class Error:
    """A mutable error record: a code and an optional description."""

    code: int = ERROR_CODE_NONE
    desc: str | None = None

    def unpack(self) -> tuple[int, str | None]:
        """Return the code and the description as a pair."""
        return self.code, self.desc

    def set(self, code: int, desc: str | None) -> None:
        """Replace both the code and the description."""
        self.code = code
        self.desc = desc

    def set_code(self, code: int) -> None:
        """Set the code and drop the description."""
        self.set(code, None)

    def assign(self, other: Error) -> None:
        """Copy code and description from ``other``."""
        code, desc = _require(other).unpack()
        self.set(code, desc)

    def clear(self) -> None:
        """Reset to the no-error state."""
        self.assign(Error())

    def get_code_and_clear(self) -> int:
        """Return the current code and reset to the no-error state."""
        code = self.code
        self.clear()
        return code

    def is_equal_code_to(self, code: int) -> bool:
        """Whether the code equals ``code``."""
        return self.code == code

    def is_equal_code(self, other: Error) -> bool:
        """Whether the code equals the code of ``other``."""
        return self.is_equal_code_to(_require(other).code)

    def is_equal_desc_to(self, desc: str | None) -> bool:
        """Whether the description equals ``desc``."""
        return self.desc == desc

    def is_equal_desc(self, other: Error) -> bool:
        """Whether the description equals the description of ``other``."""
        return self.is_equal_desc_to(_require(other).desc)

    def is_equal(self, other: Error) -> bool:
        """Whether both code and description equal those of ``other``."""
        return self.is_equal_code(other) and self.is_equal_desc(other)

    def is_ok(self) -> bool:
        """Whether this value carries no error."""
        return self.is_equal_code_to(ERROR_CODE_NONE)