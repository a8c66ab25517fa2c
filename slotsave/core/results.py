from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from slotsave.core.exceptions import SaveFileError

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class OperationResult(Generic[_T]):
    """Outcome of a single load or save attempt."""

    value: _T | None = None
    error: SaveFileError | None = None

    @classmethod
    def success(cls, value: _T | None = None) -> OperationResult[_T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: SaveFileError) -> OperationResult[_T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_code(self) -> str | None:
        """Error kind of a failed attempt, `None` on success."""
        return None if self.error is None else self.error.error_code
