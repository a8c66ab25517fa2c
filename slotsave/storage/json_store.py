from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter

_T = TypeVar("_T")


class JsonStore:
    """Plain text file access plus JSON encoding for save payloads.

    Files are read and written as UTF-8 with newline translation disabled so
    that obfuscated text, which may contain carriage returns, survives a
    round trip unchanged.
    """

    def read_text(self, path: Path) -> str:
        """Read an entire file as text, dropping a leading UTF-8 BOM."""
        with path.open("r", encoding="utf-8-sig", newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, payload: str) -> None:
        """Create or truncate `path` and write `payload` to it."""
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(payload)

    def ensure_parent(self, path: Path) -> None:
        """Create the parent directory of `path`, including intermediate segments."""
        path.parent.mkdir(parents=True, exist_ok=True)

    def serialize(self, adapter: TypeAdapter[_T], data: _T) -> str:
        """Serialize JSON using indented, human-readable formatting."""
        return f"{adapter.dump_json(data, indent=2).decode('utf-8')}\n"

    def deserialize(self, adapter: TypeAdapter[_T], payload: str) -> _T:
        """Validate JSON text into the adapter's type."""
        return adapter.validate_json(payload)
