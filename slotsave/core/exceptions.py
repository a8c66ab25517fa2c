from __future__ import annotations

from pathlib import Path


class SaveFileError(Exception):
    """Base exception for all save file failures."""

    error_code = "SAVE_FILE_ERROR"

    def __init__(self, *, operation: str, path: Path, reason: str) -> None:
        super().__init__(
            f"Error occurred when trying to {operation}.\n"
            f"At full path: {path}.\n"
            f"Reason: {reason}."
        )
        self.operation = operation
        self.path = path
        self.reason = reason

    @property
    def message(self) -> str:
        """Formatted diagnostic text."""
        return str(self)


class SaveIOError(SaveFileError):
    """Raised when the filesystem refuses a read, write, or directory creation."""

    error_code = "IO_ERROR"


class SaveDecodeError(SaveFileError):
    """Raised when file content cannot be turned back into the payload type."""

    error_code = "DECODE_ERROR"


class SaveEncodeError(SaveFileError):
    """Raised when a payload is not representable as JSON."""

    error_code = "ENCODE_ERROR"
