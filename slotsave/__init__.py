"""Generic JSON save files for games, with per-slot paths and optional obfuscation."""

from slotsave.config import Settings, get_settings
from slotsave.core import (
    OperationResult,
    RecordingDiagnostics,
    SaveDecodeError,
    SaveEncodeError,
    SaveFileError,
    SaveFileHandler,
    SaveIOError,
)
from slotsave.storage import JsonStore, SavePaths

__all__ = [
    "JsonStore",
    "OperationResult",
    "RecordingDiagnostics",
    "SaveDecodeError",
    "SaveEncodeError",
    "SaveFileError",
    "SaveFileHandler",
    "SaveIOError",
    "SavePaths",
    "Settings",
    "get_settings",
]
