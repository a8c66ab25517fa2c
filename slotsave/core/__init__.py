"""Save file handling, obfuscation, and failure reporting."""

from slotsave.core.cipher import ENCRYPTION_KEY, xor_transform
from slotsave.core.diagnostics import DiagnosticSink, LoggingDiagnostics, RecordingDiagnostics
from slotsave.core.exceptions import SaveDecodeError, SaveEncodeError, SaveFileError, SaveIOError
from slotsave.core.results import OperationResult
from slotsave.core.save_file_handler import SaveFileHandler

__all__ = [
    "ENCRYPTION_KEY",
    "DiagnosticSink",
    "LoggingDiagnostics",
    "OperationResult",
    "RecordingDiagnostics",
    "SaveDecodeError",
    "SaveEncodeError",
    "SaveFileError",
    "SaveFileHandler",
    "SaveIOError",
    "xor_transform",
]
