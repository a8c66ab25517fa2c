"""Diagnostics sinks that receive save file failures."""

from __future__ import annotations

import logging
from typing import Protocol

from slotsave.core.exceptions import SaveFileError

logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    """Receiver for failures swallowed at the public save/load boundary."""

    def report(self, error: SaveFileError) -> None: ...


class LoggingDiagnostics:
    """Default sink that forwards failures to the standard logging system."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self.logger = target or logger

    def report(self, error: SaveFileError) -> None:
        self.logger.error(
            "Error occurred when trying to %s.\nAt full path: %s.\nReason: %s.",
            error.operation,
            error.path,
            error.reason,
        )


class RecordingDiagnostics:
    """In-memory sink that keeps every reported failure."""

    def __init__(self) -> None:
        self.errors: list[SaveFileError] = []

    def report(self, error: SaveFileError) -> None:
        self.errors.append(error)

    @property
    def error_codes(self) -> list[str]:
        return [error.error_code for error in self.errors]

    def clear(self) -> None:
        self.errors.clear()
