from __future__ import annotations

import logging
from pathlib import Path

import pytest

from slotsave.core.diagnostics import LoggingDiagnostics, RecordingDiagnostics
from slotsave.core.exceptions import SaveDecodeError, SaveFileError, SaveIOError
from slotsave.core.results import OperationResult


def test_error_message_names_operation_path_and_reason(tmp_path: Path) -> None:
    path = tmp_path / "slot1" / "state.json"
    error = SaveIOError(operation="save data to file", path=path, reason="disk full")

    assert isinstance(error, SaveFileError)
    assert error.error_code == "IO_ERROR"
    assert error.message == (
        "Error occurred when trying to save data to file.\n"
        f"At full path: {path}.\n"
        "Reason: disk full."
    )


def test_logging_diagnostics_logs_at_error_level(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "state.json"
    sink = LoggingDiagnostics(logging.getLogger("slotsave.tests"))

    with caplog.at_level(logging.ERROR, logger="slotsave.tests"):
        sink.report(SaveDecodeError(operation="load data from file", path=path, reason="bad"))

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.ERROR
    assert "load data from file" in record.getMessage()
    assert f"At full path: {path}." in record.getMessage()
    assert "Reason: bad." in record.getMessage()


def test_recording_diagnostics_keeps_errors_in_order(tmp_path: Path) -> None:
    sink = RecordingDiagnostics()
    sink.report(SaveIOError(operation="save data to file", path=tmp_path, reason="a"))
    sink.report(SaveDecodeError(operation="load data from file", path=tmp_path, reason="b"))

    assert sink.error_codes == ["IO_ERROR", "DECODE_ERROR"]
    assert [error.reason for error in sink.errors] == ["a", "b"]

    sink.clear()
    assert sink.errors == []


def test_operation_result_reports_outcome(tmp_path: Path) -> None:
    success: OperationResult[int] = OperationResult.success(7)
    failure: OperationResult[int] = OperationResult.failure(
        SaveDecodeError(operation="load data from file", path=tmp_path, reason="bad")
    )

    assert success.ok
    assert success.value == 7
    assert success.error_code is None
    assert not failure.ok
    assert failure.value is None
    assert failure.error_code == "DECODE_ERROR"
