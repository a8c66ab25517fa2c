from __future__ import annotations

from pathlib import Path

import pytest

from slotsave.core.diagnostics import RecordingDiagnostics
from slotsave.storage.paths import SavePaths


@pytest.fixture
def save_root(tmp_path: Path) -> Path:
    """Provide a save directory that does not exist yet."""
    return tmp_path / "saves"


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    """Provide a sink that records every reported failure."""
    return RecordingDiagnostics()


@pytest.fixture
def player_paths(save_root: Path) -> SavePaths:
    """Provide the `saves/<slot>/player/state.json` layout."""
    return SavePaths(directory=save_root, sub_folders="player", file_name="state.json")
