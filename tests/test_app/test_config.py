from __future__ import annotations

from pathlib import Path

import pytest

from slotsave.config import ENV_SAVE_ROOT, ENV_USE_ENCRYPTION, get_settings


def test_defaults_use_saves_directory_under_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv(ENV_SAVE_ROOT, raising=False)
    monkeypatch.delenv(ENV_USE_ENCRYPTION, raising=False)
    monkeypatch.chdir(tmp_path)

    settings = get_settings()

    assert settings.save_root == (tmp_path / "saves").resolve()
    assert settings.use_encryption is False


def test_save_root_override_is_resolved(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(ENV_SAVE_ROOT, str(tmp_path / "custom" / ".." / "game"))

    assert get_settings().save_root == (tmp_path / "game").resolve()


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("1", True),
        ("TRUE", True),
        (" yes ", True),
        ("on", True),
        ("0", False),
        ("false", False),
        ("Off", False),
        ("", False),
        ("maybe", False),
    ],
)
def test_use_encryption_parsing(
    raw_value: str, expected: bool, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(ENV_USE_ENCRYPTION, raw_value)

    assert get_settings().use_encryption is expected
