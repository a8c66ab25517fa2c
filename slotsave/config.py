from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

ENV_SAVE_ROOT: Final[str] = "SLOTSAVE_SAVE_ROOT"
ENV_USE_ENCRYPTION: Final[str] = "SLOTSAVE_USE_ENCRYPTION"

DEFAULT_SAVE_DIRNAME: Final[str] = "saves"
DEFAULT_USE_ENCRYPTION: Final[bool] = False

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration for save file handlers."""

    save_root: Path
    use_encryption: bool


def _parse_bool(raw_value: str | None, *, fallback: bool) -> bool:
    """Parse a boolean environment value with fallback."""
    if not raw_value:
        return fallback

    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return fallback


def get_settings() -> Settings:
    """Build settings from environment variables and local defaults."""
    root_override = os.getenv(ENV_SAVE_ROOT)
    save_root = (
        Path(root_override).expanduser().resolve()
        if root_override
        else (Path.cwd() / DEFAULT_SAVE_DIRNAME).resolve()
    )
    use_encryption = _parse_bool(
        os.getenv(ENV_USE_ENCRYPTION), fallback=DEFAULT_USE_ENCRYPTION
    )

    return Settings(save_root=save_root, use_encryption=use_encryption)
