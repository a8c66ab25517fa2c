"""Filesystem persistence helpers for save files."""

from slotsave.storage.json_store import JsonStore
from slotsave.storage.paths import SavePaths

__all__ = ["JsonStore", "SavePaths"]
