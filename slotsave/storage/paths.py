from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from slotsave.config import Settings, get_settings


@dataclass(frozen=True, slots=True)
class SavePaths:
    """Path template shared by every save slot of one kind of data.

    Slot identifiers are joined as-is. Callers are responsible for passing
    filesystem-safe strings.
    """

    directory: Path
    sub_folders: str
    file_name: str

    @classmethod
    def from_settings(
        cls,
        sub_folders: str,
        file_name: str,
        *,
        settings: Settings | None = None,
    ) -> SavePaths:
        """Create a path template rooted at the configured save directory."""
        resolved = settings or get_settings()
        return cls(directory=resolved.save_root, sub_folders=sub_folders, file_name=file_name)

    def slot_file(self, slot_id: str) -> Path:
        """Return `directory/slot_id/sub_folders/file_name`."""
        return Path(self.directory, slot_id, self.sub_folders, self.file_name)

    def standalone_file(self) -> Path:
        """Return `directory/sub_folders/file_name`."""
        return Path(self.directory, self.sub_folders, self.file_name)
