from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

from slotsave.config import Settings, get_settings
from slotsave.core.cipher import xor_transform
from slotsave.core.diagnostics import DiagnosticSink, LoggingDiagnostics
from slotsave.core.exceptions import SaveDecodeError, SaveEncodeError, SaveIOError
from slotsave.core.results import OperationResult
from slotsave.storage.json_store import JsonStore
from slotsave.storage.paths import SavePaths

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_LOAD_OPERATION = "load data from file"
_SAVE_OPERATION = "save data to file"


def _describe(exc: BaseException) -> str:
    """Return a single-line reason for a diagnostic message."""
    return " ".join(str(exc).split()) or type(exc).__name__


class SaveFileHandler(Generic[_T]):
    """Load and save one kind of game data as JSON, per save slot or standalone.

    The public load/save operations never raise. Failures are reported to the
    injected diagnostics sink and turned into the default value (load) or a
    no-op (save). A failed save may leave the target file truncated.

    No locking is done. Concurrent saves to the same path must be serialized
    by the caller.
    """

    def __init__(
        self,
        payload_type: Any,
        *,
        paths: SavePaths,
        use_encryption: bool = False,
        default_factory: Callable[[], _T] | None = None,
        store: JsonStore | None = None,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        self._payload_type = payload_type
        self._adapter: TypeAdapter[_T] = TypeAdapter(payload_type)
        self._paths = paths
        self._use_encryption = use_encryption
        self._default_factory = default_factory
        self.store = store or JsonStore()
        self.diagnostics = diagnostics or LoggingDiagnostics()

    @classmethod
    def from_settings(
        cls,
        payload_type: Any,
        sub_folders: str,
        file_name: str,
        *,
        settings: Settings | None = None,
        use_encryption: bool | None = None,
        default_factory: Callable[[], _T] | None = None,
        store: JsonStore | None = None,
        diagnostics: DiagnosticSink | None = None,
    ) -> SaveFileHandler[_T]:
        """Create a handler rooted at the configured save directory."""
        resolved = settings or get_settings()
        return cls(
            payload_type,
            paths=SavePaths.from_settings(sub_folders, file_name, settings=resolved),
            use_encryption=resolved.use_encryption if use_encryption is None else use_encryption,
            default_factory=default_factory,
            store=store,
            diagnostics=diagnostics,
        )

    @property
    def payload_type(self) -> Any:
        return self._payload_type

    @property
    def paths(self) -> SavePaths:
        return self._paths

    @property
    def directory(self) -> Path:
        return self._paths.directory

    @property
    def sub_folders(self) -> str:
        return self._paths.sub_folders

    @property
    def file_name(self) -> str:
        return self._paths.file_name

    @property
    def use_encryption(self) -> bool:
        return self._use_encryption

    def slot_path(self, slot_id: str) -> Path:
        """Return the file path used for a save slot."""
        return self._paths.slot_file(slot_id)

    def standalone_path(self) -> Path:
        """Return the file path used when no save slot is involved."""
        return self._paths.standalone_file()

    def slot_exists(self, slot_id: str | None) -> bool:
        """Check whether a save slot already has a file on disk."""
        if slot_id is None:
            return False
        return self.slot_path(slot_id).is_file()

    def standalone_exists(self) -> bool:
        """Check whether the standalone file exists on disk."""
        return self.standalone_path().is_file()

    def load_from_slot(self, slot_id: str | None) -> _T | None:
        """Load the data stored in a save slot.

        Returns the default value when `slot_id` is `None`, when the file does
        not exist, or when the file cannot be read or decoded.
        """
        if slot_id is None:
            return self._default()
        return self._unwrap(self.try_load(self.slot_path(slot_id)))

    def load_standalone(self) -> _T | None:
        """Load the data stored outside of any save slot."""
        return self._unwrap(self.try_load(self.standalone_path()))

    def save_to_slot(self, data: _T, slot_id: str | None) -> None:
        """Save data into a save slot. Does nothing when `slot_id` is `None`."""
        if slot_id is None:
            return
        self._report(self.try_save(self.slot_path(slot_id), data))

    def save_standalone(self, data: _T) -> None:
        """Save data outside of any save slot."""
        self._report(self.try_save(self.standalone_path(), data))

    def try_load(self, path: Path) -> OperationResult[_T]:
        """Read, optionally decrypt, and decode `path`.

        A missing file is a success carrying the default value. Failures come
        back as `SaveIOError` or `SaveDecodeError` and are not reported.
        """
        try:
            if not path.is_file():
                logger.debug("No save file at %s; using default value.", path)
                return OperationResult.success(self._default())
            serialized = self.store.read_text(path)
        except OSError as exc:
            return OperationResult.failure(
                SaveIOError(operation=_LOAD_OPERATION, path=path, reason=_describe(exc))
            )
        except UnicodeDecodeError as exc:
            return OperationResult.failure(
                SaveDecodeError(operation=_LOAD_OPERATION, path=path, reason=_describe(exc))
            )

        if self._use_encryption:
            serialized = xor_transform(serialized)

        try:
            loaded = self.store.deserialize(self._adapter, serialized)
        except Exception as exc:
            # Validators on the payload type may raise anything, not only ValidationError.
            return OperationResult.failure(
                SaveDecodeError(operation=_LOAD_OPERATION, path=path, reason=_describe(exc))
            )

        logger.debug("Loaded save file %s.", path)
        return OperationResult.success(loaded)

    def try_save(self, path: Path, data: _T) -> OperationResult[None]:
        """Encode, optionally encrypt, and write `data` to `path`.

        Failures come back as `SaveIOError` or `SaveEncodeError` and are not
        reported.
        """
        try:
            self.store.ensure_parent(path)
        except (OSError, ValueError) as exc:
            return OperationResult.failure(
                SaveIOError(operation=_SAVE_OPERATION, path=path, reason=_describe(exc))
            )

        try:
            serialized = self.store.serialize(self._adapter, data)
        except Exception as exc:
            # Custom serializers may raise anything, not only PydanticSerializationError.
            return OperationResult.failure(
                SaveEncodeError(operation=_SAVE_OPERATION, path=path, reason=_describe(exc))
            )

        if self._use_encryption:
            serialized = xor_transform(serialized)

        try:
            self.store.write_text(path, serialized)
        except (OSError, ValueError) as exc:
            return OperationResult.failure(
                SaveIOError(operation=_SAVE_OPERATION, path=path, reason=_describe(exc))
            )

        logger.debug("Saved save file %s.", path)
        return OperationResult.success()

    def _default(self) -> _T | None:
        return self._default_factory() if self._default_factory is not None else None

    def _unwrap(self, result: OperationResult[_T]) -> _T | None:
        if result.ok:
            return result.value
        self._report(result)
        return self._default()

    def _report(self, result: OperationResult[Any]) -> None:
        if result.error is not None:
            self.diagnostics.report(result.error)
