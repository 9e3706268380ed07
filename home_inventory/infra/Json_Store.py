"""JSON document store with all-or-nothing transactions.

The whole dataset (inventory items, shopping items, notes, settings) lives in
one JSON document. A transaction stages every change on a deep copy of the
document; the copy replaces the live document only after it has been written
to disk (temp file + move), so a failure mid-batch never leaves partial state
behind, neither in memory nor on disk.

Without a path the store is purely in-memory (used by tests).
"""
import copy
import json
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import Iterator, Optional

from home_inventory.errors import StorageFailure
from home_inventory.infra.Inventory_Repository import InventoryRepository
from home_inventory.infra.Notes_Repository import NotesRepository
from home_inventory.infra.Settings_Repository import SettingsRepository
from home_inventory.infra.Shopping_Repository import ShoppingListRepository

logger = logging.getLogger(__name__)


def empty_document() -> dict:
    return {"inventory_items": [], "shopping_items": [], "notes": [], "settings": {}}


class UnitOfWork:
    """Repositories bound to one document (a staged copy or a read snapshot)."""

    def __init__(self, document: dict):
        self.document = document
        self.inventory = InventoryRepository(document)
        self.shopping = ShoppingListRepository(document)
        self.notes = NotesRepository(document)
        self.settings = SettingsRepository(document)


class JsonStore:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else None
        self._lock = RLock()
        self._document = self._load()

    def _load(self) -> dict:
        document = empty_document()
        if self.path is None:
            return document
        if not self.path.exists():
            logger.warning(f"Store file not found: {self.path}. Starting with an empty inventory.")
            return document
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in store file {self.path}: {e}")
            raise StorageFailure(f"Saved data is unreadable: {e}") from e
        except OSError as e:
            logger.error(f"Error reading store file {self.path}: {e}")
            raise StorageFailure(f"Could not read saved data: {e}") from e
        if not isinstance(data, dict):
            raise StorageFailure(f"Unexpected store layout in {self.path}")
        for key in document:
            if key in data:
                document[key] = data[key]
        self._check_records(document)
        return document

    def _check_records(self, document: dict) -> None:
        '''Rebuilds every stored record once so a malformed entry fails at load time.'''
        uow = UnitOfWork(document)
        try:
            uow.inventory.get_all()
            uow.shopping.get_all()
            uow.notes.get_all()
            uow.settings.get()
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Malformed record in store file {self.path}: {e!r}")
            raise StorageFailure(f"Saved data is malformed: {e!r}") from e

    def view(self) -> UnitOfWork:
        '''Read-only snapshot of the current document.'''
        with self._lock:
            return UnitOfWork(copy.deepcopy(self._document))

    @contextmanager
    def transaction(self) -> Iterator[UnitOfWork]:
        """Stage changes on a copy; commit only if the block completes and the write succeeds."""
        with self._lock:
            staged = copy.deepcopy(self._document)
            yield UnitOfWork(staged)
            self._write(staged)
            self._document = staged

    def _write(self, document: dict) -> None:
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=".home_inventory_", suffix=".json"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(document, tmp, indent=2, ensure_ascii=False)
                shutil.move(tmp_path, str(self.path))
            finally:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to write store file {self.path}: {e}")
            raise StorageFailure(f"Could not save changes: {e}") from e
