"""Notes: a small capped notebook kept next to the inventory."""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, List

from home_inventory.domain.Note import Note
from home_inventory.errors import CapacityExceeded, ItemNotFound
from home_inventory.utilities.constants import MAX_NOTES

if TYPE_CHECKING:
    from home_inventory.session import InventorySession

logger = logging.getLogger(__name__)


class NotesService:
    def __init__(self, session: "InventorySession"):
        self.session = session

    def notes(self) -> List[Note]:
        '''All notes, most recently modified first.'''
        return self.session.all_notes()

    def get_note(self, note_id: str) -> Note:
        note = self.session.store.view().notes.get_by_id(note_id)
        if note is None:
            raise ItemNotFound("Note", note_id)
        return note

    def can_add_note(self) -> bool:
        return self.session.store.view().notes.count() < MAX_NOTES

    def add_note(self, title: str = "", content: str = "") -> Note:
        note = Note(title=title, content=content)
        with self.session.transaction("add_note") as tx:
            if tx.notes.count() >= MAX_NOTES:
                raise CapacityExceeded(f"Maximum of {MAX_NOTES} notes allowed")
            tx.notes.insert(note)
        self.session.publish_notes()
        return note

    def update_note(self, note_id: str, title: str, content: str) -> Note:
        with self.session.transaction("update_note") as tx:
            note = tx.notes.get_by_id(note_id)
            if note is None:
                raise ItemNotFound("Note", note_id)
            tx.notes.update(note.update_content(title, content))
        self.session.publish_notes()
        return note

    def delete_note(self, note_id: str) -> None:
        with self.session.transaction("delete_note") as tx:
            if not tx.notes.delete(note_id):
                raise ItemNotFound("Note", note_id)
        logger.info(f"Deleted note {note_id}")
        self.session.publish_notes()
