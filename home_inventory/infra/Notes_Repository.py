"""Notes repository; listing is newest modification first."""
from typing import List

from home_inventory.domain.Note import Note
from home_inventory.infra.Record_Repository import RecordRepository


class NotesRepository(RecordRepository[Note]):
    collection = "notes"
    entity = Note
    kind = "Note"

    def get_all(self) -> List[Note]:
        return sorted(super().get_all(), key=lambda note: note.last_modified, reverse=True)
