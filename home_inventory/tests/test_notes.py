from datetime import datetime, timedelta
import unittest

from home_inventory.domain.Note import Note
from home_inventory.errors import CapacityExceeded, ItemNotFound
from home_inventory.events.Event_Bus import NOTES_CHANGED
from home_inventory.infra.Json_Store import JsonStore
from home_inventory.session import InventorySession


class TestNotes(unittest.TestCase):

    def setUp(self):
        self.session = InventorySession(JsonStore())
        self.notes = self.session.notes

    def test_note_cap(self):
        for i in range(6):
            self.assertTrue(self.notes.can_add_note())
            self.notes.add_note(f"Note {i}", "text")
        self.assertFalse(self.notes.can_add_note())
        with self.assertRaises(CapacityExceeded):
            self.notes.add_note("Seventh", "text")
        self.assertEqual(len(self.notes.notes()), 6)

    def test_delete_frees_a_slot(self):
        created = [self.notes.add_note(f"Note {i}") for i in range(6)]
        self.notes.delete_note(created[0].id)
        self.assertTrue(self.notes.can_add_note())
        with self.assertRaises(ItemNotFound):
            self.notes.delete_note(created[0].id)

    def test_update_note(self):
        note = self.notes.add_note("Groceries", "milk")
        updated = self.notes.update_note(note.id, "Groceries", "milk, eggs")
        self.assertEqual(self.notes.get_note(note.id).content, "milk, eggs")
        self.assertGreaterEqual(updated.last_modified, note.created_date)
        with self.assertRaises(ItemNotFound):
            self.notes.update_note("missing", "x", "y")

    def test_listing_is_newest_first(self):
        base = datetime(2024, 5, 1, 12, 0, 0)
        with self.session.store.transaction() as tx:
            tx.notes.insert(Note("old", created_date=base, last_modified=base))
            tx.notes.insert(Note("new", created_date=base, last_modified=base + timedelta(hours=2)))
            tx.notes.insert(Note("middle", created_date=base, last_modified=base + timedelta(hours=1)))
        self.assertEqual([n.title for n in self.notes.notes()], ["new", "middle", "old"])

    def test_changes_are_published(self):
        seen = []
        self.session.subscribe(NOTES_CHANGED, lambda name, payload: seen.append(len(payload["notes"])))
        note = self.notes.add_note("a")
        self.notes.delete_note(note.id)
        self.assertEqual(seen, [1, 0])


if __name__ == '__main__':
    unittest.main()
