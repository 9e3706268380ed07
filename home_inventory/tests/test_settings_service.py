import unittest
from unittest.mock import patch

from home_inventory.domain.AppSettings import AppSettings, ShoppingState
from home_inventory.errors import StorageFailure, ValidationFailure
from home_inventory.events.Event_Bus import SETTINGS_CHANGED
from home_inventory.infra.Json_Store import JsonStore
from home_inventory.session import InventorySession


class TestSettingsService(unittest.TestCase):

    def setUp(self):
        self.session = InventorySession(JsonStore())
        self.preferences = self.session.preferences

    def _stored(self) -> AppSettings:
        return self.session.store.view().settings.get()

    def test_toggle_dark_mode_persists(self):
        self.assertTrue(self.preferences.toggle_dark_mode().is_dark_mode)
        self.assertTrue(self._stored().is_dark_mode)
        self.assertFalse(self.preferences.toggle_dark_mode().is_dark_mode)

    def test_dark_mode_reverts_when_save_fails(self):
        seen = []
        self.session.subscribe(SETTINGS_CHANGED, lambda name, payload: seen.append(payload["settings"].is_dark_mode))
        with patch.object(self.session.store, "_write", side_effect=StorageFailure("read-only")):
            with self.assertRaises(StorageFailure):
                self.preferences.toggle_dark_mode()
        self.assertFalse(self.session.settings.is_dark_mode)
        self.assertFalse(self._stored().is_dark_mode)
        self.assertEqual(seen, [True, False])

    def test_toggles(self):
        self.assertTrue(self.preferences.toggle_security().is_security_enabled)
        self.assertTrue(self.preferences.toggle_inventory_reminder().is_inventory_reminder_enabled)
        stored = self._stored()
        self.assertTrue(stored.is_security_enabled)
        self.assertTrue(stored.is_inventory_reminder_enabled)

    def test_update_keeps_shopping_state(self):
        self.session.shopping.generate()
        self.session.shopping.add_misc_item("Tape")
        updated = self.preferences.update(AppSettings(is_dark_mode=True))
        self.assertTrue(updated.is_dark_mode)
        self.assertIs(updated.shopping_state, ShoppingState.GENERATING)
        self.assertEqual(updated.misc_item_history, ["Tape"])
        self.assertEqual(self._stored(), updated)

    def test_reminder_times(self):
        settings = self.preferences.update_reminder_times("07:30")
        self.assertEqual(settings.reminder_time1, "07:30")
        self.assertFalse(settings.is_second_reminder_enabled)
        settings = self.preferences.update_reminder_times("07:30", "21:15")
        self.assertTrue(settings.is_second_reminder_enabled)
        self.assertEqual(settings.reminder_time2, "21:15")
        with self.assertRaises(ValidationFailure):
            self.preferences.update_reminder_times("25:00")
        self.assertEqual(self.session.settings.reminder_time1, "07:30")

    def test_misc_item_suggestions(self):
        self.session.shopping.generate()
        for name in ("Tape", "Candles", "Tape"):
            self.session.shopping.add_misc_item(name)
        self.assertEqual(self.preferences.misc_item_suggestions(), ["Tape", "Candles"])


if __name__ == '__main__':
    unittest.main()
