import unittest

from home_inventory.domain.AppSettings import AppSettings, ShoppingState


class TestMiscItemHistory(unittest.TestCase):

    def test_add_appends_without_mutating_original(self):
        settings = AppSettings()
        updated = settings.add_misc_item_to_history("Batteries")
        self.assertEqual(settings.misc_item_history, [])
        self.assertEqual(updated.misc_item_history, ["Batteries"])

    def test_existing_entry_moves_to_most_recent(self):
        settings = AppSettings(misc_item_history=["Batteries", "Candles", "Tape"])
        updated = settings.add_misc_item_to_history("Batteries")
        self.assertEqual(updated.misc_item_history, ["Candles", "Tape", "Batteries"])

    def test_history_is_capped_and_evicts_oldest(self):
        settings = AppSettings()
        for i in range(25):
            settings = settings.add_misc_item_to_history(f"item-{i}")
        self.assertEqual(len(settings.misc_item_history), 20)
        self.assertEqual(settings.misc_item_history[0], "item-5")
        self.assertEqual(settings.misc_item_history[-1], "item-24")

    def test_suggestions_most_recent_first(self):
        settings = AppSettings()
        for i in range(12):
            settings = settings.add_misc_item_to_history(f"item-{i}")
        suggestions = settings.misc_item_suggestions()
        self.assertEqual(len(suggestions), 10)
        self.assertEqual(suggestions[0], "item-11")
        self.assertEqual(suggestions[-1], "item-2")


class TestAppSettingsSerialization(unittest.TestCase):

    def test_defaults(self):
        settings = AppSettings()
        self.assertIs(settings.shopping_state, ShoppingState.EMPTY)
        self.assertEqual(settings.reminder_time1, "09:00")
        self.assertEqual(settings.reminder_time2, "18:00")
        self.assertFalse(settings.is_dark_mode)

    def test_from_dict_ignores_unknown_keys_and_bad_state(self):
        settings = AppSettings.from_dict({"shopping_state": "FLYING", "is_dark_mode": True, "colour": "red"})
        self.assertIs(settings.shopping_state, ShoppingState.EMPTY)
        self.assertTrue(settings.is_dark_mode)

    def test_round_trip(self):
        settings = AppSettings(is_security_enabled=True, shopping_state=ShoppingState.LIST_READY,
                               misc_item_history=["Tape"])
        self.assertEqual(AppSettings.from_dict(settings.to_dict()), settings)

    def test_copy_accepts_state_name(self):
        settings = AppSettings().copy(shopping_state="SHOPPING")
        self.assertIs(settings.shopping_state, ShoppingState.SHOPPING)


if __name__ == '__main__':
    unittest.main()
