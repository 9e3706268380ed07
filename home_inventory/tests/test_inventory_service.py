import unittest

from home_inventory.domain.AppSettings import ShoppingState
from home_inventory.domain.InventoryItem import InventoryItem
from home_inventory.domain.Taxonomy import InventoryCategory, InventorySubcategory
from home_inventory.errors import ItemNotFound, ValidationFailure
from home_inventory.events.Event_Bus import INVENTORY_CHANGED
from home_inventory.infra.Json_Store import JsonStore
from home_inventory.session import InventorySession


class TestInventoryService(unittest.TestCase):

    def setUp(self):
        self.session = InventorySession(JsonStore())
        self.service = self.session.inventory
        self.milk = InventoryItem("Milk", InventorySubcategory.DOOR_BOTTLES, quantity=0.2)
        self.rice = InventoryItem("Rice", InventorySubcategory.RICE, quantity=0.8)
        with self.session.store.transaction() as tx:
            tx.inventory.insert_many([self.milk, self.rice])

    def test_add_custom_item(self):
        item = self.service.add_custom_item("  Quinoa ", "cereals")
        self.assertEqual(item.name, "Quinoa")
        self.assertEqual(item.quantity, 0.0)
        self.assertTrue(item.is_custom)
        self.assertIs(item.subcategory, InventorySubcategory.CEREALS)
        self.assertEqual(len(self.service.items()), 3)

    def test_add_custom_item_rejects_bad_input(self):
        with self.assertRaises(ValidationFailure):
            self.service.add_custom_item("   ", InventorySubcategory.RICE)
        with self.assertRaises(ValidationFailure):
            self.service.add_custom_item("Paint", "garage")
        self.assertEqual(len(self.service.items()), 2)

    def test_update_quantity_clamps(self):
        self.assertEqual(self.service.update_quantity(self.milk.id, 1.5).quantity, 1.0)
        self.assertEqual(self.service.get_item(self.milk.id).quantity, 1.0)
        with self.assertRaises(ItemNotFound):
            self.service.update_quantity("missing", 0.5)

    def test_update_quantity_rejects_nan(self):
        with self.assertRaises(ValidationFailure):
            self.service.update_quantity(self.milk.id, float("nan"))
        self.assertEqual(self.service.get_item(self.milk.id).quantity, 0.2)
        self.assertEqual(self.session.insights.stats().total_items, 2)

    def test_rename_cascades_to_shopping_list(self):
        self.session.shopping.generate()
        self.service.rename_item(self.milk.id, " Oat Milk ")
        self.assertEqual(self.service.get_item(self.milk.id).name, "Oat Milk")
        self.assertEqual([e.name for e in self.session.shopping_items()], ["Oat Milk"])

    def test_rename_rejects_blank(self):
        with self.assertRaises(ValidationFailure):
            self.service.rename_item(self.milk.id, "  ")
        self.assertEqual(self.service.get_item(self.milk.id).name, "Milk")

    def test_remove_item_cascades(self):
        self.session.shopping.generate()
        self.session.shopping.add_misc_item("Tape")
        self.service.remove_item(self.milk.id)
        self.assertEqual([i.name for i in self.service.items()], ["Rice"])
        entries = self.session.shopping_items()
        self.assertEqual([e.name for e in entries], ["Tape"])
        with self.assertRaises(ItemNotFound):
            self.service.remove_item(self.milk.id)

    def test_restock_item(self):
        item = self.service.restock_item(self.milk.id)
        self.assertEqual(item.quantity, 1.0)
        self.assertEqual(len(self.service.get_item(self.milk.id).purchase_history), 1)

    def test_category_queries(self):
        self.assertEqual([i.name for i in self.service.items_for_category(InventoryCategory.FRIDGE)], ["Milk"])
        self.assertEqual([i.name for i in self.service.items_for_subcategory("RICE")], ["Rice"])
        self.assertEqual(self.service.items_for_category("hygiene"), [])

    def test_reset_to_defaults(self):
        self.session.notes.add_note("List", "buy bulbs")
        self.session.shopping.generate()
        items = self.service.reset_to_defaults()
        expected = sum(len(sub.sample_items) for sub in InventorySubcategory)
        self.assertEqual(len(items), expected)
        self.assertEqual(len(self.service.items()), expected)
        self.assertTrue(all(i.quantity == 1.0 for i in self.service.items()))
        self.assertEqual(self.session.shopping_items(), [])
        self.assertEqual(self.session.all_notes(), [])
        self.assertIs(self.session.shopping_state, ShoppingState.EMPTY)

    def test_clear_all_data(self):
        self.session.shopping.generate()
        self.service.clear_all_data()
        self.assertEqual(self.service.items(), [])
        self.assertEqual(self.session.shopping_items(), [])
        self.assertIs(self.session.store.view().settings.get().shopping_state, ShoppingState.EMPTY)

    def test_changes_are_published(self):
        seen = []
        self.session.subscribe(INVENTORY_CHANGED, lambda name, payload: seen.append(payload["items"]))
        self.service.update_quantity(self.rice.id, 0.1)
        self.assertEqual(len(seen), 1)
        rice = next(i for i in seen[0] if i.id == self.rice.id)
        self.assertEqual(rice.quantity, 0.1)


if __name__ == '__main__':
    unittest.main()
