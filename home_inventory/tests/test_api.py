import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from home_inventory.api.api_run import create_app
from home_inventory.errors import StorageFailure
from home_inventory.infra.Json_Store import JsonStore
from home_inventory.session import InventorySession


class TestInventoryAPI(unittest.TestCase):

    def setUp(self):
        self.session = InventorySession(JsonStore())
        self.client = TestClient(create_app(self.session))

    def _add(self, name="Quinoa", subcategory="CEREALS"):
        resp = self.client.post('/api/inventory', json={"name": name, "subcategory": subcategory})
        self.assertEqual(resp.status_code, 201)
        return resp.json()

    def test_add_and_list_items(self):
        created = self._add()
        self.assertEqual(created['quantity_percentage'], 0)
        self.assertTrue(created['needs_restocking'])
        self.assertEqual(created['category'], 'GROCERY')
        resp = self.client.get('/api/inventory')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['count'], 1)
        resp = self.client.get('/api/inventory', params={'category': 'fridge'})
        self.assertEqual(resp.json()['count'], 0)

    def test_invalid_item_input(self):
        resp = self.client.post('/api/inventory', json={"name": "   ", "subcategory": "RICE"})
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post('/api/inventory', json={"name": "Paint", "subcategory": "GARAGE"})
        self.assertEqual(resp.status_code, 422)

    def test_unknown_item_is_404(self):
        self.assertEqual(self.client.get('/api/inventory/missing').status_code, 404)
        self.assertEqual(self.client.delete('/api/inventory/missing').status_code, 404)

    def test_quantity_and_rename(self):
        item = self._add()
        resp = self.client.put(f"/api/inventory/{item['id']}/quantity", json={"quantity": 0.5})
        self.assertEqual(resp.json()['quantity_percentage'], 50)
        resp = self.client.put(f"/api/inventory/{item['id']}/name", json={"name": "Red Quinoa"})
        self.assertEqual(resp.json()['name'], 'Red Quinoa')

    def test_nan_quantity_is_rejected_and_not_stored(self):
        item = self._add()
        resp = self.client.put(
            f"/api/inventory/{item['id']}/quantity",
            content='{"quantity": NaN}',
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(self.client.get('/api/inventory').status_code, 200)
        self.assertEqual(self.client.get('/api/insights/stats').status_code, 200)
        self.assertEqual(self.session.inventory_items()[0].quantity, 0.0)

    def test_taxonomy(self):
        categories = self.client.get('/api/inventory/taxonomy').json()['categories']
        self.assertEqual([c['name'] for c in categories], ['FRIDGE', 'GROCERY', 'HYGIENE', 'PERSONAL_CARE'])

    def test_storage_failure_is_503(self):
        with patch.object(self.session.store, "_write", side_effect=StorageFailure("disk full")):
            resp = self.client.post('/api/inventory', json={"name": "Quinoa", "subcategory": "CEREALS"})
        self.assertEqual(resp.status_code, 503)
        self.assertEqual(resp.json()['detail'], 'disk full')
        events = self.client.get('/api/events').json()['events']
        self.assertEqual(events[-1]['type'], 'app.error')


class TestShoppingAPI(unittest.TestCase):

    def setUp(self):
        self.session = InventorySession(JsonStore())
        self.client = TestClient(create_app(self.session))
        self.item = self.client.post('/api/inventory', json={"name": "Rice", "subcategory": "RICE"}).json()

    def test_full_trip(self):
        resp = self.client.post('/api/shopping/generate')
        self.assertEqual(resp.json(), {"success": True, "state": "GENERATING"})
        misc = self.client.post('/api/shopping/misc', json={"name": "Batteries"}).json()
        self.assertTrue(misc['item']['is_temporary'])
        self.client.post('/api/shopping/finalize')
        self.client.post('/api/shopping/start')

        listing = self.client.get('/api/shopping').json()
        self.assertEqual(listing['state'], 'SHOPPING')
        self.assertEqual(listing['count'], 2)
        rice_entry = next(e for e in listing['items'] if e['inventory_item_id'] == self.item['id'])
        toggled = self.client.post(f"/api/shopping/items/{rice_entry['id']}/toggle").json()
        self.assertTrue(toggled['item']['is_checked'])

        resp = self.client.post('/api/shopping/complete')
        self.assertEqual(resp.json(), {"success": True, "state": "EMPTY"})
        rice = self.client.get(f"/api/inventory/{self.item['id']}").json()
        self.assertEqual(rice['quantity'], 1.0)
        self.assertEqual(len(rice['purchase_history']), 1)
        suggestions = self.client.get('/api/shopping/suggestions').json()['suggestions']
        self.assertEqual(suggestions, ['Batteries'])

    def test_wrong_state_is_reported_not_raised(self):
        resp = self.client.post('/api/shopping/start')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": False, "state": "EMPTY"})


class TestNotesAndSettingsAPI(unittest.TestCase):

    def setUp(self):
        self.session = InventorySession(JsonStore())
        self.client = TestClient(create_app(self.session))

    def test_note_cap_is_409(self):
        for i in range(6):
            self.assertEqual(self.client.post('/api/notes', json={"title": f"n{i}"}).status_code, 201)
        resp = self.client.post('/api/notes', json={"title": "n7"})
        self.assertEqual(resp.status_code, 409)
        listing = self.client.get('/api/notes').json()
        self.assertEqual(listing['count'], 6)
        self.assertFalse(listing['can_add'])

    def test_settings(self):
        self.assertTrue(self.client.post('/api/settings/dark-mode').json()['is_dark_mode'])
        resp = self.client.put('/api/settings/reminders', json={"time1": "08:00", "time2": "20:00"})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()['is_second_reminder_enabled'])
        bad = self.client.put('/api/settings/reminders', json={"time1": "8 o'clock"})
        self.assertEqual(bad.status_code, 422)
        current = self.client.get('/api/settings').json()
        self.assertEqual(current['reminder_time1'], '08:00')

    def test_insights_report(self):
        report = self.client.get('/api/insights').json()
        self.assertEqual(report['stats']['total_items'], 0)
        self.assertEqual(report['recommendations'][0]['title'], 'Great Job!')

    def test_events_polling(self):
        self.client.post('/api/settings/security')
        first = self.client.get('/api/events').json()
        self.assertEqual(first['events'][-1]['type'], 'settings.changed')
        later = self.client.get('/api/events', params={'since': first['next_cursor']}).json()
        self.assertEqual(later['events'], [])


if __name__ == '__main__':
    unittest.main()
