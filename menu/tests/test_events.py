import unittest
from fastapi.testclient import TestClient
from menu.api.api_run import app
from menu.events.Event_Bus import EventBus, MENU_ITEM_SAVED, MENU_SELECTION_CHANGED
from menu.events.console_observers import start, get_events


class TestEventBus(unittest.TestCase):

    def test_publish_reaches_subscribers_once(self):
        bus = EventBus()
        received = []
        listener = lambda name, payload: received.append((name, payload))
        bus.subscribe(listener, MENU_ITEM_SAVED)
        bus.subscribe(listener, MENU_ITEM_SAVED)
        self.assertEqual(bus.publish(MENU_ITEM_SAVED, {'item': {}}), 1)
        self.assertEqual(received, [(MENU_ITEM_SAVED, {'item': {}})])

    def test_one_listener_many_events(self):
        bus = EventBus()
        received = []
        bus.subscribe(lambda name, payload: received.append(name), MENU_ITEM_SAVED, MENU_SELECTION_CHANGED)
        bus.publish(MENU_SELECTION_CHANGED)
        bus.publish(MENU_ITEM_SAVED)
        self.assertEqual(received, [MENU_SELECTION_CHANGED, MENU_ITEM_SAVED])
        self.assertEqual(bus.publish('menu_item.unknown'), 0)

    def test_failing_subscriber_does_not_propagate(self):
        bus = EventBus()
        received = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe(broken, MENU_SELECTION_CHANGED)
        bus.subscribe(lambda n, p: received.append(p), MENU_SELECTION_CHANGED)
        with self.assertLogs('menu.events.Event_Bus', level='ERROR'):
            self.assertEqual(bus.publish(MENU_SELECTION_CHANGED, 1), 1)
        self.assertEqual(received, [1])


class TestEventsAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        start()
        cls.client = TestClient(app)

    def setUp(self):
        self.client.post('/api/menu-item/reset')
        self.cursor = get_events()['next_cursor']

    def test_save_and_toggle_are_recorded(self):
        self.client.post('/api/menu-item/ingredients/Mozzarella/toggle')
        self.client.put('/api/menu-item/details', json={'name': 'Caprese'})
        self.client.post('/api/menu-item/save')
        resp = self.client.get('/api/events', params={'since': self.cursor})
        self.assertEqual(resp.status_code, 200)
        events = resp.json()['events']
        self.assertEqual([e['type'] for e in events], [MENU_SELECTION_CHANGED, MENU_ITEM_SAVED])
        self.assertEqual(events[0]['ingredient'], 'Mozzarella')
        self.assertTrue(events[0]['selected'])
        self.assertEqual(events[1]['name'], 'Caprese')
        self.assertEqual(events[1]['ingredients'], ['Mozzarella'])
        self.assertEqual(resp.json()['next_cursor'], events[-1]['id'])

    def test_no_new_events(self):
        data = self.client.get('/api/events', params={'since': self.cursor}).json()
        self.assertEqual(data['events'], [])
        self.assertEqual(data['next_cursor'], self.cursor)


if __name__ == '__main__':
    unittest.main()
