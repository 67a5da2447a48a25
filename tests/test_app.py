import importlib
import unittest

from fastapi.testclient import TestClient

from booking_admin.auth import get_current_admin
from booking_admin.main import app

from memory_store import MemoryDocumentStore
from api_client import make_client


class TestAppRoutes(unittest.TestCase):
    def setUp(self):
        self.client = make_client(MemoryDocumentStore())

    def test_index_lists_named_pages(self):
        body = self.client.get("/?lang=es").json()

        pages = {page["name"]: page for page in body["pages"]}
        self.assertEqual(
            list(pages),
            ["dashboard", "categories", "services", "professionals", "bookings", "schedule", "calendar", "settings"],
        )
        self.assertTrue(pages["schedule"]["placeholder"])
        self.assertFalse(pages["bookings"]["placeholder"])
        self.assertEqual(pages["bookings"]["label"], "Reservas")

    def test_health(self):
        self.assertEqual(self.client.get("/health").json(), {"status": "healthy"})


class TestApplicationImport(unittest.TestCase):
    def test_main_module_imports_with_every_router(self):
        module = importlib.import_module("booking_admin.main")

        paths = {route.path for route in module.app.routes}
        for path in ("/dashboard", "/staff/{employee_id}/schedule", "/settings/widget", "/calendar"):
            self.assertIn(path, paths)


class TestLifespan(unittest.TestCase):
    def test_startup_uses_the_configured_store_and_starts_the_feed(self):
        store = MemoryDocumentStore({"bookings": {"b1": {"status": "pending", "date": "2025-01-01"}}})
        app.state.store = store
        app.dependency_overrides[get_current_admin] = lambda: {"uid": "test-admin"}

        with TestClient(app) as client:
            feed = app.state.booking_feed
            self.assertTrue(feed.running)
            body = client.get("/dashboard").json()

        self.assertEqual(body["source"], "live")
        self.assertEqual(body["stats"]["totalBookings"], 1)
        self.assertFalse(feed.running)
        self.assertFalse(store.closed)

    def test_feed_failure_falls_back_to_pull(self):
        store = MemoryDocumentStore()
        store.fail_operations.add("watch")
        app.state.store = store
        app.dependency_overrides[get_current_admin] = lambda: {"uid": "test-admin"}

        with TestClient(app) as client:
            body = client.get("/dashboard").json()

        self.assertEqual(body["source"], "pull")


class TestAuthentication(unittest.TestCase):
    def setUp(self):
        app.state.store = MemoryDocumentStore()
        app.dependency_overrides.clear()

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_missing_token_is_rejected(self):
        from booking_admin import auth

        if not auth.ADMIN_AUTH_ENABLED:
            self.skipTest("admin authentication disabled in this environment")

        response = TestClient(app).get("/categories")

        self.assertEqual(response.status_code, 401)


if __name__ == "__main__":
    unittest.main(verbosity=2)
