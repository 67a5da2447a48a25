import unittest

from booking_admin.domain.scheduling.schemas import WEEKDAYS

from memory_store import MemoryDocumentStore
from api_client import make_client


def _store():
    return MemoryDocumentStore(
        {
            "services": {"cut": {"name": "Cut"}, "facial": {"name": "Facial"}},
            "employees": {
                "john": {
                    "name": "John Smith",
                    "role": "Hairstylist",
                    "email": "john@example.com",
                    "serviceIds": ["cut", "gone"],
                    "workingHours": {
                        "monday": {"start": "09:00", "end": "17:00"},
                        "saturday": {"start": "10:00", "end": "15:00"},
                        "sunday": None,
                    },
                },
                "ana": {
                    "name": "Ana",
                    "role": "Esthetician",
                    "services": ["facial"],
                    "schedule": {
                        "weeklySchedule": {"tuesday": {"isWorking": True, "timeSlots": [{"start": "10:00", "end": "14:00"}]}},
                        "exceptions": [
                            {"id": "e2", "date": "2025-06-02", "type": "holiday"},
                            {"id": "e1", "date": "2025-06-01", "type": "holiday"},
                        ],
                    },
                },
            },
        }
    )


class TestStaffApi(unittest.TestCase):
    def setUp(self):
        self.store = _store()
        self.client = make_client(self.store)

    def test_list_normalizes_legacy_fields(self):
        response = self.client.get("/staff")

        self.assertEqual(response.status_code, 200, response.text)
        ana, john = response.json()
        self.assertEqual(john["services"], ["cut", "gone"])
        self.assertEqual(john["serviceNames"], ["Cut"])
        self.assertEqual(john["workingDays"], 2)
        self.assertTrue(john["active"])
        self.assertEqual(ana["workingDays"], 1)
        self.assertEqual(ana["exceptionsCount"], 2)
        self.assertFalse(ana["schedule"]["weeklySchedule"]["monday"]["isWorking"])

    def test_name_and_role_are_required(self):
        response = self.client.post("/staff", json={"name": "Bo", "role": "  "})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Name and Role are required")
        self.assertEqual(self.store.writes, [])

    def test_invalid_email_is_rejected(self):
        response = self.client.post("/staff", json={"name": "Bo", "role": "Barber", "email": "not-an-email"})

        self.assertEqual(response.status_code, 422)

    def test_create_gets_default_schedule(self):
        response = self.client.post(
            "/staff",
            json={"name": "Bo", "role": "Barber", "email": "BO@Example.com", "services": ["cut", "cut", "facial"]},
        )

        self.assertEqual(response.status_code, 200, response.text)
        body = response.json()
        self.assertEqual(body["email"], "bo@example.com")
        self.assertEqual(body["services"], ["cut", "facial"])
        self.assertEqual(body["serviceNames"], ["Cut", "Facial"])
        self.assertEqual(body["workingDays"], 5)
        stored = self.store.collections["employees"][body["id"]]
        self.assertEqual(stored["schedule"]["weeklySchedule"]["monday"]["timeSlots"], [{"start": "09:00", "end": "17:00"}])

    def test_update_returns_patched_record_without_reread(self):
        response = self.client.post("/staff", json={"id": "ana", "name": "Ana Maria", "role": "Esthetician"})

        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["name"], "Ana Maria")
        self.assertEqual(response.json()["exceptionsCount"], 2)
        self.assertEqual([w[0] for w in self.store.writes], ["update"])

    def test_assign_services_dedupes_in_order(self):
        response = self.client.put("/staff/john/services", json={"services": ["facial", "cut", "facial", "unknown"]})

        self.assertEqual(response.json()["services"], ["facial", "cut", "unknown"])
        self.assertEqual(self.store.collections["employees"]["john"]["services"], ["facial", "cut", "unknown"])

    def test_create_with_partial_schedule_fills_missing_days(self):
        response = self.client.post(
            "/staff",
            json={"name": "Bo", "role": "Barber", "schedule": {"weeklySchedule": {"monday": {"isWorking": True}}}},
        )

        self.assertEqual(response.status_code, 200, response.text)
        stored = self.store.collections["employees"][response.json()["id"]]
        self.assertEqual(sorted(stored["schedule"]["weeklySchedule"]), sorted(WEEKDAYS))

    def test_patch_with_blank_email_clears_it(self):
        response = self.client.patch("/staff/john", json={"email": ""})

        self.assertEqual(response.status_code, 200, response.text)
        self.assertIsNone(response.json()["email"])
        self.assertIsNone(self.store.collections["employees"]["john"]["email"])

    def test_patch_leaves_unsent_fields_alone(self):
        response = self.client.patch("/staff/john", json={"role": "Senior Stylist"})

        self.assertEqual(response.json()["email"], "john@example.com")
        self.assertEqual(self.store.collections["employees"]["john"]["email"], "john@example.com")

    def test_toggle_active(self):
        response = self.client.put("/staff/john/active", json={"active": False})

        self.assertFalse(response.json()["active"])

    def test_delete(self):
        response = self.client.delete("/staff/john")

        self.assertEqual(response.json(), {"message": "Employee deleted"})
        self.assertNotIn("john", self.store.collections["employees"])

    def test_unknown_employee(self):
        self.assertEqual(self.client.get("/staff/missing").status_code, 404)
        self.assertEqual(self.client.put("/staff/missing/active", json={"active": True}).status_code, 404)


class TestScheduleApi(unittest.TestCase):
    def setUp(self):
        self.store = _store()
        self.client = make_client(self.store)

    def test_get_sorts_exceptions(self):
        response = self.client.get("/staff/ana/schedule")

        self.assertEqual(response.status_code, 200, response.text)
        body = response.json()
        self.assertEqual([e["id"] for e in body["schedule"]["exceptions"]], ["e1", "e2"])
        self.assertEqual(body["workingDays"], 1)

    def test_legacy_working_hours_are_converted(self):
        body = self.client.get("/staff/john/schedule").json()

        self.assertEqual(body["schedule"]["weeklySchedule"]["saturday"]["timeSlots"], [{"start": "10:00", "end": "15:00"}])

    def test_operations_are_applied_and_saved(self):
        response = self.client.post(
            "/staff/ana/schedule/operations",
            json={
                "operations": [
                    {"op": "toggle_working_day", "day": "monday"},
                    {"op": "copy_day", "source": "monday", "targets": ["wednesday", "thursday"]},
                    {"op": "add_exception", "date": "2025-07-14", "type": "modified", "timeSlots": [{"start": "09:00", "end": "12:00"}]},
                    {"op": "remove_exception", "id": "e2"},
                ]
            },
        )

        self.assertEqual(response.status_code, 200, response.text)
        body = response.json()
        self.assertEqual(body["workingDays"], 4)
        self.assertEqual(body["exceptionsCount"], 2)
        stored = self.store.collections["employees"]["ana"]
        self.assertTrue(stored["schedule"]["weeklySchedule"]["thursday"]["isWorking"])
        self.assertEqual(stored["schedule"]["exceptions"][-1]["timeSlots"], [{"start": "09:00", "end": "12:00"}])
        self.assertIn("updatedAt", stored)

    def test_addressing_error_stores_nothing(self):
        response = self.client.post(
            "/staff/ana/schedule/operations",
            json={
                "operations": [
                    {"op": "toggle_working_day", "day": "monday"},
                    {"op": "remove_time_slot", "day": "friday", "index": 0},
                ]
            },
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("Operation 1", response.json()["detail"])
        self.assertEqual(self.store.writes, [])

    def test_invalid_exception_date_is_422(self):
        response = self.client.post(
            "/staff/ana/schedule/operations",
            json={"operations": [{"op": "add_exception", "date": "tomorrow"}]},
        )

        self.assertEqual(response.status_code, 422)

    def test_replace_schedule(self):
        response = self.client.put(
            "/staff/john/schedule",
            json={"weeklySchedule": {"sunday": {"isWorking": True, "timeSlots": [{"start": "12:00", "end": "16:00"}]}}},
        )

        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["workingDays"], 1)
        stored = self.store.collections["employees"]["john"]["schedule"]
        self.assertEqual(len(stored["weeklySchedule"]), 7)

    def test_replace_without_weekly_schedule_keeps_every_weekday(self):
        response = self.client.put("/staff/ana/schedule", json={})

        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["workingDays"], 0)
        stored = self.store.collections["employees"]["ana"]["schedule"]
        self.assertEqual(sorted(stored["weeklySchedule"]), sorted(WEEKDAYS))

    def test_replace_drops_slots_from_holidays(self):
        response = self.client.put(
            "/staff/ana/schedule",
            json={"exceptions": [{"id": "h1", "date": "2025-12-25", "type": "holiday", "timeSlots": [{"start": "09:00", "end": "10:00"}]}]},
        )

        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["schedule"]["exceptions"][0]["timeSlots"], [])
        stored = self.store.collections["employees"]["ana"]["schedule"]
        self.assertEqual(stored["exceptions"][0]["timeSlots"], [])

    def test_exception_stored_without_id_can_be_removed(self):
        self.store.collections["employees"]["ana"]["schedule"]["exceptions"] = [{"date": "2025-05-01", "type": "holiday"}]
        listed = self.client.get("/staff/ana/schedule").json()["schedule"]["exceptions"]

        response = self.client.post(
            "/staff/ana/schedule/operations",
            json={"operations": [{"op": "remove_exception", "id": listed[0]["id"]}]},
        )

        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["exceptionsCount"], 0)
        self.assertEqual(self.store.collections["employees"]["ana"]["schedule"]["exceptions"], [])

    def test_unknown_employee(self):
        self.assertEqual(self.client.get("/staff/missing/schedule").status_code, 404)


if __name__ == "__main__":
    unittest.main(verbosity=2)
