import asyncio
import itertools
import unittest

from booking_admin.domain.scheduling.editor import ScheduleEditError, ScheduleEditor, generate_exception_id
from booking_admin.domain.scheduling.normalize import default_schedule
from booking_admin.domain.scheduling.schemas import (
    WEEKDAYS,
    AddException,
    CopyDay,
    DaySchedule,
    EmployeeSchedule,
    ScheduleException,
    TimeSlot,
    ToggleWorkingDay,
    UpdateTimeSlot,
)


async def _noop_save(schedule):
    return None


def _sequential_ids():
    counter = itertools.count(1)
    return lambda: f"exc{next(counter)}"


class TestWeeklyEditing(unittest.TestCase):
    def setUp(self):
        self.editor = ScheduleEditor(default_schedule(), on_save=_noop_save, id_factory=_sequential_ids())

    def test_turning_on_an_empty_day_seeds_one_default_slot(self):
        day = self.editor.toggle_working_day("saturday")

        self.assertTrue(day.isWorking)
        self.assertEqual(day.timeSlots, [TimeSlot(start="09:00", end="17:00")])

    def test_every_weekday_seeds_one_default_slot(self):
        for day in WEEKDAYS:
            with self.subTest(day=day):
                editor = ScheduleEditor(default_schedule(), on_save=_noop_save)
                editor.schedule.weeklySchedule[day] = DaySchedule()

                toggled = editor.toggle_working_day(day)

                self.assertTrue(toggled.isWorking)
                self.assertEqual(toggled.timeSlots, [TimeSlot(start="09:00", end="17:00")])

    def test_turning_on_a_day_with_slots_keeps_them(self):
        sunday = self.editor.schedule.weeklySchedule["sunday"]
        sunday.timeSlots.append(TimeSlot(start="10:00", end="12:00"))

        day = self.editor.toggle_working_day("sunday")

        self.assertTrue(day.isWorking)
        self.assertEqual(day.timeSlots, [TimeSlot(start="10:00", end="12:00")])

    def test_turning_off_keeps_slots(self):
        day = self.editor.toggle_working_day("monday")

        self.assertFalse(day.isWorking)
        self.assertEqual(len(day.timeSlots), 1)

    def test_remove_time_slot_removes_exactly_that_slot(self):
        self.editor.add_time_slot("monday")
        self.editor.update_time_slot("monday", 1, "start", "18:00")
        self.editor.add_time_slot("monday")

        removed = self.editor.remove_time_slot("monday", 1)

        self.assertEqual(removed.start, "18:00")
        starts = [slot.start for slot in self.editor.schedule.weeklySchedule["monday"].timeSlots]
        self.assertEqual(starts, ["09:00", "09:00"])

    def test_update_time_slot_accepts_inverted_times(self):
        slot = self.editor.update_time_slot("monday", 0, "start", "20:00")

        self.assertEqual(slot, TimeSlot(start="20:00", end="17:00"))

    def test_addressing_errors(self):
        with self.assertRaises(ScheduleEditError):
            self.editor.toggle_working_day("funday")
        with self.assertRaises(ScheduleEditError):
            self.editor.remove_time_slot("monday", 3)
        with self.assertRaises(ScheduleEditError):
            self.editor.update_time_slot("saturday", 0, "end", "10:00")

    def test_editor_works_on_a_copy(self):
        original = default_schedule()
        editor = ScheduleEditor(original, on_save=_noop_save)

        editor.toggle_working_day("monday")

        self.assertTrue(original.weeklySchedule["monday"].isWorking)


class TestCopyDay(unittest.TestCase):
    def setUp(self):
        self.editor = ScheduleEditor(default_schedule(), on_save=_noop_save)
        self.editor.update_time_slot("monday", 0, "start", "08:00")
        self.editor.add_time_slot("monday")

    def test_copy_to_selected_days(self):
        self.editor.toggle_day_selection("saturday")
        self.editor.toggle_day_selection("sunday")

        written = self.editor.copy_day("monday")

        self.assertEqual(written, ["saturday", "sunday"])
        monday = self.editor.schedule.weeklySchedule["monday"]
        for day in written:
            target = self.editor.schedule.weeklySchedule[day]
            self.assertEqual(target.isWorking, monday.isWorking)
            self.assertEqual(target.timeSlots, monday.timeSlots)

    def test_copied_slots_are_not_shared(self):
        self.editor.select_days(["tuesday", "wednesday"])
        self.editor.copy_day("monday")

        self.editor.update_time_slot("tuesday", 0, "start", "11:00")

        self.assertEqual(self.editor.schedule.weeklySchedule["monday"].timeSlots[0].start, "08:00")
        self.assertEqual(self.editor.schedule.weeklySchedule["wednesday"].timeSlots[0].start, "08:00")

    def test_nothing_selected_besides_source_is_a_no_op(self):
        before = self.editor.schedule.model_copy(deep=True)
        self.editor.select_days(["monday"])

        self.assertEqual(self.editor.copy_day("monday"), [])
        self.assertEqual(self.editor.schedule, before)

    def test_toggle_day_selection_twice_deselects(self):
        self.editor.toggle_day_selection("friday")

        self.assertEqual(self.editor.toggle_day_selection("friday"), [])


class TestExceptions(unittest.TestCase):
    def setUp(self):
        self.editor = ScheduleEditor(default_schedule(), on_save=_noop_save, id_factory=_sequential_ids())

    def test_holiday_drops_time_slots(self):
        exception = self.editor.add_exception("2025-12-25", "holiday", time_slots=[TimeSlot()])

        self.assertEqual(exception.id, "exc1")
        self.assertEqual(exception.timeSlots, [])

    def test_modified_exception_slots(self):
        exception = self.editor.add_exception("2025-12-24", "modified", note="Half day")
        self.editor.add_exception_slot(exception.id, "09:00", "13:00")
        self.editor.add_exception_slot(exception.id)

        removed = self.editor.remove_exception_slot(exception.id, 1)

        self.assertEqual(removed, TimeSlot(start="09:00", end="17:00"))
        self.assertEqual(exception.timeSlots, [TimeSlot(start="09:00", end="13:00")])
        self.assertEqual(exception.note, "Half day")

    def test_slots_cannot_be_added_to_holidays(self):
        exception = self.editor.add_exception("2025-01-01")

        with self.assertRaises(ScheduleEditError):
            self.editor.add_exception_slot(exception.id)

    def test_unknown_exception_id(self):
        with self.assertRaises(ScheduleEditError):
            self.editor.remove_exception_slot("missing", 0)
        self.assertFalse(self.editor.remove_exception("missing"))

    def test_remove_exception(self):
        kept = self.editor.add_exception("2025-01-01")
        removed = self.editor.add_exception("2025-01-02")

        self.assertTrue(self.editor.remove_exception(removed.id))
        self.assertEqual([e.id for e in self.editor.schedule.exceptions], [kept.id])

    def test_sorted_exceptions_is_stable_and_keeps_duplicates(self):
        self.editor.add_exception("2025-03-10")
        self.editor.add_exception("2025-01-05", note="first")
        self.editor.add_exception("2025-01-05", note="second")
        self.editor.add_exception("not a date")
        self.editor.add_exception("2024-12-31T10:00:00Z")

        ordered = self.editor.sorted_exceptions()

        self.assertEqual(
            [(e.date, e.note) for e in ordered],
            [
                ("2024-12-31T10:00:00Z", None),
                ("2025-01-05", "first"),
                ("2025-01-05", "second"),
                ("2025-03-10", None),
                ("not a date", None),
            ],
        )

    def test_generated_ids(self):
        exception_id = generate_exception_id()

        self.assertEqual(len(exception_id), 9)
        self.assertTrue(all(c.isdigit() or c.islower() for c in exception_id))


class TestApplyAndSave(unittest.TestCase):
    def test_apply_operations_then_save(self):
        saved = []

        async def on_save(schedule):
            saved.append(schedule)

        editor = ScheduleEditor(default_schedule(), on_save=on_save, id_factory=_sequential_ids())
        editor.apply(ToggleWorkingDay(op="toggle_working_day", day="saturday"))
        editor.apply(UpdateTimeSlot(op="update_time_slot", day="saturday", index=0, field="end", value="13:00"))
        editor.apply(CopyDay(op="copy_day", source="saturday", targets=["sunday"]))
        editor.apply(AddException(op="add_exception", date="2025-05-01"))

        result = asyncio.run(editor.save())

        self.assertEqual(saved, [result])
        self.assertEqual(result.weeklySchedule["sunday"].timeSlots, [TimeSlot(start="09:00", end="13:00")])
        self.assertTrue(result.weeklySchedule["sunday"].isWorking)
        self.assertEqual(result.exceptions, [ScheduleException(id="exc1", date="2025-05-01")])

        editor.toggle_working_day("sunday")
        self.assertTrue(result.weeklySchedule["sunday"].isWorking)

    def test_schedule_model_fills_missing_weekdays(self):
        schedule = EmployeeSchedule(weeklySchedule={"monday": {"isWorking": True}})

        self.assertEqual(len(schedule.weeklySchedule), 7)
        self.assertFalse(schedule.weeklySchedule["sunday"].isWorking)

    def test_schedule_model_rejects_unknown_weekdays(self):
        with self.assertRaises(ValueError):
            EmployeeSchedule(weeklySchedule={"caturday": {}})


if __name__ == "__main__":
    unittest.main(verbosity=2)
