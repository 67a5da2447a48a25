"""Scheduling router - weekly schedule and exceptions of one employee"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ...auth import get_current_admin
from ...config import EMPLOYEES_COLLECTION
from ...store import DocumentStore, get_store, utcnow
from ..staff.repository import StaffRepository
from .editor import ScheduleEditError, ScheduleEditor, sort_exceptions
from .normalize import exceptions_count, normalize_schedule, working_days_count
from .schemas import EmployeeSchedule, ScheduleOperationsRequest, ScheduleView

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/staff/{employee_id}/schedule",
    tags=["Schedule"],
    dependencies=[Depends(get_current_admin)],
)


def _load_schedule(store: DocumentStore, employee_id: str) -> EmployeeSchedule:
    doc = StaffRepository.get_employee_doc(store, employee_id)
    if not doc:
        raise HTTPException(status_code=404, detail="Employee not found")
    legacy_hours = doc.get("workingHours") if isinstance(doc.get("workingHours"), dict) else None
    return normalize_schedule(doc.get("schedule"), legacy_hours)


def _view(schedule: EmployeeSchedule) -> ScheduleView:
    ordered = schedule.model_copy(update={"exceptions": sort_exceptions(schedule.exceptions)})
    return ScheduleView(
        schedule=ordered,
        workingDays=working_days_count(schedule),
        exceptionsCount=exceptions_count(schedule),
    )


def _saver(store: DocumentStore, employee_id: str):
    async def on_save(schedule: EmployeeSchedule) -> None:
        store.update(
            EMPLOYEES_COLLECTION,
            employee_id,
            {"schedule": schedule.model_dump(), "updatedAt": utcnow()},
        )
        logger.info(f"✅ Schedule stored for employee {employee_id}")

    return on_save


@router.get("", response_model=ScheduleView)
async def get_schedule(employee_id: str, store: DocumentStore = Depends(get_store)):
    """Get the normalized schedule; exceptions come back in date order"""
    return _view(_load_schedule(store, employee_id))


@router.put("", response_model=ScheduleView)
async def replace_schedule(
    employee_id: str,
    data: EmployeeSchedule,
    store: DocumentStore = Depends(get_store),
):
    """Replace the whole schedule with the one sent"""
    _load_schedule(store, employee_id)
    editor = ScheduleEditor(data, on_save=_saver(store, employee_id))
    return _view(await editor.save())


@router.post("/operations", response_model=ScheduleView)
async def apply_schedule_operations(
    employee_id: str,
    data: ScheduleOperationsRequest,
    store: DocumentStore = Depends(get_store),
):
    """
    Apply editor operations in order, then save once.

    Nothing is stored when any operation addresses a day, slot or exception
    that does not exist.
    """
    editor = ScheduleEditor(_load_schedule(store, employee_id), on_save=_saver(store, employee_id))
    for position, operation in enumerate(data.operations):
        try:
            editor.apply(operation)
        except ScheduleEditError as e:
            logger.warning(f"⚠️ Schedule operation {position} ({operation.op}) rejected: {e}")
            raise HTTPException(status_code=400, detail=f"Operation {position}: {e}") from e
    return _view(await editor.save())
