"""Staff repository - Document store operations for employees"""

from typing import Optional

from ...config import EMPLOYEES_COLLECTION, SERVICES_COLLECTION
from ...store import DocumentStore, utcnow
from ..scheduling.normalize import exceptions_count, normalize_schedule, working_days_count
from .schemas import EmployeeResponse


def dedupe(values) -> list[str]:
    """Drop repeated ids, first occurrence wins"""
    return list(dict.fromkeys(str(v) for v in values if v))


def to_employee(doc: dict, service_names: dict[str, str]) -> EmployeeResponse:
    """
    Apply read-time defaults.

    ``serviceIds`` is the legacy name of ``services``; ``workingHours`` is
    only consulted when no ``schedule`` is stored.
    """
    raw_services = doc.get("services")
    if not isinstance(raw_services, list):
        raw_services = doc.get("serviceIds") if isinstance(doc.get("serviceIds"), list) else []
    services = dedupe(raw_services)

    legacy_hours = doc.get("workingHours") if isinstance(doc.get("workingHours"), dict) else None
    schedule = normalize_schedule(doc.get("schedule"), legacy_hours)

    return EmployeeResponse(
        id=doc["id"],
        name=doc.get("name") or "",
        role=doc.get("role") or "",
        email=doc.get("email") or None,
        phone=doc.get("phone") or None,
        active=doc["active"] if isinstance(doc.get("active"), bool) else True,
        services=services,
        serviceNames=[service_names[s] for s in services if s in service_names],
        schedule=schedule,
        workingDays=working_days_count(schedule),
        exceptionsCount=exceptions_count(schedule),
        createdAt=doc.get("createdAt"),
        updatedAt=doc.get("updatedAt"),
    )


class StaffRepository:
    """Repository for employee document operations"""

    @staticmethod
    def get_service_names(store: DocumentStore) -> dict[str, str]:
        return {doc["id"]: doc.get("name") or "" for doc in store.list(SERVICES_COLLECTION)}

    @staticmethod
    def get_employees(store: DocumentStore, service_names: dict[str, str]) -> list[EmployeeResponse]:
        employees = [to_employee(doc, service_names) for doc in store.list(EMPLOYEES_COLLECTION)]
        return sorted(employees, key=lambda e: e.name.casefold())

    @staticmethod
    def get_employee_doc(store: DocumentStore, employee_id: str) -> Optional[dict]:
        return store.get(EMPLOYEES_COLLECTION, employee_id)

    @staticmethod
    def create_employee(store: DocumentStore, data: dict) -> tuple[str, dict]:
        now = utcnow()
        document = {**data, "createdAt": now, "updatedAt": now}
        return store.add(EMPLOYEES_COLLECTION, document), document

    @staticmethod
    def update_employee(store: DocumentStore, employee_id: str, updates: dict) -> dict:
        written = {**updates, "updatedAt": utcnow()}
        store.update(EMPLOYEES_COLLECTION, employee_id, written)
        return written

    @staticmethod
    def delete_employee(store: DocumentStore, employee_id: str) -> None:
        store.delete(EMPLOYEES_COLLECTION, employee_id)
