"""Staff service - Business logic for employee operations"""

import logging

from fastapi import HTTPException

from ...store import DocumentStore
from ..scheduling.normalize import default_schedule
from .repository import StaffRepository, dedupe, to_employee
from .schemas import EmployeeForm, EmployeeResponse, EmployeeUpdate

logger = logging.getLogger(__name__)


class StaffService:
    """Service layer for the staff page

    Writes are not followed by a re-read: the record returned is the stored
    document patched locally with what was written.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self.repo = StaffRepository()

    def get_staff(self) -> list[EmployeeResponse]:
        return self.repo.get_employees(self.store, self.repo.get_service_names(self.store))

    def _get_doc(self, employee_id: str) -> dict:
        doc = self.repo.get_employee_doc(self.store, employee_id)
        if not doc:
            raise HTTPException(status_code=404, detail="Employee not found")
        return doc

    def _patched(self, doc: dict, written: dict) -> EmployeeResponse:
        return to_employee({**doc, **written}, self.repo.get_service_names(self.store))

    def get_employee(self, employee_id: str) -> EmployeeResponse:
        return to_employee(self._get_doc(employee_id), self.repo.get_service_names(self.store))

    def save_employee(self, data: EmployeeForm) -> EmployeeResponse:
        """Update when the form carries an id, insert otherwise"""
        name = data.name.strip()
        role = data.role.strip()
        if not name or not role:
            raise HTTPException(status_code=400, detail="Name and Role are required")

        fields = {
            "name": name,
            "role": role,
            "email": data.email,
            "phone": data.phone or None,
            "active": data.active,
            "services": dedupe(data.services),
        }
        if data.schedule is not None:
            fields["schedule"] = data.schedule.model_dump()

        if data.id:
            doc = self._get_doc(data.id)
            written = self.repo.update_employee(self.store, data.id, fields)
            logger.info(f"Updated employee {data.id}")
            return self._patched(doc, written)

        fields.setdefault("schedule", default_schedule().model_dump())
        employee_id, document = self.repo.create_employee(self.store, fields)
        logger.info(f"📥 Created employee {employee_id} ({name}, {role})")
        return self._patched({"id": employee_id}, document)

    def update_employee(self, employee_id: str, data: EmployeeUpdate) -> EmployeeResponse:
        # unset fields are left alone; a blank email or phone clears it
        updates = data.model_dump(exclude_unset=True)
        if updates.get("active") is None:
            updates.pop("active", None)
        if "phone" in updates:
            updates["phone"] = updates["phone"] or None
        for field in ("name", "role"):
            if field in updates:
                updates[field] = (updates[field] or "").strip()
                if not updates[field]:
                    raise HTTPException(status_code=400, detail="Name and Role are required")

        doc = self._get_doc(employee_id)
        if not updates:
            return self._patched(doc, {})
        return self._patched(doc, self.repo.update_employee(self.store, employee_id, updates))

    def set_active(self, employee_id: str, active: bool) -> EmployeeResponse:
        doc = self._get_doc(employee_id)
        return self._patched(doc, self.repo.update_employee(self.store, employee_id, {"active": active}))

    def set_services(self, employee_id: str, service_ids: list[str]) -> EmployeeResponse:
        """Replace the assigned services; ids are not checked against the catalog"""
        doc = self._get_doc(employee_id)
        services = dedupe(service_ids)
        written = self.repo.update_employee(self.store, employee_id, {"services": services})
        logger.info(f"Assigned {len(services)} services to employee {employee_id}")
        return self._patched(doc, written)

    def delete_employee(self, employee_id: str) -> dict:
        self.repo.delete_employee(self.store, employee_id)
        return {"message": "Employee deleted"}
