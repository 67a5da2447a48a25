"""Staff router - FastAPI endpoints for employees"""

from fastapi import APIRouter, Depends

from ...auth import get_current_admin
from ...store import DocumentStore, get_store
from ..categories.schemas import ActiveToggle
from .schemas import EmployeeForm, EmployeeResponse, EmployeeUpdate, ServiceAssignment
from .service import StaffService

router = APIRouter(prefix="/staff", tags=["Staff"], dependencies=[Depends(get_current_admin)])


def get_staff_service(store: DocumentStore = Depends(get_store)) -> StaffService:
    """Dependency injection for StaffService"""
    return StaffService(store)


@router.get("", response_model=list[EmployeeResponse])
async def get_staff(service: StaffService = Depends(get_staff_service)):
    """Get all employees with resolved service names and schedule summary"""
    return service.get_staff()


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: str, service: StaffService = Depends(get_staff_service)):
    return service.get_employee(employee_id)


@router.post("", response_model=EmployeeResponse)
async def save_employee(data: EmployeeForm, service: StaffService = Depends(get_staff_service)):
    """Create an employee, or update it when the form carries an id"""
    return service.save_employee(data)


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    service: StaffService = Depends(get_staff_service),
):
    return service.update_employee(employee_id, data)


@router.put("/{employee_id}/active", response_model=EmployeeResponse)
async def set_employee_active(
    employee_id: str,
    data: ActiveToggle,
    service: StaffService = Depends(get_staff_service),
):
    return service.set_active(employee_id, data.active)


@router.put("/{employee_id}/services", response_model=EmployeeResponse)
async def set_employee_services(
    employee_id: str,
    data: ServiceAssignment,
    service: StaffService = Depends(get_staff_service),
):
    """Replace the services an employee can perform"""
    return service.set_services(employee_id, data.services)


@router.delete("/{employee_id}")
async def delete_employee(employee_id: str, service: StaffService = Depends(get_staff_service)):
    return service.delete_employee(employee_id)
