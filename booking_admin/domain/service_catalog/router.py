"""Service catalog router - FastAPI endpoints for bookable services"""

from fastapi import APIRouter, Depends

from ...auth import get_current_admin
from ...store import DocumentStore, get_store
from ..categories.schemas import ActiveToggle, MoveRequest
from .schemas import ServiceForm, ServiceResponse, ServiceUpdate
from .service import ServiceCatalogService

router = APIRouter(prefix="/services", tags=["Services"], dependencies=[Depends(get_current_admin)])


def get_service_catalog(store: DocumentStore = Depends(get_store)) -> ServiceCatalogService:
    """Dependency injection for ServiceCatalogService"""
    return ServiceCatalogService(store)


@router.get("", response_model=list[ServiceResponse])
async def get_services(catalog: ServiceCatalogService = Depends(get_service_catalog)):
    """Get all services sorted by category order, then service order"""
    return catalog.get_services()


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: str, catalog: ServiceCatalogService = Depends(get_service_catalog)):
    return catalog.get_service(service_id)


@router.post("", response_model=list[ServiceResponse])
async def save_service(data: ServiceForm, catalog: ServiceCatalogService = Depends(get_service_catalog)):
    """Create a service, or update it when the form carries an id"""
    return catalog.save_service(data)


@router.patch("/{service_id}", response_model=list[ServiceResponse])
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    catalog: ServiceCatalogService = Depends(get_service_catalog),
):
    return catalog.update_service(service_id, data)


@router.put("/{service_id}/active", response_model=list[ServiceResponse])
async def set_service_active(
    service_id: str,
    data: ActiveToggle,
    catalog: ServiceCatalogService = Depends(get_service_catalog),
):
    return catalog.set_active(service_id, data.active)


@router.post("/{service_id}/move", response_model=list[ServiceResponse])
async def move_service(
    service_id: str,
    data: MoveRequest,
    catalog: ServiceCatalogService = Depends(get_service_catalog),
):
    return catalog.move_service(service_id, data.direction)


@router.delete("/{service_id}", response_model=list[ServiceResponse])
async def delete_service(service_id: str, catalog: ServiceCatalogService = Depends(get_service_catalog)):
    return catalog.delete_service(service_id)
