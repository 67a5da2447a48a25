"""Category router - FastAPI endpoints for service categories"""

import logging

from fastapi import APIRouter, Depends

from ...auth import get_current_admin
from ...store import DocumentStore, get_store
from .schemas import ActiveToggle, CategoryForm, CategoryResponse, CategoryUpdate, MoveRequest
from .service import CategoryService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/categories", tags=["Categories"], dependencies=[Depends(get_current_admin)]
)


def get_category_service(store: DocumentStore = Depends(get_store)) -> CategoryService:
    """Dependency injection for CategoryService"""
    return CategoryService(store)


@router.get("", response_model=list[CategoryResponse])
async def get_categories(service: CategoryService = Depends(get_category_service)):
    """Get all categories in display order"""
    return service.get_categories()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str, service: CategoryService = Depends(get_category_service)
):
    return service.get_category(category_id)


@router.post("", response_model=list[CategoryResponse])
async def save_category(
    data: CategoryForm, service: CategoryService = Depends(get_category_service)
):
    """Create a category, or update it when the form carries an id"""
    return service.save_category(data)


@router.patch("/{category_id}", response_model=list[CategoryResponse])
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    return service.update_category(category_id, data)


@router.put("/{category_id}/active", response_model=list[CategoryResponse])
async def set_category_active(
    category_id: str,
    data: ActiveToggle,
    service: CategoryService = Depends(get_category_service),
):
    return service.set_active(category_id, data.active)


@router.post("/{category_id}/move", response_model=list[CategoryResponse])
async def move_category(
    category_id: str,
    data: MoveRequest,
    service: CategoryService = Depends(get_category_service),
):
    """Move a category one position up or down and rewrite every order value"""
    return service.move_category(category_id, data.direction)


@router.delete("/{category_id}", response_model=list[CategoryResponse])
async def delete_category(
    category_id: str, service: CategoryService = Depends(get_category_service)
):
    return service.delete_category(category_id)
