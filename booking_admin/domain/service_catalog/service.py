"""Service catalog - Business logic for bookable services"""

import logging

from fastapi import HTTPException

from ...shared.ordering import Direction, move_item
from ...store import DocumentStore
from ..categories.repository import CategoryRepository
from .repository import ServiceCatalogRepository, to_service
from .schemas import ServiceForm, ServiceResponse, ServiceUpdate

logger = logging.getLogger(__name__)


class ServiceCatalogService:
    """Service layer for the services page (re-fetch after every write)"""

    def __init__(self, store: DocumentStore):
        self.store = store
        self.repo = ServiceCatalogRepository()
        self.categories = CategoryRepository()

    def get_services(self) -> list[ServiceResponse]:
        """Fetch categories first so names and sort order can be resolved"""
        categories = self.categories.get_categories(self.store)
        return self.repo.get_services(self.store, categories)

    def get_service(self, service_id: str) -> ServiceResponse:
        doc = self.repo.get_service_doc(self.store, service_id)
        if not doc:
            raise HTTPException(status_code=404, detail="Service not found")
        categories = {c.id: c for c in self.categories.get_categories(self.store)}
        return to_service(doc, categories)

    def save_service(self, data: ServiceForm) -> list[ServiceResponse]:
        """Update when the form carries an id, insert otherwise"""
        fields = data.model_dump(exclude={"id", "order"})

        if data.id:
            if data.order is not None:
                fields["order"] = data.order
            self.repo.update_service(self.store, data.id, **fields)
            logger.info(f"Updated service {data.id}")
        else:
            # appended after the last sibling of its category
            count = len([s for s in self.get_services() if s.categoryId == data.categoryId])
            service_id = self.repo.create_service(self.store, **fields, order=count)
            logger.info(f"📥 Created service {service_id} at position {count}")

        return self.get_services()

    def update_service(self, service_id: str, data: ServiceUpdate) -> list[ServiceResponse]:
        updates = data.model_dump(exclude_none=True)
        if updates:
            self.repo.update_service(self.store, service_id, **updates)
        return self.get_services()

    def set_active(self, service_id: str, active: bool) -> list[ServiceResponse]:
        self.repo.update_service(self.store, service_id, active=active)
        return self.get_services()

    def move_service(self, service_id: str, direction: Direction) -> list[ServiceResponse]:
        """Move among the services of the same category; the category order always wins"""
        services = self.get_services()
        target = next((s for s in services if s.id == service_id), None)
        if target is None:
            raise HTTPException(status_code=404, detail="Service not found")

        siblings = [s for s in services if s.categoryId == target.categoryId]
        index = siblings.index(target)
        reordered = move_item(siblings, index, direction)
        if [s.id for s in reordered] == [s.id for s in siblings]:
            return services

        self.repo.reorder_services(self.store, [s.id for s in reordered])
        return self.get_services()

    def delete_service(self, service_id: str) -> list[ServiceResponse]:
        self.repo.delete_service(self.store, service_id)
        return self.get_services()
