"""Service catalog repository - Document store operations for services"""

from typing import Iterable, Optional

from ...config import SERVICES_COLLECTION
from ...shared.ordering import coerce_order, resequence
from ...store import DocumentStore, utcnow
from ..categories.schemas import CategoryResponse
from .schemas import ServiceResponse

NO_CATEGORY = "None"


def _number(value, default=0):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return default


def to_service(doc: dict, categories: dict[str, CategoryResponse]) -> ServiceResponse:
    """Apply read-time defaults and resolve the category name"""
    category_id = doc.get("categoryId") or ""
    category = categories.get(category_id)
    return ServiceResponse(
        id=doc["id"],
        name=doc.get("name") or "",
        description=doc.get("description") or "",
        duration=int(_number(doc.get("duration"))),
        price=float(_number(doc.get("price"))),
        categoryId=category_id,
        categoryName=category.name if category else NO_CATEGORY,
        active=doc["active"] if isinstance(doc.get("active"), bool) else True,
        order=coerce_order(doc.get("order")),
        createdAt=doc.get("createdAt"),
        updatedAt=doc.get("updatedAt"),
    )


def sort_services(
    services: Iterable[ServiceResponse], categories: dict[str, CategoryResponse]
) -> list[ServiceResponse]:
    """Parent category order first, then the service's own order"""

    def key(service: ServiceResponse):
        category = categories.get(service.categoryId)
        return (category.order if category else 0, service.order)

    return sorted(services, key=key)


class ServiceCatalogRepository:
    """Repository for service document operations"""

    @staticmethod
    def get_services(
        store: DocumentStore, categories: list[CategoryResponse]
    ) -> list[ServiceResponse]:
        by_id = {c.id: c for c in categories}
        services = [to_service(doc, by_id) for doc in store.list(SERVICES_COLLECTION)]
        return sort_services(services, by_id)

    @staticmethod
    def get_service_doc(store: DocumentStore, service_id: str) -> Optional[dict]:
        return store.get(SERVICES_COLLECTION, service_id)

    @staticmethod
    def create_service(store: DocumentStore, **data) -> str:
        now = utcnow()
        return store.add(SERVICES_COLLECTION, {**data, "createdAt": now, "updatedAt": now})

    @staticmethod
    def update_service(store: DocumentStore, service_id: str, **updates) -> None:
        store.update(SERVICES_COLLECTION, service_id, {**updates, "updatedAt": utcnow()})

    @staticmethod
    def delete_service(store: DocumentStore, service_id: str) -> None:
        store.delete(SERVICES_COLLECTION, service_id)

    @staticmethod
    def reorder_services(store: DocumentStore, service_ids: list[str]) -> int:
        return resequence(store, SERVICES_COLLECTION, service_ids)
