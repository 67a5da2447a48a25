"""Category repository - Document store operations for service categories"""

from typing import Optional

from ...config import CATEGORIES_COLLECTION
from ...shared.ordering import coerce_order, resequence
from ...store import DocumentStore, utcnow
from .schemas import CategoryResponse


def to_category(doc: dict) -> CategoryResponse:
    """Apply read-time defaults to a raw category document"""
    return CategoryResponse(
        id=doc["id"],
        name=doc.get("name") or "",
        description=doc.get("description") or "",
        active=doc["active"] if isinstance(doc.get("active"), bool) else True,
        order=coerce_order(doc.get("order")),
        createdAt=doc.get("createdAt"),
        updatedAt=doc.get("updatedAt"),
    )


class CategoryRepository:
    """Repository for category document operations"""

    @staticmethod
    def get_categories(store: DocumentStore) -> list[CategoryResponse]:
        """Get all categories sorted by display order"""
        categories = [to_category(doc) for doc in store.list(CATEGORIES_COLLECTION)]
        return sorted(categories, key=lambda c: c.order)

    @staticmethod
    def get_category(store: DocumentStore, category_id: str) -> Optional[CategoryResponse]:
        doc = store.get(CATEGORIES_COLLECTION, category_id)
        return to_category(doc) if doc else None

    @staticmethod
    def create_category(store: DocumentStore, **data) -> str:
        now = utcnow()
        return store.add(CATEGORIES_COLLECTION, {**data, "createdAt": now, "updatedAt": now})

    @staticmethod
    def update_category(store: DocumentStore, category_id: str, **updates) -> None:
        store.update(CATEGORIES_COLLECTION, category_id, {**updates, "updatedAt": utcnow()})

    @staticmethod
    def delete_category(store: DocumentStore, category_id: str) -> None:
        store.delete(CATEGORIES_COLLECTION, category_id)

    @staticmethod
    def reorder_categories(store: DocumentStore, category_ids: list[str]) -> int:
        return resequence(store, CATEGORIES_COLLECTION, category_ids)
