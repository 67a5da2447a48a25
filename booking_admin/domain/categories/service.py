"""Category service - Business logic for category operations"""

import logging

from fastapi import HTTPException

from ...shared.ordering import Direction, move_item
from ...store import DocumentStore
from .repository import CategoryRepository
from .schemas import CategoryForm, CategoryResponse, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """Service layer for category business logic

    Every write is followed by a full re-fetch; callers get the fresh list.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self.repo = CategoryRepository()

    def get_categories(self) -> list[CategoryResponse]:
        return self.repo.get_categories(self.store)

    def get_category(self, category_id: str) -> CategoryResponse:
        category = self.repo.get_category(self.store, category_id)
        if not category:
            raise HTTPException(status_code=404, detail="Category not found")
        return category

    def save_category(self, data: CategoryForm) -> list[CategoryResponse]:
        """Update when the form carries an id, insert otherwise"""
        fields = {
            "name": data.name,
            "description": data.description,
            "active": data.active,
        }

        if data.id:
            if data.order is not None:
                fields["order"] = data.order
            self.repo.update_category(self.store, data.id, **fields)
            logger.info(f"Updated category {data.id}")
        else:
            existing = self.repo.get_categories(self.store)
            category_id = self.repo.create_category(self.store, **fields, order=len(existing))
            logger.info(f"📥 Created category {category_id} at position {len(existing)}")

        return self.get_categories()

    def update_category(self, category_id: str, data: CategoryUpdate) -> list[CategoryResponse]:
        updates = data.model_dump(exclude_none=True)
        if updates:
            self.repo.update_category(self.store, category_id, **updates)
        return self.get_categories()

    def set_active(self, category_id: str, active: bool) -> list[CategoryResponse]:
        self.repo.update_category(self.store, category_id, active=active)
        return self.get_categories()

    def move_category(self, category_id: str, direction: Direction) -> list[CategoryResponse]:
        categories = self.get_categories()
        index = next((i for i, c in enumerate(categories) if c.id == category_id), None)
        if index is None:
            raise HTTPException(status_code=404, detail="Category not found")

        reordered = move_item(categories, index, direction)
        if [c.id for c in reordered] == [c.id for c in categories]:
            return categories

        self.repo.reorder_categories(self.store, [c.id for c in reordered])
        return self.get_categories()

    def delete_category(self, category_id: str) -> list[CategoryResponse]:
        """Delete a category; services pointing at it keep their dangling categoryId"""
        self.repo.delete_category(self.store, category_id)
        return self.get_categories()
