"""Reference checks run before writes, and the delete guard."""
from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from menu_catalog.core.errors import ConflictError, NotFoundError
from menu_catalog.models import Category, Item, SubCategory
from menu_catalog.services.lookup import find_by_id

logger = logging.getLogger(__name__)

SUBCATEGORY_MISMATCH = "Sub-category not found or does not belong to specified category"


def require_category(db: Session, category_id: str | None, message: str = "Category not found") -> Category:
    category = find_by_id(db, Category, category_id)
    if category is None:
        raise NotFoundError(message)
    return category


def require_subcategory_in_category(db: Session, sub_category_id: str | None, category_id: str) -> SubCategory:
    sub = find_by_id(db, SubCategory, sub_category_id)
    if sub is None or sub.category_id != category_id:
        raise NotFoundError(SUBCATEGORY_MISMATCH)
    return sub


def count_subcategories(db: Session, category_id: str) -> int:
    return db.query(func.count(SubCategory.id)).filter(SubCategory.category_id == category_id).scalar() or 0


def count_items(db: Session, *, category_id: str | None = None, sub_category_id: str | None = None) -> int:
    query = db.query(func.count(Item.id))
    if category_id is not None:
        query = query.filter(Item.category_id == category_id)
    if sub_category_id is not None:
        query = query.filter(Item.sub_category_id == sub_category_id)
    return query.scalar() or 0


def guard_category_delete(db: Session, category: Category) -> None:
    sub_count = count_subcategories(db, category.id)
    item_count = count_items(db, category_id=category.id)
    if sub_count or item_count:
        logger.warning(
            "Refusing to delete category %s: %d sub-categories, %d items",
            category.id,
            sub_count,
            item_count,
        )
        raise ConflictError("Cannot delete category with existing sub-categories or items")


def guard_subcategory_delete(db: Session, sub: SubCategory) -> None:
    item_count = count_items(db, sub_category_id=sub.id)
    if item_count:
        logger.warning("Refusing to delete sub-category %s: %d items", sub.id, item_count)
        raise ConflictError("Cannot delete sub-category with existing items")
