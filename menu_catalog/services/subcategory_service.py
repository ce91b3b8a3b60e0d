from __future__ import annotations

import logging

from sqlalchemy.orm import Session, selectinload

from menu_catalog.core.errors import ConflictError
from menu_catalog.models import Category, SubCategory
from menu_catalog.schemas.subcategory import SubCategoryCreate, SubCategoryUpdate
from menu_catalog.services.common import changes_from, db_operation, save
from menu_catalog.services.integrity import count_items, guard_subcategory_delete, require_category
from menu_catalog.services.lookup import get_by_id, resolve_identifier
from menu_catalog.services.tax_rules import resolve_subcategory_tax

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Sub-category with this name already exists in this category"
REQUIRED_FIELDS = ("name", "image", "description", "category_id", "tax_applicability", "tax")
WITH_CATEGORY = (selectinload(SubCategory.category),)


def _ensure_unique_name(db: Session, name: str, category_id: str, *, exclude_id: str | None = None) -> None:
    query = db.query(SubCategory.id).filter(
        SubCategory.category_id == category_id, SubCategory.name == name
    )
    if exclude_id is not None:
        query = query.filter(SubCategory.id != exclude_id)
    if query.first() is not None:
        raise ConflictError(DUPLICATE_NAME)


@db_operation("fetching sub-categories")
def list_subcategories(db: Session) -> list[SubCategory]:
    return (
        db.query(SubCategory)
        .options(*WITH_CATEGORY)
        .order_by(SubCategory.created_at.desc(), SubCategory.id)
        .all()
    )


@db_operation("fetching sub-categories")
def list_for_category(db: Session, category_id: str) -> tuple[Category, list[SubCategory]]:
    category = get_by_id(db, Category, category_id)
    subs = (
        db.query(SubCategory)
        .options(*WITH_CATEGORY)
        .filter(SubCategory.category_id == category.id)
        .order_by(SubCategory.created_at.desc(), SubCategory.id)
        .all()
    )
    return category, subs


@db_operation("fetching sub-category")
def get_subcategory(db: Session, identifier: str) -> SubCategory:
    return resolve_identifier(db, SubCategory, identifier, options=WITH_CATEGORY)


@db_operation("creating sub-category", conflict=DUPLICATE_NAME)
def create_subcategory(db: Session, payload: SubCategoryCreate) -> SubCategory:
    category = require_category(db, payload.category_id, "Parent category not found")
    _ensure_unique_name(db, payload.name, category.id)
    effective = resolve_subcategory_tax(category, payload.tax_applicability, payload.tax)
    sub = SubCategory(
        name=payload.name,
        image=payload.image,
        description=payload.description,
        category_id=category.id,
        tax_applicability=effective.tax_applicability,
        tax=effective.tax,
    )
    save(db, sub, refresh=["category"])
    logger.info("Created sub-category %s (%s) under %s", sub.name, sub.id, category.id)
    return sub


@db_operation("updating sub-category", conflict=DUPLICATE_NAME)
def update_subcategory(db: Session, sub_id: str, payload: SubCategoryUpdate) -> SubCategory:
    sub = get_by_id(db, SubCategory, sub_id)
    data = changes_from(payload, required=REQUIRED_FIELDS)

    category_id = sub.category_id
    if "category_id" in data:
        category = require_category(db, data["category_id"], "New parent category not found")
        data["category_id"] = category_id = category.id
        # items keep their own category reference, so moving a populated
        # sub-category would leave them pointing across categories
        if category_id != sub.category_id and count_items(db, sub_category_id=sub.id):
            raise ConflictError("Cannot move a sub-category with existing items to another category")

    name = data.get("name", sub.name)
    if name != sub.name or category_id != sub.category_id:
        _ensure_unique_name(db, name, category_id, exclude_id=sub.id)

    for key, value in data.items():
        setattr(sub, key, value)
    save(db, sub, refresh=["category"])
    logger.info("Updated sub-category %s fields=%s", sub.id, sorted(data))
    return sub


@db_operation("deleting sub-category")
def delete_subcategory(db: Session, sub_id: str) -> None:
    sub = get_by_id(db, SubCategory, sub_id)
    guard_subcategory_delete(db, sub)
    db.delete(sub)
    db.commit()
    logger.info("Deleted sub-category %s", sub_id)
