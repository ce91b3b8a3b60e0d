from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from menu_catalog.core.errors import ConflictError
from menu_catalog.models.category import Category, TaxType
from menu_catalog.schemas.category import CategoryCreate, CategoryUpdate
from menu_catalog.services.common import changes_from, db_operation, save
from menu_catalog.services.integrity import guard_category_delete
from menu_catalog.services.lookup import get_by_id, resolve_identifier
from menu_catalog.services.tax_rules import category_tax_settings

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Category with this name already exists"
REQUIRED_FIELDS = ("name", "image", "description", "tax_applicability", "tax", "tax_type")


def _ensure_unique_name(db: Session, name: str, *, exclude_id: str | None = None) -> None:
    query = db.query(Category.id).filter(Category.name == name)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first() is not None:
        raise ConflictError(DUPLICATE_NAME)


@db_operation("fetching categories")
def list_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.created_at.desc(), Category.id).all()


@db_operation("fetching category")
def get_category(db: Session, identifier: str) -> Category:
    return resolve_identifier(db, Category, identifier)


@db_operation("creating category", conflict=DUPLICATE_NAME)
def create_category(db: Session, payload: CategoryCreate) -> Category:
    _ensure_unique_name(db, payload.name)
    effective, tax_type = category_tax_settings(payload.tax_applicability, payload.tax, payload.tax_type)
    category = Category(
        name=payload.name,
        image=payload.image,
        description=payload.description,
        tax_applicability=effective.tax_applicability,
        tax=effective.tax,
        tax_type=tax_type,
    )
    save(db, category)
    logger.info("Created category %s (%s)", category.name, category.id)
    return category


@db_operation("updating category", conflict=DUPLICATE_NAME)
def update_category(db: Session, category_id: str, payload: CategoryUpdate) -> Category:
    category = get_by_id(db, Category, category_id)
    data = changes_from(payload, required=REQUIRED_FIELDS)
    if "name" in data and data["name"] != category.name:
        _ensure_unique_name(db, data["name"], exclude_id=category.id)
    if "tax_type" in data:
        data["tax_type"] = TaxType(data["tax_type"])
    for key, value in data.items():
        setattr(category, key, value)
    save(db, category)
    logger.info("Updated category %s fields=%s", category.id, sorted(data))
    return category


@db_operation("deleting category")
def delete_category(db: Session, category_id: str) -> None:
    category = get_by_id(db, Category, category_id)
    guard_category_delete(db, category)
    db.delete(category)
    db.commit()
    logger.info("Deleted category %s", category_id)
