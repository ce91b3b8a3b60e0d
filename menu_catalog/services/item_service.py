from __future__ import annotations

import logging

from sqlalchemy.orm import Session, selectinload

from menu_catalog.core.errors import ValidationError
from menu_catalog.models import Category, Item, SubCategory
from menu_catalog.schemas.item import ItemCreate, ItemUpdate
from menu_catalog.services.common import changes_from, db_operation, save
from menu_catalog.services.integrity import require_category, require_subcategory_in_category
from menu_catalog.services.lookup import get_by_id, resolve_identifier
from menu_catalog.services.pricing import amounts_for_update, total_amount
from menu_catalog.services.tax_rules import item_tax_settings

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "name",
    "image",
    "description",
    "tax_applicability",
    "tax",
    "base_amount",
    "discount",
    "category_id",
)
WITH_PARENTS = (selectinload(Item.category), selectinload(Item.sub_category))


def _items_query(db: Session):
    return db.query(Item).options(*WITH_PARENTS).order_by(Item.created_at.desc(), Item.id)


def _escape_like(term: str) -> str:
    # match % and _ literally
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@db_operation("fetching items")
def list_items(db: Session) -> list[Item]:
    return _items_query(db).all()


@db_operation("searching items")
def search_items(db: Session, name: str | None) -> list[Item]:
    term = (name or "").strip()
    if not term:
        raise ValidationError('Search query parameter "name" is required')
    return _items_query(db).filter(Item.name.ilike(f"%{_escape_like(term)}%", escape="\\")).all()


@db_operation("fetching items")
def list_for_category(db: Session, category_id: str) -> tuple[Category, list[Item]]:
    category = get_by_id(db, Category, category_id)
    return category, _items_query(db).filter(Item.category_id == category.id).all()


@db_operation("fetching items")
def list_for_subcategory(db: Session, sub_category_id: str) -> tuple[SubCategory, list[Item]]:
    sub = get_by_id(db, SubCategory, sub_category_id, options=(selectinload(SubCategory.category),))
    return sub, _items_query(db).filter(Item.sub_category_id == sub.id).all()


@db_operation("fetching item")
def get_item(db: Session, identifier: str) -> Item:
    return resolve_identifier(db, Item, identifier, options=WITH_PARENTS)


@db_operation("creating item")
def create_item(db: Session, payload: ItemCreate) -> Item:
    category = require_category(db, payload.category_id)
    sub_category_id = payload.sub_category_id or None
    if sub_category_id is not None:
        sub_category_id = require_subcategory_in_category(db, sub_category_id, category.id).id

    effective = item_tax_settings(payload.tax_applicability, payload.tax)
    discount = payload.discount or 0
    item = Item(
        name=payload.name,
        image=payload.image,
        description=payload.description,
        tax_applicability=effective.tax_applicability,
        tax=effective.tax,
        base_amount=payload.base_amount,
        discount=discount,
        total_amount=total_amount(payload.base_amount, discount),
        category_id=category.id,
        sub_category_id=sub_category_id,
    )
    save(db, item, refresh=["category", "sub_category"])
    logger.info("Created item %s (%s) total=%s", item.name, item.id, item.total_amount)
    return item


@db_operation("updating item")
def update_item(db: Session, item_id: str, payload: ItemUpdate) -> Item:
    item = get_by_id(db, Item, item_id)
    data = changes_from(payload, required=REQUIRED_FIELDS)

    category_id = item.category_id
    if "category_id" in data:
        category_id = data["category_id"] = require_category(db, data["category_id"]).id

    if "sub_category_id" in data:
        data["sub_category_id"] = data["sub_category_id"] or None
    sub_category_id = data.get("sub_category_id", item.sub_category_id)
    references_changed = "category_id" in data or "sub_category_id" in data
    if references_changed and sub_category_id is not None:
        data["sub_category_id"] = require_subcategory_in_category(db, sub_category_id, category_id).id

    data.update(amounts_for_update(item, data))
    for key, value in data.items():
        setattr(item, key, value)
    save(db, item, refresh=["category", "sub_category"])
    logger.info("Updated item %s fields=%s", item.id, sorted(data))
    return item


@db_operation("deleting item")
def delete_item(db: Session, item_id: str) -> None:
    item = get_by_id(db, Item, item_id)
    db.delete(item)
    db.commit()
    logger.info("Deleted item %s", item_id)
