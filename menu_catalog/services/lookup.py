"""Resolve path identifiers to entities.

A path segment is either a primary key (24 hex characters) or a
human-readable name. Names match case-insensitively and exactly; when
several rows share a name the oldest one wins.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.orm.interfaces import LoaderOption

from menu_catalog.core.constants import OBJECT_ID_PATTERN
from menu_catalog.core.errors import NotFoundError
from menu_catalog.models import Category, Item, SubCategory

ModelT = TypeVar("ModelT", Category, SubCategory, Item)

ENTITY_LABELS: dict[type, str] = {
    Category: "Category",
    SubCategory: "Sub-category",
    Item: "Item",
}


def is_object_id(identifier: str | None) -> bool:
    return bool(identifier) and OBJECT_ID_PATTERN.match(identifier) is not None


def not_found(model: type, message: str | None = None) -> NotFoundError:
    return NotFoundError(message or f"{ENTITY_LABELS[model]} not found")


def find_by_id(
    db: Session,
    model: type[ModelT],
    entity_id: str | None,
    *,
    options: Sequence[LoaderOption] = (),
) -> ModelT | None:
    if not is_object_id(entity_id):
        return None
    return db.get(model, entity_id.lower(), options=list(options))


def get_by_id(
    db: Session,
    model: type[ModelT],
    entity_id: str | None,
    *,
    options: Sequence[LoaderOption] = (),
    message: str | None = None,
) -> ModelT:
    entity = find_by_id(db, model, entity_id, options=options)
    if entity is None:
        raise not_found(model, message)
    return entity


def find_by_name(
    db: Session,
    model: type[ModelT],
    name: str,
    *,
    options: Sequence[LoaderOption] = (),
) -> ModelT | None:
    return (
        db.query(model)
        .options(*options)
        .filter(func.lower(model.name) == name.strip().lower())
        .order_by(model.created_at, model.id)
        .first()
    )


def resolve_identifier(
    db: Session,
    model: type[ModelT],
    identifier: str,
    *,
    options: Sequence[LoaderOption] = (),
) -> ModelT:
    """Return the entity addressed by ``identifier`` or raise ``NotFoundError``."""

    if is_object_id(identifier):
        entity = find_by_id(db, model, identifier, options=options)
    else:
        entity = find_by_name(db, model, identifier, options=options)
    if entity is None:
        raise not_found(model)
    return entity
