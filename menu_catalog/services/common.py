from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from menu_catalog.core.errors import ConflictError, UnexpectedError, ValidationError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def db_operation(action: str, *, conflict: str | None = None) -> Callable[[F], F]:
    """Translate SQLAlchemy failures raised by a service function.

    ``IntegrityError`` becomes ``ConflictError(conflict)`` when a conflict
    message is given (unique constraints backing the pre-checks), anything
    else from the database becomes ``UnexpectedError``. The session is
    rolled back in both cases.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(db: Session, *args: Any, **kwargs: Any) -> Any:
            try:
                return func(db, *args, **kwargs)
            except IntegrityError as exc:
                db.rollback()
                if conflict is not None:
                    logger.info("Integrity violation while %s: %s", action, exc.orig)
                    raise ConflictError(conflict) from exc
                logger.error("Integrity violation while %s", action, exc_info=True)
                raise UnexpectedError(f"Error {action}", error=str(exc.orig)) from exc
            except SQLAlchemyError as exc:
                db.rollback()
                logger.error("Database failure while %s", action, exc_info=True)
                raise UnexpectedError(f"Error {action}", error=str(exc)) from exc

        return wrapper  # type: ignore[return-value]

    return decorator


def changes_from(payload: BaseModel, *, required: Iterable[str] = ()) -> dict[str, Any]:
    """Fields present in an update payload; explicit nulls on ``required`` fields are rejected."""

    data = payload.model_dump(exclude_unset=True)
    nulled = sorted(to_camel(field) for field in required if field in data and data[field] is None)
    if nulled:
        raise ValidationError(f"Fields cannot be null: {', '.join(nulled)}")
    return data


def save(db: Session, entity: Any, *, refresh: Iterable[str] = ()) -> Any:
    db.add(entity)
    db.commit()
    db.refresh(entity)
    attributes = list(refresh)
    if attributes:
        db.refresh(entity, attribute_names=attributes)
    return entity
