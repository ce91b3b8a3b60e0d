from __future__ import annotations

import secrets
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def new_object_id() -> str:
    """24 lowercase hex characters, the same shape path identifiers are matched against."""
    return secrets.token_hex(12)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
