from __future__ import annotations

from collections.abc import Iterable

from fastapi import Request
from sqlalchemy.orm import Session

from menu_catalog.db.session import Database


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_db(request: Request) -> Iterable[Session]:
    yield from get_database(request).get_session()
