"""Shared fixtures: in-memory SQLite database, bare sessions and an API client.

Every test gets a fresh database. Service tests use ``db_session``; API tests
use ``client`` together with the ``create_*`` helpers, which post through the
API and return the ``data`` part of the envelope.
"""
from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

import menu_catalog.models  # noqa: F401
from menu_catalog.core.config import Settings
from menu_catalog.db.base import Base
from menu_catalog.db.session import Database
from menu_catalog.main import create_app

API = "/api/v1"


@pytest.fixture
def database():
    db = Database("sqlite://")
    Base.metadata.create_all(db.engine)
    yield db
    Base.metadata.drop_all(db.engine)
    db.dispose()


@pytest.fixture
def db_session(database):
    with database.session() as session:
        yield session


@pytest.fixture
def client(monkeypatch, database):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("RUN_MIGRATIONS", "false")
    monkeypatch.setenv("LOG_FORMAT", "text")
    app = create_app(Settings(), database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_category(client):
    def _create(**overrides):
        payload = {
            "name": "Beverages",
            "image": "https://img.example/beverages.png",
            "description": "Hot and cold drinks",
            "taxApplicability": True,
            "tax": 10,
        }
        payload.update(overrides)
        res = client.post(f"{API}/categories/", json=payload)
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _create


@pytest.fixture
def create_subcategory(client):
    def _create(category_id, **overrides):
        payload = {
            "name": "Coffee",
            "image": "https://img.example/coffee.png",
            "description": "Espresso based drinks",
            "categoryId": category_id,
        }
        payload.update(overrides)
        res = client.post(f"{API}/subcategories/", json=payload)
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _create


@pytest.fixture
def create_item(client):
    def _create(category_id, **overrides):
        payload = {
            "name": "Latte",
            "image": "https://img.example/latte.png",
            "description": "Espresso with steamed milk",
            "baseAmount": 100,
            "discount": 15,
            "categoryId": category_id,
        }
        payload.update(overrides)
        res = client.post(f"{API}/items/", json=payload)
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _create
