"""Shared fixtures: an app bound to a private in-memory SQLite database."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from product_api.api.dependencies.db import get_product_store
from product_api.core.config import Settings
from product_api.db.base import Base
from product_api.db.session import build_engine, build_session_factory
from product_api.main import create_app
from product_api.services.product_store import ProductStore


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", log_level="WARNING")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mouse() -> dict[str, Any]:
    return {
        "nome": "Mouse",
        "descricao": "wireless",
        "cor": "black",
        "peso": 0.1,
        "tipo": "peripheral",
        "preco": 49.9,
    }


@pytest.fixture
def create_product(client: TestClient) -> Callable[..., dict[str, Any]]:
    """POST a product and return it as stored (looked up by name)."""

    def _create(body: dict[str, Any]) -> dict[str, Any]:
        response = client.post("/produtos", json=body)
        assert response.status_code == 201, response.text
        found = client.get(f"/produtos/{body['nome']}")
        assert found.status_code == 200, found.text
        return found.json()

    return _create


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """A standalone session on a fresh in-memory database."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def store(db_session: Session) -> ProductStore:
    return ProductStore(db_session)


@pytest.fixture
def broken_session() -> MagicMock:
    """A session whose every database call fails as if the server were down."""
    failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
    session = MagicMock(spec=Session)
    for method in ("add", "commit", "refresh", "get", "scalars", "execute"):
        getattr(session, method).side_effect = failure
    return session


@pytest.fixture
def broken_client(app: FastAPI, broken_session: MagicMock) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_product_store] = lambda: ProductStore(broken_session)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
