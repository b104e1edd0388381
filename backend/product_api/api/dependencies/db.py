"""Database session and store dependencies."""

from collections.abc import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from product_api.db.session import get_db
from product_api.services.product_store import ProductStore


def get_session(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency that yields a managed SQLAlchemy session."""
    yield from get_db(request)


def get_product_store(db: Session = Depends(get_session)) -> ProductStore:
    """Hand each request its own store bound to the request's session."""
    return ProductStore(db)
