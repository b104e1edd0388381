"""Product persistence operations.

``ProductStore`` wraps a SQLAlchemy session and exposes the handful of
document-style operations the router needs. Lookups that find nothing
return ``None`` or ``False``; only failures talking to the database
raise, and they always surface as ``StoreError``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
import logging
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_api.core.errors import StoreError
from product_api.db.identifiers import is_object_id
from product_api.db.models.product import Product

logger = logging.getLogger(__name__)

# Columns a client may write; id and registered_at are assigned by the store.
WRITABLE_FIELDS = ("name", "description", "color", "weight", "category", "price")


class ProductStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        """Roll back and re-raise any failure inside the block as ``StoreError``."""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error while trying to {action}: {e}", exc_info=True)
            raise StoreError(f"Failed to {action}") from e
        except Exception as e:
            self.db.rollback()
            logger.error(f"Unexpected error while trying to {action}: {e}", exc_info=True)
            raise StoreError("An unexpected error occurred") from e

    def create(self, fields: Mapping[str, Any]) -> Product:
        """Persist a new product; id and registration time are assigned here."""
        product = Product(**_writable(fields))
        with self._guard("create product"):
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        logger.info(f"Created product {product.id} ({product.name!r})")
        return product

    def find_all(self) -> list[Product]:
        with self._guard("retrieve products"):
            query = select(Product).order_by(Product.registered_at, Product.id)
            return list(self.db.scalars(query).all())

    def find_by_identifier(self, product_id: str) -> Product | None:
        """Exact match on the generated identifier.

        Strings that are not identifier-shaped cannot match anything and
        are answered without a round trip.
        """
        if not is_object_id(product_id):
            return None
        with self._guard("retrieve product"):
            return self.db.get(Product, product_id.lower())

    def find_by_name_case_insensitive(self, name: str) -> Product | None:
        """Exact, case-insensitive match on the whole name."""
        with self._guard("retrieve product"):
            query = (
                select(Product)
                .where(func.lower(Product.name) == func.lower(name))
                .order_by(Product.registered_at, Product.id)
                .limit(1)
            )
            return self.db.scalars(query).first()

    def update_by_identifier(self, product_id: str, fields: Mapping[str, Any]) -> bool:
        """Overwrite the given fields; return whether a product matched.

        Fields that are absent or ``None`` are left untouched.
        """
        if not is_object_id(product_id):
            return False
        values = {k: v for k, v in _writable(fields).items() if v is not None}
        product_id = product_id.lower()

        with self._guard("update product"):
            if not values:
                return self.db.get(Product, product_id) is not None
            result = self.db.execute(
                update(Product).where(Product.id == product_id).values(**values)
            )
            self.db.commit()

        matched = result.rowcount > 0
        if matched:
            logger.info(f"Updated product {product_id}: {sorted(values)}")
        return matched

    def delete_by_identifier(self, product_id: str) -> bool:
        if not is_object_id(product_id):
            return False
        product_id = product_id.lower()

        with self._guard("delete product"):
            result = self.db.execute(delete(Product).where(Product.id == product_id))
            self.db.commit()

        removed = result.rowcount > 0
        if removed:
            logger.info(f"Deleted product {product_id}")
        return removed


def _writable(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if k in WRITABLE_FIELDS}
