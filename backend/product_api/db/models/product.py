"""SQLAlchemy model for product documents."""

from sqlalchemy import Column, Float, Index, String, Text, func
from sqlalchemy.types import DateTime

from product_api.db.base import Base
from product_api.db.identifiers import OBJECT_ID_LENGTH, new_object_id


class Product(Base):
    __tablename__ = "produtos"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    color = Column(Text, nullable=False)
    weight = Column(Float, nullable=False)  # kilograms
    category = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    registered_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (Index("ix_produtos_name_lower", func.lower(name)),)

    def __repr__(self) -> str:
        return f"<Product {self.id} {self.name!r}>"
