# components_api/models/component.py
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, Numeric, String, func, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

TABLE_NAME = "components"

# ids are signed 64-bit in every supported store
MAX_ID = 2**63 - 1

# columns a caller may write; id and created_at belong to the store
WRITABLE_FIELDS = ("name", "type", "brand", "price", "stock")


class Base(DeclarativeBase):
    pass


class ComponentRecord(Base):
    """ORM mapping of the `components` table. Also the canonical DDL."""

    __tablename__ = TABLE_NAME

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    type: Mapped[str] = mapped_column(String(80), nullable=False)
    brand: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)
    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False, server_default=text("0")
    )
    stock: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "brand": self.brand,
            "price": self.price,
            "stock": self.stock,
            "created_at": self.created_at,
        }
