# components_api/api/schemas/component.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator


class Component(BaseModel):
    """A stored component row, as returned by either repository strategy."""

    id: int
    name: str
    type: str
    brand: Optional[str] = None
    price: float = 0.0
    stock: int = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("price", mode="before")
    @classmethod
    def _price_two_digits(cls, v):
        # drivers hand back Decimal (postgres) or float/int (sqlite)
        if isinstance(v, (Decimal, int, float)):
            return round(float(v), 2)
        return v


class ComponentCreate(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=120)
    type: constr(strip_whitespace=True, min_length=1, max_length=80)
    brand: Optional[constr(max_length=80)] = None
    price: float = Field(0.0, ge=0)
    stock: int = Field(0, ge=0)


class ComponentUpdate(BaseModel):
    """
    Partial update body. Only keys the client actually sent are applied;
    use `model_dump(exclude_unset=True)` to get them.
    """

    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=120)] = None
    type: Optional[constr(strip_whitespace=True, min_length=1, max_length=80)] = None
    brand: Optional[constr(max_length=80)] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)

    @field_validator("name", "type", "price", "stock")
    @classmethod
    def _not_null(cls, v, info):
        # only runs for values that were sent; brand is the one nullable column
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v
