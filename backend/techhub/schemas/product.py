from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .validators import FLAG_DEFAULTS, MAX_PRICE, FlagDefaultsModel, UrlStr, to_money, to_number


class ProductCreate(FlagDefaultsModel):
    name: str
    description: str
    price: Decimal = Field(..., gt=0, lt=MAX_PRICE)
    original_price: Optional[Decimal] = Field(None, gt=0, lt=MAX_PRICE)
    image_url: UrlStr
    category: str
    is_featured: bool = FLAG_DEFAULTS["is_featured"]
    is_new: bool = FLAG_DEFAULTS["is_new"]
    stock_quantity: int = Field(..., ge=0, strict=True)

    @field_validator("price", "original_price", mode="after")
    @classmethod
    def round_to_cents(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        value = to_money(value)
        if value is not None and value <= 0:
            raise ValueError("must be at least 0.01 once rounded to cents")
        if value is not None and value >= MAX_PRICE:
            raise ValueError("must be below 100000000 once rounded to cents")
        return value


class Product(BaseModel):
    id: int
    name: str
    description: str
    price: float
    original_price: Optional[float] = None
    image_url: str
    category: str
    is_featured: bool
    is_new: bool
    stock_quantity: int
    created_at: datetime
    updated_at: datetime

    @field_validator("price", "original_price", mode="before")
    @classmethod
    def coerce_numeric(cls, value):
        return to_number(value)

    class Config:
        from_attributes = True
