# storefront/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

# Decimal inside Python, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Product(BaseModel):
    """Pozycja katalogu produktow (tylko odczyt)."""

    id: int
    name: str
    description: str
    price: Money
    stock: int

    model_config = ConfigDict(frozen=True)


class CartItem(BaseModel):
    product_id: int
    quantity: int


class Cart(BaseModel):
    """Koszyk uzytkownika, zapisywany w calosci jako jedna wartosc JSON."""

    user_id: str
    items: List[CartItem] = Field(default_factory=list)


class RemoveItemIn(BaseModel):
    product_id: int


class OrderItem(BaseModel):
    product_id: int
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderCreate(BaseModel):
    """Missing fields fall back to empty values so the service can reject them itself."""

    user_id: str = ""
    items: List[OrderItem] = Field(default_factory=list)
    total: Money = Decimal("0")

    @field_validator("user_id", "items", "total", mode="before")
    @classmethod
    def null_as_empty(cls, value, info):
        # null traktujemy jak brak pola
        if value is None:
            return {"user_id": "", "items": [], "total": Decimal("0")}[info.field_name]
        return value


class OrderOut(BaseModel):
    id: int
    user_id: str
    items: List[OrderItem]
    total: Money
    status: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class HealthOut(BaseModel):
    status: str
    service: str


class MessageOut(BaseModel):
    message: str
