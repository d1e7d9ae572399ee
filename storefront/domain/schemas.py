# storefront/domain/schemas.py
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class ProductOut(BaseModel):
    """Catalog item (response)."""

    id: int
    name: str
    price: int | float = Field(..., ge=0)


class ItemIn(BaseModel):
    """
    Body for adding a line to a cart.
    Fields are not validated: whatever the client sends is stored as-is.
    """

    product_id: Any = Field(None, alias="productId")
    quantity: Any = None

    model_config = ConfigDict(populate_by_name=True)


class CartLineOut(BaseModel):
    product_id: Any = Field(None, alias="productId")
    quantity: Any = None

    model_config = ConfigDict(populate_by_name=True)


class CartOut(BaseModel):
    """Response for cart mutations."""

    message: str
    cart: List[CartLineOut]


class OrderCreate(BaseModel):
    """Body for submitting an order. Items are opaque and passed through verbatim."""

    user_id: Any = Field(None, alias="userId")
    items: Any = None

    model_config = ConfigDict(populate_by_name=True)


class OrderCreated(BaseModel):
    message: str
    order_id: int = Field(..., alias="orderId")

    model_config = ConfigDict(populate_by_name=True)


class OrderOut(BaseModel):
    order_id: int = Field(..., alias="orderId")
    user_id: Any = Field(None, alias="userId")
    items: Any = None
    status: str

    model_config = ConfigDict(populate_by_name=True)


class HealthOut(BaseModel):
    status: str
    service: str
