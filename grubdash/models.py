"""
Record shapes for dishes and orders. Used to validate seed data; extra fields are kept.
"""
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from grubdash.order_state import OrderStatus

# Strict so booleans are not accepted as numbers
PositiveNumber = (
    Annotated[int, Field(strict=True, gt=0)]
    | Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)]
)


class Dish(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: PositiveNumber
    image_url: str = Field(..., min_length=1)


class OrderLineItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    dishId: str | None = None
    quantity: PositiveNumber


class Order(BaseModel):
    model_config = ConfigDict(extra="allow", use_enum_values=True)

    id: str = Field(..., min_length=1)
    deliverTo: str = Field(..., min_length=1)
    mobileNumber: str = Field(..., min_length=1)
    status: OrderStatus = Field(default=OrderStatus.PENDING, validate_default=True)
    dishes: list[OrderLineItem] = Field(..., min_length=1)
