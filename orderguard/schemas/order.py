# ==== ORDER SCHEMAS ==== #

"""Pydantic schemas for orders and their lifecycle status."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .user import User


class OrderStatus(str, Enum):
    """
    Order lifecycle status.

    Closed set: any other string is rejected when an order is built.
    """
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


class Order(BaseModel):
    """
    Immutable order snapshot embedding the ordering user.

    The amount must be a finite int or float; booleans and numeric strings
    are rejected. Zero and negative amounts are accepted here and rejected
    by order validation instead.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., strict=True)
    status: OrderStatus
    is_active: bool = Field(default=True, strict=True)
    amount: float = Field(..., allow_inf_nan=False, strict=True)
    user: User
