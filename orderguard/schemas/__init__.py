"""Pydantic schemas for the order and user domain."""

from .user import CreateUserParams, SubscriptionStatus, User, UserRule
from .order import Order, OrderStatus
from .action import UserAction, UserActionType

__all__ = [
    "CreateUserParams",
    "SubscriptionStatus",
    "User",
    "UserRule",
    "Order",
    "OrderStatus",
    "UserAction",
    "UserActionType",
]
