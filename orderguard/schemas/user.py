# ==== USER SCHEMAS ==== #

"""Pydantic schemas for users and user creation parameters."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionStatus(str, Enum):
    """Subscription state of a user account."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class UserRule(str, Enum):
    """Access rule granted to a user."""
    ADMIN = "admin"
    CREATE = "create"
    UPDATE = "update"


class User(BaseModel):
    """
    Immutable user snapshot.

    Age must be a non-negative int and flags must be real booleans; strings
    and numbers are not coerced. Every other business condition (activity,
    adulthood, bans) is judged by the rule functions.
    """

    model_config = ConfigDict(frozen=True)

    is_active: bool = Field(..., strict=True)
    name: str
    last_name: str
    age: int = Field(..., ge=0, strict=True)
    subscription_status: SubscriptionStatus
    email: str
    rule: UserRule
    is_banned: bool = Field(default=False, strict=True)


class CreateUserParams(BaseModel):
    """Parameter object for creating a user."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0, strict=True)
    email: str = Field(..., min_length=3)
    rule: UserRule
    last_name: str = ""
