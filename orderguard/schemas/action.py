"""Pydantic schemas for user actions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .user import User


class UserActionType(str, Enum):
    """Kinds of action a user can trigger."""
    CREATE = "create"
    UPDATE = "update"
    LOGIN = "login"
    LOGOUT = "logout"


class UserAction(BaseModel):
    """An action together with the user it applies to."""

    model_config = ConfigDict(frozen=True)

    action: UserActionType
    data: User
