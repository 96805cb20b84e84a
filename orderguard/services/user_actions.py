# ==== USER ACTION DISPATCH ==== #

"""
Dispatch of user actions to their handlers.

Actions are routed through a table keyed by ``UserActionType``. The table
is checked at import so every action type has a handler.
"""

from typing import Callable, Dict

from orderguard.business.errors import ensure_complete_mapping
from orderguard.observability.logging import log_business_event
from orderguard.schemas.action import UserAction, UserActionType
from orderguard.schemas.user import User
from orderguard.services.user_rules import format_user_for_display


def _handle_create(user: User) -> str:
    return f"Created user {format_user_for_display(user)}"


def _handle_update(user: User) -> str:
    return f"Updated user {format_user_for_display(user)}"


def _handle_login(user: User) -> str:
    return f"User {user.name} logged in"


def _handle_logout(user: User) -> str:
    return f"User {user.name} logged out"


ACTION_HANDLERS: Dict[UserActionType, Callable[[User], str]] = {
    UserActionType.CREATE: _handle_create,
    UserActionType.UPDATE: _handle_update,
    UserActionType.LOGIN: _handle_login,
    UserActionType.LOGOUT: _handle_logout,
}

ensure_complete_mapping(ACTION_HANDLERS, UserActionType, "ACTION_HANDLERS")


def handle_user_action(action: UserAction) -> str:
    """
    Run the handler registered for an action.

    Args:
        action (UserAction): Action type and the user it applies to

    Returns:
        str: Description of what was done
    """
    result = ACTION_HANDLERS[action.action](action.data)
    log_business_event(
        f"user_{action.action.value}",
        user_email=action.data.email,
        result=result,
    )
    return result
