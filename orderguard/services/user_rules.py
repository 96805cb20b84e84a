# ==== USER RULES SERVICE ==== #

"""
Named predicates and helpers over users.

Each predicate reads a single business condition so call sites compose
them by name rather than repeating field comparisons.
"""

from typing import Iterable, List

from orderguard.schemas.user import CreateUserParams, SubscriptionStatus, User, UserRule


ADULT_AGE = 18


# ==== PREDICATES ==== #


def is_adult(user: User) -> bool:
    return user.age >= ADULT_AGE


def is_user_admin(user: User) -> bool:
    return user.rule == UserRule.ADMIN


def has_permission(user: User) -> bool:
    """Admin users hold every permission."""
    return is_user_admin(user)


def has_active_subscription(user: User) -> bool:
    return user.subscription_status == SubscriptionStatus.ACTIVE


def can_access_dashboard(user: User) -> bool:
    """
    Check dashboard access.

    Args:
        user (User): User to check

    Returns:
        bool: True if the user is active, adult and subscribed
    """
    is_user_active = user.is_active
    is_user_old_enough = is_adult(user)
    is_subscribed = has_active_subscription(user)

    return is_user_active and is_user_old_enough and is_subscribed


# ==== COLLECTIONS ==== #


def filter_banned_users(users: Iterable[User]) -> List[User]:
    """Return the banned users, keeping their order."""
    return [user for user in users if user.is_banned]


def get_active_user_names(users: Iterable[User]) -> List[str]:
    """Return names of active users, keeping their order."""
    return [user.name for user in users if user.is_active]


# ==== FORMATTING ==== #


def format_user_for_display(user: User) -> str:
    return f"{user.name} {user.last_name}"


def describe_profile_processing(user: User) -> str:
    return f"User {user.name} processing... "


# ==== CREATION ==== #


def create_user(params: CreateUserParams) -> User:
    """
    Build a new user from a parameter object.

    New users start active and unbanned with an inactive subscription.

    Args:
        params (CreateUserParams): Creation parameters

    Returns:
        User: The created user
    """
    return User(
        is_active=True,
        name=params.name,
        last_name=params.last_name,
        age=params.age,
        subscription_status=SubscriptionStatus.INACTIVE,
        email=params.email,
        rule=params.rule,
        is_banned=False,
    )
