"""Storage contracts."""

from .repository import UserRepository

__all__ = ["UserRepository"]
