"""Errors raised for misconfigured business tables."""

from enum import Enum
from typing import Iterable, Mapping


class ConfigurationError(Exception):
    """
    A lookup table does not cover its enumeration.

    Raised while building tables at import or construction time, never
    while answering a lookup.
    """

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


def ensure_complete_mapping(table: Mapping, members: Iterable[Enum], table_name: str) -> None:
    """
    Check that ``table`` has an entry for every enum member.

    Args:
        table (Mapping): Lookup table keyed by enum members
        members (Iterable[Enum]): Members that must be covered
        table_name (str): Table name used in the error message

    Raises:
        ConfigurationError: If any member has no entry
    """
    missing = [member.name for member in members if member not in table]
    if missing:
        raise ConfigurationError(
            f"{table_name} has no entry for: {', '.join(missing)}",
            missing=missing,
        )
