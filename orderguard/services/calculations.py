"""Numeric and date helpers driven by named limits and settings."""

from datetime import datetime, timedelta

from orderguard.settings import Settings


MAX_CALCULATION_VALUE = 1000


def is_valid_for_calculation(number: float) -> bool:
    """
    Check whether a number can be fed to a calculation.

    Args:
        number (float): Candidate value

    Returns:
        bool: True if the number is a positive integer no larger than
            ``MAX_CALCULATION_VALUE``
    """
    is_positive = number > 0
    is_integer = number % 1 == 0
    is_not_too_large = number <= MAX_CALCULATION_VALUE

    return is_positive and is_integer and is_not_too_large


def is_full_day(seconds: float, config: Settings) -> bool:
    """Check whether ``seconds`` spans at least one configured day."""
    return seconds >= config.SECONDS_IN_A_DAY


def add_days_to_date(date: datetime, days: int) -> datetime:
    return date + timedelta(days=days)
