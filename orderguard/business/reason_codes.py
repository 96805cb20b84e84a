# ==== VERDICT REASON CODES ==== #

"""
Reason codes and verdicts returned by user and order validation.

A verdict is either a success carrying a caller-facing message or one of a
closed set of failure reasons. Failures are expected business outcomes and
are returned, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet

from .errors import ensure_complete_mapping


# ==== ENUMERATION DEFINITIONS ==== #


class VerdictReason(str, Enum):
    """
    Outcome codes for user and order validation.

    PROCESSING and VALID are the success outcomes of user and order
    validation respectively; every other code is a failure.
    """

    # --► USER OUTCOMES
    INACTIVE = "INACTIVE"
    UNDERAGE = "UNDERAGE"
    PROCESSING = "PROCESSING"

    # --► ORDER OUTCOMES
    MISSING = "MISSING"
    USER_INACTIVE = "USER_INACTIVE"
    WRONG_STATUS = "WRONG_STATUS"
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"
    VALID = "VALID"


SUCCESS_REASONS: FrozenSet[VerdictReason] = frozenset({
    VerdictReason.PROCESSING,
    VerdictReason.VALID,
})


# ==== CALLER-FACING MESSAGES ==== #


REASON_MESSAGES: Dict[VerdictReason, str] = {
    VerdictReason.INACTIVE: "User is inactive.",
    VerdictReason.UNDERAGE: "User is underage.",
    VerdictReason.PROCESSING: "Processing user...",
    VerdictReason.MISSING: "Invalid order.",
    VerdictReason.USER_INACTIVE: "User is not active.",
    VerdictReason.WRONG_STATUS: "Order status is not pending.",
    VerdictReason.NON_POSITIVE_AMOUNT: "Order amount must be greater than zero.",
    VerdictReason.VALID: "Order is valid and being processed.",
}


# ==== VERDICT ==== #


@dataclass(frozen=True)
class Verdict:
    """
    Result of a validation call.

    Attributes:
        reason (VerdictReason): Outcome code
        message (str): Display text for the outcome
    """

    reason: VerdictReason
    message: str

    @property
    def is_success(self) -> bool:
        return self.reason in SUCCESS_REASONS

    @classmethod
    def success(cls, reason: VerdictReason) -> "Verdict":
        """
        Build a success verdict.

        Args:
            reason (VerdictReason): A success reason

        Returns:
            Verdict: Verdict carrying the reason's display message

        Raises:
            ValueError: If ``reason`` is a failure reason
        """
        if reason not in SUCCESS_REASONS:
            raise ValueError(f"{reason.value} is not a success reason")
        return cls(reason=reason, message=REASON_MESSAGES[reason])

    @classmethod
    def failure(cls, reason: VerdictReason) -> "Verdict":
        """
        Build a failure verdict.

        Args:
            reason (VerdictReason): A failure reason

        Returns:
            Verdict: Verdict carrying the reason's display message

        Raises:
            ValueError: If ``reason`` is a success reason
        """
        if reason in SUCCESS_REASONS:
            raise ValueError(f"{reason.value} is not a failure reason")
        return cls(reason=reason, message=REASON_MESSAGES[reason])


ensure_complete_mapping(REASON_MESSAGES, VerdictReason, "REASON_MESSAGES")
