# ==== ENTITY VALIDATOR SERVICE ==== #

"""
Guard-clause validation for users and orders.

Each validator is an ordered tuple of rules. Rules are evaluated left to
right and the first failing rule decides the verdict; later rules are never
evaluated, so each rule may assume every earlier rule passed.
"""

from typing import Any, Callable, NamedTuple, Optional, Sequence

from orderguard.business.reason_codes import Verdict, VerdictReason
from orderguard.observability.logging import get_logger
from orderguard.observability.tracing import get_tracer
from orderguard.schemas.order import Order, OrderStatus
from orderguard.schemas.user import User


logger = get_logger(__name__)
tracer = get_tracer(__name__)


# ==== RULE DEFINITIONS ==== #


class ValidationRule(NamedTuple):
    """A precondition and the failure reason reported when it does not hold."""

    reason: VerdictReason
    check: Callable[[Any], bool]


# Ages at or below this limit are underage for processing
UNDERAGE_LIMIT = 18


USER_RULES: Sequence[ValidationRule] = (
    ValidationRule(VerdictReason.INACTIVE, lambda user: user.is_active),
    ValidationRule(VerdictReason.UNDERAGE, lambda user: user.age > UNDERAGE_LIMIT),
)

ORDER_RULES: Sequence[ValidationRule] = (
    ValidationRule(VerdictReason.MISSING, lambda order: order is not None),
    ValidationRule(VerdictReason.USER_INACTIVE, lambda order: order.user.is_active),
    ValidationRule(VerdictReason.WRONG_STATUS, lambda order: order.status == OrderStatus.PENDING),
    ValidationRule(VerdictReason.NON_POSITIVE_AMOUNT, lambda order: order.amount > 0),
)


def first_failure(rules: Sequence[ValidationRule], subject: Any) -> Optional[VerdictReason]:
    """
    Evaluate ``rules`` in order against ``subject``.

    Args:
        rules (Sequence[ValidationRule]): Ordered rule chain
        subject (Any): Value the checks are applied to

    Returns:
        Optional[VerdictReason]: Reason of the first failing rule, or None
            when every rule holds
    """
    for rule in rules:
        if not rule.check(subject):
            return rule.reason
    return None


# ==== VALIDATOR CLASS ==== #


class EntityValidator:
    """
    Stateless validator for users and orders.

    Rule chains are injectable so single rules can be exercised in
    isolation; the defaults are ``USER_RULES`` and ``ORDER_RULES``.
    """

    def __init__(
        self,
        user_rules: Sequence[ValidationRule] = USER_RULES,
        order_rules: Sequence[ValidationRule] = ORDER_RULES,
    ):
        self.user_rules = tuple(user_rules)
        self.order_rules = tuple(order_rules)

    def validate_user(self, user: User) -> Verdict:
        """
        Check whether a user can be processed.

        Args:
            user (User): User snapshot

        Returns:
            Verdict: INACTIVE, UNDERAGE or PROCESSING
        """
        with tracer.start_as_current_span("validate_user") as span:
            failed = first_failure(self.user_rules, user)
            verdict = (
                Verdict.failure(failed) if failed is not None
                else Verdict.success(VerdictReason.PROCESSING)
            )
            span.set_attribute("verdict", verdict.reason.value)

        logger.debug("User validated", user_name=user.name, verdict=verdict.reason.value)
        return verdict

    def validate_order(self, order: Optional[Order]) -> Verdict:
        """
        Check whether an order can be processed.

        A missing order is an expected input and yields MISSING.

        Args:
            order (Optional[Order]): Order snapshot or None

        Returns:
            Verdict: MISSING, USER_INACTIVE, WRONG_STATUS,
                NON_POSITIVE_AMOUNT or VALID
        """
        with tracer.start_as_current_span("validate_order") as span:
            failed = first_failure(self.order_rules, order)
            verdict = (
                Verdict.failure(failed) if failed is not None
                else Verdict.success(VerdictReason.VALID)
            )
            span.set_attribute("verdict", verdict.reason.value)
            if order is not None:
                span.set_attribute("order_id", order.id)

        logger.debug(
            "Order validated",
            order_id=order.id if order is not None else None,
            verdict=verdict.reason.value,
        )
        return verdict


# ==== MODULE-LEVEL HELPERS ==== #


default_validator = EntityValidator()


def validate_user(user: User) -> Verdict:
    """Validate ``user`` with the default rule chain."""
    return default_validator.validate_user(user)


def validate_order(order: Optional[Order]) -> Verdict:
    """Validate ``order`` with the default rule chain."""
    return default_validator.validate_order(order)
