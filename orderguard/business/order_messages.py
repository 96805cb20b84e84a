# ==== ORDER STATUS MESSAGES ==== #

"""
Order status to display message resolution.

The status table is checked for completeness when a resolver is built, so a
status added without a message fails at import instead of at lookup.
"""

from types import MappingProxyType
from typing import Mapping

from orderguard.business.errors import ConfigurationError, ensure_complete_mapping
from orderguard.observability.logging import get_logger
from orderguard.observability.tracing import get_tracer
from orderguard.schemas.order import OrderStatus


logger = get_logger(__name__)
tracer = get_tracer(__name__)


ORDER_STATUS_MESSAGES: Mapping[OrderStatus, str] = MappingProxyType({
    OrderStatus.PENDING: "Order is pending.",
    OrderStatus.SHIPPED: "Order has been shipped.",
    OrderStatus.DELIVERED: "Order has been delivered.",
})


class StatusMessageResolver:
    """
    Total lookup from order status to its user-facing description.

    Construction fails with ``ConfigurationError`` if the table misses a
    status, holds a blank message, or reuses a message for two statuses.
    """

    def __init__(self, messages: Mapping[OrderStatus, str] = ORDER_STATUS_MESSAGES):
        with tracer.start_as_current_span("build_status_message_table") as span:
            ensure_complete_mapping(messages, OrderStatus, "order status messages")

            blank = [status.name for status in OrderStatus if not messages[status].strip()]
            if blank:
                raise ConfigurationError(
                    f"order status messages are blank for: {', '.join(blank)}",
                    missing=blank,
                )

            texts = [messages[status] for status in OrderStatus]
            if len(set(texts)) != len(texts):
                raise ConfigurationError("order status messages must be distinct")

            self._messages = MappingProxyType({status: messages[status] for status in OrderStatus})
            span.set_attribute("statuses", len(self._messages))

        logger.debug("Status message table built", statuses=len(self._messages))

    def resolve(self, status: OrderStatus | str) -> str:
        """
        Get the display message for an order status.

        Args:
            status (OrderStatus | str): Status member or its string value

        Returns:
            str: Non-empty display message

        Raises:
            ValueError: If ``status`` is not an order status
        """
        return self._messages[OrderStatus(status)]


# ==== DEFAULT RESOLVER ==== #


default_resolver = StatusMessageResolver()


def get_order_message(status: OrderStatus | str) -> str:
    """Get the display message for ``status`` from the default table."""
    return default_resolver.resolve(status)
