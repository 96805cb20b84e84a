# ==== NOTIFICATION SERVICE ==== #

"""
Notification sending keyed by priority.

Delivery is a structured log entry; callers decide when to notify, the
validators never do.
"""

from enum import Enum

from orderguard.observability.logging import get_logger, log_business_event


class NotificationPriority(str, Enum):
    """Notification urgency."""
    URGENT = "Urgent"
    REGULAR = "Regular"


class NotificationSender:
    """Sends notifications through the contextual logger."""

    def __init__(self, channel: str = "log"):
        self.channel = channel
        self.logger = get_logger(__name__)

    def send(self, priority: NotificationPriority | str) -> str:
        """
        Send a notification of the given priority.

        Args:
            priority (NotificationPriority | str): Priority member or its value

        Returns:
            str: The delivered notification text

        Raises:
            ValueError: If ``priority`` is not a notification priority
        """
        priority = NotificationPriority(priority)
        text = f"Sending {priority.value} notification."

        if priority is NotificationPriority.URGENT:
            self.logger.warning(text, priority=priority.value, channel=self.channel)
        else:
            self.logger.info(text, priority=priority.value, channel=self.channel)

        log_business_event("notification_sent", priority=priority.value, channel=self.channel)
        return text
