# ==== SHARED TEST FIXTURES AND CONFIGURATION ==== #

"""
Shared test fixtures and configuration.

Environment variables are set before any orderguard module is imported so
the global settings instance is built from test values.
"""

import os
from typing import List

import pytest
from loguru import logger


# ==== FORCE ENVIRONMENT SETUP BEFORE ANY IMPORTS ==== #

os.environ.update({
    "APP_ENV": "test",
    "LOG_LEVEL": "WARNING",
    "SECONDS_IN_A_DAY": "86400",
})
os.environ.pop("OTEL_EXPORTER_OTLP_ENDPOINT", None)

from tests.factories.data_factories import OrderFactory, UserFactory  # noqa: E402


# ==== DATA FIXTURES ==== #


@pytest.fixture
def user_factory() -> UserFactory:
    """Factory for users with sensible defaults."""
    return UserFactory()


@pytest.fixture
def order_factory(user_factory) -> OrderFactory:
    """Factory for pending orders owned by an active adult user."""
    return OrderFactory(user_factory=user_factory)


@pytest.fixture
def active_user(user_factory):
    return user_factory.create()


@pytest.fixture
def inactive_user(user_factory):
    return user_factory.create(is_active=False)


# ==== LOG CAPTURE ==== #


@pytest.fixture
def log_records():
    """
    Capture loguru records emitted during a test.

    Yields:
        List[dict]: Loguru record dicts in emission order
    """
    records: List[dict] = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(sink_id)
