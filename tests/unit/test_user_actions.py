"""Unit tests for user action dispatch."""

import pytest

from orderguard.schemas.action import UserAction, UserActionType
from orderguard.services.user_actions import ACTION_HANDLERS, handle_user_action


@pytest.mark.unit
class TestHandleUserAction:
    """Test cases for action dispatch."""

    def test_every_action_has_handler(self):
        assert set(ACTION_HANDLERS) == set(UserActionType)

    @pytest.mark.parametrize("action_type,expected", [
        (UserActionType.CREATE, "Created user John Smith"),
        (UserActionType.UPDATE, "Updated user John Smith"),
        (UserActionType.LOGIN, "User John logged in"),
        (UserActionType.LOGOUT, "User John logged out"),
    ])
    def test_dispatch(self, active_user, action_type, expected):
        assert handle_user_action(UserAction(action=action_type, data=active_user)) == expected

    def test_dispatch_logs_business_event(self, active_user, log_records):
        handle_user_action(UserAction(action="create", data=active_user))

        record = next(r for r in log_records if r["extra"].get("business_event"))
        assert record["extra"]["event_type"] == "user_create"
        assert record["extra"]["user_email"] == "john@example.com"
