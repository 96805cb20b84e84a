"""Unit tests for verdict reason codes."""

import pytest

from orderguard.business.reason_codes import (
    REASON_MESSAGES,
    SUCCESS_REASONS,
    Verdict,
    VerdictReason,
)


@pytest.mark.unit
class TestVerdict:
    """Test cases for verdict construction."""

    def test_every_reason_has_message(self):
        """Test the message table covers all reasons."""
        assert set(REASON_MESSAGES) == set(VerdictReason)

    def test_success_reasons(self):
        assert SUCCESS_REASONS == {VerdictReason.PROCESSING, VerdictReason.VALID}

    def test_success_carries_message(self):
        verdict = Verdict.success(VerdictReason.VALID)

        assert verdict.is_success
        assert verdict.message == REASON_MESSAGES[VerdictReason.VALID]

    def test_success_rejects_failure_reason(self):
        with pytest.raises(ValueError):
            Verdict.success(VerdictReason.MISSING)

    def test_failure_rejects_success_reason(self):
        with pytest.raises(ValueError):
            Verdict.failure(VerdictReason.PROCESSING)

    def test_verdicts_compare_by_value(self):
        """Test verdicts are plain values."""
        assert Verdict.failure(VerdictReason.UNDERAGE) == Verdict.failure(VerdictReason.UNDERAGE)
