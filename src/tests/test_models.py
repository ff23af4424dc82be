# tests/test_models.py
"""Tests for result models."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from colorprobe.models import ProbeOutcome, ProbeReport, ProbeResult, resolve


class TestProbeResult:
    """Test tri-state result behaviour."""

    def test_from_bool(self):
        """Test booleans map to definite results."""
        assert ProbeResult.from_bool(True) is ProbeResult.AFFIRMATIVE
        assert ProbeResult.from_bool(False) is ProbeResult.NEGATIVE

    def test_is_known(self):
        """Test only definite results are known."""
        assert ProbeResult.AFFIRMATIVE.is_known is True
        assert ProbeResult.NEGATIVE.is_known is True
        assert ProbeResult.UNKNOWN.is_known is False

    def test_as_bool(self):
        """Test collapsing to a boolean."""
        assert ProbeResult.AFFIRMATIVE.as_bool() is True
        assert ProbeResult.NEGATIVE.as_bool() is False
        assert ProbeResult.UNKNOWN.as_bool() is False
        assert ProbeResult.UNKNOWN.as_bool(default=True) is True

    def test_unknown_is_not_a_boolean(self):
        """Test UNKNOWN is distinct from both booleans."""
        assert ProbeResult.UNKNOWN != True  # noqa: E712
        assert ProbeResult.UNKNOWN != False  # noqa: E712


class TestResolve:
    """Test folding a chain of results."""

    def test_first_known_wins(self):
        """Test the first definite answer is returned."""
        results = [ProbeResult.UNKNOWN, ProbeResult.NEGATIVE, ProbeResult.AFFIRMATIVE]
        assert resolve(results) is False

    def test_all_unknown_is_false(self):
        """Test no information resolves to False."""
        assert resolve([ProbeResult.UNKNOWN] * 4) is False

    def test_empty_chain_is_false(self):
        """Test an empty chain resolves to False."""
        assert resolve([]) is False

    def test_stops_at_first_known(self):
        """Test later results are never produced."""
        produced = []

        def chain():
            for result in (ProbeResult.UNKNOWN, ProbeResult.AFFIRMATIVE, ProbeResult.NEGATIVE):
                produced.append(result)
                yield result

        assert resolve(chain()) is True
        assert produced == [ProbeResult.UNKNOWN, ProbeResult.AFFIRMATIVE]


class TestProbeReport:
    """Test report models."""

    def test_outcome_from_value(self):
        """Test results are parsed from their string values."""
        outcome = ProbeOutcome(name="from_env", result="affirmative")
        assert outcome.result is ProbeResult.AFFIRMATIVE

    def test_invalid_result(self):
        """Test an unknown result value is rejected."""
        with pytest.raises(ValidationError):
            ProbeOutcome(name="from_env", result="maybe")

    def test_report_defaults(self):
        """Test outcomes default to empty."""
        report = ProbeReport(tty=False, disabled=False, supported=False)
        assert report.outcomes == []
