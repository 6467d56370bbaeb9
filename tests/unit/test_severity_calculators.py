"""Tests for the per-dimension severity calculators."""

from __future__ import annotations

import pytest

from housing_hazard.assessment.severity import (
    awaab_applies,
    awaab_breach_risk,
    damp_mould_severity,
    vulnerability_severity,
)
from housing_hazard.models import LandlordType, Severity


class TestDampMouldSeverity:
    @pytest.mark.parametrize(
        "count,vulnerable,expected",
        [
            (0, False, Severity.LOW),
            (0, True, Severity.LOW),
            (1, False, Severity.LOW),
            (1, True, Severity.LOW),
            (2, False, Severity.MEDIUM),
            (2, True, Severity.CRITICAL),
            (3, False, Severity.HIGH),
            (3, True, Severity.CRITICAL),
            (7, False, Severity.HIGH),
        ],
    )
    def test_thresholds(self, count, vulnerable, expected) -> None:
        assert damp_mould_severity(count, vulnerable) is expected

    @pytest.mark.parametrize("vulnerable", [True, False])
    def test_monotonic_in_indicator_count(self, vulnerable) -> None:
        severities = [damp_mould_severity(count, vulnerable) for count in range(0, 12)]
        for lower, higher in zip(severities, severities[1:]):
            assert higher >= lower


class TestVulnerabilitySeverity:
    @pytest.mark.parametrize(
        "count,symptoms,expected",
        [
            (0, False, Severity.LOW),
            (0, True, Severity.LOW),
            (1, False, Severity.MEDIUM),
            (1, True, Severity.CRITICAL),
            (2, False, Severity.HIGH),
            (2, True, Severity.CRITICAL),
            (5, False, Severity.HIGH),
        ],
    )
    def test_thresholds(self, count, symptoms, expected) -> None:
        assert vulnerability_severity(count, symptoms) is expected


class TestAwaabApplies:
    def test_social_with_damp(self) -> None:
        assert awaab_applies(LandlordType.SOCIAL, True) is True

    def test_social_without_damp(self) -> None:
        assert awaab_applies(LandlordType.SOCIAL, False) is False

    @pytest.mark.parametrize("landlord", [LandlordType.PRIVATE, LandlordType.UNKNOWN, "private", None])
    def test_never_for_non_social(self, landlord) -> None:
        assert awaab_applies(landlord, True) is False

    def test_accepts_plain_string(self) -> None:
        assert awaab_applies("social", True) is True


class TestAwaabBreachRisk:
    def test_not_applicable(self) -> None:
        assert awaab_breach_risk(False, 0, True) is Severity.LOW

    @pytest.mark.parametrize(
        "days,expected",
        [
            (0, Severity.CRITICAL),
            (-3, Severity.CRITICAL),
            (1, Severity.HIGH),
            (7, Severity.HIGH),
            (8, Severity.MEDIUM),
            (14, Severity.MEDIUM),
        ],
    )
    def test_deadline_thresholds(self, days, expected) -> None:
        assert awaab_breach_risk(True, days, False) is expected

    def test_distant_deadline_falls_through_to_delay_check(self) -> None:
        assert awaab_breach_risk(True, 15, True) is Severity.HIGH
        assert awaab_breach_risk(True, 21, False) is Severity.MEDIUM

    def test_no_deadline_with_delays(self) -> None:
        assert awaab_breach_risk(True, None, True) is Severity.HIGH

    def test_no_deadline_without_delays(self) -> None:
        assert awaab_breach_risk(True, None, False) is Severity.MEDIUM

    def test_deadline_takes_priority_over_delays(self) -> None:
        assert awaab_breach_risk(True, 10, True) is Severity.MEDIUM
