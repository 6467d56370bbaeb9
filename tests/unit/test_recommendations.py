"""Tests for recommendation assembly."""

from __future__ import annotations

from housing_hazard.assessment import recommendations as recs
from housing_hazard.assessment.recommendations import build_recommendations
from housing_hazard.models import HhsrsCategory


def _build(**overrides: object) -> list[str]:
    params = dict(
        damp_mould_detected=False,
        vulnerable_occupants_detected=False,
        health_symptoms_detected=False,
        hhsrs_category=None,
        awaab_applies=False,
        awaab_deadline_days=None,
        delay_patterns_detected=False,
    )
    params.update(overrides)
    return build_recommendations(**params)


class TestBuildRecommendations:
    def test_nothing_triggered(self) -> None:
        assert _build() == []

    def test_damp_block(self) -> None:
        assert _build(damp_mould_detected=True) == [recs.PHOTOGRAPH_EVIDENCE, recs.HHSRS_SURVEY]

    def test_vulnerable_without_symptoms(self) -> None:
        assert _build(vulnerable_occupants_detected=True) == [recs.DOCUMENT_VULNERABLE_OCCUPANTS]

    def test_vulnerable_with_symptoms(self) -> None:
        assert _build(vulnerable_occupants_detected=True, health_symptoms_detected=True) == [
            recs.DOCUMENT_VULNERABLE_OCCUPANTS,
            recs.MEDICAL_EVIDENCE,
        ]

    def test_symptoms_without_vulnerable_occupants(self) -> None:
        assert _build(health_symptoms_detected=True) == []

    def test_category_1(self) -> None:
        assert _build(hhsrs_category=HhsrsCategory.CATEGORY_1) == [
            recs.CATEGORY_1_URGENT,
            recs.CATEGORY_1_ESCALATION,
        ]

    def test_category_2(self) -> None:
        assert _build(hhsrs_category=HhsrsCategory.CATEGORY_2) == [recs.CATEGORY_2_MONITOR]

    def test_awaab_with_near_deadline(self) -> None:
        assert _build(awaab_applies=True, awaab_deadline_days=3) == [
            "URGENT: Awaab's Law deadline approaching (3 days remaining).",
            recs.AWAAB_COMMUNICATIONS,
        ]

    def test_awaab_with_deadline_passed(self) -> None:
        result = _build(awaab_applies=True, awaab_deadline_days=0)
        assert result[0] == "URGENT: Awaab's Law deadline approaching (0 days remaining)."

    def test_awaab_with_distant_deadline(self) -> None:
        assert _build(awaab_applies=True, awaab_deadline_days=12) == [recs.AWAAB_COMMUNICATIONS]

    def test_awaab_without_deadline(self) -> None:
        assert _build(awaab_applies=True) == [recs.AWAAB_COMMUNICATIONS]

    def test_delay_block(self) -> None:
        assert _build(delay_patterns_detected=True) == [
            recs.RECORD_DELAYS,
            recs.PRE_ACTION_ESCALATION,
        ]

    def test_full_ordering(self) -> None:
        result = _build(
            damp_mould_detected=True,
            vulnerable_occupants_detected=True,
            health_symptoms_detected=True,
            hhsrs_category=HhsrsCategory.CATEGORY_1,
            awaab_applies=True,
            awaab_deadline_days=5,
            delay_patterns_detected=True,
        )
        assert result == [
            recs.PHOTOGRAPH_EVIDENCE,
            recs.HHSRS_SURVEY,
            recs.DOCUMENT_VULNERABLE_OCCUPANTS,
            recs.MEDICAL_EVIDENCE,
            recs.CATEGORY_1_URGENT,
            recs.CATEGORY_1_ESCALATION,
            "URGENT: Awaab's Law deadline approaching (5 days remaining).",
            recs.AWAAB_COMMUNICATIONS,
            recs.RECORD_DELAYS,
            recs.PRE_ACTION_ESCALATION,
        ]
