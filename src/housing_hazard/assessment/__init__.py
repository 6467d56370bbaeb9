"""Hazard assessment stages and the engine that composes them."""

from __future__ import annotations

from housing_hazard.assessment.aggregator import overall_risk, requires_urgent_action
from housing_hazard.assessment.deadlines import (
    AWAAB_WINDOW_DAYS,
    awaab_deadline_days,
    days_since,
    parse_complaint_date,
)
from housing_hazard.assessment.engine import HazardEngine, evaluate
from housing_hazard.assessment.hhsrs import HhsrsClassification, classify_hhsrs
from housing_hazard.assessment.recommendations import build_recommendations
from housing_hazard.assessment.severity import (
    awaab_applies,
    awaab_breach_risk,
    damp_mould_severity,
    vulnerability_severity,
)

__all__ = [
    "AWAAB_WINDOW_DAYS",
    "HazardEngine",
    "HhsrsClassification",
    "awaab_applies",
    "awaab_breach_risk",
    "awaab_deadline_days",
    "build_recommendations",
    "classify_hhsrs",
    "damp_mould_severity",
    "days_since",
    "evaluate",
    "overall_risk",
    "parse_complaint_date",
    "requires_urgent_action",
    "vulnerability_severity",
]
