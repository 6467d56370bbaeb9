"""Overall risk level and urgent-action flag."""

from __future__ import annotations

from housing_hazard.models import HhsrsCategory, Severity

# Deadline assumed when Awaab's Law applies but no complaint date is known
_UNKNOWN_DEADLINE_DAYS = 99
URGENT_DEADLINE_DAYS = 7


def overall_risk(
    damp_mould: Severity,
    vulnerability: Severity,
    awaab_breach: Severity,
    hhsrs_category: HhsrsCategory | None,
) -> Severity:
    """Combine the dimension severities and HHSRS category; first matching rule wins.

    A Category 2 hazard lifts the result to MEDIUM but never above a HIGH
    dimension, while Category 1 is always CRITICAL.
    """
    dimensions = (damp_mould, vulnerability, awaab_breach)

    if hhsrs_category == HhsrsCategory.CATEGORY_1:
        return Severity.CRITICAL
    if Severity.CRITICAL in dimensions:
        return Severity.CRITICAL
    if Severity.HIGH in dimensions:
        return Severity.HIGH
    if hhsrs_category == HhsrsCategory.CATEGORY_2:
        return Severity.MEDIUM
    if Severity.MEDIUM in dimensions:
        return Severity.MEDIUM
    return Severity.LOW


def requires_urgent_action(
    *,
    hhsrs_category: HhsrsCategory | None,
    overall: Severity,
    awaab_applies: bool,
    awaab_deadline_days: int | None,
    damp_mould_detected: bool,
    vulnerable_occupants_detected: bool,
) -> bool:
    """Whether the case needs urgent attention.

    Not derived from *overall*: damp/mould with a vulnerable occupant is
    urgent even when the overall level is only MEDIUM.
    """
    if awaab_deadline_days is None:
        awaab_deadline_days = _UNKNOWN_DEADLINE_DAYS
    return (
        hhsrs_category == HhsrsCategory.CATEGORY_1
        or overall == Severity.CRITICAL
        or (awaab_applies and awaab_deadline_days <= URGENT_DEADLINE_DAYS)
        or (damp_mould_detected and vulnerable_occupants_detected)
    )
