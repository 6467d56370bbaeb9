"""Recommended next steps for a housing hazard assessment.

Blocks are appended in a fixed order (damp/mould, vulnerability, HHSRS,
Awaab's Law, landlord delay) and never de-duplicated across blocks.
"""

from __future__ import annotations

from housing_hazard.models import HhsrsCategory

PHOTOGRAPH_EVIDENCE = "Obtain dated photographs of all damp and mould affected areas."
HHSRS_SURVEY = "Instruct a surveyor for HHSRS assessment if not already done."
DOCUMENT_VULNERABLE_OCCUPANTS = "Document vulnerable occupants and their specific needs."
MEDICAL_EVIDENCE = "Obtain medical evidence linking health issues to conditions."
CATEGORY_1_URGENT = "URGENT: Category 1 hazard requires immediate attention."
CATEGORY_1_ESCALATION = "Consider emergency injunction or local authority involvement."
CATEGORY_2_MONITOR = "Category 2 hazard identified - monitor for escalation."
AWAAB_DEADLINE_WARNING = "URGENT: Awaab's Law deadline approaching ({days} days remaining)."
AWAAB_COMMUNICATIONS = (
    "Document all landlord communications re: damp/mould investigation and repairs."
)
RECORD_DELAYS = "Record all instances of landlord delay or non-response."
PRE_ACTION_ESCALATION = "Consider escalating via pre-action protocol if delays persist."

_DEADLINE_WARNING_DAYS = 7


def build_recommendations(
    *,
    damp_mould_detected: bool,
    vulnerable_occupants_detected: bool,
    health_symptoms_detected: bool,
    hhsrs_category: HhsrsCategory | None,
    awaab_applies: bool,
    awaab_deadline_days: int | None,
    delay_patterns_detected: bool,
) -> list[str]:
    """Assemble the recommendation list; returns [] when nothing is triggered."""
    recs: list[str] = []

    if damp_mould_detected:
        recs.append(PHOTOGRAPH_EVIDENCE)
        recs.append(HHSRS_SURVEY)

    if vulnerable_occupants_detected:
        recs.append(DOCUMENT_VULNERABLE_OCCUPANTS)
        if health_symptoms_detected:
            recs.append(MEDICAL_EVIDENCE)

    if hhsrs_category == HhsrsCategory.CATEGORY_1:
        recs.append(CATEGORY_1_URGENT)
        recs.append(CATEGORY_1_ESCALATION)
    elif hhsrs_category == HhsrsCategory.CATEGORY_2:
        recs.append(CATEGORY_2_MONITOR)

    if awaab_applies:
        if awaab_deadline_days is not None and awaab_deadline_days <= _DEADLINE_WARNING_DAYS:
            recs.append(AWAAB_DEADLINE_WARNING.format(days=awaab_deadline_days))
        recs.append(AWAAB_COMMUNICATIONS)

    if delay_patterns_detected:
        recs.append(RECORD_DELAYS)
        recs.append(PRE_ACTION_ESCALATION)

    return recs
