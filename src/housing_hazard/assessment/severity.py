"""Per-dimension severity calculators: damp/mould, vulnerability, Awaab's Law breach risk.

Each calculator is a total function of small counts and flags.  Rules are
evaluated top to bottom and the first match wins.
"""

from __future__ import annotations

from housing_hazard.models import LandlordType, Severity


def damp_mould_severity(indicator_count: int, has_vulnerable_occupants: bool) -> Severity:
    """Severity of the damp/mould evidence.

    Two or more indicators with a vulnerable occupant is CRITICAL before the
    plain count thresholds are considered.
    """
    if indicator_count == 0:
        return Severity.LOW
    if has_vulnerable_occupants and indicator_count >= 2:
        return Severity.CRITICAL
    if indicator_count >= 3:
        return Severity.HIGH
    if indicator_count >= 2:
        return Severity.MEDIUM
    return Severity.LOW


def vulnerability_severity(factor_count: int, has_health_symptoms: bool) -> Severity:
    """Severity of occupant vulnerability; any vulnerable factor is at least MEDIUM."""
    if factor_count == 0:
        return Severity.LOW
    if has_health_symptoms and factor_count >= 1:
        return Severity.CRITICAL
    if factor_count >= 2:
        return Severity.HIGH
    return Severity.MEDIUM


def awaab_applies(landlord_type: LandlordType | str | None, damp_mould_detected: bool) -> bool:
    """Awaab's Law covers damp and mould hazards in social housing only."""
    return LandlordType(landlord_type) is LandlordType.SOCIAL and damp_mould_detected


def awaab_breach_risk(
    applies: bool,
    deadline_days_remaining: int | None,
    has_delay_patterns: bool,
) -> Severity:
    """Risk that the landlord breaches the Awaab's Law timetable.

    A known deadline more than 14 days out falls through to the delay check.
    """
    if not applies:
        return Severity.LOW
    if deadline_days_remaining is not None:
        if deadline_days_remaining <= 0:
            return Severity.CRITICAL
        if deadline_days_remaining <= 7:
            return Severity.HIGH
        if deadline_days_remaining <= 14:
            return Severity.MEDIUM
    if has_delay_patterns:
        return Severity.HIGH
    return Severity.MEDIUM
