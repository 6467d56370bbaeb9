"""Awaab's Law deadline countdown.

Social landlords have 14 days to investigate a reported damp/mould hazard
and a further 7 days to begin remedial work, so the countdown runs 21 days
from the first complaint.  ``now`` is always passed in by the caller.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone

from housing_hazard.models import ComplaintDate

log = logging.getLogger(__name__)

INVESTIGATION_DAYS = 14
REMEDIAL_START_DAYS = 7
AWAAB_WINDOW_DAYS = INVESTIGATION_DAYS + REMEDIAL_START_DAYS

_ONE_DAY = timedelta(days=1)


def parse_complaint_date(value: ComplaintDate) -> datetime | None:
    """Normalise a complaint date to an aware UTC datetime.

    Plain dates are taken as midnight UTC and naive datetimes as UTC.
    Returns None for missing or unparseable values.
    """
    if value is None:
        return None
    if isinstance(value, date):
        try:
            return _as_utc(value)
        except OverflowError:
            log.warning("Ignoring out-of-range first complaint date %r", value)
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return _as_utc(datetime.fromisoformat(text))
        except (ValueError, OverflowError):
            log.warning("Ignoring unparseable first complaint date %r", value)
            return None
    log.warning("Ignoring first complaint date of type %s", type(value).__name__)
    return None


def days_since(complaint: date, now: date) -> int:
    """Whole days elapsed from *complaint* to *now*, rounded down."""
    return (_as_utc(now) - _as_utc(complaint)) // _ONE_DAY


def awaab_deadline_days(first_complaint_date: ComplaintDate, now: date) -> int | None:
    """Days left in the Awaab's Law window, never below zero.

    Returns None when the complaint date is missing or invalid, which is
    distinct from 0 (the deadline has arrived or passed).
    """
    complaint = parse_complaint_date(first_complaint_date)
    if complaint is None:
        return None
    return max(0, AWAAB_WINDOW_DAYS - days_since(complaint, now))


def _as_utc(value: date) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
