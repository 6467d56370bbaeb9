"""Housing hazard engine: lexicon matching -> dimension severities -> aggregation.

``evaluate`` is a pure function of its three arguments.  ``HazardEngine``
wraps it with a practice-area registry lookup and an injectable clock.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog

from housing_hazard.assessment.aggregator import overall_risk, requires_urgent_action
from housing_hazard.assessment.deadlines import awaab_deadline_days
from housing_hazard.assessment.hhsrs import classify_hhsrs
from housing_hazard.assessment.recommendations import build_recommendations
from housing_hazard.assessment.severity import (
    awaab_applies,
    awaab_breach_risk,
    damp_mould_severity,
    vulnerability_severity,
)
from housing_hazard.exceptions import IndicatorPackError
from housing_hazard.lexicon.matcher import build_corpus, match_indicators
from housing_hazard.lexicon.registry import normalize_practice_area
from housing_hazard.models import HazardInput, HousingHazardSummary, IndicatorPack

if TYPE_CHECKING:
    from housing_hazard.core.config import AppSettings
    from housing_hazard.lexicon.registry import LexiconRegistry

log = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def evaluate(
    hazard_input: HazardInput,
    pack: IndicatorPack | Mapping[str, Any] | None,
    now: date,
) -> HousingHazardSummary:
    """Assess one case against an indicator pack.

    Args:
        hazard_input: Case text and occupant/landlord flags.
        pack: Phrase lists for the practice area.  ``None`` yields the empty
            summary; a mapping is validated into an ``IndicatorPack``.
        now: Reference time for the Awaab's Law countdown.

    Raises:
        IndicatorPackError: If *pack* is malformed.
    """
    if pack is None:
        return HousingHazardSummary()
    pack = _coerce_pack(pack)

    corpus = build_corpus(hazard_input)
    matches = match_indicators(corpus, pack, hazard_input)

    damp_detected = bool(matches.damp_mould)
    vulnerable_detected = bool(matches.vulnerable_occupants)
    symptoms_detected = bool(matches.symptoms)
    delays_detected = bool(matches.delays)

    hhsrs = classify_hhsrs(corpus)

    applies = awaab_applies(hazard_input.landlord_type, damp_detected)
    deadline_days = None
    if applies and hazard_input.first_complaint_date is not None:
        deadline_days = awaab_deadline_days(hazard_input.first_complaint_date, now)

    damp_severity = damp_mould_severity(len(matches.damp_mould), vulnerable_detected)
    vuln_severity = vulnerability_severity(len(matches.vulnerable_occupants), symptoms_detected)
    breach_risk = awaab_breach_risk(applies, deadline_days, delays_detected)

    overall = overall_risk(damp_severity, vuln_severity, breach_risk, hhsrs.category)
    urgent = requires_urgent_action(
        hhsrs_category=hhsrs.category,
        overall=overall,
        awaab_applies=applies,
        awaab_deadline_days=deadline_days,
        damp_mould_detected=damp_detected,
        vulnerable_occupants_detected=vulnerable_detected,
    )

    recommendations = build_recommendations(
        damp_mould_detected=damp_detected,
        vulnerable_occupants_detected=vulnerable_detected,
        health_symptoms_detected=symptoms_detected,
        hhsrs_category=hhsrs.category,
        awaab_applies=applies,
        awaab_deadline_days=deadline_days,
        delay_patterns_detected=delays_detected,
    )

    log.debug(
        "Hazard evaluation: damp=%d vulnerable=%d symptoms=%d delays=%d hhsrs=%s "
        "awaab=%s deadline=%s overall=%s urgent=%s",
        len(matches.damp_mould),
        len(matches.vulnerable_occupants),
        len(matches.symptoms),
        len(matches.delays),
        hhsrs.category.value if hhsrs.category else "none",
        applies,
        deadline_days,
        overall.value,
        urgent,
    )

    return HousingHazardSummary(
        damp_mould_detected=damp_detected,
        damp_mould_indicators=matches.damp_mould,
        damp_mould_severity=damp_severity,
        vulnerable_occupants_detected=vulnerable_detected,
        vulnerable_factors=matches.vulnerable_occupants,
        vulnerability_severity=vuln_severity,
        health_symptoms_detected=symptoms_detected,
        symptoms=matches.symptoms,
        delay_patterns_detected=delays_detected,
        delay_factors=matches.delays,
        hhsrs_category=hhsrs.category,
        hhsrs_hazards=hhsrs.hazard_labels,
        awaab_applies=applies,
        awaab_breach_risk=breach_risk,
        awaab_deadline_days=deadline_days,
        overall_risk_level=overall,
        urgent_action=urgent,
        recommendations=recommendations,
    )


class HazardEngine:
    """Looks up the practice area's indicator pack and evaluates cases against it."""

    def __init__(
        self,
        registry: LexiconRegistry,
        *,
        clock: Clock | None = None,
        default_practice_area: str = "housing_disrepair",
    ) -> None:
        self._registry = registry
        self._clock = clock or _utc_now
        self._default_practice_area = default_practice_area

    @classmethod
    def from_settings(cls, settings: AppSettings, *, clock: Clock | None = None) -> HazardEngine:
        """Build an engine with the lexicon backend selected by *settings*.

        Raises:
            ValueError: If *settings* fail startup validation.
        """
        from housing_hazard.core.startup_checks import validate_settings
        from housing_hazard.lexicon import create_lexicon_backend
        from housing_hazard.lexicon.registry import LexiconRegistry

        validate_settings(settings)
        registry = LexiconRegistry(create_lexicon_backend(settings))
        return cls(
            registry,
            clock=clock,
            default_practice_area=settings.lexicon.default_practice_area,
        )

    @property
    def registry(self) -> LexiconRegistry:
        return self._registry

    def assess(
        self,
        hazard_input: HazardInput | Mapping[str, Any],
        *,
        practice_area: str | None = None,
        now: date | None = None,
    ) -> HousingHazardSummary:
        """Evaluate a case; an unregistered practice area gives the empty summary."""
        if not isinstance(hazard_input, HazardInput):
            hazard_input = HazardInput.from_dict(hazard_input)
        area = normalize_practice_area(practice_area or self._default_practice_area)
        with structlog.contextvars.bound_contextvars(practice_area=area):
            pack = self._registry.get_pack_for_practice_area(area)
            if now is None:
                now = self._clock()
            return evaluate(hazard_input, pack, now)


def _coerce_pack(pack: IndicatorPack | Mapping[str, Any]) -> IndicatorPack:
    if isinstance(pack, IndicatorPack):
        return pack
    if isinstance(pack, Mapping):
        return IndicatorPack.from_dict(pack)
    raise IndicatorPackError(f"Expected an IndicatorPack, got {type(pack).__name__}")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
