"""housing-hazard: rule-based Awaab's Law / HHSRS hazard assessment for housing disrepair cases.

Pure evaluation against an explicit indicator pack and clock::

    from datetime import datetime, timezone
    from housing_hazard import HazardInput, IndicatorPack, evaluate

    summary = evaluate(hazard_input, pack, datetime.now(timezone.utc))

Registry-backed engine::

    from housing_hazard import AppSettings, HazardEngine

    engine = HazardEngine.from_settings(AppSettings())
    summary = engine.assess(hazard_input, practice_area="housing_disrepair")
"""

from __future__ import annotations

from housing_hazard.assessment.engine import HazardEngine, evaluate
from housing_hazard.core.config import AppSettings
from housing_hazard.exceptions import HazardError, IndicatorPackError, LexiconLoadError
from housing_hazard.lexicon.registry import (
    LexiconRegistry,
    get_pack_for_practice_area,
    get_registry,
    normalize_practice_area,
)
from housing_hazard.models import (
    CaseDocument,
    HazardInput,
    HhsrsCategory,
    HousingHazardSummary,
    IndicatorPack,
    LandlordType,
    Severity,
)

__all__ = [
    "AppSettings",
    "CaseDocument",
    "HazardEngine",
    "HazardError",
    "HazardInput",
    "HhsrsCategory",
    "HousingHazardSummary",
    "IndicatorPack",
    "IndicatorPackError",
    "LandlordType",
    "LexiconLoadError",
    "LexiconRegistry",
    "Severity",
    "evaluate",
    "get_pack_for_practice_area",
    "get_registry",
    "normalize_practice_area",
]
