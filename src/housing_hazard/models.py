"""Housing hazard models: enums, inputs, indicator packs and the summary record.

This is the canonical location for the data structures shared by the lexicon,
assessment and formatter modules.  Inputs and packs are frozen; a fresh
``HousingHazardSummary`` is built on every evaluation.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Union

from housing_hazard.exceptions import IndicatorPackError

# ── Severity ─────────────────────────────────────────────────────────


class Severity(str, Enum):
    """Ordinal risk level: ``LOW < MEDIUM < HIGH < CRITICAL``.

    Ordering is by rank, not by the string value, so ``HIGH > CRITICAL`` is
    False even though it would be True lexically.
    """

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @classmethod
    def highest(cls, *severities: Severity) -> Severity:
        """Return the most severe of *severities* (``LOW`` when none are given)."""
        return max(severities, key=lambda s: cls(s).rank, default=cls.LOW)

    def _rank_of(self, other: object) -> int | None:
        if isinstance(other, Severity):
            return other.rank
        if isinstance(other, str):
            try:
                return Severity(other).rank
            except ValueError as exc:
                # NotImplemented would fall back to str ordering, which is lexical
                raise TypeError(f"Cannot order Severity against {other!r}") from exc
        return None

    def __lt__(self, other: object) -> bool:
        rank = self._rank_of(other)
        if rank is None:
            return NotImplemented
        return self.rank < rank

    def __le__(self, other: object) -> bool:
        rank = self._rank_of(other)
        if rank is None:
            return NotImplemented
        return self.rank <= rank

    def __gt__(self, other: object) -> bool:
        rank = self._rank_of(other)
        if rank is None:
            return NotImplemented
        return self.rank > rank

    def __ge__(self, other: object) -> bool:
        rank = self._rank_of(other)
        if rank is None:
            return NotImplemented
        return self.rank >= rank


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
    Severity.CRITICAL: 3,
}


# ── Case attributes ──────────────────────────────────────────────────


class LandlordType(str, Enum):
    """Landlord classification.  Only ``SOCIAL`` brings Awaab's Law into play."""

    SOCIAL = "social"
    PRIVATE = "private"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> LandlordType:
        """Case-insensitive lookup; anything unrecognised (including None) is UNKNOWN."""
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.UNKNOWN


class HhsrsCategory(str, Enum):
    """HHSRS hazard category.  Category 1 is the most severe."""

    CATEGORY_1 = "1"
    CATEGORY_2 = "2"


ComplaintDate = Union[date, str, None]


@dataclass(frozen=True)
class CaseDocument:
    """A case document whose text has already been extracted upstream."""

    name: str = ""
    doc_type: str | None = None
    extracted_text: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _optional_text(self.name) or "")
        object.__setattr__(self, "extracted_text", _optional_text(self.extracted_text))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CaseDocument:
        return cls(
            name=data.get("name") or "",
            doc_type=data.get("type", data.get("doc_type")),
            extracted_text=_pick(data, "extracted_text", "extractedText"),
        )


@dataclass(frozen=True)
class HazardInput:
    """Everything the engine reads for one evaluation.

    ``first_complaint_date`` accepts a ``date``/``datetime`` or an ISO-8601
    string; an unparseable value is treated as absent.  The occupant flags
    supplement the vulnerable-occupant phrases found in the text.
    """

    case_title: str = ""
    documents: tuple[CaseDocument, ...] = ()
    notes: str | None = None
    landlord_type: LandlordType = LandlordType.UNKNOWN
    first_complaint_date: ComplaintDate = None
    has_child_occupant: bool = False
    has_elderly_occupant: bool = False
    has_disabled_occupant: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "case_title", _optional_text(self.case_title) or "")
        object.__setattr__(self, "notes", _optional_text(self.notes))
        object.__setattr__(self, "documents", _document_tuple(self.documents))
        object.__setattr__(self, "landlord_type", LandlordType(self.landlord_type))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HazardInput:
        """Build from a case record using either camelCase or snake_case keys.

        Badly typed optional fields degrade to "absent" instead of raising.
        """
        return cls(
            case_title=_pick(data, "case_title", "caseTitle") or "",
            documents=data.get("documents") or (),
            notes=data.get("notes"),
            landlord_type=_pick(data, "landlord_type", "landlordType"),
            first_complaint_date=_pick(data, "first_complaint_date", "firstComplaintDate"),
            has_child_occupant=bool(_pick(data, "has_child_occupant", "hasChildOccupant")),
            has_elderly_occupant=bool(_pick(data, "has_elderly_occupant", "hasElderlyOccupant")),
            has_disabled_occupant=bool(_pick(data, "has_disabled_occupant", "hasDisabledOccupant")),
        )


# ── Indicator pack ───────────────────────────────────────────────────

PACK_FIELDS: tuple[str, ...] = (
    "damp_mould_factors",
    "vulnerable_occupant_factors",
    "symptom_keywords",
    "delay_patterns",
)

_PACK_ALIASES = {
    "dampMouldFactors": "damp_mould_factors",
    "vulnerableOccupantFactors": "vulnerable_occupant_factors",
    "symptomKeywords": "symptom_keywords",
    "delayPatterns": "delay_patterns",
}


@dataclass(frozen=True)
class IndicatorPack:
    """The four phrase lists a practice area supplies to the hazard engine."""

    damp_mould_factors: tuple[str, ...] = ()
    vulnerable_occupant_factors: tuple[str, ...] = ()
    symptom_keywords: tuple[str, ...] = ()
    delay_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in PACK_FIELDS:
            object.__setattr__(self, name, _phrase_tuple(name, getattr(self, name)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IndicatorPack:
        """Build from a mapping of list name -> phrases.

        Raises:
            IndicatorPackError: On unknown or missing lists, or malformed phrases.
        """
        if not isinstance(data, Mapping):
            raise IndicatorPackError(
                f"Indicator pack must be a mapping, got {type(data).__name__}"
            )
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _PACK_ALIASES.get(key, key)
            if name not in PACK_FIELDS:
                raise IndicatorPackError(f"Unknown indicator list {key!r}")
            kwargs[name] = value
        missing = [name for name in PACK_FIELDS if name not in kwargs]
        if missing:
            raise IndicatorPackError(f"Indicator pack is missing: {', '.join(missing)}")
        return cls(**kwargs)

    def phrase_count(self) -> int:
        return sum(len(getattr(self, name)) for name in PACK_FIELDS)


# ── Summary ──────────────────────────────────────────────────────────


@dataclass
class HousingHazardSummary:
    """Result of one hazard evaluation.

    ``HousingHazardSummary()`` is the defined "no hazard detected" baseline.
    """

    damp_mould_detected: bool = False
    damp_mould_indicators: list[str] = field(default_factory=list)
    damp_mould_severity: Severity = Severity.LOW

    vulnerable_occupants_detected: bool = False
    vulnerable_factors: list[str] = field(default_factory=list)
    vulnerability_severity: Severity = Severity.LOW

    health_symptoms_detected: bool = False
    symptoms: list[str] = field(default_factory=list)

    delay_patterns_detected: bool = False
    delay_factors: list[str] = field(default_factory=list)

    hhsrs_category: HhsrsCategory | None = None
    hhsrs_hazards: list[str] = field(default_factory=list)

    awaab_applies: bool = False
    awaab_breach_risk: Severity = Severity.LOW
    awaab_deadline_days: int | None = None

    overall_risk_level: Severity = Severity.LOW
    urgent_action: bool = False
    recommendations: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> HousingHazardSummary:
        return cls()

    def to_dict(self) -> dict[str, Any]:
        """camelCase rendering for the case dashboard; absent optionals are omitted."""
        out: dict[str, Any] = {
            "dampMouldDetected": self.damp_mould_detected,
            "dampMouldIndicators": list(self.damp_mould_indicators),
            "dampMouldSeverity": self.damp_mould_severity.value,
            "vulnerableOccupantsDetected": self.vulnerable_occupants_detected,
            "vulnerableFactors": list(self.vulnerable_factors),
            "vulnerabilitySeverity": self.vulnerability_severity.value,
            "healthSymptomsDetected": self.health_symptoms_detected,
            "symptoms": list(self.symptoms),
            "delayPatternsDetected": self.delay_patterns_detected,
            "delayFactors": list(self.delay_factors),
            "hhsrsHazards": list(self.hhsrs_hazards),
            "awaabApplies": self.awaab_applies,
            "awaabBreachRisk": self.awaab_breach_risk.value,
            "overallRiskLevel": self.overall_risk_level.value,
            "urgentAction": self.urgent_action,
            "recommendations": list(self.recommendations),
        }
        if self.hhsrs_category is not None:
            out["hhsrsCategory"] = self.hhsrs_category.value
        if self.awaab_deadline_days is not None:
            out["awaabDeadlineDays"] = self.awaab_deadline_days
        return out


# ── Internal helpers ────────────────────────────────────────────────

def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _optional_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _document_tuple(value: Any) -> tuple[CaseDocument, ...]:
    # Entries that are neither documents nor mappings carry no text and are skipped.
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return ()
    documents: list[CaseDocument] = []
    for doc in value:
        if isinstance(doc, CaseDocument):
            documents.append(doc)
        elif isinstance(doc, Mapping):
            documents.append(CaseDocument.from_dict(doc))
    return tuple(documents)


def _phrase_tuple(name: str, value: Any) -> tuple[str, ...]:
    # A bare string is a sequence too, but matching its characters is never intended.
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise IndicatorPackError(
            f"Indicator list {name!r} must be a list of phrases, got {type(value).__name__}"
        )
    for phrase in value:
        if not isinstance(phrase, str):
            raise IndicatorPackError(
                f"Indicator list {name!r} contains a non-string phrase: {phrase!r}"
            )
        if not phrase.strip():
            raise IndicatorPackError(f"Indicator list {name!r} contains a blank phrase")
    return tuple(value)
