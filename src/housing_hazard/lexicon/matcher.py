"""Phrase matching of case text against an indicator pack.

Matching is literal substring containment on the lower-cased corpus, not
word-boundary matching: ``"damp"`` also matches ``"dampness"``.  Matches are
returned in the pack's own order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from housing_hazard.models import HazardInput, IndicatorPack

# Labels used for the explicit occupant flags on HazardInput
CHILD_LABEL = "child"
ELDERLY_LABEL = "elderly"
DISABLED_LABEL = "disabled"


@dataclass
class IndicatorMatches:
    """Matched phrases per indicator category."""

    damp_mould: list[str] = field(default_factory=list)
    vulnerable_occupants: list[str] = field(default_factory=list)
    symptoms: list[str] = field(default_factory=list)
    delays: list[str] = field(default_factory=list)


def build_corpus(hazard_input: HazardInput) -> str:
    """Combine title, notes and every document's name and text into one lower-cased string."""
    parts = [hazard_input.case_title, hazard_input.notes or ""]
    parts.extend(
        f"{doc.name} {doc.extracted_text or ''}" for doc in hazard_input.documents
    )
    return " ".join(parts).lower()


def match_phrases(corpus: str, phrases: Iterable[str]) -> list[str]:
    """Return the phrases occurring anywhere in *corpus* (which must already be lower-cased)."""
    return [p for p in phrases if p and p.lower() in corpus]


def match_indicators(
    corpus: str,
    pack: IndicatorPack,
    hazard_input: HazardInput,
) -> IndicatorMatches:
    """Match every category of *pack* and fold in the explicit occupant flags."""
    vulnerable = match_phrases(corpus, pack.vulnerable_occupant_factors)
    flags = (
        (hazard_input.has_child_occupant, CHILD_LABEL),
        (hazard_input.has_elderly_occupant, ELDERLY_LABEL),
        (hazard_input.has_disabled_occupant, DISABLED_LABEL),
    )
    for flagged, label in flags:
        if flagged and label not in vulnerable:
            vulnerable.append(label)

    return IndicatorMatches(
        damp_mould=match_phrases(corpus, pack.damp_mould_factors),
        vulnerable_occupants=vulnerable,
        symptoms=match_phrases(corpus, pack.symptom_keywords),
        delays=match_phrases(corpus, pack.delay_patterns),
    )
