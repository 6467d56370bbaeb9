"""Shared fixtures for housing-hazard tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from housing_hazard.lexicon.backends.memory_backend import MemoryLexiconBackend
from housing_hazard.lexicon.registry import LexiconRegistry
from housing_hazard.models import CaseDocument, HazardInput, IndicatorPack

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Reference instant for deadline arithmetic (midday UTC)."""
    return FIXED_NOW


@pytest.fixture
def pack() -> IndicatorPack:
    """Small synthetic indicator pack, independent of the shipped lexicon."""
    return IndicatorPack(
        damp_mould_factors=("black mould", "condensation", "damp", "leak"),
        vulnerable_occupant_factors=("vulnerable", "baby", "elderly", "wheelchair"),
        symptom_keywords=("asthma", "cough", "wheezing"),
        delay_patterns=("no response", "ignored", "still waiting"),
    )


@pytest.fixture
def registry(pack: IndicatorPack) -> LexiconRegistry:
    """Registry with a housing pack and a known area without a hazard model."""
    backend = MemoryLexiconBackend({"housing_disrepair": pack, "family": None})
    return LexiconRegistry(backend)


@pytest.fixture
def damp_case() -> HazardInput:
    """Social-housing case with two damp indicators and a child occupant."""
    return HazardInput(
        case_title="Smith v Riverside Housing",
        documents=(
            CaseDocument(
                name="Inspection notes",
                doc_type="report",
                extracted_text="Black mould behind the wardrobe and heavy condensation on windows.",
            ),
        ),
        landlord_type="social",
        has_child_occupant=True,
    )
