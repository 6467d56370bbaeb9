"""Practice-area lexicon registry.

Maps free-form practice-area strings (``"Housing Disrepair"``,
``"housing"``, ``"disrepair claim"``) onto canonical practice areas and
looks up each area's hazard indicator pack through a lexicon backend.

Usage::

    from housing_hazard.lexicon.registry import get_registry

    registry = get_registry()
    pack = registry.get_pack_for_practice_area("housing_disrepair")
    if pack is None:
        ...  # no hazard model for this practice area
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from housing_hazard.models import IndicatorPack

if TYPE_CHECKING:
    from housing_hazard.core.config import AppSettings
    from housing_hazard.lexicon.backends.protocol import ILexiconBackend

log = logging.getLogger(__name__)

HOUSING_DISREPAIR = "housing_disrepair"
PERSONAL_INJURY = "personal_injury"
CLINICAL_NEGLIGENCE = "clinical_negligence"
FAMILY = "family"
CRIMINAL = "criminal"
OTHER_LITIGATION = "other_litigation"

KNOWN_PRACTICE_AREAS: tuple[str, ...] = (
    OTHER_LITIGATION,
    HOUSING_DISREPAIR,
    PERSONAL_INJURY,
    CLINICAL_NEGLIGENCE,
    FAMILY,
    CRIMINAL,
)

# Checked in order; the first area with a matching fragment wins.
_AREA_FRAGMENTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (HOUSING_DISREPAIR, ("housing", "disrepair")),
    (PERSONAL_INJURY, ("pi", "personal", "injury", "rta", "accident")),
    (CLINICAL_NEGLIGENCE, ("clin", "medical", "negligence")),
    (FAMILY, ("family", "child", "divorce", "matrimonial", "financial_remedy")),
    (CRIMINAL, ("criminal", "defense", "prosecution", "charge", "offence", "bail")),
)

_NON_AREA_CHARS = re.compile(r"[^a-z_]")


def normalize_practice_area(practice_area: str | None) -> str:
    """Map a free-form practice-area string to one of ``KNOWN_PRACTICE_AREAS``.

    Unrecognised or empty values fall back to ``other_litigation``.
    """
    if not practice_area:
        return OTHER_LITIGATION

    lower = _NON_AREA_CHARS.sub("_", practice_area.lower())
    if lower in KNOWN_PRACTICE_AREAS:
        return lower

    for area, fragments in _AREA_FRAGMENTS:
        if any(fragment in lower for fragment in fragments):
            return area
    return OTHER_LITIGATION


class LexiconRegistry:
    """Resolves practice areas to indicator packs held by a lexicon backend."""

    def __init__(self, backend: ILexiconBackend) -> None:
        self._backend = backend

    @property
    def backend(self) -> ILexiconBackend:
        return self._backend

    def get_pack_for_practice_area(self, practice_area: str | None) -> IndicatorPack | None:
        """Return the indicator pack for *practice_area*, or None if none is registered."""
        area = normalize_practice_area(practice_area)
        pack = self._backend.get_pack(area)
        if pack is None:
            log.warning("No hazard indicator pack registered for practice area %r", area)
        return pack

    def has(self, practice_area: str | None) -> bool:
        """Check if a hazard indicator pack exists for the practice area."""
        return self._backend.get_pack(normalize_practice_area(practice_area)) is not None

    def list_practice_areas(self) -> list[str]:
        """Return the practice areas known to the backend, sorted."""
        return self._backend.list_practice_areas()


# ── Module-level singleton ──────────────────────────────────────────

_global_registry: LexiconRegistry | None = None


def get_registry(settings: AppSettings | None = None) -> LexiconRegistry:
    """Return the global lexicon registry, building it from settings on first call."""
    global _global_registry
    if _global_registry is None:
        from housing_hazard.core.config import AppSettings
        from housing_hazard.lexicon import create_lexicon_backend

        _global_registry = LexiconRegistry(create_lexicon_backend(settings or AppSettings()))
    return _global_registry


def reset_registry() -> None:
    """Drop the global registry so the next ``get_registry()`` rebuilds it."""
    global _global_registry
    _global_registry = None


def get_pack_for_practice_area(practice_area: str | None) -> IndicatorPack | None:
    """Shortcut for ``get_registry().get_pack_for_practice_area(...)``."""
    return get_registry().get_pack_for_practice_area(practice_area)
