"""Lexicon backend protocol: the contract every backend implements."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from housing_hazard.models import IndicatorPack


@runtime_checkable
class ILexiconBackend(Protocol):
    """Protocol for indicator-pack storage backends (file, memory)."""

    def get_pack(self, practice_area: str) -> IndicatorPack | None:
        """Return the hazard indicator pack for a practice area, or None if it has none."""
        ...

    def list_practice_areas(self) -> list[str]:
        """Return every practice area the backend knows about, sorted."""
        ...

    def get_version(self) -> int:
        """Return the lexicon version number."""
        ...
