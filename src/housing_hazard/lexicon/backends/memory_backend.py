"""In-memory lexicon backend for testing."""

from __future__ import annotations

from collections.abc import Mapping

from housing_hazard.models import IndicatorPack


class MemoryLexiconBackend:
    """Dict-backed lexicon backend for unit tests and embedding."""

    def __init__(
        self,
        packs: Mapping[str, IndicatorPack | None] | None = None,
        *,
        version: int = 1,
    ) -> None:
        self._packs = dict(packs or {})
        self._version = version

    def get_pack(self, practice_area: str) -> IndicatorPack | None:
        """Return the pack registered for *practice_area*, if any."""
        return self._packs.get(practice_area)

    def list_practice_areas(self) -> list[str]:
        return sorted(self._packs)

    def get_version(self) -> int:
        """Return the lexicon version."""
        return self._version
