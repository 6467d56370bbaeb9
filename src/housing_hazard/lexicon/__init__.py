"""Indicator lexicons: phrase matching, backends and the practice-area registry.

Factory function::

    from housing_hazard.lexicon import create_lexicon_backend
    backend = create_lexicon_backend(settings)
    pack = backend.get_pack("housing_disrepair")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from housing_hazard.lexicon.matcher import (
    IndicatorMatches,
    build_corpus,
    match_indicators,
    match_phrases,
)
from housing_hazard.lexicon.registry import (
    LexiconRegistry,
    get_pack_for_practice_area,
    get_registry,
    normalize_practice_area,
)

if TYPE_CHECKING:
    from housing_hazard.core.config import AppSettings
    from housing_hazard.lexicon.backends.protocol import ILexiconBackend


def create_lexicon_backend(settings: AppSettings) -> ILexiconBackend:
    """Create the lexicon backend selected by ``settings.lexicon.backend``."""
    backend_type = settings.lexicon.backend

    if backend_type == "file":
        from housing_hazard.lexicon.backends.file_backend import FileLexiconBackend

        return FileLexiconBackend(settings.lexicon.lexicon_path)

    if backend_type == "memory":
        from housing_hazard.lexicon.backends.memory_backend import MemoryLexiconBackend

        return MemoryLexiconBackend()

    raise ValueError(f"Unknown lexicon backend: {backend_type!r}")


__all__ = [
    "IndicatorMatches",
    "LexiconRegistry",
    "build_corpus",
    "create_lexicon_backend",
    "get_pack_for_practice_area",
    "get_registry",
    "match_indicators",
    "match_phrases",
    "normalize_practice_area",
]
