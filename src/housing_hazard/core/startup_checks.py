"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from housing_hazard.lexicon.registry import KNOWN_PRACTICE_AREAS, normalize_practice_area

if TYPE_CHECKING:
    from housing_hazard.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_lexicon_path(settings)
    _check_default_practice_area(settings)


def _check_lexicon_path(settings: AppSettings) -> None:
    """Reject a file backend pointing at a lexicon that does not exist."""
    if settings.lexicon.backend != "file":
        return
    path = settings.lexicon.lexicon_path
    if not path.is_file():
        raise ValueError(
            f"HAZARD_LEXICON_LEXICON_PATH points at a missing file: {path}. "
            f"Set it to a YAML or JSON lexicon, or use HAZARD_LEXICON_BACKEND=memory."
        )
    if path.suffix not in (".yaml", ".yml", ".json"):
        log.warning("Lexicon file %s has an unrecognised suffix; it will be parsed as JSON", path)


def _check_default_practice_area(settings: AppSettings) -> None:
    """Reject an empty default practice area; warn when it normalises to something else."""
    area = settings.lexicon.default_practice_area.strip()
    if not area:
        raise ValueError("HAZARD_LEXICON_DEFAULT_PRACTICE_AREA must not be empty.")
    normalized = normalize_practice_area(area)
    if area not in KNOWN_PRACTICE_AREAS:
        log.warning(
            "Default practice area %r is not canonical; it resolves to %r",
            area,
            normalized,
        )
