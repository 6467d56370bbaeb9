"""Nested pydantic-settings configuration for the hazard engine.

Each sub-config reads its own ``HAZARD_<GROUP>_*`` env vars::

    export HAZARD_LEXICON_BACKEND=file
    export HAZARD_LEXICON_LEXICON_PATH=/etc/hazard/practice_areas.yaml
    export HAZARD_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

DEFAULT_LEXICON_PATH = Path(__file__).resolve().parent.parent / "lexicon" / "data" / "practice_areas.yaml"


class LexiconConfig(BaseSettings):
    """Indicator lexicon configuration.

    Env vars use ``HAZARD_LEXICON_`` prefix.
    """

    model_config = {"env_prefix": "HAZARD_LEXICON_"}

    backend: Literal["file", "memory"] = "file"
    lexicon_path: Path = DEFAULT_LEXICON_PATH
    default_practice_area: str = "housing_disrepair"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``HAZARD_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "HAZARD_OBSERVABILITY_"}

    service_name: str = "housing-hazard"
    log_level: str = "INFO"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    lexicon: LexiconConfig = LexiconConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
