"""File-backed lexicon backend loading indicator packs from YAML or JSON on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from housing_hazard.exceptions import LexiconLoadError
from housing_hazard.models import IndicatorPack

log = logging.getLogger(__name__)


class FileLexiconBackend:
    """Loads indicator packs from a YAML or JSON file on disk.

    Expected shape::

        version: 3
        packs:
          housing_disrepair:
            damp_mould_factors: [damp, mould, ...]
            vulnerable_occupant_factors: [...]
            symptom_keywords: [...]
            delay_patterns: [...]
          personal_injury: null

    A ``null`` entry registers the practice area without a hazard model.
    The file is lazy-loaded on first access.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._packs: dict[str, IndicatorPack | None] | None = None
        self._version: int = 1

    def get_pack(self, practice_area: str) -> IndicatorPack | None:
        """Return the pack for *practice_area*, or None if absent or null."""
        self._ensure_loaded()
        assert self._packs is not None
        return self._packs.get(practice_area)

    def list_practice_areas(self) -> list[str]:
        self._ensure_loaded()
        assert self._packs is not None
        return sorted(self._packs)

    def get_version(self) -> int:
        """Return the lexicon version."""
        self._ensure_loaded()
        return self._version

    def _ensure_loaded(self) -> None:
        """Lazy-load the lexicon file on first access."""
        if self._packs is not None:
            return

        if not self._path.exists():
            raise FileNotFoundError(f"Lexicon file not found: {self._path}")

        raw_text = self._path.read_text(encoding="utf-8")

        try:
            if self._path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(raw_text)
            else:
                data = json.loads(raw_text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise LexiconLoadError(f"Could not parse lexicon file: {exc}", str(self._path)) from exc

        self._parse(data)

    def _parse(self, data: Any) -> None:
        """Parse the raw document into IndicatorPack objects.

        Pack-level problems raise ``IndicatorPackError`` from the model itself.
        """
        if not isinstance(data, dict):
            raise LexiconLoadError("Lexicon file must contain a mapping", str(self._path))

        packs_data = data.get("packs") or {}
        if not isinstance(packs_data, dict):
            raise LexiconLoadError("'packs' must be a mapping of practice area to pack", str(self._path))

        packs: dict[str, IndicatorPack | None] = {}
        for area, pack_data in packs_data.items():
            packs[str(area)] = None if pack_data is None else IndicatorPack.from_dict(pack_data)

        self._version = int(data.get("version", 1))
        self._packs = packs

        log.info(
            "Loaded %d practice area lexicon(s) from %s (version %d)",
            len(packs),
            self._path,
            self._version,
        )
