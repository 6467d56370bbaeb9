"""JSON output formatter for hazard summaries served to the case dashboard."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from housing_hazard.models import HousingHazardSummary


class JSONFormatter:
    """Renders HousingHazardSummary as indented camelCase JSON bytes."""

    def format(self, summary: HousingHazardSummary, **kwargs: Any) -> bytes:
        """Serialize *summary* to pretty-printed JSON bytes."""
        indent = kwargs.get("indent", 2)
        return json.dumps(summary.to_dict(), indent=indent, ensure_ascii=False).encode("utf-8")

    def format_to_file(self, summary: HousingHazardSummary, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(summary, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
