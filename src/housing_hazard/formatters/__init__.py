"""Output formatters for HousingHazardSummary.

Usage::

    from housing_hazard.formatters import JSONFormatter

    payload = JSONFormatter().format(summary)
"""

from __future__ import annotations

from housing_hazard.formatters.json_formatter import JSONFormatter

__all__ = ["JSONFormatter"]
