"""Tests for the JSON output formatter."""

from __future__ import annotations

import json

from housing_hazard.formatters import JSONFormatter
from housing_hazard.models import HhsrsCategory, HousingHazardSummary, Severity


class TestJSONFormatter:
    def test_empty_summary(self) -> None:
        data = json.loads(JSONFormatter().format(HousingHazardSummary()))

        assert data["overallRiskLevel"] == "LOW"
        assert data["urgentAction"] is False
        assert data["recommendations"] == []
        assert "hhsrsCategory" not in data
        assert "awaabDeadlineDays" not in data

    def test_optional_fields_rendered(self) -> None:
        summary = HousingHazardSummary(
            hhsrs_category=HhsrsCategory.CATEGORY_2,
            awaab_applies=True,
            awaab_deadline_days=0,
            awaab_breach_risk=Severity.CRITICAL,
        )
        data = json.loads(JSONFormatter().format(summary))

        assert data["hhsrsCategory"] == "2"
        assert data["awaabDeadlineDays"] == 0
        assert data["awaabBreachRisk"] == "CRITICAL"

    def test_keeps_non_ascii(self) -> None:
        summary = HousingHazardSummary(damp_mould_indicators=["moisissure à l'angle"])
        assert "à".encode() in JSONFormatter().format(summary)

    def test_indent_option(self) -> None:
        compact = JSONFormatter().format(HousingHazardSummary(), indent=None)
        assert b"\n" not in compact

    def test_format_to_file(self, tmp_path) -> None:
        path = tmp_path / "summary.json"
        result = JSONFormatter().format_to_file(HousingHazardSummary(urgent_action=True), path)
        assert result == path
        assert json.loads(path.read_text())["urgentAction"] is True

    def test_content_type(self) -> None:
        assert JSONFormatter().content_type == "application/json"
