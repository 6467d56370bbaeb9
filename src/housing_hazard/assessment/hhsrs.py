"""HHSRS hazard category detection from case text."""

from __future__ import annotations

from dataclasses import dataclass, field

from housing_hazard.models import HhsrsCategory

CATEGORY_1_MARKERS: tuple[str, ...] = ("category 1", "cat 1", "cat1")
CATEGORY_2_MARKERS: tuple[str, ...] = ("category 2", "cat 2", "cat2")

_HAZARD_LABELS = {
    HhsrsCategory.CATEGORY_1: "Category 1 hazard identified",
    HhsrsCategory.CATEGORY_2: "Category 2 hazard identified",
}


@dataclass
class HhsrsClassification:
    category: HhsrsCategory | None = None
    hazard_labels: list[str] = field(default_factory=list)


def classify_hhsrs(corpus: str) -> HhsrsClassification:
    """Find an HHSRS category mention in the lower-cased *corpus*.

    Category 1 takes precedence when both categories are mentioned.
    """
    if any(marker in corpus for marker in CATEGORY_1_MARKERS):
        category = HhsrsCategory.CATEGORY_1
    elif any(marker in corpus for marker in CATEGORY_2_MARKERS):
        category = HhsrsCategory.CATEGORY_2
    else:
        return HhsrsClassification()
    return HhsrsClassification(category=category, hazard_labels=[_HAZARD_LABELS[category]])
