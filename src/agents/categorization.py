"""
Feature Categorizer.

Maps guest-selected highlight phrases to stay categories using a static
keyword table. Order of the request is preserved.
"""

import re
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Tuple

from src.models.generation_state import CategorizedFeature

GENERAL_CATEGORY = "general"
GENERAL_WEIGHT = 1

# (category, priority weight, keywords); first matching row wins
CATEGORY_TABLE: Tuple[Tuple[str, int, Tuple[str, ...]], ...] = (
    ("service", 6, (
        "customer service", "service", "staff", "hospitality", "friendly",
        "helpful", "concierge", "reception", "check-in", "welcome",
    )),
    ("accommodation", 5, (
        "room", "clean", "comfortable", "bed", "suite", "bathroom",
        "quiet", "spacious", "view",
    )),
    ("location", 4, (
        "location", "accessibility", "nearby", "transport", "central",
        "walking distance", "beach", "downtown",
    )),
    ("dining", 3, (
        "dining", "restaurant", "food", "breakfast", "meal", "dinner",
        "bar", "coffee", "buffet",
    )),
    ("amenities", 2, (
        "facilities", "amenities", "pool", "gym", "spa", "wifi", "wi-fi",
        "parking", "fitness",
    )),
    ("value", 2, (
        "value", "price", "worth", "affordable", "deal", "money",
    )),
)

CATEGORY_KEYWORDS: Tuple[str, ...] = tuple(
    keyword for _, _, keywords in CATEGORY_TABLE for keyword in keywords
)

# Keywords match at the start of a word so "room" hits "rooms" but not "mushroom"
_COMPILED_TABLE = tuple(
    (
        category,
        weight,
        tuple(re.compile(r"\b" + re.escape(keyword)) for keyword in keywords),
    )
    for category, weight, keywords in CATEGORY_TABLE
)


def identify_category(feature: str) -> Tuple[str, int]:
    """Return (category, priority weight) for a feature phrase."""
    text = feature.lower()
    for category, weight, patterns in _COMPILED_TABLE:
        if any(pattern.search(text) for pattern in patterns):
            return category, weight
    return GENERAL_CATEGORY, GENERAL_WEIGHT


def mentions_category_keyword(text: str) -> bool:
    """True if the text contains any category keyword."""
    lowered = text.lower()
    return any(
        pattern.search(lowered)
        for _, _, patterns in _COMPILED_TABLE
        for pattern in patterns
    )


class FeatureCategorizer:
    """
    Categorizes highlight phrases.

    Weights are reported in metadata only; the narrative keeps the
    guest's own ordering.
    """

    def categorize(self, features: Optional[Iterable[str]]) -> List[CategorizedFeature]:
        """
        Categorize features in request order.

        Args:
            features: Highlight phrases (None or empty allowed)

        Returns:
            One CategorizedFeature per phrase, same order
        """
        if not features:
            return []

        categorized = []
        for feature in features:
            category, weight = identify_category(feature)
            categorized.append(
                CategorizedFeature(
                    feature=feature,
                    category=category,
                    priority_weight=weight
                )
            )
        return categorized


def category_summary(categorized: Iterable[CategorizedFeature]) -> Dict[str, int]:
    """
    Sum priority weights per category.

    Categories appear in the order they were first seen.
    """
    summary: Dict[str, int] = OrderedDict()
    for item in categorized:
        summary[item.category] = summary.get(item.category, 0) + item.priority_weight
    return dict(summary)
