"""
Quality Evaluator.

Scores a composed review with simple, objective heuristics.
"""

import re
from typing import Dict, Optional, Sequence, Tuple

import config.settings as settings
from src.agents.categorization import mentions_category_keyword
from src.agents.composition import CLOSING_PHRASES

SENTIMENT_WORDS: Sequence[str] = (
    "excellent", "outstanding", "wonderful", "amazing", "perfect",
    "exceptional", "great", "fantastic", "impressive", "impressed",
    "beautiful", "memorable", "recommend",
)

_SENTIMENT_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(word) for word in SENTIMENT_WORDS) + r")",
    re.IGNORECASE
)


class QualityEvaluator:
    """
    Weighted checklist over the draft review.

    Each satisfied heuristic adds its weight; weights must sum to <= 1.
    """

    def __init__(
        self,
        weights: Optional[Dict[str, float]] = None,
        min_length: int = settings.QUALITY_MIN_LENGTH,
        max_length: int = settings.QUALITY_MAX_LENGTH,
        closing_phrases: Sequence[str] = CLOSING_PHRASES
    ):
        self.weights = dict(weights or settings.QUALITY_WEIGHTS)
        if any(w < 0 for w in self.weights.values()) or sum(self.weights.values()) > 1.0 + 1e-9:
            raise ValueError(f"Quality weights must be non-negative and sum to <= 1: {self.weights}")
        if not 0 < min_length < max_length:
            raise ValueError(f"Invalid length band: {min_length}-{max_length}")

        self.min_length = min_length
        self.max_length = max_length
        self.closing_phrases = tuple(closing_phrases)

    def evaluate(self, review: str) -> Tuple[float, Dict[str, bool]]:
        """
        Score a review.

        Args:
            review: Draft review text

        Returns:
            (score in [0, 1], heuristic name -> satisfied)
        """
        text = (review or "").strip()

        checks = {
            "has_content": len(text) > 0,
            "mentions_category": bool(text) and mentions_category_keyword(text),
            "has_sentiment": bool(_SENTIMENT_PATTERN.search(text)),
            "length_in_band": self.min_length <= len(text) <= self.max_length,
            "has_closing": self._has_closing(text),
        }

        score = sum(self.weights.get(name, 0.0) for name, passed in checks.items() if passed)
        return max(0.0, min(1.0, score)), checks

    def _has_closing(self, text: str) -> bool:
        return any(text.endswith(phrase) for phrase in self.closing_phrases)
