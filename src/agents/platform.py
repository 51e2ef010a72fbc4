"""
Platform Optimizer.

Fits the review into the target platform's character limit.
"""

import re

import config.settings as settings
from src.models.agent_config import AgentConfiguration

_SENTENCE_BOUNDARY = re.compile(r"[.!?](?=\s|$)")
_WORD_BOUNDARY = re.compile(r"\s")


class PlatformOptimizer:
    """
    Truncates reviews that exceed a platform limit.

    Preference order: last sentence end within the limit, last word
    boundary plus ellipsis, hard cut plus ellipsis. Boundaries earlier
    than boundary_ratio * limit are not used.
    """

    def __init__(
        self,
        config: AgentConfiguration,
        ellipsis: str = settings.TRUNCATION_ELLIPSIS,
        boundary_ratio: float = settings.TRUNCATION_BOUNDARY_RATIO
    ):
        self.config = config
        self.ellipsis = ellipsis
        self.boundary_ratio = boundary_ratio

    def limit_for(self, platform: str) -> int:
        return self.config.limit_for(platform)

    def optimize(self, review: str, platform: str) -> str:
        """
        Apply the platform limit.

        Args:
            review: Draft review
            platform: Platform id; unknown ids use the default platform limit

        Returns:
            Review no longer than the platform limit
        """
        return self.truncate(review, self.limit_for(platform))

    def truncate(self, text: str, max_length: int) -> str:
        if len(text) <= max_length:
            return text

        min_boundary = int(max_length * self.boundary_ratio)

        # Sentence end that fits entirely within the limit; scan one char past
        # the limit so the lookahead sees the real next character
        sentence_end = -1
        for match in _SENTENCE_BOUNDARY.finditer(text, 0, max_length + 1):
            if match.end() <= max_length:
                sentence_end = match.end()
        if sentence_end >= min_boundary and sentence_end > 0:
            return text[:sentence_end]

        if max_length <= len(self.ellipsis):
            return text[:max_length]

        window = text[:max_length - len(self.ellipsis)]

        word_end = -1
        for match in _WORD_BOUNDARY.finditer(window):
            word_end = match.start()
        if word_end >= min_boundary and word_end > 0:
            return window[:word_end].rstrip() + self.ellipsis

        return window + self.ellipsis
