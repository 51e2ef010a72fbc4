"""
Generation state model.

Per-invocation working state threaded through the pipeline stages.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class PipelineStage(Enum):
    """Stages a single request moves through, in order."""
    START = "start"
    VALIDATED = "validated"
    FEATURES_ANALYZED = "features_analyzed"
    STAFF_PROCESSED = "staff_processed"
    COMMENTS_INCORPORATED = "comments_incorporated"
    NARRATIVE_GENERATED = "narrative_generated"
    QUALITY_EVALUATED = "quality_evaluated"
    PLATFORM_OPTIMIZED = "platform_optimized"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class CategorizedFeature:
    """A highlight phrase with its category and priority weight."""
    feature: str
    category: str
    priority_weight: int

    def __post_init__(self):
        if self.priority_weight < 1:
            raise ValueError(
                f"Invalid priority_weight: {self.priority_weight}. Must be >= 1"
            )


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass
class GenerationState:
    """
    Mutable state for exactly one invocation.

    Created fresh by the orchestrator per request and discarded afterwards.
    Confidence and quality only ever move up and stay within [0, 1].
    """
    categorized_features: List[CategorizedFeature] = field(default_factory=list)
    staff_member: Optional[str] = None
    sanitized_comments: str = ""
    draft_review: str = ""
    confidence: float = 0.0
    quality_score: float = 0.0
    stage: PipelineStage = PipelineStage.START

    def add_confidence(self, amount: float) -> float:
        """Accumulate confidence, clamped to [0, 1]."""
        if amount < 0:
            raise ValueError(f"Confidence increment must be >= 0, got {amount}")
        self.confidence = _clamp(self.confidence + amount)
        return self.confidence

    def raise_quality_score(self, score: float) -> float:
        """Record a quality score; never lowers an earlier one."""
        self.quality_score = max(self.quality_score, _clamp(score))
        return self.quality_score

    def advance(self, stage: PipelineStage) -> None:
        self.stage = stage

    @property
    def features(self) -> List[str]:
        """Feature phrases in request order."""
        return [item.feature for item in self.categorized_features]
