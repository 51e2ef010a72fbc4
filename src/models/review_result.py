"""
Review result model.

Outcome of one invocation. Failures are data, never exceptions.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class ReviewResult:
    """
    Result returned by ReviewGenerationAgent.generate().

    On success: review, confidence, quality_score and metadata are set.
    On failure: error, error_kind and fallback are set.
    """
    success: bool
    review: str = ""
    confidence: float = 0.0
    quality_score: float = 0.0
    metadata: Dict = field(default_factory=dict)
    error: Optional[str] = None
    error_kind: Optional[str] = None  # "InsufficientInput" or "InternalCompositionError"
    failed_stage: Optional[str] = None
    fallback: Optional[str] = None

    @classmethod
    def succeeded(
        cls,
        review: str,
        confidence: float,
        quality_score: float,
        metadata: Dict
    ) -> "ReviewResult":
        return cls(
            success=True,
            review=review,
            confidence=confidence,
            quality_score=quality_score,
            metadata=metadata
        )

    @classmethod
    def failed(
        cls,
        error: str,
        error_kind: str,
        fallback: str,
        failed_stage: Optional[str] = None,
        confidence: float = 0.0,
        quality_score: float = 0.0
    ) -> "ReviewResult":
        return cls(
            success=False,
            error=error,
            error_kind=error_kind,
            fallback=fallback,
            failed_stage=failed_stage,
            confidence=confidence,
            quality_score=quality_score
        )

    @property
    def text(self) -> str:
        """Displayable text: the review, or the fallback on failure."""
        return self.review if self.success else (self.fallback or "")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        if self.success:
            return {
                "success": True,
                "review": self.review,
                "confidence": self.confidence,
                "quality_score": self.quality_score,
                "metadata": dict(self.metadata),
            }
        return {
            "success": False,
            "error": self.error,
            "error_kind": self.error_kind,
            "failed_stage": self.failed_stage,
            "fallback": self.fallback,
            "confidence": self.confidence,
            "quality_score": self.quality_score,
        }
