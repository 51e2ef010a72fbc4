"""
Review Generation Orchestrator.

Sequences the review pipeline for one guest request and converts every
failure into a ReviewResult.
"""

import re
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple, Union

import config.settings as settings
from src.agents.categorization import FeatureCategorizer, category_summary
from src.agents.composition import NarrativeComposer, PhraseSelector
from src.agents.errors import (
    InsufficientInputError,
    InternalCompositionError,
    ReviewGenerationError,
)
from src.agents.platform import PlatformOptimizer
from src.agents.quality import QualityEvaluator
from src.agents.sanitization import CommentSanitizer
from src.agents.staff import StaffRecognitionProcessor
from src.agents.validation import InputValidator
from src.models.agent_config import AgentConfiguration
from src.models.generation_state import GenerationState, PipelineStage
from src.models.review_request import ReviewRequest
from src.models.review_result import ReviewResult
from src.utils.log_collaborator import AgentLogger
from src.utils.monitoring import REVIEW_GENERATED

_SENTENCE = re.compile(r"[.!?]+(?=\s|$)")


class ReviewGenerationAgent:
    """
    Rule-based review compositor.

    Pipeline per request:
    1. Validate → 2. Categorize features → 3. Staff recognition
    → 4. Sanitize comments → 5. Compose narrative → 6. Score quality
    → 7. Fit platform limit

    Components are read-only after construction; all per-request data
    lives in a GenerationState created inside generate(), so one agent
    can serve concurrent requests.
    """

    def __init__(
        self,
        config: Optional[AgentConfiguration] = None,
        logger=None,
        monitor=None,
        selector: Optional[PhraseSelector] = None
    ):
        """
        Initialize the agent.

        Args:
            config: Agent configuration (defaults from config.settings)
            logger: Logging collaborator with debug/info/warn/error(message, data)
            monitor: Optional business event sink with track(event, data)
            selector: Phrase selection strategy (first template by default)
        """
        self.config = config or AgentConfiguration.from_settings()
        self.logger = logger or AgentLogger()
        self.monitor = monitor

        self.validator = InputValidator()
        self.categorizer = FeatureCategorizer()
        self.staff_processor = StaffRecognitionProcessor()
        self.sanitizer = CommentSanitizer()
        self.composer = NarrativeComposer(self.config.hotel_name, selector=selector)
        self.quality_evaluator = QualityEvaluator()
        self.platform_optimizer = PlatformOptimizer(self.config)

    def generate(self, request: Union[ReviewRequest, dict, None]) -> ReviewResult:
        """
        Generate a review for one request.

        Never raises: insufficient input and internal faults come back as
        ReviewResult(success=False) with a fallback review.

        Args:
            request: ReviewRequest or a request-shaped dict

        Returns:
            ReviewResult
        """
        state = GenerationState()
        current_stage = PipelineStage.START

        try:
            if not isinstance(request, ReviewRequest):
                request = ReviewRequest.from_dict(request)

            self.logger.info("Processing review request", {
                "feature_count": len(request.features),
                "has_staff": bool(request.staff.strip()),
                "comment_length": len(request.comments),
                "platform": request.platform
            })

            workflow: List[Tuple[PipelineStage, Callable[[], None]]] = [
                (PipelineStage.VALIDATED, lambda: self._validate_input(request)),
                (PipelineStage.FEATURES_ANALYZED, lambda: self._analyze_features(request.features, state)),
                (PipelineStage.STAFF_PROCESSED, lambda: self._process_staff_recognition(request.staff, state)),
                (PipelineStage.COMMENTS_INCORPORATED, lambda: self._incorporate_comments(request.comments, state)),
                (PipelineStage.NARRATIVE_GENERATED, lambda: self._generate_narrative(state)),
                (PipelineStage.QUALITY_EVALUATED, lambda: self._evaluate_quality(state)),
                (PipelineStage.PLATFORM_OPTIMIZED, lambda: self._optimize_for_platform(request.platform, state)),
            ]

            for stage, step in workflow:
                current_stage = stage
                step()
                state.advance(stage)

            state.advance(PipelineStage.DONE)
            result = ReviewResult.succeeded(
                review=state.draft_review,
                confidence=state.confidence,
                quality_score=state.quality_score,
                metadata=self._build_metadata(request, state)
            )

        except InsufficientInputError as e:
            self.logger.warn(str(e), {"error_kind": e.kind})
            return self._failure(str(e), e.kind, current_stage, state)

        except ReviewGenerationError as e:
            self.logger.error("Review generation failed", {
                "error": str(e),
                "error_kind": e.kind,
                "stage": current_stage.value
            })
            return self._failure(str(e), e.kind, current_stage, state)

        except Exception as e:
            error = InternalCompositionError(f"{type(e).__name__}: {e}")
            self.logger.error("Review generation failed", {
                "error": str(error),
                "error_kind": error.kind,
                "stage": current_stage.value
            })
            return self._failure(str(error), error.kind, current_stage, state)

        self._track(REVIEW_GENERATED, {
            "platform": result.metadata["platform"],
            "feature_count": result.metadata["feature_count"],
            "quality_score": result.quality_score
        })
        return result

    def _validate_input(self, request: ReviewRequest) -> None:
        summary = self.validator.validate(request)
        self.logger.debug("Input validation passed", summary)

    def _analyze_features(self, features: List[str], state: GenerationState) -> None:
        state.categorized_features = self.categorizer.categorize(features)
        state.add_confidence(
            settings.FEATURE_CONFIDENCE_INCREMENT * len(state.categorized_features)
        )

        self.logger.debug("Features analyzed", {
            "categorized": [
                {"feature": f.feature, "category": f.category, "priority_weight": f.priority_weight}
                for f in state.categorized_features
            ],
            "confidence": state.confidence
        })

    def _process_staff_recognition(self, staff: str, state: GenerationState) -> None:
        state.staff_member = self.staff_processor.process(staff)
        if state.staff_member is None:
            return

        state.add_confidence(settings.STAFF_CONFIDENCE_INCREMENT)
        self.logger.debug("Staff recognition processed", {"staff_member": state.staff_member})

    def _incorporate_comments(self, comments: str, state: GenerationState) -> None:
        state.sanitized_comments = self.sanitizer.sanitize(comments)
        if not state.sanitized_comments:
            return

        state.add_confidence(settings.COMMENTS_CONFIDENCE_INCREMENT)
        self.logger.debug("Personal comments processed", {
            "original_length": len(comments),
            "sanitized_length": len(state.sanitized_comments)
        })

    def _generate_narrative(self, state: GenerationState) -> None:
        state.draft_review = self.composer.compose(
            features=state.features,
            staff_member=state.staff_member,
            comments=state.sanitized_comments
        )

        self.logger.info("Natural language review generated", {
            "length": len(state.draft_review),
            "confidence": state.confidence
        })

    def _evaluate_quality(self, state: GenerationState) -> None:
        score, checks = self.quality_evaluator.evaluate(state.draft_review)
        state.raise_quality_score(score)

        self.logger.debug("Quality evaluation completed", {
            "metrics": checks,
            "quality_score": state.quality_score
        })

    def _optimize_for_platform(self, platform: str, state: GenerationState) -> None:
        limit = self.platform_optimizer.limit_for(platform)
        original_length = len(state.draft_review)
        state.draft_review = self.platform_optimizer.truncate(state.draft_review, limit)

        self.logger.debug("Platform optimization applied", {
            "platform": platform,
            "limit": limit,
            "truncated": len(state.draft_review) < original_length
        })

    def _build_metadata(self, request: ReviewRequest, state: GenerationState) -> dict:
        review = state.draft_review
        return {
            "feature_count": len(state.categorized_features),
            "has_staff_mention": state.staff_member is not None,
            "has_comments": bool(state.sanitized_comments),
            "platform": request.platform or self.config.default_platform,
            "character_limit": self.platform_optimizer.limit_for(request.platform),
            "word_count": len(review.split()),
            "sentence_count": len(_SENTENCE.findall(review)),
            "categories": category_summary(state.categorized_features),
            "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        }

    def _failure(
        self,
        error: str,
        error_kind: str,
        stage: PipelineStage,
        state: GenerationState
    ) -> ReviewResult:
        state.advance(PipelineStage.FAILED)
        return ReviewResult.failed(
            error=error,
            error_kind=error_kind,
            fallback=self.composer.fallback(),
            failed_stage=stage.value,
            confidence=state.confidence,
            quality_score=state.quality_score
        )

    def _track(self, event: str, data: dict) -> None:
        if self.monitor is None:
            return
        try:
            self.monitor.track(event, data)
        except Exception as e:
            self.logger.warn("Monitoring event dropped", {"event": event, "error": str(e)})
