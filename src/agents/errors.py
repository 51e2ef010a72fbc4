"""
Review generation errors.

Raised inside the pipeline and converted into failed ReviewResults by the
orchestrator. None of these cross the agent's public boundary.
"""


class ReviewGenerationError(Exception):
    """Base class for pipeline failures."""

    kind = "ReviewGenerationError"


class InsufficientInputError(ReviewGenerationError):
    """No features and no comments: nothing to write about."""

    kind = "InsufficientInput"

    def __init__(self, message: str = "Insufficient input for review generation"):
        super().__init__(message)


class InternalCompositionError(ReviewGenerationError):
    """Unexpected fault while categorizing, composing, scoring or optimizing."""

    kind = "InternalCompositionError"
