"""
Input Validator.

Rejects requests that carry no substance to write a review from.
"""

from typing import Dict

from src.agents.errors import InsufficientInputError
from src.models.review_request import ReviewRequest


class InputValidator:
    """
    Checks a request has at least one feature or non-blank comments.
    Staff mentions alone are not enough.
    """

    def validate(self, request: ReviewRequest) -> Dict[str, bool]:
        """
        Validate a request.

        Args:
            request: Incoming review request

        Returns:
            Summary flags for logging

        Raises:
            InsufficientInputError: If there are no features and no comments
        """
        summary = {
            "has_features": len(request.features) > 0,
            "has_comments": len(request.comments.strip()) > 0,
            "has_staff": len(request.staff.strip()) > 0,
        }

        if not summary["has_features"] and not summary["has_comments"]:
            raise InsufficientInputError()

        return summary
