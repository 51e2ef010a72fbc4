"""
Review request model.

One guest submission: selected highlights, optional staff mention,
free-text comments and the target platform.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ReviewRequest:
    """
    Input for a single review generation.
    Comments are untrusted and sanitized later in the pipeline.
    """
    features: List[str] = field(default_factory=list)  # Ordered highlight phrases
    staff: str = ""  # Staff name, empty, or the opt-out sentinel
    comments: str = ""  # Raw guest text
    platform: str = ""  # Platform id (e.g., "booking")

    def __post_init__(self):
        # Normalize missing values so later stages never see None
        if self.features is None:
            self.features = []
        elif isinstance(self.features, str):
            self.features = [self.features]

        self.features = [
            str(feature).strip()
            for feature in self.features
            if feature is not None and str(feature).strip()
        ]
        self.staff = str(self.staff) if self.staff is not None else ""
        self.comments = str(self.comments) if self.comments is not None else ""
        self.platform = str(self.platform or "").strip().lower()

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ReviewRequest":
        """Create ReviewRequest from a request-shaped dict."""
        data = data or {}
        return cls(
            features=data.get("features"),
            staff=data.get("staff"),
            comments=data.get("comments"),
            platform=data.get("platform"),
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "features": list(self.features),
            "staff": self.staff,
            "comments": self.comments,
            "platform": self.platform,
        }
