"""
Agent configuration model.

Immutable settings shared by every invocation of the review agent.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import config.settings as settings


@dataclass(frozen=True)
class AgentConfiguration:
    """
    Read-only configuration for ReviewGenerationAgent.

    Safe to share between concurrent invocations: platform limits are
    frozen into a read-only mapping at construction.
    """
    hotel_name: str = settings.HOTEL_NAME
    max_comment_length: int = settings.MAX_COMMENT_LENGTH  # Advisory, not enforced by the agent
    platform_limits: Mapping[str, int] = field(
        default_factory=lambda: dict(settings.PLATFORM_LIMITS)
    )
    default_platform: str = settings.DEFAULT_PLATFORM

    def __post_init__(self):
        if not isinstance(self.hotel_name, str) or not self.hotel_name.strip():
            raise ValueError("hotel_name must be a non-empty string")

        if not isinstance(self.max_comment_length, int) or self.max_comment_length <= 0:
            raise ValueError(
                f"Invalid max_comment_length: {self.max_comment_length}. Must be > 0"
            )

        for platform, limit in self.platform_limits.items():
            if not isinstance(limit, int) or limit <= 0:
                raise ValueError(
                    f"Invalid limit for platform '{platform}': {limit}. Must be > 0"
                )

        # Frozen dataclass, so bypass __setattr__ to swap in a read-only view
        object.__setattr__(
            self,
            "platform_limits",
            MappingProxyType({k.lower(): v for k, v in self.platform_limits.items()})
        )
        object.__setattr__(self, "hotel_name", self.hotel_name.strip())

    def limit_for(self, platform: Optional[str]) -> int:
        """
        Character limit for a platform.

        Unrecognized platforms fall back to the default platform's limit,
        then to the smallest configured limit.
        """
        key = (platform or "").strip().lower()
        if key in self.platform_limits:
            return self.platform_limits[key]
        if self.default_platform in self.platform_limits:
            return self.platform_limits[self.default_platform]
        if self.platform_limits:
            return min(self.platform_limits.values())
        return settings.PLATFORM_LIMITS[settings.DEFAULT_PLATFORM]

    @classmethod
    def from_settings(cls) -> "AgentConfiguration":
        """Build the default configuration from config.settings."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> "AgentConfiguration":
        """
        Create configuration from a dict.

        Accepts camelCase (hotelName) or snake_case (hotel_name) keys.
        Omitted fields keep their defaults.
        """
        aliases = {
            "hotelName": "hotel_name",
            "maxCommentLength": "max_comment_length",
            "platformLimits": "platform_limits",
            "defaultPlatform": "default_platform",
        }
        kwargs = {}
        for key, value in (data or {}).items():
            name = aliases.get(key, key)
            if value is None:
                continue
            if name in ("hotel_name", "max_comment_length", "platform_limits", "default_platform"):
                kwargs[name] = value
        return cls(**kwargs)
