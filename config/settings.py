"""
Configuration settings for ReviewCraft.

Centralized defaults for the review generation agent and the CLI.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Agent defaults
HOTEL_NAME = os.getenv("REVIEWCRAFT_HOTEL_NAME", "our hotel")
MAX_COMMENT_LENGTH = 200  # Advisory only, enforced by the guest-facing form

# Platform character limits
PLATFORM_LIMITS = {
    "booking": 4000,
    "tripadvisor": 20000,
    "google": 4096,
    "expedia": 4000,
}
DEFAULT_PLATFORM = "tripadvisor"  # Limit used for unrecognized platforms

# Staff sentinel offered by the guest form
STAFF_OPT_OUT = "Prefer not to mention"

# Confidence increments per pipeline stage
FEATURE_CONFIDENCE_INCREMENT = 0.2  # Per categorized feature
STAFF_CONFIDENCE_INCREMENT = 0.15
COMMENTS_CONFIDENCE_INCREMENT = 0.25

# Quality evaluation
QUALITY_WEIGHTS = {
    "has_content": 0.2,
    "mentions_category": 0.2,
    "has_sentiment": 0.2,
    "length_in_band": 0.2,
    "has_closing": 0.2,
}
QUALITY_MIN_LENGTH = 50
QUALITY_MAX_LENGTH = 2000

# Platform truncation
TRUNCATION_ELLIPSIS = "..."
TRUNCATION_BOUNDARY_RATIO = 0.7  # Boundaries earlier than this share of the limit are ignored

# Batch CSV columns
BATCH_FEATURE_SEPARATOR = ";"
BATCH_COLUMNS = ["features", "staff", "comments", "platform"]

# Logging
LOG_LEVEL = os.getenv("REVIEWCRAFT_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "reviewcraft.log"
