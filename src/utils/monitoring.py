"""
Monitoring collaborator.

Receives coarse business events (review_generated, review_copy_failed).
Has no influence on review generation.
"""

import logging
import threading
from collections import Counter
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

REVIEW_GENERATED = "review_generated"
REVIEW_COPY_FAILED = "review_copy_failed"


class EventMonitor:
    """Counts and logs business events. Thread-safe."""

    def __init__(self):
        self._counts = Counter()
        self._lock = threading.Lock()

    def track(self, event: str, data: Optional[Dict[str, Any]] = None) -> None:
        with self._lock:
            self._counts[event] += 1
        logger.info(f"Event {event}: {data or {}}")

    def count(self, event: str) -> int:
        with self._lock:
            return self._counts[event]

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)
