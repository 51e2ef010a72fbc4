"""
Staff Recognition Processor.

Decides whether the review should thank a named staff member.
"""

from typing import Optional

import config.settings as settings


class StaffRecognitionProcessor:
    """Resolves the raw staff field to a name, or None when opted out."""

    def __init__(self, opt_out_sentinel: str = settings.STAFF_OPT_OUT):
        self.opt_out_sentinel = opt_out_sentinel

    def process(self, staff: Optional[str]) -> Optional[str]:
        """
        Args:
            staff: Raw staff field from the guest form

        Returns:
            Trimmed staff name, or None if empty or the opt-out sentinel
            (case-sensitive match)
        """
        name = (staff or "").strip()
        if not name or name == self.opt_out_sentinel:
            return None
        return name
