"""
Comment Sanitizer.

Cleans untrusted guest comments before they are placed in a review.
"""

import re
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

# Comments like "www.hotel.com" look like URLs to bs4; they are still plain text
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

# Elements dropped together with their content
SCRIPT_LIKE_TAGS = ("script", "style", "iframe", "object", "embed", "noscript", "template")

_WHITESPACE = re.compile(r"\s+")
_RESIDUAL_TAG = re.compile(r"<[^<>]*>")
_ANGLE_BRACKETS = re.compile(r"[<>]")


class CommentSanitizer:
    """
    Strips markup and normalizes whitespace in guest comments.

    Does not enforce max_comment_length; only the platform limit is
    applied, on the final review.
    """

    def sanitize(self, comments: str) -> str:
        """
        Sanitize raw comments.

        Repeats the cleaning pass until the text stops changing, so entity
        encoded markup (e.g. "&lt;b&gt;") cannot survive and
        sanitize(sanitize(x)) == sanitize(x).

        Args:
            comments: Raw guest text (may be empty)

        Returns:
            Markup-free, whitespace-normalized text
        """
        if not comments or not comments.strip():
            return ""

        current = comments
        while True:
            cleaned = self._clean_once(current)
            # Every pass removes or keeps characters; stop at the fixed point
            if cleaned == current or len(cleaned) >= len(current):
                return cleaned
            current = cleaned

    def _clean_once(self, text: str) -> str:
        soup = BeautifulSoup(text, "html.parser")

        for element in soup.find_all(list(SCRIPT_LIKE_TAGS)):
            element.decompose()

        plain = soup.get_text(separator=" ")
        plain = _RESIDUAL_TAG.sub(" ", plain)
        plain = _ANGLE_BRACKETS.sub("", plain)
        return _WHITESPACE.sub(" ", plain).strip()
