"""
Narrative Composer.

Builds the review prose from categorized features, staff recognition,
sanitized comments and a closing phrase.
"""

import random
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

OPENING_TEMPLATE = "I had a wonderful stay at {hotel_name}."

STAFF_TEMPLATES: Sequence[str] = (
    "Special thanks to {name} for exceptional service.",
    "{name} went above and beyond to make our stay memorable.",
    "We were particularly impressed by {name}'s professionalism and helpfulness.",
    "{name} provided outstanding customer service throughout our stay.",
    "{name}'s attention to detail and warm hospitality stood out.",
)

CLOSING_PHRASES: Sequence[str] = (
    "Highly recommend!",
    "Will definitely return!",
    "Exceeded expectations!",
    "Five stars!",
    "Outstanding experience overall!",
    "Perfect for our stay!",
    "Couldn't ask for more!",
    "Absolutely wonderful!",
)

FALLBACK_TEMPLATE = "I had a wonderful stay at {hotel_name}. Highly recommend!"

_SENTENCE_END = re.compile(r"[.!?]$")
_WHITESPACE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([.,!?;:])")


class PhraseSelector(ABC):
    """
    Strategy for picking one phrase out of a template set.

    Implementations must be deterministic for identical arguments and
    hold no per-call mutable state, so one selector can serve concurrent
    invocations.
    """

    name: str = "base_selector"

    @abstractmethod
    def select(self, options: Sequence[str], context: str = "") -> str:
        """
        Args:
            options: Non-empty ordered template set
            context: Request-derived text used by varied strategies

        Returns:
            One element of options
        """
        raise NotImplementedError

    def __repr__(self):
        return f"<PhraseSelector: {self.name}>"


class FirstPhraseSelector(PhraseSelector):
    """Always the first template. Default, keeps output reproducible."""

    name = "first"

    def select(self, options: Sequence[str], context: str = "") -> str:
        return options[0]


class IndexedPhraseSelector(PhraseSelector):
    """Fixed index into every template set, wrapping around."""

    name = "indexed"

    def __init__(self, index: int):
        if index < 0:
            raise ValueError(f"Invalid index: {index}. Must be >= 0")
        self.index = index

    def select(self, options: Sequence[str], context: str = "") -> str:
        return options[self.index % len(options)]


class SeededPhraseSelector(PhraseSelector):
    """
    Varied selection that is reproducible per (seed, context).

    A fresh Random is built per call so no generator state is shared
    between invocations.
    """

    name = "seeded"

    def __init__(self, seed: int):
        self.seed = seed

    def select(self, options: Sequence[str], context: str = "") -> str:
        rng = random.Random(f"{self.seed}:{context}")
        return options[rng.randrange(len(options))]


def polish(review: str) -> str:
    """Collapse whitespace, drop spaces before punctuation, trim."""
    text = _WHITESPACE.sub(" ", review)
    text = _SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
    return text.strip()


def as_sentence(text: str) -> str:
    """Terminate text with a period unless it already ends a sentence."""
    text = text.strip()
    if not text or _SENTENCE_END.search(text):
        return text
    return text + "."


class NarrativeComposer:
    """
    Composes the draft review.

    Clauses, in order: opening, features, staff, comments, closing.
    Features keep the guest's order.
    """

    def __init__(self, hotel_name: str, selector: Optional[PhraseSelector] = None):
        self.hotel_name = hotel_name
        self.selector = selector or FirstPhraseSelector()

    def compose(
        self,
        features: List[str],
        staff_member: Optional[str],
        comments: str
    ) -> str:
        """
        Build the polished review text.

        Args:
            features: Feature phrases in request order
            staff_member: Name to thank, or None
            comments: Sanitized comments (may be empty)

        Returns:
            Polished review
        """
        clauses = [self.opening()]

        if features:
            clauses.append(self.feature_narrative(features))

        if staff_member:
            clauses.append(self.staff_recognition(staff_member))

        if comments:
            clauses.append(as_sentence(comments))

        clauses.append(self.closing(context="|".join([self.hotel_name] + list(features))))

        return polish(" ".join(clauses))

    def opening(self) -> str:
        return OPENING_TEMPLATE.format(hotel_name=self.hotel_name)

    def feature_narrative(self, features: List[str]) -> str:
        if not features:
            return ""
        if len(features) == 1:
            return f"The {features[0]} was exceptional."
        if len(features) == 2:
            return f"The {features[0]} and {features[1]} were outstanding."

        *others, last = features
        return (
            f"The {', '.join(others)} were all excellent, "
            f"and the {last} was particularly impressive."
        )

    def staff_recognition(self, staff_member: str) -> str:
        template = self.selector.select(STAFF_TEMPLATES, context=staff_member)
        return template.format(name=staff_member)

    def closing(self, context: str = "") -> str:
        return self.selector.select(CLOSING_PHRASES, context=context)

    def fallback(self) -> str:
        """Minimal review built from the hotel name alone."""
        return FALLBACK_TEMPLATE.format(hotel_name=self.hotel_name)
