"""Three-way sentiment classification.

Scores the first paragraph of a note and maps the score onto
Positive / Negative / Neutral.
"""

import logging
from enum import Enum

from .backend import LinguisticBackend, get_default_backend

logger = logging.getLogger(__name__)

POSITIVE_THRESHOLD = 0.3
NEGATIVE_THRESHOLD = -0.3


class Sentiment(Enum):
    """Sentiment label of a note."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"

    @property
    def emoji(self) -> str:
        """Decorative emoji shown next to the label."""
        return _EMOJI[self]

    @property
    def display(self) -> str:
        """Label with its emoji, e.g. "Positive 😊"."""
        return f"{self.value} {self.emoji}"


_EMOJI: dict[Sentiment, str] = {
    Sentiment.POSITIVE: "😊",
    Sentiment.NEGATIVE: "😔",
    Sentiment.NEUTRAL: "😐",
}


def first_paragraph(text: str) -> str:
    """Get the text up to the first line break, ignoring leading whitespace."""
    return text.lstrip().split("\n", 1)[0].strip()


def classify_score(
    score: float | None,
    positive_threshold: float = POSITIVE_THRESHOLD,
    negative_threshold: float = NEGATIVE_THRESHOLD,
) -> Sentiment:
    """Map a sentiment score onto a label.

    Args:
        score: Score in [-1.0, 1.0], or None
        positive_threshold: Scores strictly above this are positive
        negative_threshold: Scores strictly below this are negative

    Returns:
        Sentiment label; None maps to NEUTRAL
    """
    if score is None:
        return Sentiment.NEUTRAL
    if score > positive_threshold:
        return Sentiment.POSITIVE
    if score < negative_threshold:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def analyze_sentiment(
    text: str,
    backend: LinguisticBackend | None = None,
    positive_threshold: float = POSITIVE_THRESHOLD,
    negative_threshold: float = NEGATIVE_THRESHOLD,
) -> Sentiment:
    """Classify the sentiment of text.

    Only the first paragraph is scored.

    Args:
        text: Text to classify
        backend: Linguistic backend providing the sentiment score
        positive_threshold: Scores strictly above this are positive
        negative_threshold: Scores strictly below this are negative

    Returns:
        Sentiment label; empty input is NEUTRAL
    """
    if not text:
        return Sentiment.NEUTRAL

    paragraph = first_paragraph(text)
    if not paragraph:
        return Sentiment.NEUTRAL

    backend = backend or get_default_backend()
    score = backend.sentiment_score(paragraph)
    sentiment = classify_score(score, positive_threshold, negative_threshold)
    logger.debug(f"Sentiment score {score} -> {sentiment.value}")
    return sentiment


__all__ = [
    "NEGATIVE_THRESHOLD",
    "POSITIVE_THRESHOLD",
    "Sentiment",
    "analyze_sentiment",
    "classify_score",
    "first_paragraph",
]
