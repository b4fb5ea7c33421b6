"""Keyword extraction.

Tallies nouns and verbs longer than three characters and returns the
most frequent ones.
"""

import logging
import unicodedata
from collections import Counter

from .backend import LinguisticBackend, PartOfSpeech, get_default_backend

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD_LIMIT = 5

KEYWORD_TAGS = frozenset({PartOfSpeech.NOUN, PartOfSpeech.VERB})
MIN_KEYWORD_LENGTH = 4


def extract_keywords(
    text: str,
    limit: int = DEFAULT_KEYWORD_LIMIT,
    backend: LinguisticBackend | None = None,
) -> list[str]:
    """Extract the most frequent noun and verb keywords from text.

    Ties keep the order in which the words first appear.

    Args:
        text: Text to analyze
        limit: Maximum number of keywords to return (>= 1)
        backend: Linguistic backend for part-of-speech tagging

    Returns:
        Lowercase keywords, most frequent first

    Raises:
        ValueError: If limit is less than 1
    """
    if not text:
        return []
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    backend = backend or get_default_backend()

    tally: Counter[str] = Counter()
    for word in backend.tag_words(text):
        if word.pos not in KEYWORD_TAGS:
            continue
        normalized = unicodedata.normalize("NFC", word.text).lower()
        if len(normalized) >= MIN_KEYWORD_LENGTH:
            tally[normalized] += 1

    # most_common() orders equal counts by first insertion
    keywords = [word for word, _ in tally.most_common(limit)]
    logger.debug(f"Extracted keywords {keywords} from {len(tally)} candidates")
    return keywords


__all__ = ["DEFAULT_KEYWORD_LIMIT", "extract_keywords"]
