"""Extractive summarization.

Selects the highest-scoring sentences of a text by word frequency and
returns them in their original order.
"""

import logging
from collections import Counter
from dataclasses import dataclass

from .backend import LinguisticBackend, get_default_backend

logger = logging.getLogger(__name__)

DEFAULT_MAX_SENTENCES = 3

# Words this short are ignored for scoring.
MIN_WORD_LENGTH = 4


@dataclass(frozen=True)
class ScoredSentence:
    """A sentence with its frequency score and original position."""

    text: str
    score: float
    index: int


def _scoring_words(sentence: str) -> list[str]:
    """Split on whitespace, case-fold and drop short words."""
    return [word for word in sentence.lower().split() if len(word) >= MIN_WORD_LENGTH]


def rank_sentences(sentences: list[str]) -> list[ScoredSentence]:
    """Score each sentence by the mean corpus frequency of its words.

    Args:
        sentences: Sentences in original order

    Returns:
        One ScoredSentence per input sentence, in input order
    """
    word_freq: Counter[str] = Counter()
    for sentence in sentences:
        word_freq.update(_scoring_words(sentence))

    ranked = []
    for index, sentence in enumerate(sentences):
        words = _scoring_words(sentence)
        total = sum(word_freq[word] for word in words)
        score = total / max(len(words), 1)
        ranked.append(ScoredSentence(text=sentence, score=score, index=index))
    return ranked


def summarize(
    text: str,
    max_sentences: int = DEFAULT_MAX_SENTENCES,
    backend: LinguisticBackend | None = None,
) -> str:
    """Build an extractive summary of text.

    Texts with no more than max_sentences sentences are returned
    unchanged. Longer texts are reduced to their max_sentences
    best-scoring sentences, joined by a single space in original order.

    Args:
        text: Text to summarize
        max_sentences: Maximum number of sentences to keep (>= 1)
        backend: Linguistic backend for sentence splitting

    Returns:
        The summary, or an empty string for empty input

    Raises:
        ValueError: If max_sentences is less than 1
    """
    if not text:
        return ""
    if max_sentences < 1:
        raise ValueError(f"max_sentences must be at least 1, got {max_sentences}")

    backend = backend or get_default_backend()
    sentences = [span.text for span in backend.sentences(text)]

    if len(sentences) <= max_sentences:
        return text

    ranked = rank_sentences(sentences)

    # sorted() is stable: equal scores keep their original order
    top = sorted(ranked, key=lambda s: s.score, reverse=True)[:max_sentences]
    top.sort(key=lambda s: s.index)

    logger.debug(
        "Summarized %d sentences down to %d (indexes %s)",
        len(sentences),
        len(top),
        [s.index for s in top],
    )
    return " ".join(s.text for s in top)


__all__ = [
    "DEFAULT_MAX_SENTENCES",
    "ScoredSentence",
    "rank_sentences",
    "summarize",
]
