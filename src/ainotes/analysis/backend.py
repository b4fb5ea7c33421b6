"""Linguistic backend protocol and token types.

Defines the capability interface the analysis operations are built on:
sentence splitting, part-of-speech tagging and sentiment scoring.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class PartOfSpeech(Enum):
    """Lexical class assigned to a word token."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    DETERMINER = "determiner"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    NUMBER = "number"
    OTHER = "other"


@dataclass(frozen=True)
class SentenceSpan:
    """A trimmed sentence and its character offsets in the source text."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class TaggedWord:
    """A word token with its part-of-speech tag."""

    text: str
    start: int
    end: int
    pos: PartOfSpeech


class LinguisticBackend(Protocol):
    """Interface for tokenization, tagging and sentiment scoring.

    Implementations must be deterministic: identical input yields
    identical output. Each call returns a fresh iterator.
    """

    def sentences(self, text: str) -> Iterator[SentenceSpan]:
        """Yield non-empty, trimmed sentence spans in original order."""
        ...

    def tag_words(self, text: str) -> Iterator[TaggedWord]:
        """Yield word tokens (no whitespace or punctuation) with POS tags."""
        ...

    def sentiment_score(self, text: str) -> float | None:
        """Score text in [-1.0, 1.0], or None if no score is available."""
        ...


_default_backend: LinguisticBackend | None = None


def get_default_backend() -> LinguisticBackend:
    """Get the shared rule-based backend.

    The rule-based backend is stateless, so one instance serves all callers.
    """
    global _default_backend
    if _default_backend is None:
        from .rules import RuleBasedBackend

        _default_backend = RuleBasedBackend()
    return _default_backend


__all__ = [
    "LinguisticBackend",
    "PartOfSpeech",
    "SentenceSpan",
    "TaggedWord",
    "get_default_backend",
]
