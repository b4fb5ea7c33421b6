"""Text analyzer facade.

Binds the four analysis operations to one backend and one set of limits.
"""

from dataclasses import dataclass, field
from typing import Any

from ..config import AnalysisConfig
from .backend import LinguisticBackend, get_default_backend
from .keywords import extract_keywords
from .sentiment import Sentiment, analyze_sentiment
from .summarizer import summarize
from .title import generate_title


@dataclass(frozen=True)
class NoteAnalysis:
    """Everything derived from a note body in one pass."""

    title: str
    summary: str
    keywords: list[str] = field(default_factory=list)
    sentiment: Sentiment = Sentiment.NEUTRAL

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "title": self.title,
            "summary": self.summary,
            "keywords": list(self.keywords),
            "sentiment": self.sentiment.value,
        }


class TextAnalyzer:
    """Runs summarization, keyword extraction, titling and sentiment.

    Holds only its backend and configuration; every call is independent,
    so one analyzer can be shared across threads.
    """

    def __init__(
        self,
        backend: LinguisticBackend | None = None,
        config: AnalysisConfig | None = None,
    ) -> None:
        """Initialize analyzer.

        Args:
            backend: Linguistic backend, defaults to the rule-based one
            config: Analysis limits and thresholds
        """
        self._backend = backend or get_default_backend()
        self._config = config or AnalysisConfig()

    @property
    def config(self) -> AnalysisConfig:
        """Get the analysis configuration."""
        return self._config

    def summarize(self, text: str, max_sentences: int | None = None) -> str:
        """Summarize text, keeping at most max_sentences sentences."""
        if max_sentences is None:
            max_sentences = self._config.max_sentences
        return summarize(text, max_sentences=max_sentences, backend=self._backend)

    def extract_keywords(self, text: str, limit: int | None = None) -> list[str]:
        """Extract up to limit keywords, most frequent first."""
        if limit is None:
            limit = self._config.keyword_limit
        return extract_keywords(text, limit=limit, backend=self._backend)

    def generate_title(self, text: str) -> str:
        """Generate a title from the first sentence."""
        return generate_title(
            text, max_length=self._config.title_max_length, backend=self._backend
        )

    def analyze_sentiment(self, text: str) -> Sentiment:
        """Classify text as positive, negative or neutral."""
        return analyze_sentiment(
            text,
            backend=self._backend,
            positive_threshold=self._config.positive_threshold,
            negative_threshold=self._config.negative_threshold,
        )

    def analyze(
        self,
        text: str,
        max_sentences: int | None = None,
        keyword_limit: int | None = None,
    ) -> NoteAnalysis:
        """Run all four analyses over text."""
        return NoteAnalysis(
            title=self.generate_title(text),
            summary=self.summarize(text, max_sentences),
            keywords=self.extract_keywords(text, keyword_limit),
            sentiment=self.analyze_sentiment(text),
        )


__all__ = ["NoteAnalysis", "TextAnalyzer"]
