"""Text analysis engine for AI Notes.

Derives a title, an extractive summary, keyword tags and a sentiment
label from note content. All operations are pure functions of their
input.
"""

from .analyzer import NoteAnalysis, TextAnalyzer
from .backend import (
    LinguisticBackend,
    PartOfSpeech,
    SentenceSpan,
    TaggedWord,
    get_default_backend,
)
from .keywords import extract_keywords
from .rules import RuleBasedBackend
from .sentiment import Sentiment, analyze_sentiment, classify_score
from .summarizer import ScoredSentence, rank_sentences, summarize
from .title import DEFAULT_TITLE, generate_title

__all__ = [
    "DEFAULT_TITLE",
    "LinguisticBackend",
    "NoteAnalysis",
    "PartOfSpeech",
    "RuleBasedBackend",
    "ScoredSentence",
    "SentenceSpan",
    "Sentiment",
    "TaggedWord",
    "TextAnalyzer",
    "analyze_sentiment",
    "classify_score",
    "extract_keywords",
    "generate_title",
    "get_default_backend",
    "rank_sentences",
    "summarize",
]
