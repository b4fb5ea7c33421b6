"""Unit tests for the TextAnalyzer facade."""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from ainotes.analysis import NoteAnalysis, Sentiment, TextAnalyzer
from ainotes.config import AnalysisConfig

LONG_TEXT = (
    "The garden needs water. Birds sing. Cats sleep. "
    "Dogs bark. The garden grows."
)


@pytest.fixture
def analyzer() -> TextAnalyzer:
    """Create an analyzer with default limits."""
    return TextAnalyzer()


class TestTextAnalyzer:
    """Tests for TextAnalyzer operations."""

    def test_defaults_come_from_config(self, analyzer: TextAnalyzer) -> None:
        """Test that the default configuration is used."""
        assert analyzer.config == AnalysisConfig()
        assert analyzer.config.max_sentences == 3
        assert analyzer.config.keyword_limit == 5

    def test_summarize_uses_configured_limit(self) -> None:
        """Test that summaries follow config.max_sentences."""
        analyzer = TextAnalyzer(config=AnalysisConfig(max_sentences=2))
        assert analyzer.summarize(LONG_TEXT) == "The garden needs water. The garden grows."

    def test_summarize_explicit_limit_wins(self) -> None:
        """Test that an explicit limit overrides config."""
        analyzer = TextAnalyzer(config=AnalysisConfig(max_sentences=2))
        assert analyzer.summarize(LONG_TEXT, max_sentences=5) == LONG_TEXT

    def test_keyword_limit_from_config(self) -> None:
        """Test that keyword count follows config.keyword_limit."""
        analyzer = TextAnalyzer(config=AnalysisConfig(keyword_limit=1))
        assert analyzer.extract_keywords("The project needs review.") == ["project"]

    def test_title_length_from_config(self) -> None:
        """Test that titles follow config.title_max_length."""
        analyzer = TextAnalyzer(config=AnalysisConfig(title_max_length=5))
        assert analyzer.generate_title("Groceries for the week.") == "Groce..."

    def test_sentiment_thresholds_from_config(self) -> None:
        """Test that sentiment thresholds follow config."""
        strict = TextAnalyzer(config=AnalysisConfig(positive_threshold=0.9))
        assert strict.analyze_sentiment("I love this!") == Sentiment.NEUTRAL

    def test_invalid_limits_raise(self, analyzer: TextAnalyzer) -> None:
        """Test that limits below one are rejected."""
        with pytest.raises(ValueError):
            analyzer.summarize(LONG_TEXT, max_sentences=0)
        with pytest.raises(ValueError):
            analyzer.extract_keywords(LONG_TEXT, limit=0)


class TestAnalyze:
    """Tests for TextAnalyzer.analyze()."""

    def test_empty_text_defaults(self, analyzer: TextAnalyzer) -> None:
        """Test that empty text gets every default."""
        assert analyzer.analyze("") == NoteAnalysis(
            title="New Note",
            summary="",
            keywords=[],
            sentiment=Sentiment.NEUTRAL,
        )

    def test_full_analysis(self, analyzer: TextAnalyzer) -> None:
        """Test that all four results are produced together."""
        text = "Great progress on the project today! The project needs review."
        result = analyzer.analyze(text)

        assert result.title == "Great progress on the project today!"
        assert result.summary == text
        assert result.keywords[0] == "project"
        assert result.sentiment == Sentiment.POSITIVE

    def test_to_dict_is_json_ready(self, analyzer: TextAnalyzer) -> None:
        """Test dictionary conversion for JSON output."""
        data = analyzer.analyze("I love this!").to_dict()
        assert data["sentiment"] == "Positive"
        assert set(data) == {"title", "summary", "keywords", "sentiment"}
        assert json.loads(json.dumps(data)) == data

    def test_shared_across_threads(self, analyzer: TextAnalyzer) -> None:
        """Test that concurrent calls give the same results."""
        expected = analyzer.analyze(LONG_TEXT)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(analyzer.analyze, [LONG_TEXT] * 8))
        assert all(result == expected for result in results)
