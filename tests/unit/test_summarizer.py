"""Unit tests for extractive summarization."""

import pytest

from ainotes.analysis import RuleBasedBackend, ScoredSentence, rank_sentences, summarize
from ainotes.analysis.summarizer import DEFAULT_MAX_SENTENCES


class TestSummarize:
    """Tests for summarize()."""

    def test_empty_text_returns_empty(self) -> None:
        """Test that empty text summarizes to an empty string."""
        assert summarize("") == ""

    def test_short_text_returned_verbatim(self) -> None:
        """Test that a single sentence is returned unchanged."""
        assert summarize("Short note.") == "Short note."

    def test_text_at_limit_returned_verbatim(self) -> None:
        """Test that spacing is preserved when nothing is dropped."""
        text = "One thing.  Two things.\nThree things."
        assert summarize(text, max_sentences=3) == text

    def test_whitespace_only_returned_verbatim(self) -> None:
        """Test that text with no sentences is returned as given."""
        assert summarize("   ") == "   "

    def test_keeps_best_sentences_in_original_order(self) -> None:
        """Test that the top sentences come back in document order."""
        text = (
            "The garden needs water. Birds sing. Cats sleep. "
            "Dogs bark. The garden grows."
        )
        summary = summarize(text, max_sentences=2)
        assert summary == "The garden needs water. The garden grows."

    def test_five_sentences_reduced_to_two(self) -> None:
        """Test that a five-sentence text keeps exactly two sentences."""
        text = (
            "Project kickoff happened today. Budget approval is pending. "
            "Project timeline looks tight. Lunch was pizza. "
            "Project risks were listed."
        )
        summary = summarize(text, max_sentences=2)
        sentences = list(RuleBasedBackend().sentences(summary))
        assert len(sentences) == 2
        # Order matches the source text
        assert text.index(sentences[0].text) < text.index(sentences[1].text)

    def test_equal_scores_prefer_earlier_sentences(self) -> None:
        """Test that ties are broken by original position."""
        text = (
            "The garden needs water. The garden needs sunlight. "
            "Cats sleep. Dogs bark. The garden grows."
        )
        summary = summarize(text, max_sentences=2)
        assert summary == "The garden needs water. The garden needs sunlight."

    def test_summary_joined_with_single_space(self) -> None:
        """Test that kept sentences are joined by one space."""
        text = "Alpha beta gamma.\n\nAlpha beta delta.\n\nZulu."
        assert summarize(text, max_sentences=2) == "Alpha beta gamma. Alpha beta delta."

    def test_default_max_sentences(self) -> None:
        """Test that three sentences are kept by default."""
        assert DEFAULT_MAX_SENTENCES == 3
        text = "First note here. Second note here. Third note here. Fourth one."
        summary = summarize(text)
        assert len(list(RuleBasedBackend().sentences(summary))) == 3

    @pytest.mark.parametrize("max_sentences", [0, -1])
    def test_invalid_max_sentences_raises(self, max_sentences: int) -> None:
        """Test that a limit below one is rejected."""
        with pytest.raises(ValueError, match="max_sentences"):
            summarize("One. Two. Three.", max_sentences=max_sentences)

    def test_invalid_max_sentences_allowed_for_empty_text(self) -> None:
        """Test that empty text short-circuits before validation."""
        assert summarize("", max_sentences=0) == ""

    def test_is_deterministic(self) -> None:
        """Test that repeated calls give the same summary."""
        text = "Plans for today. Plans for tomorrow. Weather is nice. Call mom later."
        assert summarize(text, max_sentences=2) == summarize(text, max_sentences=2)


class TestRankSentences:
    """Tests for rank_sentences()."""

    def test_scores_by_mean_word_frequency(self) -> None:
        """Test sentence scores are mean frequencies of long words."""
        ranked = rank_sentences(["garden needs water", "garden grows"])
        assert ranked == [
            ScoredSentence(text="garden needs water", score=(2 + 1 + 1) / 3, index=0),
            ScoredSentence(text="garden grows", score=(2 + 1) / 2, index=1),
        ]

    def test_short_words_ignored(self) -> None:
        """Test that words under four characters do not count."""
        ranked = rank_sentences(["a an the cat", "the dog"])
        assert [s.score for s in ranked] == [0.0, 0.0]

    def test_case_insensitive(self) -> None:
        """Test that word counting ignores case."""
        ranked = rank_sentences(["Garden", "garden"])
        assert [s.score for s in ranked] == [2.0, 2.0]

    def test_empty_list(self) -> None:
        """Test ranking no sentences."""
        assert rank_sentences([]) == []
