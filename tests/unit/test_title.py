"""Unit tests for title generation."""

import unicodedata

import pytest

from ainotes.analysis import DEFAULT_TITLE, generate_title


class TestGenerateTitle:
    """Tests for generate_title()."""

    def test_empty_text_gets_default_title(self) -> None:
        """Test that empty text is titled "New Note"."""
        assert generate_title("") == "New Note"
        assert DEFAULT_TITLE == "New Note"

    @pytest.mark.parametrize("text", ["   ", "\n\n", "\t \n"])
    def test_whitespace_gets_default_title(self, text: str) -> None:
        """Test that text without sentences gets the default title."""
        assert generate_title(text) == DEFAULT_TITLE

    def test_first_sentence_used(self) -> None:
        """Test that the title is the first sentence."""
        assert generate_title("Buy milk. Then pick up eggs.") == "Buy milk."

    def test_leading_whitespace_trimmed(self) -> None:
        """Test that surrounding whitespace is removed."""
        assert generate_title("  \n  Call the plumber!  Soon.") == "Call the plumber!"

    def test_first_line_ends_sentence(self) -> None:
        """Test that a line break ends the first sentence."""
        assert generate_title("Groceries\nmilk\neggs") == "Groceries"

    def test_abbreviation_does_not_split_title(self) -> None:
        """Test that "Dr." does not end the first sentence."""
        text = "Dr. Smith called today. He will call back."
        assert generate_title(text) == "Dr. Smith called today."

    def test_long_sentence_truncated(self) -> None:
        """Test that long sentences are cut and get an ellipsis."""
        text = "A" * 60
        assert generate_title(text) == "A" * 50 + "..."

    def test_exactly_max_length_not_truncated(self) -> None:
        """Test that a 50 character sentence is kept whole."""
        text = "B" * 50
        assert generate_title(text) == text

    def test_custom_max_length(self) -> None:
        """Test truncation at a custom length."""
        assert generate_title("Hello wonderful world.", max_length=10) == "Hello wond..."

    def test_title_never_empty(self) -> None:
        """Test that any input produces a non-empty title."""
        for text in ["", " ", "x", "...", "!"]:
            assert generate_title(text)

    def test_decomposed_accents_count_once(self) -> None:
        """Test that a 49 character NFD sentence is not truncated."""
        sentence = unicodedata.normalize(
            "NFD", "Café meeting about the crème brûlée menu, déjà vu"
        )
        assert generate_title(sentence) == sentence

    def test_truncation_keeps_accents_on_their_letters(self) -> None:
        """Test that a cut never separates a letter from its accent."""
        text = unicodedata.normalize("NFD", "é" * 60)
        assert generate_title(text) == unicodedata.normalize("NFD", "é" * 50) + "..."
