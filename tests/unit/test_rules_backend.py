"""Unit tests for the rule-based linguistic backend."""

import unicodedata

import pytest

from ainotes.analysis import (
    LinguisticBackend,
    PartOfSpeech,
    RuleBasedBackend,
    get_default_backend,
)


@pytest.fixture
def backend() -> RuleBasedBackend:
    """Create a rule-based backend."""
    return RuleBasedBackend()


def sentence_texts(backend: RuleBasedBackend, text: str) -> list[str]:
    """Split text and return the sentence strings."""
    return [span.text for span in backend.sentences(text)]


def tags(backend: RuleBasedBackend, text: str) -> dict[str, PartOfSpeech]:
    """Tag text and map each word to its part of speech."""
    return {word.text: word.pos for word in backend.tag_words(text)}


class TestDefaultBackend:
    """Tests for get_default_backend()."""

    def test_returns_shared_rule_based_backend(self) -> None:
        """Test that the default backend is a reused rule-based instance."""
        first = get_default_backend()
        assert isinstance(first, RuleBasedBackend)
        assert get_default_backend() is first

    def test_satisfies_protocol(self, backend: RuleBasedBackend) -> None:
        """Test that the rule-based backend can stand in for the protocol."""
        typed: LinguisticBackend = backend
        assert list(typed.sentences("One.")) != []


class TestSentenceSplitting:
    """Tests for RuleBasedBackend.sentences()."""

    def test_terminal_punctuation(self, backend: RuleBasedBackend) -> None:
        """Test splitting on period, question and exclamation marks."""
        assert sentence_texts(backend, "Hello world. How are you? Fine!") == [
            "Hello world.",
            "How are you?",
            "Fine!",
        ]

    def test_spans_point_into_text(self, backend: RuleBasedBackend) -> None:
        """Test that span offsets locate each sentence in the input."""
        text = "  First one.   Second one."
        for span in backend.sentences(text):
            assert text[span.start : span.end] == span.text

    def test_line_breaks_end_sentences(self, backend: RuleBasedBackend) -> None:
        """Test that each line is its own sentence."""
        assert sentence_texts(backend, "Shopping list\nmilk\n\neggs") == [
            "Shopping list",
            "milk",
            "eggs",
        ]

    def test_trailing_text_without_punctuation(self, backend: RuleBasedBackend) -> None:
        """Test that unterminated trailing text is a sentence."""
        assert sentence_texts(backend, "Done. Still going") == ["Done.", "Still going"]

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Dr. Smith arrived. He sat down.", ["Dr. Smith arrived.", "He sat down."]),
            ("Bring snacks, e.g. chips. Thanks.", ["Bring snacks, e.g. chips.", "Thanks."]),
            ("J. R. R. Tolkien wrote books.", ["J. R. R. Tolkien wrote books."]),
            ("Meet at 5 p.m. tomorrow.", ["Meet at 5 p.m. tomorrow."]),
        ],
    )
    def test_abbreviations_do_not_split(
        self, backend: RuleBasedBackend, text: str, expected: list[str]
    ) -> None:
        """Test that abbreviations and initials keep sentences whole."""
        assert sentence_texts(backend, text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            (
                "I moved to the U.S. last year. It was fun.",
                ["I moved to the U.S. last year.", "It was fun."],
            ),
            ("I moved to the U.S. It was fun.", ["I moved to the U.S.", "It was fun."]),
            ("Plan B. Then we go home.", ["Plan B.", "Then we go home."]),
            ("John F. Kennedy spoke first.", ["John F. Kennedy spoke first."]),
            ("Lunch at noon. then review.", ["Lunch at noon. then review."]),
        ],
    )
    def test_initials_and_acronyms(
        self, backend: RuleBasedBackend, text: str, expected: list[str]
    ) -> None:
        """Test that a period after an initial or acronym ends a sentence only before a new one."""
        assert sentence_texts(backend, text) == expected

    def test_decimal_numbers_do_not_split(self, backend: RuleBasedBackend) -> None:
        """Test that a period inside a number is not a boundary."""
        assert sentence_texts(backend, "It costs 3.50 today. Cheap.") == [
            "It costs 3.50 today.",
            "Cheap.",
        ]

    def test_ellipsis_and_quotes(self, backend: RuleBasedBackend) -> None:
        """Test repeated punctuation and closing quotes."""
        assert sentence_texts(backend, "Wait... what?") == ["Wait...", "what?"]
        assert sentence_texts(backend, 'She said "hi." Then left.') == [
            'She said "hi."',
            "Then left.",
        ]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n"])
    def test_blank_text_has_no_sentences(self, backend: RuleBasedBackend, text: str) -> None:
        """Test that blank text yields nothing."""
        assert sentence_texts(backend, text) == []


class TestTagging:
    """Tests for RuleBasedBackend.tag_words()."""

    def test_simple_sentence(self, backend: RuleBasedBackend) -> None:
        """Test tags for a typical to-do sentence."""
        assert tags(backend, "I need to buy milk.") == {
            "I": PartOfSpeech.PRONOUN,
            "need": PartOfSpeech.VERB,
            "to": PartOfSpeech.PREPOSITION,
            "buy": PartOfSpeech.VERB,
            "milk": PartOfSpeech.NOUN,
        }

    def test_determiner_noun_and_past_tense(self, backend: RuleBasedBackend) -> None:
        """Test nouns after determiners and irregular past forms."""
        assert tags(backend, "The meeting went well.") == {
            "The": PartOfSpeech.DETERMINER,
            "meeting": PartOfSpeech.NOUN,
            "went": PartOfSpeech.VERB,
            "well": PartOfSpeech.ADVERB,
        }

    def test_third_person_verb_after_noun(self, backend: RuleBasedBackend) -> None:
        """Test that "needs" after a noun is a verb."""
        tagged = tags(backend, "The project needs review.")
        assert tagged["project"] == PartOfSpeech.NOUN
        assert tagged["needs"] == PartOfSpeech.VERB
        assert tagged["review"] == PartOfSpeech.VERB

    def test_proper_noun_mid_sentence(self, backend: RuleBasedBackend) -> None:
        """Test that capitalized words inside a sentence are nouns."""
        assert tags(backend, "We flew to Paris.")["Paris"] == PartOfSpeech.NOUN

    def test_numbers_adjectives_adverbs(self, backend: RuleBasedBackend) -> None:
        """Test closed and suffix-based classes."""
        tagged = tags(backend, "She quickly wrote 42 wonderful songs.")
        assert tagged["quickly"] == PartOfSpeech.ADVERB
        assert tagged["42"] == PartOfSpeech.NUMBER
        assert tagged["wonderful"] == PartOfSpeech.ADJECTIVE
        assert tagged["songs"] == PartOfSpeech.NOUN

    def test_contractions_are_single_words(self, backend: RuleBasedBackend) -> None:
        """Test that apostrophes stay inside words."""
        words = [word.text for word in backend.tag_words("I don't know.")]
        assert words == ["I", "don't", "know"]

    def test_decomposed_accents_stay_in_word(self, backend: RuleBasedBackend) -> None:
        """Test that NFD combining marks do not split words."""
        text = unicodedata.normalize("NFD", "Le résumé est prêt.")
        words = [word.text for word in backend.tag_words(text)]
        assert words == unicodedata.normalize("NFD", "Le résumé est prêt").split()
        for word in backend.tag_words(text):
            assert text[word.start : word.end] == word.text

    def test_word_offsets(self, backend: RuleBasedBackend) -> None:
        """Test that word offsets locate each word in the input."""
        text = "First line.\n  Second, longer line!"
        for word in backend.tag_words(text):
            assert text[word.start : word.end] == word.text

    def test_punctuation_is_not_tagged(self, backend: RuleBasedBackend) -> None:
        """Test that punctuation marks are skipped."""
        assert list(backend.tag_words("... !!! ???")) == []
