"""Rule-based English linguistic backend.

Regex sentence and word splitting, a lexicon-and-suffix part-of-speech
tagger, and a polarity-lexicon sentiment scorer. Works offline and is
fully deterministic.
"""

import math
import re
import unicodedata
from collections.abc import Iterator

from . import lexicon
from .backend import PartOfSpeech, SentenceSpan, TaggedWord

# Combining diacritics, so decomposed (NFD) letters stay inside their word.
_MARKS = "\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"
_LETTERS = rf"(?:[^\W_][{_MARKS}]*)+"

# Terminal punctuation (plus closing quotes/brackets) before whitespace or end
# of text, or a bare line break.
_BOUNDARY = re.compile(r"[.!?…]+[\"'”’)\]]*(?=\s|$)|\n")
_LAST_WORD = re.compile(r"(\S+)$")
_NEXT_WORD = re.compile(r"[^\S\n]+[\"'“‘(\[]*([^\W_]+)")
_ACRONYM = re.compile(r"[A-Za-z](?:\.[A-Za-z])+")
_WORD = re.compile(rf"{_LETTERS}(?:['’-]{_LETTERS})*")

_CLOSERS = "\"'”’)]"
_OPENERS = "\"'“‘(["

# Capitalized words that usually open a new sentence rather than continue a name.
_SENTENCE_OPENERS = (
    lexicon.PRONOUNS
    | lexicon.DETERMINERS
    | lexicon.PREPOSITIONS
    | lexicon.CONJUNCTIONS
    | lexicon.ADVERBS
    | lexicon.INTERJECTIONS
    | lexicon.AUXILIARIES
)

# Sentiment normalization and modifier weights.
NORMALIZATION_ALPHA = 15.0
NEGATION_SCALAR = -0.74
NEGATION_WINDOW = 3
EXCLAMATION_BOOST = 0.292
MAX_EXCLAMATIONS = 4
BUT_BEFORE_WEIGHT = 0.5
BUT_AFTER_WEIGHT = 1.5


def _normalize(word: str) -> str:
    return unicodedata.normalize("NFC", word).lower().replace("’", "'")


def _has_suffix(word: str, suffixes: tuple[str, ...]) -> bool:
    return any(word.endswith(suffix) and len(word) >= len(suffix) + 3 for suffix in suffixes)


class RuleBasedBackend:
    """Offline English backend built on word lists and suffix rules.

    Sentences end at terminal punctuation followed by whitespace, or at a
    line break. Words are tagged one sentence at a time using the previous
    token as context. Sentiment follows the usual lexicon approach: word
    valences adjusted for intensifiers, negation and a contrastive "but",
    summed and squashed into [-1, 1].
    """

    def sentences(self, text: str) -> Iterator[SentenceSpan]:
        """Yield trimmed, non-empty sentences in original order."""
        start = 0
        for match in _BOUNDARY.finditer(text):
            if match.group() != "\n" and self._continues_sentence(text, start, match):
                continue
            span = self._trimmed_span(text, start, match.end())
            if span is not None:
                yield span
            start = match.end()

        span = self._trimmed_span(text, start, len(text))
        if span is not None:
            yield span

    def tag_words(self, text: str) -> Iterator[TaggedWord]:
        """Yield word tokens with part-of-speech tags."""
        for sentence in self.sentences(text):
            previous: str | None = None
            previous_pos: PartOfSpeech | None = None
            for match in _WORD.finditer(sentence.text):
                word = match.group()
                pos = self._tag(word, previous, previous_pos)
                yield TaggedWord(
                    text=word,
                    start=sentence.start + match.start(),
                    end=sentence.start + match.end(),
                    pos=pos,
                )
                previous = _normalize(word)
                previous_pos = pos

    def sentiment_score(self, text: str) -> float | None:
        """Score text in [-1.0, 1.0]; None when it contains no words."""
        tokens = [_normalize(match.group()) for match in _WORD.finditer(text)]
        if not tokens:
            return None

        valences: list[float] = []
        for index, token in enumerate(tokens):
            valence = lexicon.POLARITY.get(token, 0.0)
            if valence:
                valence = self._apply_modifiers(tokens, index, valence)
            valences.append(valence)

        if "but" in tokens:
            pivot = tokens.index("but")
            valences = [
                value * BUT_BEFORE_WEIGHT if i < pivot
                else value * BUT_AFTER_WEIGHT if i > pivot
                else value
                for i, value in enumerate(valences)
            ]

        total = sum(valences)
        if total:
            emphasis = min(text.count("!"), MAX_EXCLAMATIONS) * EXCLAMATION_BOOST
            total += emphasis if total > 0 else -emphasis

        return total / math.sqrt(total * total + NORMALIZATION_ALPHA)

    @staticmethod
    def _trimmed_span(text: str, start: int, end: int) -> SentenceSpan | None:
        segment = text[start:end]
        stripped = segment.strip()
        if not stripped:
            return None
        span_start = start + (len(segment) - len(segment.lstrip()))
        span_end = span_start + len(stripped)
        return SentenceSpan(text=stripped, start=span_start, end=span_end)

    @staticmethod
    def _continues_sentence(text: str, start: int, match: re.Match[str]) -> bool:
        """Check if a single period continues the sentence.

        A period never ends a sentence when the next word is lowercase, nor
        after a known abbreviation. After an initial ("J.") or a dotted
        acronym ("U.S.") it ends the sentence unless the next word looks
        like the rest of a name.
        """
        if match.group().rstrip(_CLOSERS) != ".":
            return False

        last = _LAST_WORD.search(text, start, match.start())
        if last is None:
            return False

        following = _NEXT_WORD.match(text, match.end())
        if following is not None and following.group(1)[0].islower():
            return True

        word = last.group(1).lstrip(_OPENERS)
        if word.lower() in lexicon.ABBREVIATIONS:
            return True

        is_initial = len(word) == 1 and word.isupper()
        if not (is_initial or _ACRONYM.fullmatch(word)):
            return False
        return following is not None and _normalize(following.group(1)) not in _SENTENCE_OPENERS

    def _tag(
        self,
        word: str,
        previous: str | None,
        previous_pos: PartOfSpeech | None,
    ) -> PartOfSpeech:
        lower = _normalize(word)

        if any(ch.isdigit() for ch in lower):
            return PartOfSpeech.NUMBER
        if lower in lexicon.PRONOUNS:
            return PartOfSpeech.PRONOUN
        if lower in lexicon.DETERMINERS:
            return PartOfSpeech.DETERMINER
        if lower in lexicon.AUXILIARIES:
            return PartOfSpeech.VERB
        if lower in lexicon.BASE_VERBS and (
            previous in lexicon.SUBJECT_PRONOUNS or previous in lexicon.VERB_CUES
        ):
            return PartOfSpeech.VERB
        if lower in lexicon.PREPOSITIONS:
            return PartOfSpeech.PREPOSITION
        if lower in lexicon.CONJUNCTIONS:
            return PartOfSpeech.CONJUNCTION
        if lower in lexicon.ADVERBS:
            return PartOfSpeech.ADVERB
        if lower in lexicon.INTERJECTIONS:
            return PartOfSpeech.OTHER

        # Capitalized mid-sentence: proper noun
        if previous is not None and word[0].isupper():
            return PartOfSpeech.NOUN

        if lower in lexicon.ADJECTIVES:
            return PartOfSpeech.ADJECTIVE
        if lower.endswith("ly") and len(lower) > 4 and lower not in lexicon.LY_NON_ADVERBS:
            return PartOfSpeech.ADVERB
        if _has_suffix(lower, lexicon.ADJECTIVE_SUFFIXES):
            return PartOfSpeech.ADJECTIVE

        if (
            previous in lexicon.DETERMINERS
            or previous in lexicon.POSSESSIVES
            or previous_pos is PartOfSpeech.ADJECTIVE
        ):
            return PartOfSpeech.NOUN
        if previous_pos is PartOfSpeech.PREPOSITION and previous != "to":
            return PartOfSpeech.NOUN

        if self._is_verb_form(lower, previous_pos):
            return PartOfSpeech.VERB
        if previous in lexicon.VERB_CUES and previous != "to" and not _has_suffix(
            lower, lexicon.NOUN_SUFFIXES
        ):
            return PartOfSpeech.VERB
        if _has_suffix(lower, lexicon.VERB_SUFFIXES):
            return PartOfSpeech.VERB

        return PartOfSpeech.NOUN

    @staticmethod
    def _is_verb_form(word: str, previous_pos: PartOfSpeech | None) -> bool:
        if word in lexicon.BASE_VERBS or word in lexicon.IRREGULAR_VERB_FORMS:
            return True
        if word.endswith("ing") and len(word) > 5 and word not in lexicon.ING_NOUNS:
            return True
        if word.endswith("ed") and len(word) > 4 and word not in lexicon.ED_NON_VERBS:
            return True

        # Third person -s forms only after a subject
        if word.endswith("s") and previous_pos in (PartOfSpeech.NOUN, PartOfSpeech.PRONOUN):
            stems = [word[:-1]]
            if word.endswith("es"):
                stems.append(word[:-2])
            if word.endswith("ies"):
                stems.append(word[:-3] + "y")
            return any(stem in lexicon.BASE_VERBS for stem in stems)

        return False

    @staticmethod
    def _apply_modifiers(tokens: list[str], index: int, valence: float) -> float:
        """Adjust a word's valence for a preceding intensifier or negation."""
        previous = tokens[index - 1] if index > 0 else None
        if previous in lexicon.INTENSIFIERS:
            scalar = lexicon.INTENSIFIERS[previous]
            valence += scalar if valence > 0 else -scalar

        window = tokens[max(0, index - NEGATION_WINDOW):index]
        if any(word in lexicon.NEGATIONS for word in window):
            valence *= NEGATION_SCALAR

        return valence


__all__ = ["RuleBasedBackend"]
