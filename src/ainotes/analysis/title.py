"""Title generation from the first sentence of a note."""

import unicodedata

from .backend import LinguisticBackend, get_default_backend

DEFAULT_TITLE = "New Note"
DEFAULT_TITLE_LENGTH = 50
ELLIPSIS = "..."


def _characters(text: str) -> list[str]:
    """Split text into visible characters, keeping combining marks attached."""
    characters: list[str] = []
    for ch in text:
        if characters and unicodedata.combining(ch):
            characters[-1] += ch
        else:
            characters.append(ch)
    return characters


def generate_title(
    text: str,
    max_length: int = DEFAULT_TITLE_LENGTH,
    backend: LinguisticBackend | None = None,
) -> str:
    """Generate a title from the first sentence of text.

    Length is measured in visible characters, so an accented letter counts
    once whether it is stored composed or decomposed.

    Args:
        text: Note content
        max_length: Characters kept before the ellipsis is appended
        backend: Linguistic backend for sentence splitting

    Returns:
        The trimmed first sentence, truncated with "..." when longer than
        max_length, or "New Note" when there is nothing to use
    """
    if not text:
        return DEFAULT_TITLE

    backend = backend or get_default_backend()
    first = next(iter(backend.sentences(text)), None)
    if first is None:
        return DEFAULT_TITLE

    sentence = first.text.strip()
    if not sentence:
        return DEFAULT_TITLE

    characters = _characters(sentence)
    if len(characters) > max_length:
        return "".join(characters[:max_length]) + ELLIPSIS
    return sentence


__all__ = ["DEFAULT_TITLE", "DEFAULT_TITLE_LENGTH", "generate_title"]
