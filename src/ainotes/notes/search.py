"""In-memory note search."""

from .models import Note


def matches(note: Note, query: str) -> bool:
    """Check if a note's title, content or any tag contains query.

    Matching is case-insensitive.
    """
    needle = query.lower()
    return (
        needle in note.title.lower()
        or needle in note.content.lower()
        or any(needle in tag.lower() for tag in note.tags)
    )


def search_notes(notes: list[Note], query: str) -> list[Note]:
    """Filter notes by a case-insensitive substring query.

    Args:
        notes: Notes to search, order is preserved
        query: Search text; empty returns every note

    Returns:
        Matching notes
    """
    if not query:
        return list(notes)
    return [note for note in notes if matches(note, query)]


__all__ = ["matches", "search_notes"]
