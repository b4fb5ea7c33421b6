"""Notes module for AI Notes.

Provides the note model, search and the note service.
"""

from .errors import InvalidNoteIdError, MissingNoteIdError, NoteError
from .models import DEFAULT_TITLE, Note
from .search import search_notes
from .service import NoteRepository, NoteService

__all__ = [
    "DEFAULT_TITLE",
    "InvalidNoteIdError",
    "MissingNoteIdError",
    "Note",
    "NoteError",
    "NoteRepository",
    "NoteService",
    "search_notes",
]
