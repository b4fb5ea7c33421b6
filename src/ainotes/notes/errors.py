"""Error types for note persistence.

Raised by the note service and repositories for caller mistakes; store
connectivity failures surface as pymongo errors.
"""


class NoteError(Exception):
    """Base exception for note-related errors."""

    pass


class MissingNoteIdError(NoteError):
    """Raised when an operation needs a persisted note but id is None."""

    def __init__(self, message: str = "Note ID is missing") -> None:
        super().__init__(message)


class InvalidNoteIdError(NoteError):
    """Raised when a note ID is not a valid document ID."""

    def __init__(self, note_id: str) -> None:
        """Initialize error.

        Args:
            note_id: The rejected ID.
        """
        super().__init__(f"Invalid note ID: {note_id!r}")
        self.note_id = note_id


__all__ = [
    "InvalidNoteIdError",
    "MissingNoteIdError",
    "NoteError",
]
