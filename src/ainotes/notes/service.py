"""Note service for capturing, enriching and persisting notes.

Runs the text analyzer over note content and hands the results to the
document store.
"""

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from ..analysis import Sentiment, TextAnalyzer
from .errors import MissingNoteIdError
from .models import DEFAULT_TITLE, Note
from .search import search_notes

if TYPE_CHECKING:
    from ..stt.dictation import DictationSession

logger = logging.getLogger(__name__)


class NoteRepository(Protocol):
    """Protocol for note persistence."""

    def create(self, note: Note) -> str:
        """Insert note and return its ID."""
        ...

    def update(self, note: Note) -> None:
        """Write an existing note."""
        ...

    def delete(self, note_id: str) -> bool:
        """Delete a note, returning True if it existed."""
        ...

    def find_by_user(self, user_id: str, limit: int | None = None) -> list[Note]:
        """Get a user's notes, most recently updated first."""
        ...


class NoteService:
    """Service for creating, enriching and querying notes.

    Handles title/summary/tag generation and persistence for one user.
    """

    def __init__(
        self,
        analyzer: TextAnalyzer | None = None,
        repository: NoteRepository | None = None,
        user_id: str = "demo_user",
        auto_summarize: bool = True,
    ) -> None:
        """Initialize note service.

        Args:
            analyzer: Text analyzer for derived fields
            repository: Optional repository for persistence
            user_id: Owner of notes created by this service
            auto_summarize: Generate a summary when a note is created
        """
        self._analyzer = analyzer or TextAnalyzer()
        self._repository = repository
        self._user_id = user_id
        self._auto_summarize = auto_summarize

    @property
    def user_id(self) -> str:
        """Get the owning user ID."""
        return self._user_id

    @property
    def analyzer(self) -> TextAnalyzer:
        """Get the text analyzer."""
        return self._analyzer

    def create_note(
        self,
        content: str,
        is_recorded: bool = False,
        audio_url: str | None = None,
    ) -> Note:
        """Create a note with generated title, summary and tags.

        Args:
            content: Note body (typed text or final transcript)
            is_recorded: True if the content came from dictation
            audio_url: Optional reference to recorded audio

        Returns:
            The new note, with id set when a repository is configured
        """
        note = Note(
            title=self._analyzer.generate_title(content),
            content=content,
            summary=self._analyzer.summarize(content) if self._auto_summarize else "",
            is_recorded=is_recorded,
            audio_url=audio_url,
            tags=self._analyzer.extract_keywords(content),
        )
        self._insert(note)

        logger.info(
            f"Created note: title={note.title!r}, tags={note.tags}, "
            f"recorded={is_recorded}, id={note.id}"
        )
        return note

    def capture_dictation(self, session: "DictationSession") -> Note | None:
        """Create a recorded note from a finished dictation session.

        Args:
            session: Dictation session holding the transcript

        Returns:
            The new note, or None if the transcript is empty
        """
        transcript = session.transcript
        if not transcript.strip():
            logger.debug("Empty transcript, nothing to save")
            return None

        note = self.create_note(transcript, is_recorded=True)
        session.reset()
        return note

    def save(self, note: Note) -> Note:
        """Create or update a note.

        A missing or default title is regenerated from the content first.

        Args:
            note: Note to save

        Returns:
            The same note, with id and timestamps updated
        """
        if not note.title or note.title == DEFAULT_TITLE:
            note.title = self._analyzer.generate_title(note.content)

        if note.id is None:
            self._insert(note)
            return note

        note.updated_at = datetime.now(UTC)
        if self._repository is None:
            logger.warning("No repository configured, note update not persisted")
            return note

        self._repository.update(note)
        logger.info(f"Updated note {note.id}")
        return note

    def delete(self, note: Note) -> bool:
        """Delete a persisted note.

        Args:
            note: Note to delete

        Returns:
            True if the note was deleted

        Raises:
            MissingNoteIdError: If the note was never persisted
        """
        if note.id is None:
            raise MissingNoteIdError()

        if self._repository is None:
            logger.warning("No repository configured for note deletion")
            return False

        deleted = self._repository.delete(note.id)
        logger.info(f"Deleted note {note.id}: {deleted}")
        return deleted

    def list_notes(self, limit: int | None = None) -> list[Note]:
        """Get this user's notes, most recently updated first."""
        if self._repository is None:
            logger.warning("No repository configured for note queries")
            return []
        return self._repository.find_by_user(self._user_id, limit)

    def search(self, query: str) -> list[Note]:
        """Search this user's notes by title, content or tag."""
        return search_notes(self.list_notes(), query)

    def generate_summary(self, note: Note) -> str:
        """Regenerate and store the note's summary."""
        note.summary = self._analyzer.summarize(note.content)
        return note.summary

    def summarize_in_background(
        self,
        note: Note,
        on_complete: Callable[[str], None],
    ) -> threading.Thread:
        """Summarize a note's content on a background thread.

        The note itself is not modified; on_complete receives the summary
        and decides what to do with it.

        Args:
            note: Note whose content to summarize
            on_complete: Called with the summary from the worker thread

        Returns:
            The started worker thread
        """
        content = note.content

        def worker() -> None:
            on_complete(self._analyzer.summarize(content))

        thread = threading.Thread(target=worker, name="note-summarizer", daemon=True)
        thread.start()
        return thread

    def suggest_keywords(self, note: Note) -> list[str]:
        """Extract keywords from the note's content without storing them."""
        return self._analyzer.extract_keywords(note.content)

    def analyze_sentiment(self, note: Note) -> Sentiment:
        """Classify the sentiment of the note's content."""
        return self._analyzer.analyze_sentiment(note.content)

    @staticmethod
    def add_tag(note: Note, tag: str) -> None:
        """Append a tag; blank tags are ignored."""
        if tag.strip():
            note.tags.append(tag)

    @staticmethod
    def remove_tag(note: Note, tag: str) -> None:
        """Remove every occurrence of a tag."""
        note.tags[:] = [existing for existing in note.tags if existing != tag]

    def _insert(self, note: Note) -> None:
        """Stamp owner and timestamps, then persist a new note."""
        now = datetime.now(UTC)
        note.user_id = self._user_id
        note.created_at = now
        note.updated_at = now

        if self._repository is None:
            logger.debug("No repository configured, note kept in memory")
            return

        note.id = self._repository.create(note)


__all__ = ["NoteRepository", "NoteService"]
