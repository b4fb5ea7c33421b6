"""Live note feed.

Polls a user's notes and notifies subscribers with ordered snapshots
whenever the result changes.
"""

import logging
import threading
from collections.abc import Callable
from typing import Protocol

from pymongo.errors import PyMongoError

from ..notes.models import Note

logger = logging.getLogger(__name__)


class NoteSource(Protocol):
    """Anything that can list a user's notes, newest update first."""

    def find_by_user(self, user_id: str, limit: int | None = None) -> list[Note]:
        """Get a user's notes, most recently updated first."""
        ...


class NoteFeed:
    """Subscription to one user's notes, ordered by last update.

    Each refresh fetches a snapshot; subscribers are notified on the first
    snapshot and on every snapshot that differs from the previous one.
    Store failures are recorded in error_message and reported through
    on_error; they never stop the feed.
    """

    def __init__(
        self,
        source: NoteSource,
        user_id: str,
        poll_interval: float = 2.0,
        on_change: Callable[[list[Note]], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the feed.

        Args:
            source: Repository to poll.
            user_id: Owner whose notes are watched.
            poll_interval: Seconds between polls when running.
            on_change: Called with the new snapshot when it changes.
            on_error: Called with an error message when a poll fails.
        """
        self._source = source
        self._user_id = user_id
        self._poll_interval = poll_interval
        self._on_change = on_change
        self._on_error = on_error

        self._notes: list[Note] = []
        self._has_snapshot = False
        self._is_loading = False
        self._error_message: str | None = None

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def notes(self) -> list[Note]:
        """Get the latest snapshot."""
        with self._lock:
            return list(self._notes)

    @property
    def is_loading(self) -> bool:
        """Check if a fetch is in progress."""
        return self._is_loading

    @property
    def error_message(self) -> str | None:
        """Get the last fetch error, cleared by the next successful fetch."""
        return self._error_message

    @property
    def is_running(self) -> bool:
        """Check if the poll loop is running."""
        return self._thread is not None and self._thread.is_alive()

    def refresh(self) -> bool:
        """Fetch a snapshot and notify if it changed.

        Returns:
            True if subscribers were notified.
        """
        self._is_loading = True
        try:
            notes = self._source.find_by_user(self._user_id)
        except PyMongoError as e:
            self._error_message = str(e)
            logger.error("Error fetching notes for %s: %s", self._user_id, e)
            if self._on_error is not None:
                self._on_error(self._error_message)
            return False
        finally:
            self._is_loading = False

        self._error_message = None
        with self._lock:
            changed = not self._has_snapshot or notes != self._notes
            self._notes = notes
            self._has_snapshot = True

        if not changed:
            return False

        logger.debug("Fetched %d notes for %s", len(notes), self._user_id)
        if self._on_change is not None:
            self._on_change(list(notes))
        return True

    def start(self) -> None:
        """Start polling on a background thread."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._poll_loop, name="note-feed", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop polling and wait for the thread to exit."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=self._poll_interval + 2.0)
            self._thread = None

    def _poll_loop(self) -> None:
        """Background polling loop."""
        while not self._stop_event.is_set():
            try:
                self.refresh()
            except Exception:
                logger.exception("Note feed subscriber failed")
            self._stop_event.wait(self._poll_interval)

    def __enter__(self) -> "NoteFeed":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit."""
        self.stop()


__all__ = ["NoteFeed", "NoteSource"]
