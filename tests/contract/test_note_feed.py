"""Contract tests for the live note feed.

Drives NoteFeed against a mongomock-backed repository.
"""

import threading
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest
from mongomock import MongoClient
from pymongo.errors import AutoReconnect

from ainotes.notes import Note
from ainotes.storage import NoteFeed, NoteRepository

BASE_TIME = datetime(2024, 3, 1, 9, 0, 0, tzinfo=UTC)


@pytest.fixture
def repository() -> NoteRepository:
    """Create NoteRepository with mock database."""
    return NoteRepository(MongoClient()["ainotes_test"]["notes"])


def add_note(repository: NoteRepository, title: str, minutes: int = 0, user_id: str = "alice") -> Note:
    """Store a note and return it with its ID."""
    stamp = BASE_TIME + timedelta(minutes=minutes)
    note = Note(title=title, content=title, user_id=user_id, created_at=stamp, updated_at=stamp)
    note.id = repository.create(note)
    return note


class TestNoteFeedRefresh:
    """Contract tests for NoteFeed.refresh()."""

    def test_first_snapshot_notifies(self, repository: NoteRepository) -> None:
        """Test that subscribers get the initial snapshot, even when empty."""
        snapshots: list[list[Note]] = []
        feed = NoteFeed(repository, "alice", on_change=snapshots.append)

        assert feed.refresh() is True
        assert snapshots == [[]]

    def test_snapshot_ordered_by_update(self, repository: NoteRepository) -> None:
        """Test that snapshots list the newest update first."""
        add_note(repository, "Old", minutes=0)
        add_note(repository, "New", minutes=5)
        feed = NoteFeed(repository, "alice")

        feed.refresh()

        assert [note.title for note in feed.notes] == ["New", "Old"]

    def test_unchanged_snapshot_not_notified(self, repository: NoteRepository) -> None:
        """Test that identical snapshots are not delivered twice."""
        add_note(repository, "Only")
        on_change = MagicMock()
        feed = NoteFeed(repository, "alice", on_change=on_change)

        assert feed.refresh() is True
        assert feed.refresh() is False
        on_change.assert_called_once()

    def test_insert_update_delete_notify(self, repository: NoteRepository) -> None:
        """Test that every kind of change produces a snapshot."""
        snapshots: list[list[str]] = []
        feed = NoteFeed(
            repository,
            "alice",
            on_change=lambda notes: snapshots.append([note.title for note in notes]),
        )
        feed.refresh()

        note = add_note(repository, "Draft")
        feed.refresh()

        note.title = "Final"
        note.updated_at = BASE_TIME + timedelta(minutes=1)
        repository.update(note)
        feed.refresh()

        repository.delete(note.id)
        feed.refresh()

        assert snapshots == [[], ["Draft"], ["Final"], []]

    def test_other_users_ignored(self, repository: NoteRepository) -> None:
        """Test that the feed only sees its user's notes."""
        add_note(repository, "Mine")
        feed = NoteFeed(repository, "alice")
        feed.refresh()

        on_change = MagicMock()
        feed._on_change = on_change
        add_note(repository, "Theirs", user_id="bob")

        assert feed.refresh() is False
        on_change.assert_not_called()
        assert [note.title for note in feed.notes] == ["Mine"]

    def test_store_error_reported(self) -> None:
        """Test that store failures set error_message and keep the last snapshot."""
        source = MagicMock()
        source.find_by_user.return_value = [Note(title="Cached")]
        errors: list[str] = []
        feed = NoteFeed(source, "alice", on_error=errors.append)
        feed.refresh()

        source.find_by_user.side_effect = AutoReconnect("connection reset")
        assert feed.refresh() is False

        assert feed.error_message == "connection reset"
        assert errors == ["connection reset"]
        assert [note.title for note in feed.notes] == ["Cached"]
        assert feed.is_loading is False

    def test_error_cleared_on_success(self) -> None:
        """Test that a successful poll clears the error."""
        source = MagicMock()
        source.find_by_user.side_effect = [AutoReconnect("down"), []]
        feed = NoteFeed(source, "alice")

        feed.refresh()
        assert feed.error_message == "down"

        feed.refresh()
        assert feed.error_message is None

    def test_notes_is_a_copy(self, repository: NoteRepository) -> None:
        """Test that callers cannot modify the feed's snapshot."""
        add_note(repository, "Only")
        feed = NoteFeed(repository, "alice")
        feed.refresh()

        feed.notes.clear()
        assert len(feed.notes) == 1


class TestNoteFeedPolling:
    """Contract tests for the background poll loop."""

    def test_start_delivers_changes(self, repository: NoteRepository) -> None:
        """Test that a running feed picks up new notes."""
        changed = threading.Event()
        snapshots: list[list[str]] = []

        def on_change(notes: list[Note]) -> None:
            snapshots.append([note.title for note in notes])
            if notes:
                changed.set()

        feed = NoteFeed(repository, "alice", poll_interval=0.01, on_change=on_change)
        with feed:
            assert feed.is_running
            add_note(repository, "Live")
            assert changed.wait(timeout=2.0)

        assert not feed.is_running
        assert snapshots[-1] == ["Live"]

    def test_errors_do_not_stop_polling(self) -> None:
        """Test that the loop keeps polling after store and subscriber errors."""
        source = MagicMock()
        source.find_by_user.side_effect = [
            AutoReconnect("blip"),
            [Note(title="One")],
            [Note(title="Two")],
        ] + [[Note(title="Two")]] * 1000
        delivered = threading.Event()
        calls: list[str] = []

        def on_change(notes: list[Note]) -> None:
            calls.append(notes[0].title)
            if notes[0].title == "One":
                raise ValueError("subscriber bug")
            delivered.set()

        feed = NoteFeed(source, "alice", poll_interval=0.01, on_change=on_change)
        feed.start()
        try:
            assert delivered.wait(timeout=2.0)
        finally:
            feed.stop()

        assert calls[:2] == ["One", "Two"]

    def test_start_is_idempotent(self, repository: NoteRepository) -> None:
        """Test that starting twice keeps one poll thread."""
        feed = NoteFeed(repository, "alice", poll_interval=0.01)
        feed.start()
        thread = feed._thread
        feed.start()
        assert feed._thread is thread
        feed.stop()
        assert not feed.is_running

    def test_stop_without_start(self, repository: NoteRepository) -> None:
        """Test that stopping an idle feed is harmless."""
        feed = NoteFeed(repository, "alice")
        feed.stop()
        assert not feed.is_running
