"""Note repository for MongoDB storage.

Persists notes keyed by owning user and serves the per-user live query.
"""

import logging
import re
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.collection import Collection

from ..notes.errors import InvalidNoteIdError, MissingNoteIdError
from ..notes.models import Note
from .client import retry_on_connection_failure

logger = logging.getLogger(__name__)


def _object_id(note_id: str) -> ObjectId:
    try:
        return ObjectId(note_id)
    except (InvalidId, TypeError) as e:
        raise InvalidNoteIdError(note_id) from e


class NoteRepository:
    """Repository for note storage operations."""

    def __init__(self, collection: Collection[dict[str, Any]]) -> None:
        """Initialize repository with MongoDB collection.

        Args:
            collection: MongoDB collection for notes.
        """
        self._collection = collection
        self._ensure_indexes()

    def _ensure_indexes(self) -> None:
        """Create indexes for efficient queries."""
        self._collection.create_index([("user_id", 1), ("updated_at", DESCENDING)])
        self._collection.create_index([("tags", 1)])

    @retry_on_connection_failure()
    def create(self, note: Note) -> str:
        """Insert a note and return its ID.

        Args:
            note: The note to insert; its id is ignored.

        Returns:
            The generated document ID.
        """
        result = self._collection.insert_one(note.to_dict())
        note_id = str(result.inserted_id)
        logger.info("Note created with ID: %s", note_id)
        return note_id

    @retry_on_connection_failure()
    def update(self, note: Note) -> None:
        """Write a note's fields onto its document, creating it if absent.

        Args:
            note: The note to write (must have id set).

        Raises:
            MissingNoteIdError: If note.id is None.
            InvalidNoteIdError: If note.id is not a valid document ID.
        """
        if not note.id:
            raise MissingNoteIdError()

        self._collection.update_one(
            {"_id": _object_id(note.id)},
            {"$set": note.to_dict()},
            upsert=True,
        )
        logger.info("Note updated: %s", note.id)

    @retry_on_connection_failure()
    def delete(self, note_id: str) -> bool:
        """Delete a note.

        Args:
            note_id: The note ID.

        Returns:
            True if a document was deleted.
        """
        try:
            object_id = _object_id(note_id)
        except InvalidNoteIdError:
            return False

        result = self._collection.delete_one({"_id": object_id})
        if result.deleted_count:
            logger.info("Note deleted: %s", note_id)
        return result.deleted_count > 0

    @retry_on_connection_failure()
    def get_by_id(self, note_id: str) -> Note | None:
        """Retrieve a note by ID.

        Args:
            note_id: The note ID.

        Returns:
            The note or None if not found.
        """
        try:
            object_id = _object_id(note_id)
        except InvalidNoteIdError:
            return None

        doc = self._collection.find_one({"_id": object_id})
        if doc is None:
            return None
        return Note.from_dict(doc)

    @retry_on_connection_failure()
    def find_by_user(self, user_id: str, limit: int | None = None) -> list[Note]:
        """Get a user's notes, most recently updated first.

        Args:
            user_id: Owning user ID.
            limit: Maximum number of results, None for all.

        Returns:
            List of notes ordered by updated_at descending; empty when
            limit is below 1.
        """
        if limit is not None and limit < 1:
            return []

        cursor = self._collection.find({"user_id": user_id}).sort("updated_at", DESCENDING)
        if limit is not None:
            cursor = cursor.limit(limit)
        return [Note.from_dict(doc) for doc in cursor]

    @retry_on_connection_failure()
    def search_text(self, user_id: str, query: str, limit: int = 20) -> list[Note]:
        """Case-insensitive substring search over title, content and tags.

        Args:
            user_id: Owning user ID.
            query: Text to look for; empty matches every note.
            limit: Maximum number of results.

        Returns:
            Matching notes, most recently updated first; empty when limit
            is below 1.
        """
        if limit < 1:
            return []

        filters: dict[str, Any] = {"user_id": user_id}
        if query:
            pattern = {"$regex": re.escape(query), "$options": "i"}
            filters["$or"] = [
                {"title": pattern},
                {"content": pattern},
                {"tags": pattern},
            ]

        cursor = (
            self._collection.find(filters)
            .sort("updated_at", DESCENDING)
            .limit(limit)
        )
        return [Note.from_dict(doc) for doc in cursor]


__all__ = ["NoteRepository"]
