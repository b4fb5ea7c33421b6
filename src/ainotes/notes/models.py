"""Data model for notes.

Defines the Note entity stored in the document store.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from ..analysis.title import DEFAULT_TITLE

PREVIEW_LENGTH = 100


def _utc(value: datetime | None) -> datetime:
    """Treat naive datetimes read from MongoDB as UTC."""
    if value is None:
        return datetime.now(UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass
class Note:
    """A typed or dictated note.

    Content is the source of truth; title, summary and tags are derived
    from it and may be regenerated at any time.

    Attributes:
        title: Display title
        content: Raw note body
        summary: Extractive summary (may be empty)
        created_at: When the note was first saved
        updated_at: When the note was last saved
        is_recorded: True if captured by voice dictation
        audio_url: Reference to the recorded audio, if kept
        tags: Keyword and user tags (duplicates allowed)
        user_id: Owning user
        id: MongoDB document ID, None until persisted
    """

    title: str = DEFAULT_TITLE
    content: str = ""
    summary: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    is_recorded: bool = False
    audio_url: str | None = None
    tags: list[str] = field(default_factory=list)
    user_id: str = ""
    id: str | None = None

    @property
    def preview(self) -> str:
        """First 100 characters of the content, with "..." if cut."""
        if len(self.content) > PREVIEW_LENGTH:
            return self.content[:PREVIEW_LENGTH] + "..."
        return self.content

    @property
    def formatted_date(self) -> str:
        """Last update as a medium date and short time."""
        updated = self.updated_at
        hour = updated.hour % 12 or 12
        return f"{updated:%b} {updated.day}, {updated.year} at {hour}:{updated:%M %p}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for MongoDB storage."""
        return {
            "title": self.title,
            "content": self.content,
            "summary": self.summary,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "is_recorded": self.is_recorded,
            "audio_url": self.audio_url,
            "tags": list(self.tags),
            "user_id": self.user_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Note":
        """Create from MongoDB document."""
        return cls(
            id=str(data["_id"]) if data.get("_id") else None,
            title=data.get("title", DEFAULT_TITLE),
            content=data.get("content", ""),
            summary=data.get("summary", ""),
            created_at=_utc(data.get("created_at")),
            updated_at=_utc(data.get("updated_at")),
            is_recorded=data.get("is_recorded", False),
            audio_url=data.get("audio_url"),
            tags=list(data.get("tags", [])),
            user_id=data.get("user_id", ""),
        )


__all__ = ["DEFAULT_TITLE", "Note"]
