"""MongoDB storage module for AI Notes.

Provides persistent note storage keyed by user and a live note feed.
"""

from .client import MongoStorageClient, retry_on_connection_failure
from .feed import NoteFeed, NoteSource
from .notes import NoteRepository

__all__ = [
    "MongoStorageClient",
    "NoteFeed",
    "NoteRepository",
    "NoteSource",
    "retry_on_connection_failure",
]
