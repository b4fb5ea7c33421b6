"""Speech-to-text module for AI Notes.

Provides the transcriber interface, a mock implementation and the
dictation session that turns speech into note content.
"""

from .dictation import DictationSession
from .mock import MockTranscriber
from .transcriber import PartialTranscription, Transcriber

__all__ = [
    "DictationSession",
    "MockTranscriber",
    "PartialTranscription",
    "Transcriber",
]
