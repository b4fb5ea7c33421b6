"""Speech recognizer interface used by dictation.

A dictation is heard as a sequence of segments. Each segment is reported
several times while it is being recognized and one last time once final.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol


@dataclass
class PartialTranscription:
    """Current text of the segment being dictated.

    Attributes:
        text: Segment text recognized so far, replacing any earlier partial
        is_final: True once the segment is closed and will not change
    """

    text: str
    is_final: bool


class Transcriber(Protocol):
    """Streaming recognizer that turns microphone audio into segments."""

    def transcribe_stream(self, audio_stream: Iterator[bytes]) -> Iterator[PartialTranscription]:
        """Recognize speech while audio chunks arrive.

        The iterator ends when the audio stream does; the last partial of
        an unfinished segment is then left without is_final set.

        Args:
            audio_stream: Microphone chunks in arrival order

        Yields:
            Partial and final segment results

        Raises:
            RuntimeError: If recognition fails mid-dictation
        """
        ...

    def set_language(self, language: str) -> None:
        """Select the dictation language, e.g. "en" or "fr"."""
        ...


__all__ = ["PartialTranscription", "Transcriber"]
