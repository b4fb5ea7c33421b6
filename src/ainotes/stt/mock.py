"""Mock transcriber for testing.

Replays scripted dictation so sessions can be driven without audio.
"""

from collections.abc import Iterator

from .transcriber import PartialTranscription


class MockTranscriber:
    """Transcriber that replays preset segments.

    Each segment is streamed word by word, one partial per audio chunk
    consumed, finishing with a final result for the whole segment.
    """

    def __init__(self, segments: list[str] | None = None) -> None:
        """Initialize mock transcriber.

        Args:
            segments: Spoken segments to replay, in order
        """
        self._language = "en"
        self._segments: list[str] = list(segments or [])
        self._error_message: str | None = None
        self._fail_after: int = 0
        self._call_count = 0

    def set_response(self, *segments: str) -> None:
        """Set the segments to replay, in order."""
        self._segments = list(segments)
        self._error_message = None

    def set_error(self, message: str, after_partials: int = 0) -> None:
        """Fail with RuntimeError once the given number of partials is out.

        Args:
            message: Error message
            after_partials: Partial results to emit before failing
        """
        self._error_message = message
        self._fail_after = after_partials

    def transcribe_stream(self, audio_stream: Iterator[bytes]) -> Iterator[PartialTranscription]:
        """Yield preset segments word by word as chunks arrive."""
        self._call_count += 1
        emitted = 0

        for segment in self._segments:
            words = segment.split()
            for i in range(len(words)):
                if self._error_message and emitted >= self._fail_after:
                    raise RuntimeError(self._error_message)
                # Stop early if the audio runs out
                if next(audio_stream, None) is None:
                    return
                emitted += 1
                yield PartialTranscription(
                    text=" ".join(words[: i + 1]),
                    is_final=(i == len(words) - 1),
                )

        if self._error_message:
            raise RuntimeError(self._error_message)

    def set_language(self, language: str) -> None:
        """Set language."""
        self._language = language

    @property
    def language(self) -> str:
        """Get current language setting."""
        return self._language

    @property
    def call_count(self) -> int:
        """Get number of dictations streamed."""
        return self._call_count


__all__ = ["MockTranscriber"]
