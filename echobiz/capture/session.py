"""
Transcript capture sessions.

Wraps whatever produces transcripts (a speech service, a terminal prompt)
behind a controller that allows at most one active session. Starting a new
capture while one is running stops the running one first, and stopping is
safe to repeat.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TranscriptSource = Callable[[], Optional[str]]
ResultCallback = Callable[[str], None]
ErrorCallback = Callable[["CaptureError"], None]


class CaptureUnavailable(Exception):
    """Raised when no transcript source is available in this environment."""


class CaptureError(Exception):
    """Raised by a transcript source on hardware, permission or network failure."""
    def __init__(self, message: str, code: str = "capture"):
        super().__init__(message)
        self.code = code


@dataclass
class CaptureSession:
    """One capture attempt. Finishes exactly once."""
    source: TranscriptSource
    on_result: ResultCallback
    on_error: Optional[ErrorCallback] = None
    active: bool = True

    def run(self) -> Optional[str]:
        """Read one transcript from the source and deliver it.

        Returns:
            The transcript, or None if the session was stopped or failed
        """
        if not self.active:
            return None
        try:
            transcript = self.source()
        except CaptureError as e:
            logger.warning(f"Capture failed: {e}")
            if self.active and self.on_error:
                self.on_error(e)
            self.stop()
            return None

        if not self.active:
            return None
        self.stop()
        if transcript is None:
            return None
        self.on_result(transcript)
        return transcript

    def stop(self) -> None:
        self.active = False


class CaptureController:
    """Keeps at most one capture session alive (tap-to-stop semantics)."""

    def __init__(self, source: Optional[TranscriptSource]):
        self._source = source
        self._session: Optional[CaptureSession] = None

    @property
    def supported(self) -> bool:
        return self._source is not None

    @property
    def is_capturing(self) -> bool:
        return self._session is not None and self._session.active

    def start(
        self,
        on_result: ResultCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> CaptureSession:
        """Begin a new session, stopping any active one first.

        Raises:
            CaptureUnavailable: If no transcript source was configured
        """
        if self._source is None:
            raise CaptureUnavailable("Speech recognition is not supported in this environment")
        self.stop()
        self._session = CaptureSession(self._source, on_result, on_error)
        return self._session

    def toggle(
        self,
        on_result: ResultCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> Optional[CaptureSession]:
        """Stop the active session if there is one, otherwise start a new one."""
        if self.is_capturing:
            self.stop()
            return None
        return self.start(on_result, on_error)

    def stop(self) -> None:
        """Stop the active session. Safe to call when nothing is active."""
        session, self._session = self._session, None
        if session is not None and session.active:
            logger.debug("Stopping active capture session")
            session.stop()
