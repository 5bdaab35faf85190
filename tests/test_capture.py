"""
Tests for capture sessions and the single-session controller.
"""
import pytest

from echobiz.capture import CaptureController, CaptureError, CaptureSession, CaptureUnavailable


class TestCaptureSession:
    """Test a single capture attempt."""

    def test_delivers_transcript(self):
        """Test that a transcript reaches the result callback once."""
        results = []
        session = CaptureSession(lambda: "500 diya Suresh ko", results.append)

        assert session.run() == "500 diya Suresh ko"
        assert results == ["500 diya Suresh ko"]
        assert not session.active

    def test_runs_only_once(self):
        """Test that a finished session does not capture again."""
        results = []
        session = CaptureSession(lambda: "hello", results.append)
        session.run()

        assert session.run() is None
        assert results == ["hello"]

    def test_stopped_session_does_nothing(self):
        """Test that a stopped session never calls the source."""
        calls = []
        session = CaptureSession(lambda: calls.append(1), lambda text: None)
        session.stop()

        assert session.run() is None
        assert calls == []

    def test_no_transcript(self):
        """Test that end of input delivers nothing."""
        results = []
        session = CaptureSession(lambda: None, results.append)

        assert session.run() is None
        assert results == []

    def test_error_reported(self):
        """Test that a capture failure goes to the error callback."""
        errors = []

        def failing_source():
            raise CaptureError("Microphone permission denied", code="not-allowed")

        session = CaptureSession(failing_source, lambda text: None, errors.append)

        assert session.run() is None
        assert len(errors) == 1
        assert errors[0].code == "not-allowed"
        assert not session.active

    def test_error_without_callback(self):
        """Test that a failure without an error callback is not raised."""
        def failing_source():
            raise CaptureError("network")

        session = CaptureSession(failing_source, lambda text: None)

        assert session.run() is None


class TestCaptureController:
    """Test at-most-one-session semantics."""

    def test_unsupported_environment(self):
        """Test that starting without a source raises CaptureUnavailable."""
        controller = CaptureController(None)

        assert not controller.supported
        with pytest.raises(CaptureUnavailable):
            controller.start(lambda text: None)

    def test_start_stops_previous_session(self):
        """Test that a second start stops the first session."""
        controller = CaptureController(lambda: "hello")
        first = controller.start(lambda text: None)
        second = controller.start(lambda text: None)

        assert not first.active
        assert second.active
        assert controller.is_capturing

    def test_stopped_session_delivers_nothing(self):
        """Test that a superseded session cannot deliver a result."""
        results = []
        controller = CaptureController(lambda: "hello")
        first = controller.start(results.append)
        controller.start(lambda text: None)

        assert first.run() is None
        assert results == []

    def test_toggle(self):
        """Test tap-to-start, tap-to-stop."""
        controller = CaptureController(lambda: "hello")

        session = controller.toggle(lambda text: None)
        assert session is not None
        assert controller.is_capturing

        assert controller.toggle(lambda text: None) is None
        assert not controller.is_capturing

    def test_stop_is_idempotent(self):
        """Test stopping repeatedly, with or without an active session."""
        controller = CaptureController(lambda: "hello")
        controller.stop()
        controller.start(lambda text: None)
        controller.stop()
        controller.stop()

        assert not controller.is_capturing

    def test_finished_session_is_not_capturing(self):
        """Test that a completed run leaves the controller idle."""
        controller = CaptureController(lambda: "hello")
        controller.start(lambda text: None).run()

        assert not controller.is_capturing
