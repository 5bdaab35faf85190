"""
Transcript capture for EchoBiz.

Provides single-session control over whatever produces transcripts.
"""

from .session import CaptureController, CaptureError, CaptureSession, CaptureUnavailable

__all__ = ["CaptureController", "CaptureError", "CaptureSession", "CaptureUnavailable"]
