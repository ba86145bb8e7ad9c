"""
Error Taxonomy
==============

Typed failures raised by the URL builder and the video assembly pipeline.

Every failure carries a machine-readable FailureKind so callers can branch
on the kind of failure instead of parsing message text.

Rules:
    - One exception class per failure kind
    - Nothing here is retried internally; retry policy belongs to the caller
    - Underlying encoder exceptions are chained with ``raise ... from``
"""

from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    """
    Machine-readable failure codes.

    Attributes:
        URL_CONSTRUCTION: Composed request URL is malformed
        ENCODER_INIT: Encoder resource unavailable or misconfigured
        FRAME_WRITE: Frame rejected (dimension mismatch or encoder refusal)
        ENCODER_CLOSE: Encoder finalize/flush failed
    """

    URL_CONSTRUCTION = "URL_CONSTRUCTION"
    ENCODER_INIT = "ENCODER_INIT"
    FRAME_WRITE = "FRAME_WRITE"
    ENCODER_CLOSE = "ENCODER_CLOSE"


class GibsVideoError(Exception):
    """Base class for all typed gibs_video failures."""

    kind: FailureKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, message={self.message!r})"


class UrlConstructionError(GibsVideoError):
    """Raised when a composed request URL fails validation."""

    kind = FailureKind.URL_CONSTRUCTION


class EncoderInitError(GibsVideoError):
    """Raised when the encoder resource cannot be acquired."""

    kind = FailureKind.ENCODER_INIT


class FrameWriteError(GibsVideoError):
    """
    Raised when a frame cannot be appended.

    Attributes:
        frame_index: Zero-based position of the rejected frame in the sequence
    """

    kind = FailureKind.FRAME_WRITE

    def __init__(self, message: str, frame_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.frame_index = frame_index


class EncoderCloseError(GibsVideoError):
    """Raised when the encoder fails to flush and close."""

    kind = FailureKind.ENCODER_CLOSE


class AssemblerStateError(RuntimeError):
    """Raised when an assembler operation is called from the wrong state."""
    pass
