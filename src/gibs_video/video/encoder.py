"""
Frame Encoder
=============

Capability contract for the external video muxer/codec.

The assembler depends only on the three operations below, never on a
concrete codec:

    open(path, fourcc, fps, width, height, is_color) -> handle
    write(handle, pixels)
    close(handle)

Every operation raises on failure. Callers translate those exceptions into
the typed errors in ``gibs_video.errors``.

Implementations:
    - OpenCVFrameEncoder: cv2.VideoWriter (production)
    - MockFrameEncoder: in-memory, deterministic, with failure injection
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

import cv2
import numpy as np


logger = logging.getLogger(__name__)


class FrameEncoder(Protocol):
    """
    Protocol for video encoder backends.

    A handle returned by ``open`` is owned by exactly one caller and must be
    passed to ``close`` exactly once.
    """

    def open(
        self,
        path: str,
        fourcc: str,
        fps: float,
        width: int,
        height: int,
        is_color: bool = True,
    ) -> Any:
        """Acquire an encoder writing to ``path``. Raises on failure."""
        ...

    def write(self, handle: Any, pixels: np.ndarray) -> None:
        """Encode one frame. Raises on failure."""
        ...

    def close(self, handle: Any) -> None:
        """Flush and release the encoder. Raises on failure."""
        ...


class EncoderBackendError(Exception):
    """Raised by encoder backends when the codec reports a failure."""
    pass


@dataclass
class OpenCVHandle:
    """cv2.VideoWriter plus the frame shape it was opened for."""

    writer: cv2.VideoWriter
    path: str
    width: int
    height: int
    channels: int

    @property
    def frame_shape(self) -> tuple:
        if self.channels == 1:
            return (self.height, self.width)
        return (self.height, self.width, self.channels)


class OpenCVFrameEncoder:
    """
    Encoder backed by ``cv2.VideoWriter``.

    OpenCV reports most failures through return values rather than
    exceptions, and ``VideoWriter.write`` silently drops frames whose shape
    does not match the writer. Both are converted to EncoderBackendError
    here so a dropped frame is never counted as written.
    """

    def open(
        self,
        path: str,
        fourcc: str,
        fps: float,
        width: int,
        height: int,
        is_color: bool = True,
    ) -> OpenCVHandle:
        if len(fourcc) != 4:
            raise EncoderBackendError(f"fourcc must be 4 characters, got {fourcc!r}")

        writer = cv2.VideoWriter(
            str(path),
            cv2.VideoWriter_fourcc(*fourcc),
            float(fps),
            (int(width), int(height)),
            bool(is_color),
        )
        if not writer.isOpened():
            writer.release()
            raise EncoderBackendError(
                f"cv2.VideoWriter failed to open {path} "
                f"(fourcc={fourcc}, size={width}x{height}, fps={fps})"
            )

        logger.debug(f"VideoWriter opened: {path}")
        return OpenCVHandle(
            writer=writer,
            path=str(path),
            width=int(width),
            height=int(height),
            channels=3 if is_color else 1,
        )

    def write(self, handle: OpenCVHandle, pixels: np.ndarray) -> None:
        if not handle.writer.isOpened():
            raise EncoderBackendError("VideoWriter is not open")
        if pixels.dtype != np.uint8 or pixels.shape != handle.frame_shape:
            raise EncoderBackendError(
                f"VideoWriter for {handle.path} expects uint8 frames of shape "
                f"{handle.frame_shape}, got {pixels.dtype} {pixels.shape}"
            )
        handle.writer.write(pixels)

    def close(self, handle: OpenCVHandle) -> None:
        handle.writer.release()


@dataclass
class MockHandle:
    """In-memory encoder handle."""

    handle_id: int
    path: str
    fourcc: str
    fps: float
    width: int
    height: int
    is_color: bool
    frames: List[np.ndarray] = field(default_factory=list)
    closed: bool = False


class MockFrameEncoder:
    """
    Deterministic in-memory encoder for testing.

    Records every open/write/close so tests can assert that each handle is
    released exactly once. Failures can be injected per stage.

    Attributes:
        fail_on_open: Raise from ``open``
        fail_on_write_index: Raise when writing the frame at this index
        fail_on_close: Raise from ``close`` (the handle still counts as closed)
        opened: Every handle ever returned by ``open``
        close_calls: Number of ``close`` calls per handle id
    """

    def __init__(
        self,
        fail_on_open: bool = False,
        fail_on_write_index: Optional[int] = None,
        fail_on_close: bool = False,
    ) -> None:
        self.fail_on_open = fail_on_open
        self.fail_on_write_index = fail_on_write_index
        self.fail_on_close = fail_on_close

        self.opened: List[MockHandle] = []
        self.close_calls: Dict[int, int] = {}
        self.open_attempts = 0

    def open(
        self,
        path: str,
        fourcc: str,
        fps: float,
        width: int,
        height: int,
        is_color: bool = True,
    ) -> MockHandle:
        self.open_attempts += 1
        if self.fail_on_open:
            raise EncoderBackendError(f"injected open failure for {path}")

        handle = MockHandle(
            handle_id=len(self.opened),
            path=str(path),
            fourcc=fourcc,
            fps=fps,
            width=width,
            height=height,
            is_color=is_color,
        )
        self.opened.append(handle)
        self.close_calls[handle.handle_id] = 0
        return handle

    def write(self, handle: MockHandle, pixels: np.ndarray) -> None:
        if handle.closed:
            raise EncoderBackendError("write after close")
        expected = (handle.height, handle.width, 3) if handle.is_color else (handle.height, handle.width)
        if pixels.shape != expected:
            raise EncoderBackendError(f"expected frame shape {expected}, got {pixels.shape}")
        if self.fail_on_write_index is not None and len(handle.frames) == self.fail_on_write_index:
            raise EncoderBackendError(
                f"injected write failure at frame {self.fail_on_write_index}"
            )
        handle.frames.append(pixels.copy())

    def close(self, handle: MockHandle) -> None:
        self.close_calls[handle.handle_id] += 1
        handle.closed = True
        if self.fail_on_close:
            raise EncoderBackendError("injected close failure")

    @property
    def live_handles(self) -> List[MockHandle]:
        """Handles that were opened and never closed."""
        return [handle for handle in self.opened if not handle.closed]
