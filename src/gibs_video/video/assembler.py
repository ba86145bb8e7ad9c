"""
Video Assembler
===============

Turns an ordered sequence of Frames into one video file.

One assembler owns one encoder handle for the lifetime of one assembly.
The lifecycle is a strict one-direction state machine:

    CREATED → OPEN → WRITING → FINALIZED
        any non-terminal state → FAILED

Transitions:
    open():      CREATED → OPEN, acquires the encoder
    append():    OPEN | WRITING → WRITING, one frame per call, in order
    finalize():  OPEN | WRITING → FINALIZED, returns the VideoArtifact
    abort():     any non-terminal state → FAILED

Resource Rules:
    - The encoder handle is released exactly once on every exit path
    - FAILED is entered only after the handle has been released
    - A partially written file is removed on failure (unless keep_partial)
    - FINALIZED and FAILED are terminal; the instance is not reusable
    - append() is not reentrant; concurrent calls raise AssemblerStateError

Example:
    from gibs_video.video import VideoAssembler

    with VideoAssembler(width=500, height=500, output_dir="/tmp") as assembler:
        for frame in frames:
            assembler.append(frame)
        artifact = assembler.finalize()
"""

import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

from gibs_video.errors import (
    AssemblerStateError,
    EncoderCloseError,
    EncoderInitError,
    FailureKind,
    FrameWriteError,
)
from gibs_video.models.artifact import VideoArtifact
from gibs_video.stream.frame import Frame
from gibs_video.video.encoder import FrameEncoder, OpenCVFrameEncoder
from gibs_video.video.naming import NamingStrategy, RandomNaming


logger = logging.getLogger(__name__)


DEFAULT_FOURCC = "mp4v"
DEFAULT_FPS = 10.0
DEFAULT_EXTENSION = "mp4"


class AssemblerState(str, Enum):
    """
    Lifecycle states of a VideoAssembler.

    Attributes:
        CREATED: Constructed, encoder not yet acquired
        OPEN: Encoder acquired, no frames written
        WRITING: At least one frame accepted
        FINALIZED: Encoder closed, artifact produced (terminal)
        FAILED: Assembly failed, encoder released (terminal)
    """

    CREATED = "CREATED"
    OPEN = "OPEN"
    WRITING = "WRITING"
    FINALIZED = "FINALIZED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self in (AssemblerState.FINALIZED, AssemblerState.FAILED)


class VideoAssembler:
    """
    Sequential frame-to-video pipeline around one encoder handle.

    Attributes:
        width: Target frame width, fixed at creation
        height: Target frame height, fixed at creation
        state: Current AssemblerState
        frames_written: Frames accepted by the encoder so far
        failure: FailureKind of the failure that ended the assembly, if any
        path: Output path, chosen when the encoder is opened
    """

    def __init__(
        self,
        width: int,
        height: int,
        output_dir: Union[str, Path] = ".",
        encoder: Optional[FrameEncoder] = None,
        naming: Optional[NamingStrategy] = None,
        fourcc: str = DEFAULT_FOURCC,
        fps: float = DEFAULT_FPS,
        is_color: bool = True,
        extension: str = DEFAULT_EXTENSION,
        keep_partial: bool = False,
    ) -> None:
        """
        Initialize the assembler. No resource is acquired until open().

        Args:
            width: Target frame width in pixels (> 0)
            height: Target frame height in pixels (> 0)
            output_dir: Directory the video is written to
            encoder: Encoder backend (defaults to OpenCVFrameEncoder)
            naming: Output file naming strategy (defaults to RandomNaming)
            fourcc: Four-character codec tag
            fps: Playback frames per second (> 0)
            is_color: Must be True; frames are always 3-channel BGR
            extension: Output file extension, without the dot
            keep_partial: Keep a partially written file after a failure

        Raises:
            ValueError: If dimensions, fps, fourcc or is_color are invalid
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Target dimensions must be positive, got {width}x{height}")
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        if len(fourcc) != 4:
            raise ValueError(f"fourcc must be 4 characters, got {fourcc!r}")
        if not is_color:
            raise ValueError("is_color=False is not supported: frames are 3-channel BGR")

        self._width = int(width)
        self._height = int(height)
        self._output_dir = Path(output_dir)
        self._encoder = encoder if encoder is not None else OpenCVFrameEncoder()
        self._naming = naming if naming is not None else RandomNaming()
        self._fourcc = fourcc
        self._fps = float(fps)
        self._is_color = is_color
        self._extension = extension.lstrip(".")
        self._keep_partial = keep_partial

        self._state = AssemblerState.CREATED
        self._handle = None
        self._path: Optional[Path] = None
        self._frames_written = 0
        self._failure: Optional[FailureKind] = None
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def state(self) -> AssemblerState:
        return self._state

    @property
    def frames_written(self) -> int:
        return self._frames_written

    @property
    def failure(self) -> Optional[FailureKind]:
        return self._failure

    @property
    def path(self) -> Optional[Path]:
        return self._path

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def open(self) -> None:
        """
        Acquire the encoder sized to the target dimensions.

        Raises:
            EncoderInitError: If the encoder cannot be opened. The assembler
                moves to FAILED and never accepts frames.
            AssemblerStateError: If not in CREATED
        """
        with self._exclusive("open"):
            self._require(AssemblerState.CREATED, operation="open")

            path = self._output_dir / self._naming(self._extension)
            try:
                handle = self._encoder.open(
                    str(path),
                    self._fourcc,
                    self._fps,
                    self._width,
                    self._height,
                    self._is_color,
                )
            except Exception as exc:
                self._state = AssemblerState.FAILED
                self._failure = FailureKind.ENCODER_INIT
                logger.warning(f"Error creating video encoder for {path}: {exc}")
                raise EncoderInitError(f"Error creating video encoder for {path}: {exc}") from exc

            self._handle = handle
            self._path = path
            self._state = AssemblerState.OPEN
            logger.info(
                f"Video encoder opened: {path} "
                f"({self._width}x{self._height}, fourcc={self._fourcc}, fps={self._fps})"
            )

    def append(self, frame: Frame) -> None:
        """
        Write one frame. Frame i is fully accepted before frame i+1 is submitted.

        Args:
            frame: Frame matching the target width and height

        Raises:
            FrameWriteError: On dimension mismatch or encoder rejection. The
                encoder is released and the assembler moves to FAILED.
            AssemblerStateError: If not in OPEN or WRITING, or on a
                concurrent call
        """
        with self._exclusive("append"):
            self._require(AssemblerState.OPEN, AssemblerState.WRITING, operation="append")

            index = self._frames_written
            if not isinstance(frame, Frame):
                message = f"Frame {index}: expected Frame, got {type(frame).__name__}"
                logger.warning(f"Error writing to video encoder: {message}")
                self._fail(FailureKind.FRAME_WRITE)
                raise FrameWriteError(
                    message,
                    frame_index=index,
                )

            if (frame.width, frame.height) != (self._width, self._height):
                message = (
                    f"Frame {index}: size {frame.width}x{frame.height} does not match "
                    f"target {self._width}x{self._height}"
                )
                logger.warning(f"Error writing to video encoder: {message}")
                self._fail(FailureKind.FRAME_WRITE)
                raise FrameWriteError(message, frame_index=index)

            try:
                self._encoder.write(self._handle, frame.pixels)
            except Exception as exc:
                logger.warning(f"Error writing to video encoder, frame {index}: {exc}")
                self._fail(FailureKind.FRAME_WRITE)
                raise FrameWriteError(
                    f"Frame {index}: encoder rejected frame: {exc}",
                    frame_index=index,
                ) from exc

            self._frames_written += 1
            self._state = AssemblerState.WRITING
            logger.debug(f"Frame {index} written to {self._path}")

    def extend(self, frames: Iterable[Frame]) -> None:
        """Append every frame of ``frames`` in order."""
        for frame in frames:
            self.append(frame)

    def finalize(self) -> VideoArtifact:
        """
        Flush and close the encoder.

        Returns:
            VideoArtifact referencing the number of frames accepted

        Raises:
            EncoderCloseError: If the encoder fails to close. The handle is
                not closed again; the assembler moves to FAILED.
            AssemblerStateError: If not in OPEN or WRITING
        """
        with self._exclusive("finalize"):
            self._require(AssemblerState.OPEN, AssemblerState.WRITING, operation="finalize")

            handle, self._handle = self._handle, None
            try:
                self._encoder.close(handle)
            except Exception as exc:
                self._state = AssemblerState.FAILED
                self._failure = FailureKind.ENCODER_CLOSE
                logger.warning(f"Error closing video encoder for {self._path}: {exc}")
                self._discard_partial()
                raise EncoderCloseError(
                    f"Error closing video encoder for {self._path}: {exc}"
                ) from exc

            self._state = AssemblerState.FINALIZED
            logger.info(f"Video finalized: {self._path} ({self._frames_written} frames)")

            return VideoArtifact(
                path=self._path,
                width=self._width,
                height=self._height,
                frame_count=self._frames_written,
                fourcc=self._fourcc,
                fps=self._fps,
            )

    def abort(self) -> None:
        """
        Release the encoder without producing an artifact.

        No-op once the assembler is in a terminal state.
        """
        with self._exclusive("abort"):
            if self._state.is_terminal:
                return
            logger.info(f"Aborting video assembly in state {self._state.value}")
            self._fail(None)

    def __enter__(self) -> "VideoAssembler":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._state.is_terminal:
            return
        if exc_type is None:
            logger.warning(
                "VideoAssembler left without finalize(); discarding "
                f"{self._frames_written} written frames"
            )
        self.abort()

    def __repr__(self) -> str:
        return (
            f"VideoAssembler({self._width}x{self._height}, "
            f"state={self._state.value}, frames={self._frames_written})"
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _exclusive(self, operation: str) -> "_ExclusiveCall":
        return _ExclusiveCall(self._lock, operation)

    def _require(self, *states: AssemblerState, operation: str) -> None:
        if self._state not in states:
            allowed = ", ".join(state.value for state in states)
            raise AssemblerStateError(
                f"Cannot {operation}() in state {self._state.value} (allowed: {allowed})"
            )

    def _fail(self, kind: Optional[FailureKind]) -> None:
        """Release the encoder, discard partial output, then enter FAILED."""
        self._release()
        self._discard_partial()
        self._state = AssemblerState.FAILED
        self._failure = kind

    def _release(self) -> None:
        # Clearing the handle before close() guarantees a single release
        handle, self._handle = self._handle, None
        if handle is None:
            return
        try:
            self._encoder.close(handle)
        except Exception as exc:
            logger.warning(f"Error closing video encoder during cleanup of {self._path}: {exc}")

    def _discard_partial(self) -> None:
        if self._keep_partial or self._path is None:
            return
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning(f"Could not remove partial video {self._path}: {exc}")


class _ExclusiveCall:
    """Non-blocking guard that rejects overlapping calls on one assembler."""

    def __init__(self, lock: threading.Lock, operation: str) -> None:
        self._lock = lock
        self._operation = operation

    def __enter__(self) -> None:
        if not self._lock.acquire(blocking=False):
            raise AssemblerStateError(
                f"{self._operation}() called while another call is in progress"
            )

    def __exit__(self, exc_type, exc, tb) -> None:
        self._lock.release()


def assemble_video(
    frames: Iterable[Frame],
    width: int,
    height: int,
    **options,
) -> VideoArtifact:
    """
    Open, append every frame in order, and finalize.

    Args:
        frames: Ordered frames, each width x height
        width: Target width in pixels
        height: Target height in pixels
        **options: Forwarded to VideoAssembler

    Returns:
        VideoArtifact

    Raises:
        EncoderInitError, FrameWriteError, EncoderCloseError
    """
    with VideoAssembler(width, height, **options) as assembler:
        assembler.extend(frames)
        return assembler.finalize()
