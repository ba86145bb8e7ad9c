"""
Video Module
============

Sequential frame-to-video assembly.

This module provides:
    - FrameEncoder: Protocol for the external encoder (open/write/close)
    - OpenCVFrameEncoder: cv2.VideoWriter backend
    - MockFrameEncoder: In-memory backend with failure injection
    - NamingStrategy implementations for output file names
    - VideoAssembler: One-shot state machine owning one encoder handle

Example:
    from gibs_video.video import VideoAssembler

    with VideoAssembler(width=500, height=500) as assembler:
        assembler.extend(frames)
        artifact = assembler.finalize()
"""

from gibs_video.video.encoder import (
    EncoderBackendError,
    FrameEncoder,
    MockFrameEncoder,
    OpenCVFrameEncoder,
)
from gibs_video.video.naming import (
    FixedNaming,
    NamingStrategy,
    RandomNaming,
    TimestampNaming,
    naming_from_config,
)
from gibs_video.video.assembler import (
    AssemblerState,
    VideoAssembler,
    assemble_video,
)


__all__ = [
    "FrameEncoder",
    "EncoderBackendError",
    "OpenCVFrameEncoder",
    "MockFrameEncoder",
    "NamingStrategy",
    "RandomNaming",
    "FixedNaming",
    "TimestampNaming",
    "naming_from_config",
    "AssemblerState",
    "VideoAssembler",
    "assemble_video",
]
