"""
Stream Module
=============

Decoded frame representation consumed by the video assembler.
"""

from gibs_video.stream.frame import Frame, ImageFormat


__all__ = [
    "Frame",
    "ImageFormat",
]
