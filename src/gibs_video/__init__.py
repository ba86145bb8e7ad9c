"""
gibs-video
==========

Request URL construction for NASA GIBS imagery and assembly of decoded
image frames into a single video file.

Components:
    - models: Closed request parameter enums, product catalog, VideoArtifact
    - request: Pure request URL builder
    - stream: Frame data model
    - video: Encoder contract, naming strategies, VideoAssembler
    - client: GibsClient facade over the above

Example:
    from gibs_video import GibsClient, Imagery, Projection, Service

    client = GibsClient(image_width=500, image_height=500)
    url = client.get_url(Service.WMTS, Projection.GEOGRAPHIC, Imagery.STANDARD)
"""

__version__ = "0.1.0"

from gibs_video.client import GibsClient
from gibs_video.errors import (
    AssemblerStateError,
    EncoderCloseError,
    EncoderInitError,
    FailureKind,
    FrameWriteError,
    GibsVideoError,
    UrlConstructionError,
)
from gibs_video.models.parameters import Imagery, Projection, Service
from gibs_video.request.url_builder import RequestURL, build_url
from gibs_video.stream.frame import Frame, ImageFormat
from gibs_video.video.assembler import AssemblerState, VideoAssembler, assemble_video

__all__ = [
    "__version__",
    "GibsClient",
    # Parameters
    "Projection",
    "Service",
    "Imagery",
    # URL builder
    "RequestURL",
    "build_url",
    # Frames and video
    "Frame",
    "ImageFormat",
    "AssemblerState",
    "VideoAssembler",
    "assemble_video",
    # Errors
    "FailureKind",
    "GibsVideoError",
    "UrlConstructionError",
    "EncoderInitError",
    "FrameWriteError",
    "EncoderCloseError",
    "AssemblerStateError",
]
