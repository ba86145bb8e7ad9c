"""
GIBS Client
===========

Facade tying the URL builder and the video assembler to one configured
image size.

Example:
    from gibs_video.client import GibsClient
    from gibs_video.models.parameters import Imagery, Projection, Service

    client = GibsClient(image_width=500, image_height=500)
    url = client.get_url(Service.WMTS, Projection.GEOGRAPHIC, Imagery.STANDARD)
    artifact = client.process_images(frames)
"""

import logging
from typing import Iterable, Optional

from gibs_video.config import Settings, load_config
from gibs_video.models.artifact import VideoArtifact
from gibs_video.models.parameters import Imagery, Projection, Service
from gibs_video.request.url_builder import RequestURL, build_url
from gibs_video.stream.frame import Frame
from gibs_video.video.assembler import assemble_video
from gibs_video.video.encoder import FrameEncoder
from gibs_video.video.naming import NamingStrategy, naming_from_config


logger = logging.getLogger(__name__)


class GibsClient:
    """
    Builds GIBS request URLs and assembles fetched images into videos.

    Attributes:
        image_width: Width every processed image must have
        image_height: Height every processed image must have
        settings: Loaded configuration
    """

    def __init__(
        self,
        image_width: int,
        image_height: int,
        settings: Optional[Settings] = None,
        encoder: Optional[FrameEncoder] = None,
        naming: Optional[NamingStrategy] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            image_width: Target video width in pixels
            image_height: Target video height in pixels
            settings: Configuration (loaded via load_config() when None)
            encoder: Encoder backend override (OpenCV when None)
            naming: Naming strategy override (from settings when None)
        """
        if image_width <= 0 or image_height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {image_width}x{image_height}"
            )

        self.image_width = image_width
        self.image_height = image_height
        self.settings = settings if settings is not None else load_config()
        self._encoder = encoder

        video = self.settings.video
        self._naming = naming or naming_from_config(video.naming, video.file_name)

    def get_url(
        self,
        service: Service,
        projection: Projection,
        imagery: Imagery,
    ) -> RequestURL:
        """
        Build the request URL for the configured host.

        Raises:
            UrlConstructionError: If the composed URL is malformed
        """
        return build_url(
            service,
            projection,
            imagery,
            host=self.settings.gibs.host,
            extension=self.settings.gibs.extension,
        )

    def process_images(self, images: Iterable[Frame]) -> VideoArtifact:
        """
        Assemble images into a single video file.

        Args:
            images: Ordered frames, each image_width x image_height

        Returns:
            VideoArtifact of the written file

        Raises:
            EncoderInitError, FrameWriteError, EncoderCloseError
        """
        video = self.settings.video
        logger.info(
            f"Assembling video {self.image_width}x{self.image_height} into {video.output_dir}"
        )
        return assemble_video(
            images,
            self.image_width,
            self.image_height,
            output_dir=video.output_dir,
            encoder=self._encoder,
            naming=self._naming,
            fourcc=video.fourcc,
            fps=video.fps,
            is_color=video.is_color,
            extension=video.extension,
            keep_partial=video.keep_partial,
        )
