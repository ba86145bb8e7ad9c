"""
Video Artifact
==============

Result of a successful assembly. Only ever constructed by
``VideoAssembler.finalize()``; a failed assembly never yields one.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class VideoArtifact(BaseModel):
    """
    Finalized video file and the parameters it was produced with.

    Attributes:
        path: Location of the written video file
        width: Frame width in pixels
        height: Frame height in pixels
        frame_count: Number of frames the encoder accepted
        fourcc: Four-character codec tag used for encoding
        fps: Playback rate written into the container
    """

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Location of the written video file")
    width: int = Field(..., gt=0, description="Frame width in pixels")
    height: int = Field(..., gt=0, description="Frame height in pixels")
    frame_count: int = Field(..., ge=0, description="Frames accepted by the encoder")
    fourcc: str = Field(..., min_length=4, max_length=4, description="Codec tag")
    fps: float = Field(..., gt=0, description="Playback frames per second")

    @property
    def name(self) -> str:
        """File name of the artifact (the identifier returned to callers)."""
        return self.path.name

    @property
    def duration_seconds(self) -> float:
        """Playback duration implied by frame_count and fps."""
        return self.frame_count / self.fps
