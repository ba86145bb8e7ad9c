"""
Data Models
===========

Value types for gibs-video.

Models:
    Parameters:
        - Projection, Service, Imagery: Closed request parameter enums

    Products:
        - Platform, CleanInfrared: Imagery product catalog

    Output:
        - VideoArtifact: Result of a successful assembly
"""

from gibs_video.models.parameters import Imagery, Projection, Service
from gibs_video.models.products import CleanInfrared, Platform
from gibs_video.models.artifact import VideoArtifact

__all__ = [
    # Parameters
    "Projection",
    "Service",
    "Imagery",
    # Products
    "Platform",
    "CleanInfrared",
    # Output
    "VideoArtifact",
]
