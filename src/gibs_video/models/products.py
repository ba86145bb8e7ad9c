"""
Imagery Products
================

Catalog of GIBS imagery layers with their instrument and source format.

Reference:
    https://wiki.earthdata.nasa.gov/display/GIBS/GIBS+Available+Imagery+Products
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from gibs_video.stream.frame import ImageFormat


class Platform(str, Enum):
    """Geostationary platforms that publish Clean Infrared imagery."""

    GOES_EAST = "GOES_EAST"
    GOES_WEST = "GOES_WEST"
    HIMAWARI_8 = "HIMAWARI_8"


_CLEAN_INFRARED_LAYERS = {
    Platform.GOES_EAST: "GOES-East_ABI_Band13_Clean_Infrared",
    Platform.GOES_WEST: "GOES-West_ABI_Band13_Clean_Infrared",
    Platform.HIMAWARI_8: "Himawari_AHI_Band3_Red_Visible_1km",
}


class CleanInfrared(BaseModel):
    """
    Clean Infrared (Band 13) product for one platform.

    Attributes:
        platform: Source platform
        instrument: Imaging instrument
        image: Format the layer is served in
        layer: GIBS layer identifier
    """

    model_config = ConfigDict(frozen=True)

    platform: Platform
    instrument: str = "ABI"
    image: ImageFormat = ImageFormat.PNG
    layer: str

    @classmethod
    def for_platform(cls, platform: Platform) -> "CleanInfrared":
        """Build the product entry for ``platform``."""
        return cls(platform=platform, layer=_CLEAN_INFRARED_LAYERS[platform])
