"""
Request Parameter Space
=======================

Closed enumerations that make up a GIBS request path.

    https://gibs.earthdata.nasa.gov/{service}/epsg{code}/{imagery}

Each member renders to exactly one canonical lowercase token. Values outside
these sets are not representable: ``Projection(9999)`` raises ValueError.

Example:
    from gibs_video.models.parameters import Imagery, Projection, Service

    Service.WMTS.token            # "wmts"
    Projection.GEOGRAPHIC.token   # "epsg4326"
    Imagery.NEAR_REAL_TIME.token  # "nrt"
"""

from enum import Enum


class Projection(int, Enum):
    """
    Coordinate reference systems served by GIBS (WMTS version 1.0.0).

    Attributes:
        EPSG_4326: WGS 84 / Geographic
        EPSG_3857: Web Mercator
        EPSG_3413: Arctic polar stereographic
        EPSG_3031: Antarctic polar stereographic
    """

    EPSG_4326 = 4326
    EPSG_3857 = 3857
    EPSG_3413 = 3413
    EPSG_3031 = 3031

    # Aliases
    GEOGRAPHIC = 4326
    WEB_MERCATOR = 3857

    @classmethod
    def from_code(cls, code: int) -> "Projection":
        """
        Look up a projection by its EPSG number.

        Raises:
            ValueError: If the code is not one of the supported projections
        """
        try:
            return cls(code)
        except ValueError:
            supported = ", ".join(str(member.code) for member in cls)
            raise ValueError(
                f"Unsupported EPSG code {code!r} (supported: {supported})"
            ) from None

    @property
    def code(self) -> int:
        """Numeric EPSG code."""
        return int(self.value)

    @property
    def token(self) -> str:
        """Path segment, e.g. ``epsg3857``."""
        return f"epsg{self.value}"

    @property
    def crs_name(self) -> str:
        """Human-readable name of the coordinate reference system."""
        return _CRS_NAMES[self]

    def __str__(self) -> str:
        return str(self.value)


_CRS_NAMES = {
    Projection.EPSG_4326: "WGS 84 / Geographic",
    Projection.EPSG_3857: "Web Mercator",
    Projection.EPSG_3413: "Arctic polar stereographic",
    Projection.EPSG_3031: "Antarctic polar stereographic",
}


class Service(str, Enum):
    """
    Transport/query style used to fetch imagery.

    Attributes:
        WMTS: OGC Web Map Tile Service
        WMS: OGC Web Map Service
        TWMS: Tiled Web Map Service
    """

    WMTS = "wmts"
    WMS = "wms"
    TWMS = "twms"

    @property
    def token(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Imagery(str, Enum):
    """
    Freshness/completeness class of imagery products.

    Attributes:
        ALL: All Best Available, Standard, and Near Real-Time products
        BEST: The "Best Available" imagery products
        NEAR_REAL_TIME: Near Real-Time imagery products only
        STANDARD: Standard imagery products only
    """

    ALL = "all"
    BEST = "best"
    NEAR_REAL_TIME = "nrt"
    STANDARD = "std"

    @property
    def token(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
