"""
Parameter Space Tests
=====================

Closed enumerations and their canonical tokens.
"""

import pytest

from gibs_video.models.parameters import Imagery, Projection, Service
from gibs_video.models.products import CleanInfrared, Platform
from gibs_video.stream.frame import ImageFormat


class TestProjection:
    """Tests for the EPSG projection enum."""

    def test_members(self):
        """Exactly the four supported codes are members."""
        assert [p.code for p in Projection] == [4326, 3857, 3413, 3031]

    def test_aliases(self):
        """Named aliases resolve to the same members."""
        assert Projection.GEOGRAPHIC is Projection.EPSG_4326
        assert Projection.WEB_MERCATOR is Projection.EPSG_3857

    def test_tokens(self):
        assert Projection.EPSG_4326.token == "epsg4326"
        assert Projection.EPSG_3031.token == "epsg3031"
        assert str(Projection.EPSG_3413) == "3413"

    def test_crs_names(self):
        assert Projection.EPSG_4326.crs_name == "WGS 84 / Geographic"
        assert Projection.EPSG_3857.crs_name == "Web Mercator"
        assert Projection.EPSG_3413.crs_name == "Arctic polar stereographic"
        assert Projection.EPSG_3031.crs_name == "Antarctic polar stereographic"

    def test_lookup_by_code(self):
        assert Projection(3857) is Projection.EPSG_3857
        assert Projection.from_code(3031) is Projection.EPSG_3031

    @pytest.mark.parametrize("code", [0, 4327, 9999, -4326])
    def test_unsupported_code_rejected(self, code):
        """Codes outside the closed set are not representable."""
        with pytest.raises(ValueError):
            Projection(code)
        with pytest.raises(ValueError, match="Unsupported EPSG code"):
            Projection.from_code(code)


class TestServiceAndImagery:
    """Tests for the service and imagery enums."""

    def test_service_tokens(self):
        assert {s: s.token for s in Service} == {
            Service.WMTS: "wmts",
            Service.WMS: "wms",
            Service.TWMS: "twms",
        }

    def test_imagery_tokens(self):
        assert {i: i.token for i in Imagery} == {
            Imagery.ALL: "all",
            Imagery.BEST: "best",
            Imagery.NEAR_REAL_TIME: "nrt",
            Imagery.STANDARD: "std",
        }

    def test_str_is_token(self):
        assert str(Service.TWMS) == "twms"
        assert str(Imagery.NEAR_REAL_TIME) == "nrt"

    def test_unknown_token_rejected(self):
        with pytest.raises(ValueError):
            Service("wcs")
        with pytest.raises(ValueError):
            Imagery("latest")


class TestProducts:
    """Tests for the imagery product catalog."""

    @pytest.mark.parametrize(
        "platform,layer",
        [
            (Platform.GOES_EAST, "GOES-East_ABI_Band13_Clean_Infrared"),
            (Platform.GOES_WEST, "GOES-West_ABI_Band13_Clean_Infrared"),
            (Platform.HIMAWARI_8, "Himawari_AHI_Band3_Red_Visible_1km"),
        ],
    )
    def test_clean_infrared_layer(self, platform, layer):
        product = CleanInfrared.for_platform(platform)
        assert product.layer == layer
        assert product.platform == platform
        assert product.instrument == "ABI"
        assert product.image == ImageFormat.PNG
