"""
Frame Tests
===========
"""

import numpy as np
import pytest

from gibs_video.stream.frame import Frame, ImageFormat


class TestFrame:
    """Tests for Frame validation."""

    def test_valid_frame(self, make_frame):
        frame = make_frame(640, 480, image_type=ImageFormat.PNG)
        assert frame.size == (640, 480)
        assert frame.pixels.shape == (480, 640, 3)
        assert frame.image_type == ImageFormat.PNG

    def test_from_array(self):
        frame = Frame.from_array(np.zeros((20, 30, 3), dtype=np.uint8))
        assert frame.width == 30
        assert frame.height == 20

    def test_declared_size_must_match_buffer(self):
        pixels = np.zeros((100, 200, 3), dtype=np.uint8)
        with pytest.raises(ValueError, match="does not match"):
            Frame(pixels=pixels, image_type=ImageFormat.JPEG, width=100, height=200)

    def test_rejects_wrong_dtype(self):
        pixels = np.zeros((10, 10, 3), dtype=np.float64)
        with pytest.raises(ValueError, match="uint8"):
            Frame(pixels=pixels, image_type=ImageFormat.JPEG, width=10, height=10)

    @pytest.mark.parametrize("shape", [(10, 10), (10, 10, 4), (10, 10, 1)])
    def test_rejects_wrong_channels(self, shape):
        pixels = np.zeros(shape, dtype=np.uint8)
        with pytest.raises(ValueError, match="shape"):
            Frame(pixels=pixels, image_type=ImageFormat.PNG, width=10, height=10)

    def test_rejects_non_array(self):
        with pytest.raises(ValueError, match="numpy array"):
            Frame(pixels=[[0]], image_type=ImageFormat.PNG, width=1, height=1)

    def test_immutable(self, make_frame):
        frame = make_frame(10, 10)
        with pytest.raises(AttributeError):
            frame.width = 20

    def test_repr_is_compact(self, make_frame):
        assert repr(make_frame(8, 4)) == "Frame(image_type=jpeg, width=8, height=4)"


class TestFrameImageType:
    """image_type is always an ImageFormat member."""

    def test_string_coerced(self):
        frame = Frame(
            pixels=np.zeros((4, 8, 3), dtype=np.uint8),
            image_type="jpeg",
            width=8,
            height=4,
        )
        assert frame.image_type is ImageFormat.JPEG
        assert repr(frame) == "Frame(image_type=jpeg, width=8, height=4)"

    @pytest.mark.parametrize("image_type", ["gif", "JPEG", None])
    def test_unknown_rejected(self, image_type):
        with pytest.raises(ValueError, match="image_type"):
            Frame(
                pixels=np.zeros((4, 8, 3), dtype=np.uint8),
                image_type=image_type,
                width=8,
                height=4,
            )
