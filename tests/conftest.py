"""
Test Configuration
==================

Pytest fixtures and test configuration for gibs-video.
"""

import numpy as np
import pytest


@pytest.fixture
def make_frame():
    """Factory for solid-color BGR frames of a given size."""
    from gibs_video.stream.frame import Frame, ImageFormat

    def _make(width=500, height=500, value=0, image_type=ImageFormat.JPEG):
        pixels = np.full((height, width, 3), value, dtype=np.uint8)
        return Frame(pixels=pixels, image_type=image_type, width=width, height=height)

    return _make


@pytest.fixture
def frames_500(make_frame):
    """Ten 500x500 frames with increasing brightness."""
    return [make_frame(500, 500, value=i * 20) for i in range(10)]


@pytest.fixture
def mock_encoder():
    """Provide a MockFrameEncoder with no injected failures."""
    from gibs_video.video.encoder import MockFrameEncoder

    return MockFrameEncoder()


@pytest.fixture
def sample_config():
    """Provide a sample YAML config dict for testing."""
    return {
        "gibs": {"host": "gibs.example.org", "extension": "sgi"},
        "video": {
            "fourcc": "MJPG",
            "fps": 5,
            "extension": "avi",
            "naming": "fixed",
            "file_name": "clip",
        },
        "logging": {"level": "DEBUG", "format": "json"},
    }
