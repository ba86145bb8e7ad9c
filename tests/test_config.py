"""
Configuration Tests
===================
"""

import logging

import pytest
import yaml
from pydantic import ValidationError

from gibs_video.config import Settings, load_config, setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    """Remove GIBS_VIDEO_* overrides from the environment."""
    for name in (
        "GIBS_VIDEO_HOST",
        "GIBS_VIDEO_FOURCC",
        "GIBS_VIDEO_FPS",
        "GIBS_VIDEO_OUTPUT_DIR",
        "GIBS_VIDEO_NAMING",
        "GIBS_VIDEO_FILE_NAME",
        "GIBS_VIDEO_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadConfig:
    """Tests for layered configuration loading."""

    def test_defaults(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        settings = load_config()

        assert settings.gibs.host == "gibs.earthdata.nasa.gov"
        assert settings.gibs.extension == "sgi"
        assert settings.video.fourcc == "mp4v"
        assert settings.video.fps == 10.0
        assert settings.video.naming == "random"
        assert settings.video.keep_partial is False

    def test_yaml_file(self, clean_env, tmp_path, sample_config):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(sample_config))

        settings = load_config(str(path))

        assert settings.gibs.host == "gibs.example.org"
        assert settings.video.fourcc == "MJPG"
        assert settings.video.fps == 5.0
        assert settings.video.extension == "avi"
        assert settings.video.file_name == "clip"
        assert settings.logging.format == "json"

    def test_config_yaml_discovered_in_cwd(self, clean_env, tmp_path, sample_config):
        (tmp_path / "config.yaml").write_text(yaml.safe_dump(sample_config))
        clean_env.chdir(tmp_path)

        assert load_config().video.fourcc == "MJPG"

    def test_env_overrides_file(self, clean_env, tmp_path, sample_config):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(sample_config))
        clean_env.setenv("GIBS_VIDEO_FOURCC", "XVID")
        clean_env.setenv("GIBS_VIDEO_FPS", "2.5")
        clean_env.setenv("GIBS_VIDEO_HOST", "gibs-c.earthdata.nasa.gov")
        clean_env.setenv("GIBS_VIDEO_NAMING", "timestamp")

        settings = load_config(str(path))

        assert settings.video.fourcc == "XVID"
        assert settings.video.fps == 2.5
        assert settings.gibs.host == "gibs-c.earthdata.nasa.gov"
        assert settings.video.naming == "timestamp"

    def test_fixed_naming_requires_file_name(self):
        with pytest.raises(ValidationError):
            Settings.model_validate({"video": {"naming": "fixed"}})

    def test_rejects_grayscale_output(self, clean_env, tmp_path):
        """Frames are always 3-channel, so a grayscale writer is refused."""
        with pytest.raises(ValidationError, match="is_color"):
            Settings.model_validate({"video": {"is_color": False}})

        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"video": {"is_color": False}}))
        with pytest.raises(ValidationError):
            load_config(str(path))

    def test_rejects_bad_values(self):
        with pytest.raises(ValidationError):
            Settings.model_validate({"video": {"fps": 0}})
        with pytest.raises(ValidationError):
            Settings.model_validate({"video": {"fourcc": "H264X"}})
        with pytest.raises(ValidationError):
            Settings.model_validate({"video": {"naming": "sequential"}})

    def test_extension_dot_stripped(self):
        settings = Settings.model_validate({"video": {"extension": ".avi"}})
        assert settings.video.extension == "avi"


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_configures_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

        settings = Settings.model_validate({"logging": {"level": "debug", "format": "json"}})
        setup_logging(settings)

        assert calls["level"] == logging.DEBUG
        assert calls["format"].startswith('{"time"')
