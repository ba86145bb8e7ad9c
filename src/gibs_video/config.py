"""
gibs-video Configuration
========================

This module handles configuration loading for URL building and video
assembly.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    GIBS_VIDEO_HOST        -> gibs.host
    GIBS_VIDEO_FOURCC      -> video.fourcc
    GIBS_VIDEO_FPS         -> video.fps
    GIBS_VIDEO_OUTPUT_DIR  -> video.output_dir
    GIBS_VIDEO_NAMING      -> video.naming
    GIBS_VIDEO_FILE_NAME   -> video.file_name
    GIBS_VIDEO_LOG_LEVEL   -> logging.level

Example:
    from gibs_video.config import load_config, setup_logging

    settings = load_config()
    setup_logging(settings)
    print(settings.video.fourcc)
"""

import os
import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class GibsConfig(BaseModel):
    """Remote imagery endpoint configuration."""

    host: str = Field(
        default="gibs.earthdata.nasa.gov",
        description="GIBS host name",
    )
    extension: str = Field(
        default="sgi",
        description="Trailing file extension of request URLs",
    )


class VideoConfig(BaseModel):
    """Video assembly configuration."""

    fourcc: str = Field(
        default="mp4v",
        min_length=4,
        max_length=4,
        description="Four-character codec tag passed to the encoder",
    )
    fps: float = Field(default=10.0, gt=0, description="Playback frames per second")
    is_color: bool = Field(default=True, description="Encode 3-channel color frames (must be true)")
    extension: str = Field(default="mp4", description="Output file extension")
    output_dir: str = Field(default=".", description="Directory for output videos")
    naming: Literal["random", "fixed", "timestamp"] = Field(
        default="random",
        description="Output naming strategy: 'random', 'fixed' or 'timestamp'",
    )
    file_name: Optional[str] = Field(
        default=None,
        description="Output file name when naming is 'fixed'",
    )
    keep_partial: bool = Field(
        default=False,
        description="Keep partially written files after a failure",
    )

    @field_validator("extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        return value.lstrip(".")

    @field_validator("is_color")
    @classmethod
    def _color_only(cls, value: bool) -> bool:
        if not value:
            raise ValueError("video.is_color must be true: frames are 3-channel BGR")
        return value

    @model_validator(mode="after")
    def _fixed_needs_name(self) -> "VideoConfig":
        if self.naming == "fixed" and not self.file_name:
            raise ValueError("video.naming 'fixed' requires video.file_name")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for gibs-video.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    gibs: GibsConfig = Field(default_factory=GibsConfig)
    video: VideoConfig = Field(default_factory=VideoConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    if env_host := os.environ.get("GIBS_VIDEO_HOST"):
        config_data.setdefault("gibs", {})["host"] = env_host

    if env_fourcc := os.environ.get("GIBS_VIDEO_FOURCC"):
        config_data.setdefault("video", {})["fourcc"] = env_fourcc
    if env_fps := os.environ.get("GIBS_VIDEO_FPS"):
        config_data.setdefault("video", {})["fps"] = float(env_fps)
    if env_dir := os.environ.get("GIBS_VIDEO_OUTPUT_DIR"):
        config_data.setdefault("video", {})["output_dir"] = env_dir
    if env_naming := os.environ.get("GIBS_VIDEO_NAMING"):
        config_data.setdefault("video", {})["naming"] = env_naming
    if env_name := os.environ.get("GIBS_VIDEO_FILE_NAME"):
        config_data.setdefault("video", {})["file_name"] = env_name

    if env_log := os.environ.get("GIBS_VIDEO_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
