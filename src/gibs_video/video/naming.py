"""
Artifact Naming
===============

Strategies that choose the output file name for an assembled video.

A naming strategy is any callable taking the file extension (without the
dot) and returning a file name. The default draws a fresh random token.
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, Optional, Protocol


class NamingStrategy(Protocol):
    """Callable returning an output file name for ``extension``."""

    def __call__(self, extension: str) -> str:
        ...


class RandomNaming:
    """Fresh uuid4 per call, e.g. ``3f2b....mp4``."""

    def __call__(self, extension: str) -> str:
        return f"{uuid.uuid4()}.{extension}"


class FixedNaming:
    """
    Caller-chosen name.

    The extension is appended only when ``name`` has no suffix.
    """

    def __init__(self, name: str) -> None:
        if not name or "/" in name or "\\" in name:
            raise ValueError(f"Invalid artifact file name: {name!r}")
        self.name = name

    def __call__(self, extension: str) -> str:
        if "." in self.name:
            return self.name
        return f"{self.name}.{extension}"


class TimestampNaming:
    """``<prefix>_<UTC timestamp>.<ext>``, e.g. ``gibs_20240101T120000Z.mp4``."""

    def __init__(
        self,
        prefix: str = "gibs",
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.prefix = prefix
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def __call__(self, extension: str) -> str:
        stamp = self._clock().strftime("%Y%m%dT%H%M%SZ")
        return f"{self.prefix}_{stamp}.{extension}"


def naming_from_config(naming: str, file_name: Optional[str] = None) -> NamingStrategy:
    """
    Build a naming strategy from its configuration name.

    Args:
        naming: "random", "fixed" or "timestamp"
        file_name: Required when naming is "fixed"

    Raises:
        ValueError: On an unknown strategy or a missing fixed name
    """
    if naming == "random":
        return RandomNaming()
    if naming == "timestamp":
        return TimestampNaming()
    if naming == "fixed":
        if not file_name:
            raise ValueError("naming 'fixed' requires video.file_name")
        return FixedNaming(file_name)
    raise ValueError(f"Unknown naming strategy: {naming!r}")
