"""
Request URL Builder
===================

Pure composition of GIBS request URLs from the closed parameter enums.

URL Template:
    https://{host}/{service}/epsg{code}/{imagery}/{service}.{extension}

The service token is repeated as the trailing file name. This mirrors the
fixed remote path layout and is kept verbatim.

Design Rules:
    - No I/O, no shared state, safe to call from any thread
    - Total over the enums; the only failure mode is UrlConstructionError
    - Equal inputs always produce equal RequestURL values

Example:
    from gibs_video.request import build_url
    from gibs_video.models.parameters import Imagery, Projection, Service

    url = build_url(Service.WMTS, Projection.GEOGRAPHIC, Imagery.STANDARD)
    str(url)  # https://gibs.earthdata.nasa.gov/wmts/epsg4326/std/wmts.sgi
"""

import itertools
import re
from dataclasses import dataclass
from typing import Iterator
from urllib.parse import urlsplit

from gibs_video.errors import UrlConstructionError
from gibs_video.models.parameters import Imagery, Projection, Service


GIBS_HOST = "gibs.earthdata.nasa.gov"
URL_SCHEME = "https"
URL_EXTENSION = "sgi"

_TOKEN_RE = re.compile(r"^[a-z0-9]+$")
_HOST_RE = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?(\.[a-z0-9]([a-z0-9-]*[a-z0-9])?)*$")


@dataclass(frozen=True)
class RequestURL:
    """
    Validated GIBS request URL.

    Equality and hashing are structural over all fields.

    Attributes:
        url: The composed URL string
        service: Service token used in the path
        projection_code: EPSG code used in the path
        imagery: Imagery token used in the path
    """

    url: str
    service: str
    projection_code: int
    imagery: str

    def __str__(self) -> str:
        return self.url


def _check_token(name: str, value: str) -> str:
    if not isinstance(value, str) or not _TOKEN_RE.match(value):
        raise UrlConstructionError(
            f"Invalid {name} token {value!r}: expected lowercase alphanumerics"
        )
    return value


def compose_url(
    service_token: str,
    projection_code: int,
    imagery_token: str,
    host: str = GIBS_HOST,
    extension: str = URL_EXTENSION,
) -> RequestURL:
    """
    Compose and validate a request URL from raw tokens.

    Lower-level entry point for callers holding free-form tokens.
    ``build_url`` is the typed front end.

    Args:
        service_token: Service path segment (e.g. "wmts")
        projection_code: EPSG number (e.g. 4326)
        imagery_token: Imagery path segment (e.g. "std")
        host: Remote host name
        extension: Trailing file extension

    Returns:
        RequestURL

    Raises:
        UrlConstructionError: If any token is malformed or the composed
            string does not parse back to the expected shape
    """
    _check_token("service", service_token)
    _check_token("imagery", imagery_token)
    _check_token("extension", extension)

    if isinstance(projection_code, bool) or not isinstance(projection_code, int):
        raise UrlConstructionError(
            f"Invalid projection code {projection_code!r}: expected an integer"
        )
    if projection_code <= 0:
        raise UrlConstructionError(
            f"Invalid projection code {projection_code!r}: expected a positive integer"
        )
    if not isinstance(host, str) or not _HOST_RE.match(host):
        raise UrlConstructionError(f"Invalid host {host!r}")

    code = int(projection_code)
    url = (
        f"{URL_SCHEME}://{host}/{service_token}/epsg{code}/"
        f"{imagery_token}/{service_token}.{extension}"
    )

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise UrlConstructionError(f"Malformed URL {url!r}: {exc}") from exc

    expected_path = f"/{service_token}/epsg{code}/{imagery_token}/{service_token}.{extension}"
    if (
        parts.scheme != URL_SCHEME
        or parts.hostname != host
        or parts.path != expected_path
        or parts.query
        or parts.fragment
    ):
        raise UrlConstructionError(f"Malformed URL {url!r}")

    return RequestURL(
        url=url,
        service=service_token,
        projection_code=code,
        imagery=imagery_token,
    )


def build_url(
    service: Service,
    projection: Projection,
    imagery: Imagery,
    host: str = GIBS_HOST,
    extension: str = URL_EXTENSION,
) -> RequestURL:
    """
    Build the request URL for a service/projection/imagery combination.

    Args:
        service: Transport style
        projection: Coordinate reference system
        imagery: Imagery freshness tier
        host: Remote host name
        extension: Trailing file extension

    Returns:
        RequestURL

    Raises:
        UrlConstructionError: If an argument is not a member of its enum
    """
    try:
        service = Service(service)
        projection = Projection(projection)
        imagery = Imagery(imagery)
    except ValueError as exc:
        raise UrlConstructionError(str(exc)) from exc

    return compose_url(
        service.token,
        projection.code,
        imagery.token,
        host=host,
        extension=extension,
    )


def iter_request_urls(
    host: str = GIBS_HOST,
    extension: str = URL_EXTENSION,
) -> Iterator[RequestURL]:
    """Yield the URL for every service × projection × imagery combination."""
    # Iterating an Enum skips aliases, so each projection appears once
    for service, projection, imagery in itertools.product(Service, Projection, Imagery):
        yield build_url(service, projection, imagery, host=host, extension=extension)
