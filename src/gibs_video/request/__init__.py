"""
Request Module
==============

Pure construction of GIBS request URLs.
"""

from gibs_video.request.url_builder import (
    GIBS_HOST,
    URL_EXTENSION,
    RequestURL,
    build_url,
    compose_url,
    iter_request_urls,
)


__all__ = [
    "GIBS_HOST",
    "URL_EXTENSION",
    "RequestURL",
    "build_url",
    "compose_url",
    "iter_request_urls",
]
