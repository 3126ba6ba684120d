"""Byte sources the extractor can read from.

Exports:
- ``path_opener``: open a local file.
- ``LogDownloadClient``: stream a file over HTTP(S).
- ``is_url`` / ``url_display_name``: helpers for mixed path/URL inputs.
"""

from hobbs_time.sources.local import SourceOpener, path_opener
from hobbs_time.sources.remote import LogDownloadClient, ResponseStream, url_display_name

URL_SCHEMES = ("http://", "https://")


def is_url(location: str) -> bool:
    return location.lower().startswith(URL_SCHEMES)


__all__ = [
    "LogDownloadClient",
    "ResponseStream",
    "SourceOpener",
    "is_url",
    "path_opener",
    "url_display_name",
]
