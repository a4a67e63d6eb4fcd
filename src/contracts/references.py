# Helpers for the URL references that link entities to each other.
# A reference is only an address; resolving it is always a separate request.

from __future__ import annotations

import re
from collections.abc import Iterable

_TRAILING_ID_RE = re.compile(r"/(\d+)/?$")


def resource_id_from_url(url: str) -> int:
    """Return the numeric id at the end of a canonical resource URL."""

    match = _TRAILING_ID_RE.search(url.strip())
    if not match:
        raise ValueError(f"URL does not end with a resource id: {url!r}")
    return int(match.group(1))


def ids_from_urls(urls: Iterable[str]) -> list[int]:
    return [resource_id_from_url(url) for url in urls]
