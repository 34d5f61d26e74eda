from __future__ import annotations

from urllib.error import HTTPError
from urllib.parse import quote, urlsplit, urlunsplit
from urllib.request import Request, urlopen

_PATH_SAFE = "/%:@!$&'()*+,;=~"
_QUERY_SAFE = _PATH_SAFE + "?"


def post(url: str, data: bytes) -> int:
    """POST ``data`` to ``url`` and return the response status code.

    The response is closed without reading its body. Error statuses are returned
    like any other; transport failures raise.
    """
    request = Request(request_url(url), data=data, method="POST")
    try:
        with urlopen(request) as response:
            return response.status
    except HTTPError as exc:
        try:
            return exc.code
        finally:
            exc.close()


def request_url(url: str) -> str:
    """Percent-encode spaces and non-ASCII characters in the path and query of ``url``."""
    parts = urlsplit(url)
    return urlunsplit(
        parts._replace(
            path=quote(parts.path, safe=_PATH_SAFE),
            query=quote(parts.query, safe=_QUERY_SAFE),
        )
    )
