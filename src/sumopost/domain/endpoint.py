from __future__ import annotations

import re
import string

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from sumopost.domain.errors import BuildingClientError

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_HEX = frozenset(string.hexdigits)
_SCHEME_TAIL = frozenset(string.digits + "+-.")
_USERINFO_CHARS = frozenset(string.ascii_letters + string.digits + "-._:~!$&'()*+,;=%@")
_HOST_CHARS = frozenset(string.ascii_letters + string.digits + "-_.~!$&'()*+,;=:[]<>\"")


class LogEndpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str

    @field_validator("url")
    @classmethod
    def ensure_parseable(cls, value: str) -> str:
        return check_url(value)


def new_log_endpoint(url: str) -> LogEndpoint:
    """Build an endpoint for ``url``, raising BuildingClientError if it does not parse.

    The address is kept exactly as given. Scheme and host are not checked, so
    ``""`` or ``"/relative"`` are accepted and only fail once something is posted.
    """
    try:
        return LogEndpoint(url=url)
    except ValidationError as exc:
        raise BuildingClientError(f"unable to build client using the URL '{url}'") from exc


def check_url(url: str) -> str:
    """Return ``url`` unchanged if it parses as a URL reference, else raise ValueError.

    Only syntax is checked: ports are not range checked and bracketed hosts are
    not required to hold an IP address.
    """
    rest, _, fragment = url.partition("#")
    if _CONTROL_CHARS.search(rest):
        raise ValueError("invalid control character in URL")
    _unescape(fragment)
    if rest in ("", "*"):
        return url

    scheme, rest = _split_scheme(rest)
    rest = rest.partition("?")[0]
    if not rest.startswith("/"):
        if scheme:
            # opaque, e.g. mailto:ops@example.com
            return url
        if ":" in rest.partition("/")[0]:
            raise ValueError("first path segment in URL cannot contain colon")

    if (scheme or not rest.startswith("///")) and rest.startswith("//"):
        authority, slash, path = rest[2:].partition("/")
        _check_authority(authority)
        rest = slash + path
    _unescape(rest)
    return url


def _split_scheme(raw: str) -> tuple[str, str]:
    for index, char in enumerate(raw):
        if char in string.ascii_letters:
            continue
        if char in _SCHEME_TAIL:
            if index == 0:
                return "", raw
            continue
        if char == ":":
            if index == 0:
                raise ValueError("missing protocol scheme")
            return raw[:index].lower(), raw[index + 1 :]
        return "", raw
    return "", raw


def _check_authority(authority: str) -> None:
    userinfo, at, host = authority.rpartition("@")
    if at:
        if not set(userinfo) <= _USERINFO_CHARS:
            raise ValueError("invalid userinfo")
        _unescape(userinfo)
    _check_host(host)


def _check_host(host: str) -> None:
    if host.startswith("["):
        end = host.rfind("]")
        if end < 0:
            raise ValueError("missing ']' in host")
        _check_port(host[end + 1 :])
        zone = host.find("%25", 0, end)
        if zone >= 0:
            _unescape(host[:zone], in_host=True)
            _unescape(host[zone:end], in_host=True, zone=True)
            _unescape(host[end:], in_host=True)
            return
    elif ":" in host:
        _check_port(host[host.rfind(":") :])
    _unescape(host, in_host=True)


def _check_port(port: str) -> None:
    if not port:
        return
    if port[0] != ":" or not all(char in string.digits for char in port[1:]):
        raise ValueError(f"invalid port {port!r} after host")


def _unescape(text: str, in_host: bool = False, zone: bool = False) -> None:
    index = 0
    while index < len(text):
        char = text[index]
        if char == "%":
            escape = text[index + 1 : index + 3]
            if len(escape) < 2 or not set(escape) <= _HEX:
                raise ValueError(f"invalid URL escape {text[index:index + 3]!r}")
            if in_host and escape != "25":
                value = chr(int(escape, 16))
                if zone:
                    if value != " " and value not in _HOST_CHARS:
                        raise ValueError(f"invalid URL escape {'%' + escape!r}")
                elif value < "\x80":
                    raise ValueError(f"invalid URL escape {'%' + escape!r}")
            index += 3
            continue
        if in_host and char < "\x80" and char not in _HOST_CHARS:
            raise ValueError(f"invalid character {char!r} in host name")
        index += 1
