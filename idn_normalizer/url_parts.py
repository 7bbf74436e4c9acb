# idn_normalizer/url_parts.py

from dataclasses import dataclass, replace
from typing import Optional
from urllib.parse import urlsplit

from idn_normalizer.errors import InvalidUrlError


@dataclass(frozen=True)
class UrlComponents:
    """
    A URL taken apart around its host.

    Every field except port is a verbatim slice of the parsed string, so
    to_url() gives back the input byte for byte until the host is replaced.
    raw_port keeps the port exactly as written ("08080", or "" for a bare
    trailing colon); port is its integer value.
    """
    scheme: str
    host: str
    port: Optional[int] = None
    rest: str = ""
    userinfo: Optional[str] = None
    raw_port: Optional[str] = None

    @property
    def authority(self) -> str:
        authority = self.host
        if self.userinfo is not None:
            authority = f"{self.userinfo}@{authority}"
        if self.raw_port is not None:
            authority = f"{authority}:{self.raw_port}"
        elif self.port is not None:
            authority = f"{authority}:{self.port}"
        return authority

    def replace_host(self, host: str) -> "UrlComponents":
        return replace(self, host=host)

    def to_url(self) -> str:
        return f"{self.scheme}://{self.authority}{self.rest}"


def _split_host_port(hostport: str) -> tuple[str, Optional[str]]:
    # IPv6 literals keep their brackets; the colons inside are not a port
    if hostport.startswith("["):
        end = hostport.find("]") + 1
        host, tail = hostport[:end], hostport[end:]
        if not tail:
            return host, None
        if not tail.startswith(":"):
            raise InvalidUrlError(f"Invalid URL: unexpected {tail!r} after IPv6 host")
        return host, tail[1:]

    host, colon, port = hostport.partition(":")
    return host, (port if colon else None)


def split_url(url: str) -> Optional[UrlComponents]:
    """
    Decomposes a URL into scheme, host, port and the remaining path/query/fragment.

    Args:
        url: The URL to decompose

    Returns:
        UrlComponents, or None when the URL has no authority to rewrite
        (relative and network-path references, "mailto:", "file:///...")

    Raises:
        InvalidUrlError: If the URL parser rejects the input
    """
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {e}") from e

    if not parts.scheme or not parts.netloc:
        return None

    # The authority must follow "scheme:" directly. urlsplit drops tab/CR/LF,
    # so a netloc that held one does not appear there verbatim.
    marker = "//" + parts.netloc
    start = url.find("//")
    prefix = url[:start]
    if start < 0 or "/" in prefix or not prefix.endswith(":") or not url.startswith(marker, start):
        raise InvalidUrlError("Invalid URL: authority contains control characters")

    userinfo, at, hostport = parts.netloc.rpartition("@")
    host, raw_port = _split_host_port(hostport)

    return UrlComponents(
        scheme=url[:start - 1],
        host=host,
        port=port,
        rest=url[start + len(marker):],
        userinfo=userinfo if at else None,
        raw_port=raw_port,
    )


def join_url(components: UrlComponents) -> str:
    """Rebuilds the URL string from its components."""
    return components.to_url()
