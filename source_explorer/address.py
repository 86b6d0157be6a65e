"""Validation and normalization of user-typed web addresses."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

__all__ = ["WebAddress", "AddressResolver", "resolve_address", "DEFAULT_SCHEME"]

DEFAULT_SCHEME = "http://"
DIRECT_PREFIXES = ("http://", "https://")
SUPPORTED_SCHEMES = frozenset({"http", "https", "ftp", "file"})
NETWORK_SCHEMES = frozenset({"http", "https", "ftp"})


@dataclass(frozen=True)
class WebAddress:
    """An address as typed by the user plus the URL it resolved to."""

    raw: str
    url: str

    def __str__(self) -> str:
        return self.url


def _attempt_url(candidate: str) -> str | None:
    """Return the normalized URL for ``candidate`` or ``None`` if malformed."""
    if not candidate or any(char.isspace() for char in candidate):
        return None
    try:
        parts = urlsplit(candidate)
        _ = parts.port  # raises ValueError for a bad port
    except ValueError:
        return None
    if parts.scheme not in SUPPORTED_SCHEMES:
        return None
    if parts.scheme in NETWORK_SCHEMES and not parts.hostname:
        return None
    if parts.scheme == "file" and not parts.path:
        return None
    return parts.geturl()


def resolve_address(raw: str | None) -> WebAddress | None:
    """Resolve ``raw`` to a fetchable address.

    The text is tried verbatim first. When that fails and it does not
    already carry an ``http://``/``https://`` prefix, ``http://`` is
    prepended and the resolution is attempted once more.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None

    url = _attempt_url(text)
    if url is None and not text.lower().startswith(DIRECT_PREFIXES):
        url = _attempt_url(DEFAULT_SCHEME + text)
    if url is None:
        return None
    return WebAddress(raw=text, url=url)


class AddressResolver:
    """Object form of :func:`resolve_address` so pages can take it as a collaborator."""

    def resolve(self, raw: str | None) -> WebAddress | None:
        return resolve_address(raw)
