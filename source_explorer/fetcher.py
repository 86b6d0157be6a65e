"""Blocking retrieval of the raw source behind a web address."""

from __future__ import annotations

import http.client
import io
import logging
import urllib.request

from .address import WebAddress

__all__ = ["SourceFetcher", "DEFAULT_USER_AGENT"]

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "SourceExplorer/0.1"


class SourceFetcher:
    """Read the whole text stream behind an address.

    ``fetch`` returns ``None`` on any I/O, protocol or decoding failure and
    the (possibly empty) text otherwise. Callers must treat ``""`` as a
    separate outcome from ``None``.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        encoding: str = "utf-8",
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.timeout = timeout
        self.encoding = encoding
        self.user_agent = user_agent

    def fetch(self, address: WebAddress | str) -> str | None:
        url = address.url if isinstance(address, WebAddress) else str(address)
        try:
            request = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
            with self._open(request) as response:
                body = response.read()
            # newline=None folds \r\n and bare \r into \n
            stream = io.TextIOWrapper(io.BytesIO(body), encoding=self.encoding, newline=None)
            lines = [line.rstrip("\n") + "\n" for line in stream]
        except (OSError, ValueError, LookupError, http.client.HTTPException) as exc:
            # UnicodeDecodeError is a ValueError, an unknown codec a LookupError
            logger.warning("Failed to fetch %s: %s", url, exc)
            return None
        logger.debug("Fetched %d lines from %s", len(lines), url)
        return "".join(lines)

    def _open(self, request: urllib.request.Request):
        if self.timeout is None:
            return urllib.request.urlopen(request)
        return urllib.request.urlopen(request, timeout=self.timeout)
