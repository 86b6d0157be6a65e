"""Logical state of one open tab."""

from __future__ import annotations

import enum
import itertools
import logging

from .address import AddressResolver, WebAddress
from .errors import FetchFailure, InvalidAddress
from .fetcher import SourceFetcher
from .notifications import Notification, NotificationKind, PageObserver

__all__ = ["Page", "PageState"]

logger = logging.getLogger(__name__)

_handles = itertools.count(1)


class PageState(enum.Enum):
    OPEN = "open"
    CLOSING = "closing"
    REMOVED = "removed"


class Page:
    """One tab: its address, its title and the source loaded for it.

    ``id`` is the page's current slot in the registry and changes as tabs
    before it close. ``handle`` never changes and is never reused, so it is
    the value to hold on to across a fetch.
    """

    def __init__(
        self,
        title: str,
        address: str = "",
        *,
        resolver: AddressResolver | None = None,
        fetcher: SourceFetcher | None = None,
        observer: PageObserver | None = None,
    ) -> None:
        self.id = 0
        self.handle = next(_handles)
        self.title = title
        self.address = address
        self.source = ""
        self.state = PageState.OPEN
        self.resolver = resolver or AddressResolver()
        self.fetcher = fetcher or SourceFetcher()
        self._observer = observer

    def __repr__(self) -> str:
        return f"Page(id={self.id}, handle={self.handle}, title={self.title!r}, state={self.state.value})"

    @property
    def is_open(self) -> bool:
        return self.state is PageState.OPEN

    @property
    def observer(self) -> PageObserver | None:
        return self._observer

    def bind(self, observer: PageObserver) -> None:
        """Attach the owning observer. A page reports to exactly one."""
        if self._observer is not None and self._observer is not observer:
            raise ValueError(f"{self!r} already has an observer")
        self._observer = observer

    def unbind(self) -> None:
        self._observer = None

    def set_id(self, new_id: int) -> None:
        # Registry bookkeeping only; never notifies.
        self.id = new_id

    def set_title(self, title: str) -> None:
        self.title = title
        self._notify(NotificationKind.TITLE_CHANGED)

    def request_close(self) -> None:
        """Ask the observer to close this page. The page itself does not change."""
        self._notify(NotificationKind.CLOSE_REQUESTED)

    def resolve(self, raw: str) -> WebAddress:
        address = self.resolver.resolve(raw)
        if address is None:
            raise InvalidAddress(raw)
        return address

    def apply_source(self, address: WebAddress, text: str | None) -> bool:
        """Install fetched ``text`` for ``address``.

        Returns ``False`` without touching anything when the page has
        started closing, so a fetch that finishes after its tab is gone is
        dropped. Raises :class:`FetchFailure` when there is nothing to show.
        """
        if not self.is_open:
            logger.debug("Discarding source for %s: %r is %s", address, self, self.state.value)
            return False
        if not text:
            raise FetchFailure(address.url)
        self.source = text
        self.address = address.url
        self.set_title(address.url)
        return True

    def submit(self, raw: str) -> WebAddress:
        """Resolve ``raw``, fetch it and show the result, all on the calling thread."""
        address = self.resolve(raw)
        self.apply_source(address, self.fetcher.fetch(address))
        return address

    def _notify(self, kind: NotificationKind) -> None:
        if self._observer is None:
            logger.debug("%r has no observer, dropping %s", self, kind.name)
            return
        self._observer.handle(self, Notification(self.id, kind))
