"""Ordered ownership of open pages and the slot ids that index them."""

from __future__ import annotations

import logging
from typing import Iterator, Protocol

from .address import AddressResolver
from .errors import AttachFailure
from .fetcher import SourceFetcher
from .notifications import Notification, NotificationKind
from .page import Page, PageState

__all__ = ["TabRegistry", "TabRenderer", "DEFAULT_TITLE", "BLANK_TITLE"]

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "New Tab"
BLANK_TITLE = ""


class TabRenderer(Protocol):
    """The visual tab strip the registry keeps in step with its pages."""

    def attach_tab(self, label: str, page: Page) -> bool: ...

    def detach_tab(self, index: int) -> None: ...

    def relabel_tab(self, index: int, label: str) -> bool: ...

    def set_selected_index(self, index: int) -> None: ...

    def get_selected_index(self) -> int: ...


class TabRegistry:
    """Owns the open pages in display order.

    The page at position ``i`` always has ``id == i`` and the last page is
    the reserved blank tab; selecting it turns it into a real tab and a new
    blank one is appended. The registry is the sole observer of every page
    it creates.
    """

    def __init__(
        self,
        renderer: TabRenderer,
        *,
        resolver: AddressResolver | None = None,
        fetcher: SourceFetcher | None = None,
        default_title: str = DEFAULT_TITLE,
    ) -> None:
        self.renderer = renderer
        self.resolver = resolver or AddressResolver()
        self.fetcher = fetcher or SourceFetcher()
        self.default_title = default_title
        self._pages: list[Page] = []

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __getitem__(self, slot_id: int) -> Page:
        return self._pages[slot_id]

    @property
    def pages(self) -> tuple[Page, ...]:
        return tuple(self._pages)

    @property
    def blank_page(self) -> Page | None:
        return self._pages[-1] if self._pages else None

    @property
    def real_page_count(self) -> int:
        return max(len(self._pages) - 1, 0)

    @property
    def selected_page(self) -> Page | None:
        index = self.renderer.get_selected_index()
        if self.in_range(index):
            return self._pages[index]
        return None

    def in_range(self, slot_id: int) -> bool:
        return 0 <= slot_id < len(self._pages)

    def index_of(self, page: Page) -> int:
        for index, candidate in enumerate(self._pages):
            if candidate is page:
                return index
        return -1

    def page_for_handle(self, handle: int) -> Page | None:
        return next((page for page in self._pages if page.handle == handle), None)

    # -----------------------
    # Structural changes
    # -----------------------
    def create(self, title: str, address: str = "") -> Page | None:
        """Open a tab at the end. Returns the new page, or ``None`` if it could not be shown."""
        page = Page(title, address, resolver=self.resolver, fetcher=self.fetcher)
        self._pages.append(page)
        page.set_id(len(self._pages) - 1)

        try:
            attached = self.renderer.attach_tab(title, page)
        except AttachFailure as exc:
            logger.warning("%s", exc)
            attached = False
        if not attached:
            self._pages.pop()
            page.state = PageState.REMOVED
            return None

        page.bind(self)
        logger.debug("Opened %r", page)
        return page

    def open_startup_tabs(self) -> None:
        """Open the first real tab and the blank trailing tab, or raise."""
        for title in (self.default_title, BLANK_TITLE):
            if self.create(title) is None:
                raise AttachFailure(title, "startup tab could not be created")

    def promote_blank(self) -> bool:
        """Give the trailing blank tab the default title and append a fresh blank tab."""
        if not self._pages:
            return False
        if self.create(BLANK_TITLE) is None:
            return False
        return self.set_tab_title(len(self._pages) - 2, self.default_title)

    def on_blank_tab_selected(self) -> bool:
        return self.promote_blank()

    def on_selection_changed(self, index: int) -> bool:
        """React to the tab strip's selection; promotes when the blank tab was picked."""
        if self._pages and index == len(self._pages) - 1:
            return self.on_blank_tab_selected()
        return False

    def close(self, slot_id: int) -> bool:
        """Remove the page at ``slot_id`` and shift every later page down one slot.

        The blank trailing tab cannot be closed. Closing the last real tab
        first promotes the blank tab so a real tab always remains.
        """
        if not self.in_range(slot_id):
            return False
        if slot_id == len(self._pages) - 1:
            logger.debug("Refusing to close the blank trailing tab")
            return False

        page = self._pages[slot_id]
        page.state = PageState.CLOSING
        if self.real_page_count == 1 and not self.promote_blank():
            logger.warning("Could not open a replacement for the last tab")

        count = len(self._pages)
        for index in range(slot_id + 1, count):
            self._pages[index].set_id(index - 1)
        del self._pages[slot_id]

        if slot_id == count - 2 and slot_id > 0:
            self.renderer.set_selected_index(slot_id - 1)
        self.renderer.detach_tab(slot_id)

        page.state = PageState.REMOVED
        page.unbind()
        self._check_positions()
        logger.debug("Closed %r", page)
        return True

    # -----------------------
    # Labels
    # -----------------------
    def rename_slot(self, slot_id: int, title: str) -> bool:
        """Change the label shown for ``slot_id`` without touching the page."""
        if not self.in_range(slot_id):
            return False
        return self.renderer.relabel_tab(slot_id, title)

    def set_tab_title(self, slot_id: int, title: str) -> bool:
        if not self.in_range(slot_id):
            return False
        self._pages[slot_id].set_title(title)
        return True

    # -----------------------
    # Observer
    # -----------------------
    def handle(self, page: Page, notification: Notification) -> None:
        if self.index_of(page) != notification.slot_id:
            logger.warning("Ignoring %s from %r: slot is stale", notification.kind.name, page)
            return

        if notification.kind is NotificationKind.TITLE_CHANGED:
            self.rename_slot(notification.slot_id, page.title)
        elif notification.kind is NotificationKind.CLOSE_REQUESTED:
            self.close(notification.slot_id)
        else:
            logger.warning("Unrecognized page notification: %r", notification)

    def _check_positions(self) -> None:
        drifted = [(index, page) for index, page in enumerate(self._pages) if page.id != index]
        if drifted:
            logger.warning("Slot ids out of step with positions: %r", drifted)
