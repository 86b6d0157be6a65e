"""Tab strip that mirrors the registry's slots on a Textual ``TabbedContent``."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.await_complete import AwaitComplete
from textual.content import Content
from textual.css.query import NoMatches
from textual.message import Message
from textual.widget import Widget
from textual.widgets import TabbedContent, TabPane, Tabs

from ..errors import AttachFailure
from ..page import Page
from .page_view import PageView

__all__ = ["SourceTabs", "BLANK_LABEL"]

logger = logging.getLogger(__name__)

BLANK_LABEL = "+"


def _display_label(label: str) -> Content:
    # The blank trailing tab still needs something to click on. Plain text, no markup.
    return Content(label or BLANK_LABEL)


class SourceTabs(Widget):
    """Index-addressed tabs.

    Pane ids are kept in slot order so the registry can talk in slot
    indexes. Visual changes are queued on this widget so they apply in the
    order the registry requested them, even while a pane is still mounting.
    """

    DEFAULT_CSS = """
    SourceTabs {
        height: 1fr;
    }

    SourceTabs > TabbedContent {
        height: 1fr;
    }
    """

    class SelectionChanged(Message):
        """The user (or the registry) activated another tab."""

        def __init__(self, sender: Widget, pane_id: str) -> None:
            super().__init__()
            self.set_sender(sender)
            self.pane_id = pane_id

    def __init__(self, **widget_kwargs) -> None:
        super().__init__(**widget_kwargs)
        self._pane_ids: list[str] = []
        self._labels: dict[str, str] = {}
        self._pending: dict[str, AwaitComplete] = {}

    def compose(self) -> ComposeResult:
        yield TabbedContent(id="source-tabs")

    @property
    def tabbed(self) -> TabbedContent:
        return self.query_one("#source-tabs", TabbedContent)

    @property
    def pane_ids(self) -> tuple[str, ...]:
        return tuple(self._pane_ids)

    @staticmethod
    def pane_id_for(page: Page) -> str:
        return f"page-{page.handle}"

    def index_of_pane(self, pane_id: str) -> int:
        try:
            return self._pane_ids.index(pane_id)
        except ValueError:
            return -1

    def label_at(self, index: int) -> str:
        return self._labels[self._pane_ids[index]]

    def view_for(self, page: Page) -> PageView:
        pane = self.tabbed.get_pane(self.pane_id_for(page))
        return pane.query_one(PageView)

    async def settle(self) -> None:
        """Wait until every attached pane has finished mounting."""
        while self._pending:
            pane_id, pending = next(iter(self._pending.items()))
            await pending
            self._pending.pop(pane_id, None)

    # -----------------------
    # TabRenderer
    # -----------------------
    def attach_tab(self, label: str, page: Page) -> bool:
        pane_id = self.pane_id_for(page)
        pane = TabPane(_display_label(label), PageView(page), id=pane_id)
        try:
            pending = self.tabbed.add_pane(pane)
        except (NoMatches, Tabs.TabError) as exc:
            raise AttachFailure(label, str(exc)) from exc
        self._pane_ids.append(pane_id)
        self._labels[pane_id] = label
        self._pending[pane_id] = pending
        return True

    def detach_tab(self, index: int) -> None:
        if not 0 <= index < len(self._pane_ids):
            logger.warning("No tab at index %d to detach", index)
            return
        pane_id = self._pane_ids.pop(index)
        self._labels.pop(pane_id, None)
        self.call_later(self._remove_pane, pane_id)

    def relabel_tab(self, index: int, label: str) -> bool:
        if not 0 <= index < len(self._pane_ids):
            return False
        pane_id = self._pane_ids[index]
        self._labels[pane_id] = label
        self.call_later(self._sync_label, pane_id)
        return True

    def set_selected_index(self, index: int) -> None:
        if not 0 <= index < len(self._pane_ids):
            logger.warning("No tab at index %d to select", index)
            return
        self.call_later(self._select_pane, self._pane_ids[index])

    def get_selected_index(self) -> int:
        return self.index_of_pane(self.tabbed.active)

    # -----------------------
    # Queued visual updates
    # -----------------------
    async def _wait_for(self, pane_id: str) -> None:
        pending = self._pending.get(pane_id)
        if pending is not None:
            await pending
            self._pending.pop(pane_id, None)

    async def _remove_pane(self, pane_id: str) -> None:
        await self._wait_for(pane_id)
        await self.tabbed.remove_pane(pane_id)

    async def _sync_label(self, pane_id: str) -> None:
        await self._wait_for(pane_id)
        label = self._labels.get(pane_id)
        if label is None:
            return
        try:
            self.tabbed.get_tab(pane_id).label = _display_label(label)
        except NoMatches:
            logger.debug("Tab %s went away before it could be relabelled", pane_id)

    async def _select_pane(self, pane_id: str) -> None:
        await self._wait_for(pane_id)
        if pane_id in self._pane_ids:
            self.tabbed.active = pane_id

    # -----------------------
    # Event handlers
    # -----------------------
    def on_tabbed_content_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        event.stop()
        pane_id = event.pane.id
        if pane_id is not None:
            self.post_message(self.SelectionChanged(self, pane_id))
