"""The Source Explorer application."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from .address import AddressResolver
from .config import ExplorerConfig
from .errors import AttachFailure
from .fetcher import SourceFetcher
from .registry import TabRegistry
from .ui import SourceTabs

__all__ = ["SourceExplorerApp", "FATAL_INIT_MESSAGE"]

logger = logging.getLogger(__name__)

FATAL_INIT_MESSAGE = (
    "Fatal initialization error, cannot start Source Explorer. "
    "The process is most likely out of memory."
)


class SourceExplorerApp(App):
    """Tabbed viewer for the raw source of web pages."""

    TITLE = "Source Explorer"
    BINDINGS = [
        Binding("ctrl+t", "new_tab", "New tab", priority=True),
        # Input binds ctrl+w to delete a word; the tab binding wins.
        Binding("ctrl+w", "close_tab", "Close tab", priority=True),
    ]
    CSS = """
    #tabs {
        height: 1fr;
    }
    """

    def __init__(
        self,
        config: ExplorerConfig | None = None,
        *,
        resolver: AddressResolver | None = None,
        fetcher: SourceFetcher | None = None,
    ) -> None:
        super().__init__()
        self.config = config or ExplorerConfig()
        if fetcher is None:
            fetcher = SourceFetcher(
                timeout=self.config.timeout,
                encoding=self.config.encoding,
                user_agent=self.config.user_agent,
            )
        self.tabs = SourceTabs(id="tabs")
        self.registry = TabRegistry(
            self.tabs,
            resolver=resolver,
            fetcher=fetcher,
            default_title=self.config.default_title,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        yield self.tabs
        yield Footer()

    async def on_mount(self) -> None:
        try:
            self.registry.open_startup_tabs()
        except (AttachFailure, MemoryError):
            logger.exception("Could not open the startup tabs")
            self.exit(return_code=1, message=FATAL_INIT_MESSAGE)
            return
        await self.tabs.settle()

        for index, raw in enumerate(self.config.addresses):
            if index > 0 and not self.registry.promote_blank():
                self.notify(f"Could not open a tab for {raw}", severity="error", markup=False)
                continue
            await self.tabs.settle()
            page = self.registry[len(self.registry) - 2]
            self.tabs.view_for(page).load(raw)

    def on_source_tabs_selection_changed(self, message: SourceTabs.SelectionChanged) -> None:
        self.registry.on_selection_changed(self.tabs.index_of_pane(message.pane_id))

    def action_new_tab(self) -> None:
        if self.registry.promote_blank():
            self.tabs.set_selected_index(len(self.registry) - 2)

    def action_close_tab(self) -> None:
        page = self.registry.selected_page
        if page is not None and page is not self.registry.blank_page:
            page.request_close()
