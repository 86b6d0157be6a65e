"""Contents of a single tab: address bar, buttons and the fetched source."""

from __future__ import annotations

import asyncio

from rich.text import Text

from textual import work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import Button, Input, Static

from ..errors import FetchFailure, InvalidAddress
from ..page import Page

__all__ = ["PageView", "AddressInput", "format_status"]

STATUS_PLACEHOLDER = "Enter an address and press Go."


def format_status(address: str | None, source: str | None) -> str:
    if not address:
        return STATUS_PLACEHOLDER
    if source is None:
        return f"Loading {address} ..."
    lines = source.count("\n")
    noun = "line" if lines == 1 else "lines"
    return f"{lines} {noun} from {address}"


class AddressInput(Input):
    def __init__(self, value: str = "") -> None:
        super().__init__(value=value, placeholder="example.com")
        self.id = "address"


class PageView(Widget):
    """View of one :class:`Page`. Drives the page; never touches the registry."""

    DEFAULT_CSS = """
    PageView {
        layout: vertical;
        height: 1fr;
    }

    PageView .page-header {
        height: auto;
    }

    PageView #address {
        width: 1fr;
    }

    PageView #go, PageView #close {
        min-width: 6;
        width: auto;
    }

    PageView #status {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }

    PageView #source-scroll {
        height: 1fr;
        border: round $surface;
    }
    """

    def __init__(self, page: Page, **widget_kwargs) -> None:
        super().__init__(**widget_kwargs)
        self.page = page

    def compose(self) -> ComposeResult:
        with Vertical():
            with Horizontal(classes="page-header"):
                yield AddressInput(self.page.address)
                yield Button("Go", id="go", variant="primary")
                yield Button("x", id="close", variant="error")
            status = format_status(self.page.address, self.page.source) if self.page.source else STATUS_PLACEHOLDER
            yield Static(Text(status), id="status")
            yield VerticalScroll(Static(Text(self.page.source), id="source"), id="source-scroll")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.load(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "go":
            self.load(self.query_one("#address", Input).value)
        elif event.button.id == "close":
            self.page.request_close()

    @work(exclusive=True, group="fetch")
    async def load(self, raw: str) -> None:
        """Resolve and fetch ``raw`` off the event loop, then apply it to the page."""
        page = self.page
        try:
            address = page.resolve(raw)
        except InvalidAddress as exc:
            self.app.notify(str(exc), severity="error", markup=False)
            return

        self._update_status(format_status(address.url, None))
        text = await asyncio.to_thread(page.fetcher.fetch, address)
        try:
            applied = page.apply_source(address, text)
        except FetchFailure as exc:
            self._update_status(format_status(page.address, page.source))
            self.app.notify(str(exc), severity="error", markup=False)
            return
        if applied:
            self.show_source(page.source)
            self.query_one("#address", Input).value = page.address
            self._update_status(format_status(page.address, page.source))

    def show_source(self, source: str) -> None:
        self.query_one("#source", Static).update(Text(source))
        self.query_one("#source-scroll", VerticalScroll).scroll_home(animate=False)

    def _update_status(self, message: str) -> None:
        self.query_one("#status", Static).update(Text(message))
