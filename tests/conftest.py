import pytest

from source_explorer.address import WebAddress
from source_explorer.errors import AttachFailure
from source_explorer.registry import TabRegistry


class RecordingRenderer:
    """In-memory stand-in for the tab strip; records every call it receives."""

    def __init__(self) -> None:
        self.labels: list[str] = []
        self.pages = []
        self.selected = 0
        self.calls: list[tuple] = []
        self.refuse_attach = False
        self.raise_on_attach = False

    def attach_tab(self, label, page):
        self.calls.append(("attach", label))
        if self.raise_on_attach:
            raise AttachFailure(label, "no room")
        if self.refuse_attach:
            return False
        self.labels.append(label)
        self.pages.append(page)
        return True

    def detach_tab(self, index):
        self.calls.append(("detach", index))
        del self.labels[index]
        del self.pages[index]
        if self.selected >= len(self.labels):
            self.selected = len(self.labels) - 1

    def relabel_tab(self, index, label):
        self.calls.append(("relabel", index, label))
        if not 0 <= index < len(self.labels):
            return False
        self.labels[index] = label
        return True

    def set_selected_index(self, index):
        self.calls.append(("select", index))
        self.selected = index

    def get_selected_index(self):
        return self.selected


class FakeFetcher:
    """Returns canned sources keyed by URL; anything unknown fails like a dead host."""

    def __init__(self, pages=None) -> None:
        self.pages = dict(pages or {})
        self.calls: list[str] = []

    def fetch(self, address):
        url = address.url if isinstance(address, WebAddress) else str(address)
        self.calls.append(url)
        return self.pages.get(url)


class Recorder:
    """Observer that only remembers what it was told."""

    def __init__(self) -> None:
        self.seen = []

    def handle(self, page, notification):
        self.seen.append((page, notification))


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def fetcher():
    return FakeFetcher(
        {
            "http://example.com": "<html>\n<body>hi</body>\n</html>\n",
            "https://empty.example": "",
        }
    )


@pytest.fixture
def registry(renderer, fetcher):
    registry = TabRegistry(renderer, fetcher=fetcher)
    registry.open_startup_tabs()
    return registry


def assert_positions(registry):
    for index, page in enumerate(registry):
        assert page.id == index
