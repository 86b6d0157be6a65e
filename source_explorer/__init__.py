"""Source Explorer: view the raw source of web pages in tabs."""

from .address import AddressResolver, WebAddress, resolve_address
from .errors import AttachFailure, FetchFailure, InvalidAddress, SourceExplorerError
from .fetcher import SourceFetcher
from .notifications import Notification, NotificationKind, PageObserver
from .page import Page, PageState
from .registry import TabRegistry, TabRenderer

__version__ = "0.1.0"

__all__ = [
    "AddressResolver",
    "WebAddress",
    "resolve_address",
    "SourceFetcher",
    "Notification",
    "NotificationKind",
    "PageObserver",
    "Page",
    "PageState",
    "TabRegistry",
    "TabRenderer",
    "SourceExplorerError",
    "InvalidAddress",
    "FetchFailure",
    "AttachFailure",
    "main",
]


def main(argv=None) -> int:
    from .app import SourceExplorerApp
    from .config import parse_config
    from .logs import configure_logging

    config = parse_config(argv)
    configure_logging(config.log_level, config.log_file)
    app = SourceExplorerApp(config)
    app.run()
    return app.return_code or 0
