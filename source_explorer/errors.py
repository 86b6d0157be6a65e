"""Exceptions raised by Source Explorer."""

from __future__ import annotations

__all__ = ["SourceExplorerError", "InvalidAddress", "FetchFailure", "AttachFailure"]


class SourceExplorerError(Exception):
    """Base class for every error the explorer reports to the user."""


class InvalidAddress(SourceExplorerError):
    """No form of the submitted text could be resolved to a URL."""

    def __init__(self, raw: str) -> None:
        super().__init__("Invalid URL!")
        self.raw = raw


class FetchFailure(SourceExplorerError):
    """The address resolved but its source could not be loaded (or was empty)."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Failed to load item at address:\n{address}")
        self.address = address


class AttachFailure(SourceExplorerError):
    """The tab widgets for a new page could not be attached."""

    def __init__(self, label: str, reason: str | None = None) -> None:
        message = f"Could not attach tab {label!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.label = label
