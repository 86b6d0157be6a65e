"""Notifications a page sends to the single observer that owns it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .page import Page

__all__ = ["NotificationKind", "Notification", "PageObserver"]


class NotificationKind(enum.Enum):
    """What happened to the page that sent the notification."""

    TITLE_CHANGED = "title_changed"
    CLOSE_REQUESTED = "close_requested"


@dataclass(frozen=True)
class Notification:
    """Immutable ``{slot_id, kind}`` pair.

    Carries no payload; the observer reads whatever it needs (the new
    title, for instance) from the page itself.
    """

    slot_id: int
    kind: NotificationKind


class PageObserver(Protocol):
    """The one object a page reports to. Dispatch is synchronous."""

    def handle(self, page: Page, notification: Notification) -> None: ...
