"""Textual widgets for Source Explorer."""

from .page_view import PageView
from .tabs import SourceTabs

__all__ = ["PageView", "SourceTabs"]
