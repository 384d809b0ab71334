"""
TUI Widget package.

Exports all custom widgets used in the TUI application.
"""

from .search_panel import SearchPanel

__all__ = [
    "SearchPanel",
]
