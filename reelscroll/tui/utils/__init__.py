"""
TUI utility functions.

Exports formatting helpers used by the search screen.
"""

from .formatters import (
    EMPTY_RESULTS_TEXT,
    IDLE_TEXT,
    LOADING_MORE_TEXT,
    format_status,
    format_footer,
    styled_footer,
    format_poster,
)

__all__ = [
    "EMPTY_RESULTS_TEXT",
    "IDLE_TEXT",
    "LOADING_MORE_TEXT",
    "format_status",
    "format_footer",
    "styled_footer",
    "format_poster",
]
