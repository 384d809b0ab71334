"""
Search Panel Widget.

Exports the SearchPanel widget for OMDb search functionality.
"""

from .search_panel import SearchPanel

__all__ = ["SearchPanel"]
