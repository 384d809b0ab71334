"""
reelscroll TUI Package.

A Textual-based terminal user interface for OMDb movie search.
"""

from .app import ReelscrollApp

__all__ = ["ReelscrollApp"]
