"""reelscroll - search OMDb and scroll through paginated results."""

__version__ = "0.1.0"
