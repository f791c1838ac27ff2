"""flowcanvas — node framework and dynamic port derivation for a visual pipeline editor."""

__version__ = "0.1.0"
