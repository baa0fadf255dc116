"""String, memory and pixel-image helpers, XPM loading and an in-memory display with an event loop."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "display",
    "image",
    "lines",
    "memory",
    "output",
    "text",
    "transform",
    "visual",
    "wordtab",
    "xpm",
]