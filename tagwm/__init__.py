"""Building blocks for a tag-based tiling window manager: clients, monitors, size hints, bar geometry, text measurement, UTF-8 decoding, box-drawing shapes and option scanning."""

__version__ = "0.1.0"