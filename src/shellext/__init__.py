"""shellext - project generator for GNOME Shell extensions."""

__version__ = "0.1.0"
