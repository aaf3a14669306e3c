"""Ocean pollution news digest service."""

__version__ = "0.1.0"
