"""Paper backend: folder management service."""

__version__ = "0.0.1"
