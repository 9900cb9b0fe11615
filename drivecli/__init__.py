"""Local account, archive and file helpers for a cloud drive command line client."""

__version__ = "3.9.0"