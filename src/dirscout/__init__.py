"""Inspect and manipulate a local filesystem tree."""

__version__ = "0.1.0"
