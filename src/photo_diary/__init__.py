"""Append dated photos to a notes vault diary and move them into an archive."""

__version__ = "0.1.0"
