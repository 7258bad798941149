"""Hobby Service - discovery, recommendations and hobby forums."""

__version__ = "0.1.0"
