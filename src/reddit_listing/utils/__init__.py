"""Utility helpers for the Reddit listing client."""

from .logging import setup_logging

__all__ = ["setup_logging"]
