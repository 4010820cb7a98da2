"""Shared utilities that are not part of the rendering math."""

from .logging import setup_default_logging

__all__ = ["setup_default_logging"]
