"""Utility helpers shared across the package."""

from . import file_io, logging

__all__ = ["file_io", "logging"]
