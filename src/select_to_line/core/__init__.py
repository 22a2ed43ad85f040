"""Core coordinate types shared across the package."""

from .positions import TextPosition, clamp_index

__all__ = ["TextPosition", "clamp_index"]
