"""Rendering layer exports."""

from .renderer import ConfigRenderer, quote

__all__ = ["ConfigRenderer", "quote"]
