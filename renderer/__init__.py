"""Renderers for marble draw."""

from .text_renderer import TextRenderer

__all__ = ["TextRenderer"]
