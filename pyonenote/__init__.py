"""Render a decoded OneNote object model into HTML fragments."""

from pyonenote.rendering.renderer import Renderer

__all__ = ["Renderer"]
