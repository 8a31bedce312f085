"""
Render configuration for OneNote HTML output.

Centralizes behavior flags so callers can tune defaults without touching
core logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug
    debug: bool = False

    # Paragraph style ids that describe page chrome rather than content; they
    # are never emitted as a wrapping tag.
    reserved_style_ids: Tuple[str, ...] = ("PageDateTime", "PageTitle")

    # Wrap paragraphs whose whole content is a bare http(s) URL in a link
    autolink_bare_urls: bool = True

    def is_semantic_tag(self, style_id: Optional[str]) -> bool:
        # Only plain ASCII alphanumeric ids make a well-formed element name
        if not style_id or not (style_id.isascii() and style_id.isalnum()):
            return False
        return style_id not in self.reserved_style_ids
