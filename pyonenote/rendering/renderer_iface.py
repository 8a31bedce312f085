"""
Note-tag seam for the renderer.

Note tags (to-do boxes, flags, ...) are rendered by a `NoteTagRenderer`. The
paragraph and attachment renderers only splice its markup in and merge the
styles it contributes.
"""

from __future__ import annotations

import html
from typing import List, Optional, Protocol, Sequence, Tuple

from ..models import NoteTag
from .styles import StyleSet, rgb

NoteTagMarkup = Tuple[str, StyleSet]


class NoteTagRenderer(Protocol):
    """Renders the note tags of one content node."""

    def render_note_tags(
        self, note_tags: Sequence[NoteTag]
    ) -> Optional[NoteTagMarkup]: ...


class CheckboxNoteTagRenderer:
    """Default note tags: disabled checkboxes for to-dos, labels otherwise."""

    def render_note_tags(
        self, note_tags: Sequence[NoteTag]
    ) -> Optional[NoteTagMarkup]:
        if not note_tags:
            return None

        markup: List[str] = []
        styles = StyleSet()
        for tag in note_tags:
            if tag.checkable:
                checked = " checked" if tag.completed else ""
                markup.append(f'<input type="checkbox" disabled{checked}> ')
            elif tag.label:
                markup.append(
                    f'<span class="note-tag">{html.escape(tag.label)}</span> '
                )
            if tag.text_color is not None and tag.text_color.is_manual:
                styles.set("color", rgb(tag.text_color))
            if tag.highlight_color is not None and tag.highlight_color.is_manual:
                styles.set("background-color", rgb(tag.highlight_color))
        return "".join(markup), styles
