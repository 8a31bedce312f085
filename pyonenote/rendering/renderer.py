"""
Renderer for OneNote content nodes.

Converts a parsed `RichText` paragraph into an HTML fragment (pure) and an
`EmbeddedFile` into an embed element, writing its bytes next to the page.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from tinyhtml import h, raw

from ..models import EmbeddedFile, NoteTag, RichText
from .attachments import (
    FileRegistry,
    determine_filename,
    guess_type,
    render_file_element,
    write_embedded_file,
)
from .options import RenderConfig
from .renderer_iface import CheckboxNoteTagRenderer, NoteTagRenderer
from .runs import escape_attr, render_runs
from .styles import resolve_paragraph_style

LOGGER = logging.getLogger(__name__)


def _is_bare_url(content: str) -> bool:
    return content.startswith("http://") or content.startswith("https://")


def render_rich_text(
    text: RichText,
    *,
    in_list: bool = False,
    note_tag_renderer: Optional[NoteTagRenderer] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render one paragraph.

    The paragraph is wrapped in a tag named after its style id (`<h1>`,
    `<p>`, ...) unless the id is reserved or the paragraph sits in a list; a
    styled paragraph without usable style id gets a `<span>`.
    """
    config = config or RenderConfig()
    note_tag_renderer = note_tag_renderer or CheckboxNoteTagRenderer()

    content = ""
    style = resolve_paragraph_style(text)

    tags = note_tag_renderer.render_note_tags(text.note_tags)
    if tags is not None:
        tag_html, tag_styles = tags
        content += tag_html
        style.extend(tag_styles)

    content += render_runs(text.text, text.text_run_indices, text.text_run_formatting)

    if config.autolink_bare_urls and _is_bare_url(content):
        content = f'<a href="{escape_attr(html.unescape(content))}">{content}</a>'

    if config.debug:
        LOGGER.debug(
            "render.rich_text style_id=%s style=%s in_list=%s",
            text.paragraph_style.style_id,
            style,
            in_list,
        )

    style_id = text.paragraph_style.style_id
    if not in_list and config.is_semantic_tag(style_id):
        return f'<{style_id} style="{escape_attr(style.serialize())}">{content}</{style_id}>'
    if not style.is_empty():
        return f'<span style="{escape_attr(style.serialize())}">{content}</span>'
    return content


def render_with_note_tags(
    note_tags: Sequence[NoteTag],
    content: str,
    note_tag_renderer: Optional[NoteTagRenderer] = None,
) -> str:
    note_tag_renderer = note_tag_renderer or CheckboxNoteTagRenderer()
    tags = note_tag_renderer.render_note_tags(note_tags)
    if tags is None:
        return content
    tag_html, tag_styles = tags
    attrs = {} if tag_styles.is_empty() else {"style": tag_styles.serialize()}
    return h("div", **attrs)(raw(tag_html), raw(content)).render()


class Renderer:
    """Renders the content nodes of one output scope.

    All files written by one instance share a `FileRegistry`, so every
    embedded file of the scope ends up under its own name in `output_dir`.
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        *,
        registry: Optional[FileRegistry] = None,
        config: Optional[RenderConfig] = None,
        note_tag_renderer: Optional[NoteTagRenderer] = None,
    ):
        self.output_dir = Path(output_dir)
        self.registry = registry if registry is not None else FileRegistry()
        self.config = config or RenderConfig()
        self.note_tag_renderer = note_tag_renderer or CheckboxNoteTagRenderer()

    def render_rich_text(self, text: RichText, *, in_list: bool = False) -> str:
        """Render a paragraph to an HTML fragment string."""
        return render_rich_text(
            text,
            in_list=in_list,
            note_tag_renderer=self.note_tag_renderer,
            config=self.config,
        )

    def render_embedded_file(self, file: EmbeddedFile) -> str:
        """Write the file into the output directory and return its embed markup."""
        filename = determine_filename(self.registry, file.filename)
        write_embedded_file(self.output_dir, filename, file.data)

        file_type = guess_type(file)
        LOGGER.info("render.embedded_file %s type=%s", filename, file_type.value)
        content = render_file_element(file_type, filename)

        return render_with_note_tags(file.note_tags, content, self.note_tag_renderer)
