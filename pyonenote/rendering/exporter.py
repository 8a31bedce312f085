"""
Exporter helpers for OneNote pages → HTML.

Thin wrappers around the node renderers and file I/O used by the CLI. They
walk a flat `Page` dump in order; real page traversal (outlines, lists,
tables) belongs to the caller.
"""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from ..exceptions import WriteFailure
from ..models import EmbeddedFile, Page, RichText
from .renderer import Renderer

LOGGER = logging.getLogger(__name__)


def load_page(path: Union[str, Path]) -> Page:
    """Read and validate a JSON page dump."""
    raw = Path(path).read_text(encoding="utf-8")
    page = Page.model_validate_json(raw)
    LOGGER.debug("export.load_page path=%s nodes=%d", path, len(page.nodes))
    return page


def render_page_fragments(page: Page, renderer: Renderer) -> List[str]:
    fragments: List[str] = []
    for node in page.nodes:
        if isinstance(node, RichText):
            fragments.append(renderer.render_rich_text(node))
        elif isinstance(node, EmbeddedFile):
            fragments.append(renderer.render_embedded_file(node))
    return fragments


def render_page_html(title: str, html_fragment: str) -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:Calibri,Segoe UI,Helvetica,Arial,sans-serif;line-height:1.4}"
        "audio,video,embed{max-width:100%}"
        f'</style><div class="page-content">{html_fragment}</div>'
    )


# Characters that are path separators or reserved on common filesystems
_RESERVED_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')
MAX_TITLE_LENGTH = 60


def page_filename(title: Optional[str]) -> str:
    """HTML file name for a page: the title with runs of whitespace collapsed
    and reserved characters replaced by `-`, or `untitled.html`."""
    stem = " ".join((title or "").split())
    stem = _RESERVED_FILENAME_CHARS.sub("-", stem)[:MAX_TITLE_LENGTH].strip(" .")
    return f"{stem or 'untitled'}.html"


def write_page(
    title: Optional[str],
    html_fragment: str,
    out_dir: Union[str, Path],
    *,
    full_page: bool = False,
) -> Path:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / page_filename(title)
    document = render_page_html(title or "", html_fragment) if full_page else html_fragment
    try:
        path.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise WriteFailure(str(path), f"Failed to write page to {path}") from exc
    LOGGER.debug("export.write_page path=%s full_page=%s", path, full_page)
    return path
