"""
Text runs of a paragraph: splitting, styling and hyperlink stitching.

OneNote stores a hyperlink that spans several formatting runs as a marker run
carrying the URL (`\\ufddfHYPERLINK "<url>"`) followed by the visible label
run(s). The runs are folded left to right with an `AnchorState` so that the
marker opens an `<a>` and the label closes it.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from functools import reduce
from typing import List, Optional, Sequence, Tuple

from ..exceptions import MalformedHyperlinkMarker
from ..models import ParagraphStyling
from .styles import resolve_style
from .whitespace import NBSP, fix_newlines

LOGGER = logging.getLogger(__name__)

HYPERLINK_MARKER = '\ufddfHYPERLINK "'


@dataclass(frozen=True)
class OpenAnchor:
    """An `<a>` opened by a marker run and not yet closed."""

    href: str
    style: str


# None means no anchor is open
AnchorState = Optional[OpenAnchor]


def split_runs(text: str, indices: Sequence[int]) -> List[str]:
    """Cut `text` at the ascending `indices` into len(indices) + 1 parts."""
    parts: List[str] = []
    for idx in reversed(indices):
        parts.append(text[idx:])
        text = text[:idx]
    parts.append(text)
    parts.reverse()
    return parts


def parse_hyperlink_marker(text: str) -> Optional[str]:
    """Return the URL of a marker run, or None if `text` is not one."""
    if not text.startswith(HYPERLINK_MARKER):
        return None
    rest = text[len(HYPERLINK_MARKER) :]
    end = rest.find('"')
    if end < 0:
        raise MalformedHyperlinkMarker(text)
    return rest[:end]


def escape_attr(value: str) -> str:
    return html.escape(value, quote=True)


def render_hyperlink_run(
    text: str, style: ParagraphStyling, state: AnchorState
) -> Tuple[str, AnchorState]:
    css = resolve_style(style).serialize()

    url = parse_hyperlink_marker(text)
    if url is not None:
        anchor = OpenAnchor(href=url, style=css)
        return f'<a href="{escape_attr(anchor.href)}" style="{escape_attr(anchor.style)}">', anchor

    label = html.escape(text, quote=False)
    if state is not None:
        return f"{label}</a>", None

    return f'<a href="{escape_attr(text)}" style="{escape_attr(css)}">{label}</a>', None


def render_plain_run(text: str, style: ParagraphStyling) -> str:
    styles = resolve_style(style)
    content = html.escape(text, quote=False)
    if styles.is_empty():
        return content
    return f'<span style="{escape_attr(styles.serialize())}">{content}</span>'


def render_run(
    acc: Tuple[List[str], AnchorState], run: Tuple[str, ParagraphStyling]
) -> Tuple[List[str], AnchorState]:
    """One step of the fold over (text, style) pairs."""
    fragments, state = acc
    text, style = run
    if style.hyperlink:
        fragment, state = render_hyperlink_run(text, style, state)
    else:
        fragment, state = render_plain_run(text, style), None
    fragments.append(fragment)
    return fragments, state


def render_runs(
    text: str, indices: Sequence[int], formatting: Sequence[ParagraphStyling]
) -> str:
    """Render the body of a paragraph.

    Without run indices the paragraph is a single run whose styling lives on
    the enclosing element, so only line breaks are handled here.
    """
    if not text:
        return NBSP

    if not indices:
        return fix_newlines(html.escape(text, quote=False))

    parts = split_runs(text, indices)
    LOGGER.debug(
        "render.runs parts=%d styles=%d len=%d", len(parts), len(formatting), len(text)
    )
    initial: Tuple[List[str], AnchorState] = ([], None)
    fragments, state = reduce(render_run, zip(parts, formatting), initial)
    if state is not None:
        LOGGER.debug("render.runs unclosed hyperlink href=%s", state.href)

    # Normalized once so a CR LF split over two runs is handled as a unit
    return fix_newlines("".join(fragments))
