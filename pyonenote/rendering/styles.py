"""
Inline CSS for OneNote paragraphs and text runs.

`StyleSet` collects declarations in insertion order; `resolve_style` and
`resolve_paragraph_style` map the parser's styling records onto it. Style
attributes without a rendering rule raise `UnsupportedStyleFeature` instead
of being dropped.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from ..exceptions import UnsupportedStyleFeature
from ..models import ColorRef, ParagraphAlignment, ParagraphStyling, RichText

LOGGER = logging.getLogger(__name__)

# CSS reference pixels per typographic point
PX_PER_POINT = 96 / 72


class StyleSet:
    """Ordered CSS declarations; a later `set` of a key replaces its value."""

    def __init__(self, styles: Optional[Mapping[str, str]] = None):
        self._styles: Dict[str, str] = {}
        if styles:
            self.extend(styles)

    def set(self, key: str, value: str) -> "StyleSet":
        self._styles[key] = value
        return self

    def extend(self, other: Union["StyleSet", Mapping[str, str]]) -> "StyleSet":
        for key, value in other.items():
            self.set(key, value)
        return self

    def get(self, key: str) -> Optional[str]:
        return self._styles.get(key)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._styles.items())

    def is_empty(self) -> bool:
        return not self._styles

    def serialize(self) -> str:
        return "".join(f"{key}:{value};" for key, value in self._styles.items())

    def __len__(self) -> int:
        return len(self._styles)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StyleSet):
            return list(self.items()) == list(other.items())
        return NotImplemented

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"StyleSet({self._styles!r})"


def px(points: float) -> str:
    return f"{round(points * PX_PER_POINT)}px"


def rgb(color: ColorRef) -> str:
    return f"rgb({color.r},{color.g},{color.b})"


def _reject_layout_attributes(style: ParagraphStyling, scope: str) -> None:
    # Layout is only rendered from the RichText node fields
    if style.paragraph_alignment is not None:
        raise UnsupportedStyleFeature("paragraph alignment", scope)
    if style.paragraph_space_before:
        raise UnsupportedStyleFeature("paragraph spacing before", scope)
    if style.paragraph_space_after:
        raise UnsupportedStyleFeature("paragraph spacing after", scope)
    if style.paragraph_line_spacing_exact:
        raise UnsupportedStyleFeature("exact line spacing", scope)


def resolve_style(style: ParagraphStyling, scope: str = "run") -> StyleSet:
    """Map a run (or paragraph) styling record to CSS declarations.

    Underline and strikethrough share `text-decoration`; strikethrough wins.
    Math formatting is accepted and not rendered. Alignment and spacing on a
    styling record raise `UnsupportedStyleFeature`, tagged with `scope`.
    """
    styles = StyleSet()

    if style.bold:
        styles.set("font-weight", "bold")
    if style.italic:
        styles.set("font-style", "italic")
    if style.underline:
        styles.set("text-decoration", "underline")
    if style.superscript:
        styles.set("vertical-align", "super")
    if style.subscript:
        styles.set("vertical-align", "sub")
    if style.strikethrough:
        styles.set("text-decoration", "line-through")

    if style.font is not None:
        styles.set("font-family", style.font)
    if style.font_size is not None:
        styles.set("font-size", f"{style.font_size / 2:g}pt")

    if style.font_color is not None and style.font_color.is_manual:
        styles.set("color", rgb(style.font_color))
    if style.highlight is not None and style.highlight.is_manual:
        styles.set("background-color", rgb(style.highlight))

    _reject_layout_attributes(style, scope)

    if style.math_formatting:
        LOGGER.debug("render.style.math_formatting ignored")

    return styles


def resolve_paragraph_style(text: RichText) -> StyleSet:
    """CSS for the element wrapping a whole paragraph."""
    if text.text == "":
        return StyleSet()

    styles = resolve_style(text.paragraph_style, scope="paragraph")

    # A paragraph made of one run carries that run's styling as well
    if len(text.text_run_formatting) == 1:
        styles.extend(resolve_style(text.text_run_formatting[0]))

    if text.paragraph_space_before > 0:
        styles.set("padding-top", px(text.paragraph_space_before))
    if text.paragraph_space_after > 0:
        styles.set("padding-bottom", px(text.paragraph_space_after))

    line_spacing = text.paragraph_line_spacing_exact
    if line_spacing is not None and line_spacing > 0:
        raise UnsupportedStyleFeature("exact line spacing", "paragraph")

    if text.paragraph_alignment == ParagraphAlignment.CENTER:
        styles.set("text-align", "center")
    elif text.paragraph_alignment == ParagraphAlignment.RIGHT:
        styles.set("text-align", "right")

    return styles
