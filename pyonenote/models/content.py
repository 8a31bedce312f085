"""
Typed document model handed over by the OneNote parser.

Only the fields the renderer reads are modelled. The models validate the run
layout of rich text up front so the renderer can slice text without checks.

Unknown fields in a dump are rejected. Set PYONENOTE_EXTRA before import to
change that: `allow` keeps them, `ignore` drops them, `forbid` is the default.
"""

from __future__ import annotations

import base64
import binascii
import os
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

EXTRA_ENV_VAR = "PYONENOTE_EXTRA"

_EXTRA_POLICIES = {
    "allow": "allow",
    "ignore": "ignore",
    "forbid": "forbid",
    "lenient": "allow",
    "strict": "forbid",
}


def extra_fields_policy() -> Literal["allow", "ignore", "forbid"]:
    """Pydantic `extra` setting for page dumps, read from the environment."""
    value = os.environ.get(EXTRA_ENV_VAR, "").strip().lower()
    return _EXTRA_POLICIES.get(value, "forbid")  # type: ignore[return-value]


class OneNoteModel(BaseModel):
    model_config = ConfigDict(extra=extra_fields_policy())


class ColorRef(OneNoteModel):
    """A font or highlight color. Automatic colors follow the theme."""

    kind: Literal["auto", "manual"] = "auto"
    r: int = Field(default=0, ge=0, le=255)
    g: int = Field(default=0, ge=0, le=255)
    b: int = Field(default=0, ge=0, le=255)

    @property
    def is_manual(self) -> bool:
        return self.kind == "manual"

    @classmethod
    def manual(cls, r: int, g: int, b: int) -> "ColorRef":
        return cls(kind="manual", r=r, g=g, b=b)


class ParagraphAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    UNKNOWN = "unknown"


class FileType(str, Enum):
    AUDIO = "audio"
    VIDEO = "video"
    UNKNOWN = "unknown"


class ParagraphStyling(OneNoteModel):
    """Formatting of a text run or of a whole paragraph."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    superscript: bool = False
    subscript: bool = False
    hyperlink: bool = False
    math_formatting: bool = False

    font: Optional[str] = None
    # Half points, as stored by OneNote
    font_size: Optional[int] = Field(default=None, ge=0)
    font_color: Optional[ColorRef] = None
    highlight: Optional[ColorRef] = None

    paragraph_alignment: Optional[ParagraphAlignment] = None
    paragraph_space_before: Optional[float] = None
    paragraph_space_after: Optional[float] = None
    paragraph_line_spacing_exact: Optional[float] = None

    style_id: Optional[str] = None


class NoteTag(OneNoteModel):
    """A note tag (to-do box, flag, ...) attached to a content node."""

    label: Optional[str] = None
    checkable: bool = False
    completed: bool = False
    text_color: Optional[ColorRef] = None
    highlight_color: Optional[ColorRef] = None


class RichText(OneNoteModel):
    """One paragraph of text split into styled runs."""

    kind: Literal["rich_text"] = "rich_text"
    text: str = ""
    text_run_indices: List[int] = Field(default_factory=list)
    text_run_formatting: List[ParagraphStyling] = Field(default_factory=list)
    paragraph_style: ParagraphStyling = Field(default_factory=ParagraphStyling)
    paragraph_space_before: float = 0.0
    paragraph_space_after: float = 0.0
    paragraph_line_spacing_exact: Optional[float] = None
    paragraph_alignment: ParagraphAlignment = ParagraphAlignment.LEFT
    note_tags: List[NoteTag] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_runs(self) -> "RichText":
        indices = self.text_run_indices
        if len(indices) + 1 < len(self.text_run_formatting):
            raise ValueError(
                f"{len(self.text_run_formatting)} run styles for "
                f"{len(indices) + 1} runs"
            )
        prev = -1
        for idx in indices:
            if idx < 0:
                raise ValueError(f"run index {idx} is negative")
            if idx <= prev:
                raise ValueError(f"run indices must be strictly ascending: {indices}")
            if idx >= len(self.text):
                raise ValueError(
                    f"run index {idx} is outside of text of length {len(self.text)}"
                )
            prev = idx
        return self


class EmbeddedFile(OneNoteModel):
    """An attachment embedded in a page."""

    kind: Literal["embedded_file"] = "embedded_file"
    filename: str
    data: bytes = b""
    file_type: FileType = FileType.UNKNOWN
    note_tags: List[NoteTag] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _decode_data(cls, value):
        """Accept raw bytes or a base64 string (as found in JSON dumps)."""
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except binascii.Error as exc:
                raise ValueError("data must be base64 encoded") from exc
        return value


PageNode = Annotated[Union[RichText, EmbeddedFile], Field(discriminator="kind")]


class Page(OneNoteModel):
    """Flat list of content nodes, in rendering order."""

    title: Optional[str] = None
    nodes: List[PageNode] = Field(default_factory=list)
