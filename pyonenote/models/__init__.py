"""Public exports for the OneNote document models."""

from __future__ import annotations

from .content import (
    ColorRef,
    EmbeddedFile,
    FileType,
    NoteTag,
    Page,
    ParagraphAlignment,
    ParagraphStyling,
    RichText,
)

__all__ = [
    "ColorRef",
    "EmbeddedFile",
    "FileType",
    "NoteTag",
    "Page",
    "ParagraphAlignment",
    "ParagraphStyling",
    "RichText",
]
