"""Library exceptions."""

from __future__ import annotations

from typing import Optional


class RenderError(Exception):
    """Base rendering error."""


class UnsupportedStyleFeature(RenderError):
    """A style attribute was used that has no rendering rule."""

    def __init__(self, feature: str, scope: str):
        super().__init__(f"Unsupported {scope} style feature: {feature}")
        self.feature = feature
        self.scope = scope


class MalformedHyperlinkMarker(RenderError):
    """Hyperlink marker without a closing quote."""

    def __init__(self, text: str):
        super().__init__(f"Hyperlink has no end marker: {text!r}")
        self.text = text


class FilenameDisambiguationFailure(RenderError):
    """An embedded file name could not be made unique."""

    def __init__(self, filename: str, reason: str):
        super().__init__(f"Cannot disambiguate file name {filename!r}: {reason}")
        self.filename = filename
        self.reason = reason


class WriteFailure(RenderError):
    """Embedded file bytes could not be written."""

    def __init__(self, path: str, message: Optional[str] = None):
        super().__init__(message or f"Failed to write embedded file to {path}")
        self.path = path
