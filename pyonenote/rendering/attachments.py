"""
Embedded file rendering for OneNote pages.

Design:
  - FileRegistry: the file names already used in one output scope
  - determine_filename: claims a unique name (`name.ext`, `name-0.ext`, ...)
  - guess_type: declared audio/video type first, then the file extension
  - Renderers: small classes implementing `render(filename)`, picked by type

`write_embedded_file` is the only function here that touches the disk.
"""

from __future__ import annotations

import html
import logging
import mimetypes
import threading
from pathlib import Path, PurePath
from typing import Dict, Set, Union

from ..exceptions import FilenameDisambiguationFailure, WriteFailure
from ..models import EmbeddedFile, FileType

LOGGER = logging.getLogger(__name__)


class FileRegistry:
    """File names claimed in one output scope (a section, a notebook...)."""

    def __init__(self) -> None:
        self._files: Set[str] = set()
        self._lock = threading.Lock()

    def claim(self, filename: str) -> bool:
        """Register `filename` unless it is taken. Returns True if claimed."""
        with self._lock:
            if filename in self._files:
                return False
            self._files.add(filename)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._files)


def _check_representable(filename: str) -> None:
    try:
        filename.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise FilenameDisambiguationFailure(filename, "name is not valid UTF-8") from exc
    path = PurePath(filename)
    if not filename or path.is_absolute() or ".." in path.parts:
        raise FilenameDisambiguationFailure(
            filename, "name does not stay inside the output directory"
        )


def _split_extension(filename: str) -> tuple[str, str]:
    suffix = PurePath(filename).suffix
    if not suffix or suffix == ".":
        raise FilenameDisambiguationFailure(filename, "embedded file has no extension")
    base = filename[: -len(suffix)].strip(".")
    return base, suffix[1:]


def determine_filename(registry: FileRegistry, filename: str) -> str:
    """Claim `filename` in `registry`, adding `-N` before the extension if taken."""
    _check_representable(filename)
    if registry.claim(filename):
        return filename

    base, ext = _split_extension(filename)
    i = 0
    while True:
        candidate = f"{base}-{i}.{ext}"
        if registry.claim(candidate):
            LOGGER.debug("render.file.rename %s -> %s", filename, candidate)
            return candidate
        i += 1


def guess_type(file: EmbeddedFile) -> FileType:
    if file.file_type in (FileType.AUDIO, FileType.VIDEO):
        return file.file_type

    mime, _ = mimetypes.guess_type(file.filename)
    if mime:
        major = mime.split("/", 1)[0]
        if major == "audio":
            return FileType.AUDIO
        if major == "video":
            return FileType.VIDEO
    return FileType.UNKNOWN


def write_embedded_file(
    output_dir: Union[str, Path], filename: str, data: bytes
) -> Path:
    path = Path(output_dir) / filename
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise WriteFailure(str(path)) from exc
    LOGGER.debug("render.file.write path=%s bytes=%d", path, len(data))
    return path


class _Renderer:
    def render(self, filename: str) -> str:  # pragma: no cover - interface
        raise NotImplementedError


class _AudioRenderer(_Renderer):
    def render(self, filename: str) -> str:
        return f'<audio controls src="{html.escape(filename)}"></audio>'


class _VideoRenderer(_Renderer):
    def render(self, filename: str) -> str:
        return f'<video controls src="{html.escape(filename)}"></video>'


class _EmbedRenderer(_Renderer):
    def render(self, filename: str) -> str:
        return f'<embed src="{html.escape(filename)}">'


_RENDERERS: Dict[FileType, _Renderer] = {
    FileType.AUDIO: _AudioRenderer(),
    FileType.VIDEO: _VideoRenderer(),
    FileType.UNKNOWN: _EmbedRenderer(),
}


def render_file_element(file_type: FileType, filename: str) -> str:
    return _RENDERERS[file_type].render(filename)
