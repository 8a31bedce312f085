"""Line breaks and indentation for text placed into HTML."""

from __future__ import annotations

from typing import List

LINE_BREAK = "<br>"
NBSP = "&nbsp;"

_BREAK_CHARS = ("\u000b", "\n", "\r")


def fix_newlines(text: str) -> str:
    """Turn control line breaks into `<br>` and keep indentation after them.

    Each of VT, LF and CR becomes its own `<br>` (so CRLF gives two). Spaces
    directly following a `<br>` become the same number of `&nbsp;`.
    """
    for ch in _BREAK_CHARS:
        text = text.replace(ch, LINE_BREAK)

    out: List[str] = []
    pos = 0
    n = len(text)
    while pos < n:
        idx = text.find(LINE_BREAK, pos)
        if idx < 0:
            out.append(text[pos:])
            break
        end = idx + len(LINE_BREAK)
        out.append(text[pos:end])
        spaces = end
        while spaces < n and text[spaces] == " ":
            spaces += 1
        out.append(NBSP * (spaces - end))
        pos = spaces
    return "".join(out)
