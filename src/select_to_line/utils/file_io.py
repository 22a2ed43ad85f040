"""Decoding documents handed to the command line helper."""

from __future__ import annotations

import codecs
import locale
from pathlib import Path

__all__ = ["decode_text", "read_text", "sniff_encoding"]

# UTF-32 LE starts with the UTF-16 LE mark, so the longer marks come first.
_BYTE_ORDER_MARKS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def read_text(path: Path | str, *, encoding: str | None = None, errors: str = "strict") -> str:
    """Read ``path`` as text with line breaks folded to ``\\n``."""

    return decode_text(Path(path).read_bytes(), encoding=encoding, errors=errors)


def decode_text(raw: bytes, *, encoding: str | None = None, errors: str = "strict") -> str:
    text = raw.decode(encoding or sniff_encoding(raw), errors=errors)
    if text.startswith("\ufeff"):
        text = text[1:]
    if "\r" in text:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text


def sniff_encoding(raw: bytes) -> str:
    """Pick an encoding from a byte-order mark, else the first codec that decodes ``raw``.

    ``latin-1`` decodes any byte sequence, so the search always succeeds.
    """

    for mark, name in _BYTE_ORDER_MARKS:
        if raw.startswith(mark):
            return name
    candidates = ["utf-8", locale.getpreferredencoding(False) or "utf-8", "latin-1"]
    for name in dict.fromkeys(candidates):
        try:
            raw.decode(name)
        except UnicodeDecodeError:
            continue
        return name
    return "latin-1"
