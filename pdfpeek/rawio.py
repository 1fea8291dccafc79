"""Low-level reading of PDF files: lines, the end marker, xref and objects."""

from __future__ import annotations

import io
from typing import BinaryIO, Sequence

from .model import PdfError, XrefEntry

_EOF_MARKER = "%%EOF"


def read_line(stream: BinaryIO) -> str:
    """Read one line obeying PDF line endings (LF, CR or CRLF).

    The terminator is kept in the result; an empty string means end of file.
    """
    chars = bytearray()
    while True:
        byte = stream.read(1)
        if not byte:
            break
        chars += byte
        if byte == b"\n":
            break
        if byte == b"\r":
            following = stream.read(1)
            if following == b"\n":
                chars += following
            elif following:
                stream.seek(-1, io.SEEK_CUR)
            break
    return chars.decode("latin-1")


def find_eof_marker(stream: BinaryIO) -> int:
    """Locate the trailing %%EOF marker.

    Returns the (negative) offset from the end of the file at which the
    marker starts. Raises PdfError if the marker is missing.
    """
    size = stream.seek(0, io.SEEK_END)
    collected: list[str] = []
    position = size - 1
    while position >= 0 and len(collected) < len(_EOF_MARKER):
        stream.seek(position)
        char = stream.read(1).decode("latin-1")
        if char.isalnum() or char == "%":
            collected.append(char)
        position -= 1
    marker = "".join(reversed(collected))
    if marker != _EOF_MARKER:
        raise PdfError("Unable to find %%EOF tag. Probably invalid PDF file.")
    return position + 1 - size


def find_startxref(stream: BinaryIO, eof_offset: int) -> int:
    """Return the byte position of the cross-reference table.

    The value is read from the line following the ``startxref`` keyword
    that precedes the end marker at ``eof_offset`` (relative to the end).
    """
    eof_position = stream.seek(eof_offset, io.SEEK_END)
    stream.seek(0)
    head = stream.read(eof_position)
    keyword_end = head.rfind(b"f", 0, max(len(head) - 1, 0))
    if keyword_end < 0:
        raise PdfError("Unable to find startxref. Most probably an invalid PDF file.")
    stream.seek(keyword_end)
    read_line(stream)
    value = read_line(stream).strip()
    try:
        position = int(value)
    except ValueError:
        raise PdfError(
            "Unable to find Xref location. Most probably an invalid PDF file."
        ) from None
    if position == 0:
        raise PdfError("Unable to find Xref location. Most probably an invalid PDF file.")
    return position


def load_xref(stream: BinaryIO, position: int) -> list[XrefEntry]:
    """Read an uncompressed cross-reference table starting at ``position``."""
    stream.seek(position)
    read_line(stream)
    tokens = read_line(stream).split()
    if len(tokens) < 2:
        raise PdfError("Malformed cross-reference subsection header.")
    try:
        count = int(tokens[1])
    except ValueError:
        raise PdfError("Malformed cross-reference subsection header.") from None

    entries = []
    for _ in range(count):
        line = read_line(stream)
        if len(line) < 18:
            raise PdfError("Truncated cross-reference table.")
        try:
            offset = int(line[0:10])
            generation = int(line[11:16])
        except ValueError:
            raise PdfError(f"Malformed cross-reference entry: {line!r}") from None
        entries.append(XrefEntry(offset, generation, line[17]))
    return entries


def read_object(stream: BinaryIO, xref: Sequence[XrefEntry], ref_num: int) -> str:
    """Read an object's text, joining its lines with spaces.

    Reading stops at the line holding ``endobj`` or ``stream``; that final
    line keeps its own terminator.
    """
    if not 0 <= ref_num < len(xref):
        raise PdfError(f"Object {ref_num} is not in the cross-reference table.")
    stream.seek(xref[ref_num].offset)
    text = ""
    while True:
        line = read_line(stream)
        if not line:
            raise PdfError(f"Object {ref_num} has no end.")
        text += line
        if "endobj" in text or "stream" in text:
            return text
        if text.endswith("\r\n"):
            text = text[:-2] + " "
        elif text.endswith("\n"):
            text = text[:-1] + " "