# src/keyvalues_parser/loader/encoding.py

"""
Encoding detection and transcoding for key-value input streams.

Files arrive either as UTF-8 (with or without a byte-order mark) or as
UTF-16 little-endian, the encoding some localisation files ship in. UTF-16LE
input is decoded fully in memory and re-encoded as UTF-8 so every later stage
reads one encoding.

Only little-endian UTF-16 is supported. A big-endian BOM is detected but the
input is rejected with KVEncodingError instead of being transcoded.
"""

from __future__ import annotations

import io
from typing import BinaryIO, Iterator, Optional

from keyvalues_parser.core.exceptions import KVEncodingError, KVReadError
from keyvalues_parser.logging import get_logger

log = get_logger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"
UTF16_LE_BOM = b"\xff\xfe"
UTF16_BE_BOM = b"\xfe\xff"


def _read(stream: BinaryIO, size: int = -1) -> bytes:
    try:
        return stream.read(size)
    except OSError as exc:
        raise KVReadError(f"Unable to read input stream: {exc}") from exc


def _rewind(stream: BinaryIO) -> None:
    try:
        stream.seek(0)
    except OSError as exc:
        raise KVReadError(f"Unable to rewind input stream: {exc}") from exc


def ensure_seekable(stream: BinaryIO) -> BinaryIO:
    """Return ``stream`` itself, or an in-memory copy when it cannot seek."""
    if stream.seekable():
        return stream
    return io.BytesIO(_read(stream))


def sniff_bom(stream: BinaryIO) -> Optional[str]:
    """
    Identify the byte-order mark at the start of ``stream``.

    Returns "utf-8", "utf-16-le", "utf-16-be" or None. The stream is
    rewound to the start before returning.
    """
    head = _read(stream, 3)
    _rewind(stream)

    if head.startswith(UTF8_BOM):
        return "utf-8"
    if head.startswith(UTF16_LE_BOM):
        return "utf-16-le"
    if head.startswith(UTF16_BE_BOM):
        return "utf-16-be"
    return None


def detect_utf16(stream: BinaryIO) -> bool:
    """True when ``stream`` starts with a UTF-16 byte-order mark of either order."""
    return sniff_bom(stream) in ("utf-16-le", "utf-16-be")


def transcode_utf16_to_utf8(stream: BinaryIO) -> io.BytesIO:
    """
    Decode a UTF-16LE stream (BOM included) and return it re-encoded as UTF-8.

    Raises:
        KVEncodingError: on a big-endian BOM or on malformed UTF-16 data.
    """
    data = _read(stream)

    if data.startswith(UTF16_BE_BOM):
        raise KVEncodingError(
            "Input is UTF-16 big-endian; only little-endian UTF-16 is supported"
        )

    if data.startswith(UTF16_LE_BOM):
        data = data[len(UTF16_LE_BOM):]

    try:
        text = data.decode("utf-16-le")
    except UnicodeDecodeError as exc:
        raise KVEncodingError(f"Input is not valid UTF-16LE: {exc}") from exc

    return io.BytesIO(text.encode("utf-8"))


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def iter_utf8_lines(stream: BinaryIO, errors: str = "replace") -> Iterator[str]:
    """Yield the physical lines of a UTF-8 byte stream without line endings."""
    try:
        for lineno, raw in enumerate(stream, start=1):
            try:
                yield _strip_eol(raw.decode("utf-8", errors))
            except UnicodeDecodeError as exc:
                raise KVEncodingError(f"Line {lineno} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise KVReadError(f"Unable to read input stream: {exc}") from exc


def open_line_source(stream: BinaryIO, utf8_errors: str = "replace") -> Iterator[str]:
    """
    Probe the encoding of ``stream`` and return an iterator of its lines.

    UTF-16LE input is transcoded in memory first; anything else is read
    directly, a UTF-8 BOM included.
    """
    stream = ensure_seekable(stream)

    log.debug("Checking if the input is encoded in UTF-16.")
    if detect_utf16(stream):
        log.info("The input is encoded in UTF-16. Converting it to UTF-8 in memory.")
        stream = transcode_utf16_to_utf8(stream)
        log.info("Successfully converted the input to UTF-8.")
    else:
        log.debug("The input is encoded in UTF-8.")

    return iter_utf8_lines(stream, errors=utf8_errors)
