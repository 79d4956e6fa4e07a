# tests/test_encoding.py

from __future__ import annotations

import io

import pytest

from keyvalues_parser.core.exceptions import KVEncodingError
from keyvalues_parser.loader import (
    detect_utf16,
    open_line_source,
    sniff_bom,
    transcode_utf16_to_utf8,
)

TEXT = '"a"\n{\n"b" "c"\n}\n'


class _OneWayStream(io.RawIOBase):
    """A readable stream that refuses to seek, like a pipe."""

    def __init__(self, data: bytes) -> None:
        self._inner = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def readinto(self, buffer) -> int:
        chunk = self._inner.read(len(buffer))
        buffer[: len(chunk)] = chunk
        return len(chunk)


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"\xef\xbb\xbf\"a\"", "utf-8"),
        (b"\xff\xfe\"\x00", "utf-16-le"),
        (b"\xfe\xff\x00\"", "utf-16-be"),
        (b"\"a\"", None),
        (b"", None),
    ],
)
def test_sniff_bom_and_rewind(data: bytes, expected) -> None:
    stream = io.BytesIO(data)
    assert sniff_bom(stream) == expected
    assert stream.tell() == 0


def test_detect_utf16_covers_both_byte_orders() -> None:
    assert detect_utf16(io.BytesIO("\ufeff".encode("utf-16-le") + b"x\x00"))
    assert detect_utf16(io.BytesIO(b"\xfe\xff\x00x"))
    assert not detect_utf16(io.BytesIO(b"\xef\xbb\xbf\"a\""))


def test_transcode_utf16le_to_utf8() -> None:
    data = "\ufeff".encode("utf-16-le") + "\"näme\" \"wert\"".encode("utf-16-le")
    out = transcode_utf16_to_utf8(io.BytesIO(data))
    assert out.read() == "\"näme\" \"wert\"".encode("utf-8")


def test_transcode_rejects_big_endian() -> None:
    data = b"\xfe\xff" + TEXT.encode("utf-16-be")
    with pytest.raises(KVEncodingError) as excinfo:
        transcode_utf16_to_utf8(io.BytesIO(data))
    assert "little-endian" in str(excinfo.value)
    assert excinfo.value.kind == "encoding"


def test_transcode_rejects_truncated_utf16() -> None:
    data = b"\xff\xfe" + TEXT.encode("utf-16-le") + b"\x00"
    with pytest.raises(KVEncodingError):
        transcode_utf16_to_utf8(io.BytesIO(data))


def test_line_source_utf16_matches_utf8() -> None:
    utf16 = io.BytesIO(b"\xff\xfe" + TEXT.encode("utf-16-le"))
    utf8 = io.BytesIO(TEXT.encode("utf-8"))
    assert list(open_line_source(utf16)) == list(open_line_source(utf8))


def test_line_source_keeps_utf8_bom_and_strips_line_endings() -> None:
    stream = io.BytesIO(b"\xef\xbb\xbf\"a\"\r\n{\r\n}")
    assert list(open_line_source(stream)) == ["\ufeff\"a\"", "{", "}"]


def test_line_source_buffers_non_seekable_stream() -> None:
    stream = _OneWayStream(b"\xff\xfe" + TEXT.encode("utf-16-le"))
    assert list(open_line_source(stream)) == ['"a"', "{", '"b" "c"', "}"]


def test_line_source_strict_utf8_raises() -> None:
    stream = io.BytesIO(b"\"a\"\n\"k\" \"\xff\"\n")
    with pytest.raises(KVEncodingError):
        list(open_line_source(stream, utf8_errors="strict"))


def test_line_source_replaces_invalid_utf8_by_default() -> None:
    stream = io.BytesIO(b"\"k\" \"\xff\"\n")
    assert list(open_line_source(stream)) == ['"k" "\ufffd"']
