# src/keyvalues_parser/loader/tokenizer.py

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Tuple

from keyvalues_parser.core.exceptions import KVSyntaxError

WHITESPACE_CUTSET = " \t"
BYTE_ORDER_MARK = "\ufeff"
COMMENT_MARKER = "//"


class TokenKind(enum.Enum):
    """Classification of one logical line."""

    ROOT = "root"
    EMPTY = "empty"
    SECTION_HEADER = "section_header"
    OPENER = "opener"
    CLOSER = "closer"
    DATA_PAIR = "data_pair"
    OPEN_DATA = "open_data"


@dataclass(frozen=True)
class Token:
    """
    A single classified line.

    Attributes:
        lineno: 1-based physical line number the logical line ended on.
        kind: The TokenKind of the line.
        strings: Quoted literals extracted from the line. For OPEN_DATA the
            last entry is the unterminated literal read so far.
        raw: The logical line as classified (after trimming).
    """

    lineno: int
    kind: TokenKind
    strings: Tuple[str, ...] = ()
    raw: str = ""

    @property
    def name(self) -> str:
        """Section name of a SECTION_HEADER token."""
        return self.strings[0]

    @property
    def key(self) -> str:
        return self.strings[0]

    @property
    def value(self) -> str:
        return self.strings[1]


def _is_blank(line: str) -> bool:
    """True when the line holds nothing but whitespace and byte-order marks."""
    return all(c.isspace() or c == BYTE_ORDER_MARK for c in line)


def split_quoted(line: str) -> Tuple[List[str], bool, str]:
    """
    Extract the quoted literals of a line.

    Scanning rules:
        - An unescaped '"' opens or closes a literal.
        - A '"' preceded by an odd run of backslashes is an escaped quote;
          it is kept in the literal as a bare '"'.
        - '//' outside a literal ends the line (trailing comment).
        - Anything outside a literal is ignored.

    Returns:
        (literals, still_open, partial) where ``literals`` are the completed
        strings, ``still_open`` says whether a literal runs past the end of
        the line and ``partial`` is its content so far.
    """
    literals: List[str] = []
    current: List[str] = []
    quoted = False
    backslashes = 0

    for i, c in enumerate(line):
        if not quoted and line.startswith(COMMENT_MARKER, i):
            break

        if c == '"':
            if backslashes % 2 == 1:
                if quoted:
                    current[-1] = '"'
                backslashes = 0
                continue

            if quoted:
                literals.append("".join(current))
                current = []
            quoted = not quoted
            backslashes = 0
            continue

        backslashes = backslashes + 1 if c == "\\" else 0

        if quoted:
            current.append(c)

    return literals, quoted, "".join(current)


def classify_line(line: str, lineno: int = 0) -> Token:
    """
    Classify one logical line into a Token.

    Examples:
        ""                      -> EMPTY
        "// comment"            -> EMPTY
        "{" / "}"               -> OPENER / CLOSER
        '"items"'               -> SECTION_HEADER("items")
        '"name" "AK-47" // x'   -> DATA_PAIR("name", "AK-47")
        '"desc" "first half'    -> OPEN_DATA

    Raises:
        KVSyntaxError: if the line holds neither one nor two literals.
    """
    # a UTF-8 BOM survives at the start of line 1
    text = line.strip(WHITESPACE_CUTSET + BYTE_ORDER_MARK)

    if not text or text.startswith(COMMENT_MARKER) or _is_blank(text):
        return Token(lineno=lineno, kind=TokenKind.EMPTY, raw=text)

    if text == "{":
        return Token(lineno=lineno, kind=TokenKind.OPENER, raw=text)
    if text == "}":
        return Token(lineno=lineno, kind=TokenKind.CLOSER, raw=text)

    literals, still_open, partial = split_quoted(text)
    if still_open:
        return Token(
            lineno=lineno,
            kind=TokenKind.OPEN_DATA,
            strings=tuple(literals) + (partial,),
            raw=text,
        )

    if len(literals) == 1:
        return Token(lineno=lineno, kind=TokenKind.SECTION_HEADER, strings=tuple(literals), raw=text)

    if len(literals) == 2:
        return Token(lineno=lineno, kind=TokenKind.DATA_PAIR, strings=tuple(literals), raw=text)

    raise KVSyntaxError(lineno, f"unrecognised line type ({len(literals)} quoted strings) -> {text!r}")
