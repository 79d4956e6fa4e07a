"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, TextIO, Union

from keyvalues_parser.config import get_config
from keyvalues_parser.core.exceptions import (
    KeyValuesError,
    KVReadError,
    KVStructureError,
    KVSyntaxError,
)
from keyvalues_parser.logger import get_logger
from keyvalues_parser.loader.encoding import open_line_source
from keyvalues_parser.loader.grammar import check_transition
from keyvalues_parser.loader.nodes import Section
from keyvalues_parser.loader.tokenizer import TokenKind, classify_line
from keyvalues_parser.loader.tree_builder import TreeBuilder

Source = Union[str, "os.PathLike[str]", BinaryIO, TextIO]


@dataclass
class ParseState:
    """
    Mutable state of a single parse pass.

    Attributes:
        last: Kind of the last non-empty token (ROOT before the first one).
        pending: Logical line being assembled; grows while a string literal
            stays open across physical lines.
        pending_start: Physical line the pending logical line started on.
        lineno: Current 1-based physical line number.
    """

    last: TokenKind = TokenKind.ROOT
    pending: str = ""
    pending_start: int = 0
    lineno: int = 0


class KeyValuesParser:
    """
    High-level parser:
      - opens the source
      - probes and normalises the encoding
      - classifies each logical line
      - validates token transitions
      - builds the section tree

    An instance keeps no state between calls to ``parse``.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger(__name__)
        self.utf8_errors = self.cfg.parser.get("utf8_errors", "replace")

    # ---------------------------------------------------------
    # Line-level pass
    # ---------------------------------------------------------
    def parse_lines(self, lines: Iterable[str]) -> Section:
        """Run the single parse pass over physical lines (no line endings)."""
        state = ParseState()
        builder = TreeBuilder()

        for physical in lines:
            state.lineno += 1

            if state.last is TokenKind.OPEN_DATA:
                state.pending += physical
            else:
                state.pending = physical
                state.pending_start = state.lineno

            token = classify_line(state.pending, state.lineno)

            # ignore empty lines
            if token.kind is TokenKind.EMPTY:
                state.pending = ""
                continue

            # a closer with nothing open is a structure error, not a grammar one
            if token.kind is TokenKind.CLOSER and not builder.depth:
                raise KVStructureError(token.lineno)

            check_transition(state.last, token)
            state.last = token.kind
            builder.apply(token)

        if state.last is TokenKind.OPEN_DATA:
            raise KVSyntaxError(
                state.pending_start, "string literal is never closed before end of input"
            )

        if builder.depth:
            self.log.warning(
                f"Input ended with {builder.depth} unclosed section(s); "
                "returning the tree as built."
            )

        if self.cfg.debug:
            self.log.debug(
                f"Read {state.lineno} lines, built {builder.section_count} sections."
            )

        return builder.root

    # ---------------------------------------------------------
    # Sources
    # ---------------------------------------------------------
    def parse_stream(self, stream: BinaryIO) -> Section:
        """Parse an open binary stream. The caller keeps ownership of it."""
        return self.parse_lines(open_line_source(stream, utf8_errors=self.utf8_errors))

    def parse_file(self, path: Union[str, "os.PathLike[str]"]) -> Section:
        file_path = Path(path)
        self.log.info(f"Parsing key-value file: {file_path}")

        try:
            fh = file_path.open("rb")
        except OSError as exc:
            raise KVReadError(f"Unable to open {file_path}: {exc}") from exc

        with fh:
            return self.parse_stream(fh)

    def parse(self, source: Source) -> Section:
        """
        Parse a path, binary stream or text stream into its root Section.

        Raises:
            KVReadError, KVEncodingError, KVSyntaxError, KVStructureError
        """
        try:
            if isinstance(source, (str, os.PathLike)):
                root = self.parse_file(source)
            elif isinstance(source, io.TextIOBase):
                root = self.parse_lines(line.rstrip("\r\n") for line in source)
            else:
                root = self.parse_stream(source)
        except KeyValuesError:
            self.log.exception("Parse failed.")
            raise

        self.log.info(f"Parse completed: {len(root)} top-level entries.")
        return root


def parse(source: Source) -> Section:
    """
    Parse key-value data into a tree.

    ``source`` may be a filesystem path, a binary stream or a text stream.
    Files opened from a path are always closed again; streams passed in are
    left open. Sections still open at the end of input are returned as built.
    """
    return KeyValuesParser().parse(source)


def parse_text(text: str) -> Section:
    """Parse key-value data held in a string."""
    return KeyValuesParser().parse(io.StringIO(text))
