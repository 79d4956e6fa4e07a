# src/keyvalues_parser/loader/__init__.py

"""
Public interface for the key-value loader stack.

Intended usage from other parts of the project and tests:

    from keyvalues_parser.loader import (
        Section,
        Value,
        Token,
        TokenKind,
        classify_line,
        check_transition,
        TreeBuilder,
        open_line_source,
    )
"""

from __future__ import annotations
from .nodes import Node, Section, Value
from .tokenizer import Token, TokenKind, classify_line, split_quoted
from .grammar import TRANSITIONS, check_transition, is_legal_transition
from .tree_builder import TreeBuilder, build_tree
from .encoding import (
    detect_utf16,
    open_line_source,
    sniff_bom,
    transcode_utf16_to_utf8,
)


__all__ = [
    "Node",
    "Section",
    "Value",
    "Token",
    "TokenKind",
    "classify_line",
    "split_quoted",
    "TRANSITIONS",
    "check_transition",
    "is_legal_transition",
    "TreeBuilder",
    "build_tree",
    "detect_utf16",
    "open_line_source",
    "sniff_bom",
    "transcode_utf16_to_utf8",
]
