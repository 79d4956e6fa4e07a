"""
keyvalues_parser: reader for nested, brace-delimited key-value text files.

    from keyvalues_parser import parse, resolve_value

    root = parse("items_game.txt")
    name = resolve_value(root, "items_game", "items", "7", "name")
"""

from keyvalues_parser.core.exceptions import (
    KeyValuesError,
    KVEncodingError,
    KVReadError,
    KVStructureError,
    KVSyntaxError,
    PathNotFoundError,
    ResolveError,
    TypeMismatchError,
)
from keyvalues_parser.loader.nodes import Node, Section, Value
from keyvalues_parser.parser_core import KeyValuesParser, parse, parse_text
from keyvalues_parser.resolve import resolve, resolve_section, resolve_value

__all__ = [
    "KeyValuesError",
    "KVEncodingError",
    "KVReadError",
    "KVStructureError",
    "KVSyntaxError",
    "PathNotFoundError",
    "ResolveError",
    "TypeMismatchError",
    "Node",
    "Section",
    "Value",
    "KeyValuesParser",
    "parse",
    "parse_text",
    "resolve",
    "resolve_section",
    "resolve_value",
]
