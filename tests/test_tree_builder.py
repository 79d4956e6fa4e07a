# tests/test_tree_builder.py

from __future__ import annotations

import pytest

from keyvalues_parser.core.exceptions import KVStructureError
from keyvalues_parser.loader import Section, Token, TokenKind, TreeBuilder, Value, build_tree


def _header(name: str, lineno: int = 0) -> Token:
    return Token(lineno=lineno, kind=TokenKind.SECTION_HEADER, strings=(name,))


def _pair(key: str, value: str) -> Token:
    return Token(lineno=0, kind=TokenKind.DATA_PAIR, strings=(key, value))


OPEN = Token(lineno=0, kind=TokenKind.OPENER)
CLOSE = Token(lineno=0, kind=TokenKind.CLOSER)


def test_builder_starts_with_only_root() -> None:
    builder = TreeBuilder()
    assert builder.depth == 0
    assert builder.current is builder.root
    assert len(builder.root) == 0


def test_section_header_pushes_and_closer_pops() -> None:
    builder = TreeBuilder()
    builder.apply(_header("root", 1))
    assert builder.depth == 1
    builder.apply(OPEN)
    builder.apply(_pair("key", "value"))
    builder.apply(CLOSE)
    assert builder.depth == 0

    root = builder.root
    assert isinstance(root["root"], Section)
    assert root["root"]["key"] == Value("value")
    assert root["root"].lineno == 1


def test_repeated_section_merges() -> None:
    tokens = [
        _header("weapons"), OPEN, _header("ak47"), OPEN, _pair("a", "1"), CLOSE, CLOSE,
        _header("weapons"), OPEN, _header("m4a1"), OPEN, _pair("b", "2"), CLOSE, CLOSE,
    ]
    root = build_tree(tokens)

    assert list(root) == ["weapons"]
    assert root.to_dict() == {"weapons": {"ak47": {"a": "1"}, "m4a1": {"b": "2"}}}


def test_merge_reuses_the_same_section_object() -> None:
    builder = TreeBuilder()
    for token in [_header("a"), OPEN, CLOSE]:
        builder.apply(token)
    first = builder.root["a"]
    for token in [_header("a"), OPEN, _pair("k", "v"), CLOSE]:
        builder.apply(token)

    assert builder.root["a"] is first
    assert builder.section_count == 1


def test_repeated_key_overwrites_leaf() -> None:
    root = build_tree([_header("s"), OPEN, _pair("k", "1"), _pair("k", "2"), CLOSE])
    assert root["s"]["k"] == Value("2")


def test_closer_with_only_root_is_structure_error() -> None:
    builder = TreeBuilder()
    with pytest.raises(KVStructureError) as excinfo:
        builder.apply(Token(lineno=1, kind=TokenKind.CLOSER))
    assert excinfo.value.lineno == 1
    assert excinfo.value.kind == "structure"
    assert builder.depth == 0


def test_section_clashing_with_value_is_structure_error() -> None:
    builder = TreeBuilder()
    for token in [_header("s"), OPEN, _pair("k", "v")]:
        builder.apply(token)
    with pytest.raises(KVStructureError):
        builder.apply(_header("k", 4))


def test_value_replacing_section_detaches_it() -> None:
    root = build_tree(
        [_header("s"), OPEN, _header("k"), OPEN, CLOSE, _pair("k", "leaf"), CLOSE]
    )
    assert root["s"]["k"] == Value("leaf")


def test_unclosed_sections_are_left_in_tree() -> None:
    builder = TreeBuilder()
    for token in [_header("outer"), OPEN, _header("inner"), OPEN, _pair("k", "v")]:
        builder.apply(token)

    assert builder.depth == 2
    assert builder.root.to_dict() == {"outer": {"inner": {"k": "v"}}}
