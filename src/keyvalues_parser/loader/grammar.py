# src/keyvalues_parser/loader/grammar.py

"""
Token-transition rules of the key-value grammar.

The table maps the previous token kind to the kinds allowed to follow it.
EMPTY lines are never checked against it and never change state.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping

from keyvalues_parser.core.exceptions import KVSyntaxError

from .tokenizer import Token, TokenKind

_BODY = frozenset(
    {
        TokenKind.SECTION_HEADER,
        TokenKind.DATA_PAIR,
        TokenKind.OPEN_DATA,
        TokenKind.CLOSER,
    }
)

TRANSITIONS: Mapping[TokenKind, FrozenSet[TokenKind]] = MappingProxyType(
    {
        TokenKind.ROOT: frozenset({TokenKind.SECTION_HEADER}),
        TokenKind.SECTION_HEADER: frozenset({TokenKind.OPENER}),
        TokenKind.OPENER: _BODY,
        TokenKind.CLOSER: _BODY,
        TokenKind.DATA_PAIR: _BODY,
        TokenKind.OPEN_DATA: frozenset({TokenKind.DATA_PAIR, TokenKind.OPEN_DATA}),
    }
)


def is_legal_transition(previous: TokenKind, current: TokenKind) -> bool:
    return current in TRANSITIONS.get(previous, frozenset())


def check_transition(previous: TokenKind, token: Token) -> None:
    """
    Raise KVSyntaxError unless ``token`` may follow a token of kind ``previous``.
    """
    if not is_legal_transition(previous, token.kind):
        raise KVSyntaxError(
            token.lineno,
            f"unexpected token ({token.kind.value} after {previous.value})",
        )
