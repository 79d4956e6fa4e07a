# src/keyvalues_parser/loader/tree_builder.py

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from keyvalues_parser.core.exceptions import KVStructureError

from .nodes import Section, Value
from .tokenizer import Token, TokenKind


class TreeBuilder:
    """
    Assemble a Section tree from a validated token stream.

    Every Section lives in an arena (``_arena``); the stack of open sections
    holds arena indices, innermost on top. Index 0 is the document root and
    is never popped.

    Rules:
        - SECTION_HEADER: push the child section of that name, creating it
          under the top section when absent. An existing child is reused,
          so repeated blocks merge.
        - DATA_PAIR: write a Value leaf into the top section; a repeated
          key overwrites.
        - CLOSER: pop one section. Popping the root is a structure error.
        - OPENER, OPEN_DATA, EMPTY: no effect on the tree.
    """

    def __init__(self) -> None:
        self.root = Section()
        self._arena: List[Section] = [self.root]
        self._stack: List[int] = [0]
        # (parent index, key) -> child index
        self._children: Dict[Tuple[int, str], int] = {}

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #

    @property
    def depth(self) -> int:
        """Number of open sections, not counting the root."""
        return len(self._stack) - 1

    @property
    def section_count(self) -> int:
        """Number of distinct sections created, not counting the root."""
        return len(self._arena) - 1

    @property
    def current(self) -> Section:
        return self._arena[self._stack[-1]]

    # ------------------------------------------------------------------ #
    # Token handlers
    # ------------------------------------------------------------------ #

    def open_section(self, name: str, lineno: int = 0) -> None:
        parent_idx = self._stack[-1]
        parent = self._arena[parent_idx]
        existing = parent.children.get(name)

        if isinstance(existing, Section):
            self._stack.append(self._children[(parent_idx, name)])
            return

        if isinstance(existing, Value):
            raise KVStructureError(
                lineno, f"section {name!r} clashes with a value of the same key"
            )

        child = Section(lineno=lineno)
        parent.children[name] = child
        self._arena.append(child)
        child_idx = len(self._arena) - 1
        self._children[(parent_idx, name)] = child_idx
        self._stack.append(child_idx)

    def set_value(self, key: str, value: str) -> None:
        parent_idx = self._stack[-1]
        self._arena[parent_idx].children[key] = Value(value)
        # A leaf replacing a section detaches it from later merges.
        self._children.pop((parent_idx, key), None)

    def close_section(self, lineno: int = 0) -> None:
        if len(self._stack) == 1:
            raise KVStructureError(lineno)
        self._stack.pop()

    def apply(self, token: Token) -> None:
        """Dispatch a validated token to its handler."""
        if token.kind is TokenKind.SECTION_HEADER:
            self.open_section(token.name, token.lineno)
        elif token.kind is TokenKind.DATA_PAIR:
            self.set_value(token.key, token.value)
        elif token.kind is TokenKind.CLOSER:
            self.close_section(token.lineno)


def build_tree(tokens: Iterable[Token]) -> Section:
    """
    Build a tree from tokens that already passed grammar validation.

    EMPTY and OPEN_DATA tokens are accepted and ignored. Sections left open
    at the end are returned as they stand.
    """
    builder = TreeBuilder()
    for token in tokens:
        builder.apply(token)
    return builder.root
