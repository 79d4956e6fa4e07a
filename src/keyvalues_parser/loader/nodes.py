# src/keyvalues_parser/loader/nodes.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple, Union


@dataclass(frozen=True)
class Value:
    """
    A terminal string datum attached to a key within a section.

    Attributes:
        text: The literal content of the quoted value, escapes resolved.
    """

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(eq=False)
class Section(Mapping):
    """
    A named node of the tree holding further named children.

    Children are either nested ``Section`` instances or ``Value`` leaves and
    keys are unique within a section. Consumers see a read-only ``Mapping``;
    only the tree builder writes to ``children``.

    Attributes:
        children: Mapping of key -> child node.
        lineno: Line number of the header that first opened the section
            (0 for the document root).
    """

    children: Dict[str, "Node"] = field(default_factory=dict)
    lineno: int = 0

    # ---------- Mapping protocol ----------

    def __getitem__(self, key: str) -> "Node":
        return self.children[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    # ---------- Helper methods ----------

    def sections(self) -> Iterator[Tuple[str, "Section"]]:
        """Yield (key, section) for every direct sub-section."""
        for key, node in self.children.items():
            if isinstance(node, Section):
                yield key, node

    def leaves(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, text) for every direct leaf value."""
        for key, node in self.children.items():
            if isinstance(node, Value):
                yield key, node.text

    def walk(self, _path: Tuple[str, ...] = ()) -> Iterator[Tuple[Tuple[str, ...], "Node"]]:
        """Yield (path, node) for every descendant in depth-first order."""
        for key, node in self.children.items():
            path = _path + (key,)
            yield path, node
            if isinstance(node, Section):
                yield from node.walk(path)

    def depth(self) -> int:
        """Return the nesting depth below this section (0 without sub-sections)."""
        return max((1 + child.depth() for _, child in self.sections()), default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain nested dicts with ``str`` leaves."""
        out: Dict[str, Any] = {}
        for key, node in self.children.items():
            out[key] = node.to_dict() if isinstance(node, Section) else node.text
        return out

    def __repr__(self) -> str:
        return f"<Section keys={len(self.children)} line={self.lineno}>"


Node = Union[Section, Value]
