"""
Path lookup into a parsed tree.

Consumers walk a chain of keys from any node and read the result as a
sub-section or as a string leaf:

    kits = resolve_section(root, "items_game", "paint_kits")
    name = resolve_value(kits, "12", "name")
"""

from __future__ import annotations

from typing import Optional, Type, Union, overload

from keyvalues_parser.core.exceptions import PathNotFoundError, TypeMismatchError
from keyvalues_parser.loader.nodes import Node, Section, Value

_VARIANT_NAMES = {Section: "section", Value: "value", str: "value"}


def _variant(node: Node) -> str:
    return "section" if isinstance(node, Section) else "value"


@overload
def resolve(node: Node, *keys: str, expect: Type[Section]) -> Section: ...
@overload
def resolve(node: Node, *keys: str, expect: Type[str]) -> str: ...
@overload
def resolve(node: Node, *keys: str, expect: Type[Value]) -> Value: ...
@overload
def resolve(node: Node, *keys: str, expect: None = None) -> Node: ...


def resolve(node: Node, *keys: str, expect: Optional[type] = None) -> Union[Node, str]:
    """
    Follow ``keys`` from ``node`` and return what is found at the end.

    Args:
        node: Starting node, usually the root returned by ``parse``.
        keys: Section keys to walk, outermost first.
        expect: ``Section`` for a sub-section, ``str`` for the text of a
            leaf, ``Value`` for the leaf node itself, or None for any node.

    Raises:
        PathNotFoundError: a key is absent, or a key is looked up below a leaf.
        TypeMismatchError: the final node is not of the expected variant.
    """
    if expect is not None and expect not in _VARIANT_NAMES:
        raise ValueError(f"expect must be Section, Value, str or None, not {expect!r}")

    current = node
    for depth, key in enumerate(keys):
        if not isinstance(current, Section) or key not in current.children:
            raise PathNotFoundError(tuple(keys[: depth + 1]), key)
        current = current.children[key]

    if expect is None:
        return current

    wanted = _VARIANT_NAMES[expect]
    if _variant(current) != wanted:
        raise TypeMismatchError(tuple(keys), wanted, _variant(current))

    if expect is str:
        return current.text  # type: ignore[union-attr]
    return current


def resolve_section(node: Node, *keys: str) -> Section:
    return resolve(node, *keys, expect=Section)


def resolve_value(node: Node, *keys: str) -> str:
    return resolve(node, *keys, expect=str)
