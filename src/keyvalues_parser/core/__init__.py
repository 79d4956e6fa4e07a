"""
Core definitions shared across the parser: the exception hierarchy.
"""

from .exceptions import (
    KeyValuesError,
    KVEncodingError,
    KVReadError,
    KVStructureError,
    KVSyntaxError,
    PathNotFoundError,
    ResolveError,
    TypeMismatchError,
)

__all__ = [
    "KeyValuesError",
    "KVEncodingError",
    "KVReadError",
    "KVStructureError",
    "KVSyntaxError",
    "PathNotFoundError",
    "ResolveError",
    "TypeMismatchError",
]
