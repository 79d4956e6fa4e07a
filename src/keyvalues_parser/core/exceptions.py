from __future__ import annotations

from typing import Optional


class KeyValuesError(Exception):
    """Base exception for parse and lookup failures."""

    kind = "error"


class KVReadError(KeyValuesError, OSError):
    """Raised when the source cannot be opened or read."""

    kind = "io"


class KVEncodingError(KeyValuesError, UnicodeError):
    """Raised when a byte-order mark claims an encoding we cannot transcode."""

    kind = "encoding"


class KVSyntaxError(KeyValuesError, ValueError):
    """Raised when a line has no recognised shape or breaks the grammar."""

    kind = "syntax"

    def __init__(self, lineno: int, detail: str):
        self.lineno = lineno
        self.detail = detail
        super().__init__(f"Line {lineno}: {detail}")


class KVStructureError(KeyValuesError):
    """Raised when a closing brace has no open section to close."""

    kind = "structure"

    def __init__(self, lineno: int, detail: str = "closing brace without an open section"):
        self.lineno = lineno
        self.detail = detail
        super().__init__(f"Line {lineno}: {detail}")


class ResolveError(KeyValuesError):
    """Base exception for failed path lookups."""

    kind = "lookup"

    def __init__(self, path: tuple, message: str):
        self.path = path
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class PathNotFoundError(ResolveError, KeyError):
    """Raised when a key along a lookup path does not exist."""

    kind = "path_not_found"

    def __init__(self, path: tuple, missing: Optional[str] = None):
        self.missing = missing
        joined = " -> ".join(path)
        super().__init__(path, f"key {missing!r} not found (path: {joined})")


class TypeMismatchError(ResolveError, TypeError):
    """Raised when the node at the end of a lookup path has the wrong variant."""

    kind = "type_mismatch"

    def __init__(self, path: tuple, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        joined = " -> ".join(path)
        super().__init__(path, f"expected {expected} at {joined!r}, found {actual}")
