# utils.py
# Shared types and errors

from __future__ import annotations

import typing as t

from typing_extensions import Buffer

# Anything the digest accepts: text, a buffer (owned or a view), or byte values.
ReadableBuffer = t.Union[str, Buffer, t.Sequence[int]]


class UnsupportedInputKind(TypeError):
    """Raised when a value is neither text nor a byte sequence."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.kind: str = type(value).__name__
        message = f"Unsupported input kind: {self.kind!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


__all__: list = ['ReadableBuffer', 'UnsupportedInputKind']
