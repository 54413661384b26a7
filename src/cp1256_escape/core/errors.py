"""Exceptions raised by cp1256-escape."""

from __future__ import annotations


class Cp1256EscapeError(Exception):
    """Base class for all library errors."""


class TableError(Cp1256EscapeError, ValueError):
    """The mapping table is malformed or not injective."""


class LossyConversionError(Cp1256EscapeError, ValueError):
    """
    A strict conversion hit a fallback path.

    Raised only when ``strict=True``. Exactly one of ``char`` (encoding)
    or ``byte`` (decoding) is set; ``position`` is the index in the input
    text where the problem starts.
    """

    def __init__(
        self,
        message: str,
        *,
        position: int,
        char: str | None = None,
        byte: int | None = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.char = char
        self.byte = byte
