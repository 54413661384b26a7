"""
Escaped CP1256 -> Unicode decoder.

Scans arbitrary text for ``\\u00XX`` tokens and maps each byte through
the reverse table. Text between tokens is ignored. Bytes with no CP1256
mapping are emitted as the same-numbered character (best effort).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cp1256_escape.codec.token import TokenScanner
from cp1256_escape.core.errors import LossyConversionError
from cp1256_escape.core.table import ReverseTable, default_tables

logger = logging.getLogger(__name__)


@dataclass
class DecodeResult:
    """Result of a decode operation."""
    text: str
    token_count: int
    unmapped_bytes: list[int] = field(default_factory=list)

    @property
    def is_lossy(self) -> bool:
        """True if any byte had no mapping and was passed through as-is."""
        return bool(self.unmapped_bytes)


def decode_with_report(
    text: str,
    strict: bool = False,
    reverse: ReverseTable | None = None,
) -> DecodeResult:
    """
    Decode escape tokens to Unicode and report unmapped bytes.

    Args:
        text: Text containing escape tokens; anything else is skipped
        strict: Raise instead of passing unmapped bytes through
        reverse: Table to use (default: the built-in CP1256 table)

    Raises:
        LossyConversionError: in strict mode, on the first unmapped byte
    """
    if reverse is None:
        _, reverse = default_tables()

    out: list[str] = []
    unmapped: list[int] = []
    tokens = TokenScanner().feed(text)

    for token in tokens:
        cp = reverse.lookup(token.byte)
        if cp is not None:
            out.append(chr(cp))
            continue

        if strict:
            raise LossyConversionError(
                f"Byte {token.byte:#04x} at position {token.start} has no CP1256 mapping",
                position=token.start,
                byte=token.byte,
            )

        logger.debug("Byte %#04x at %d unmapped, emitting U+%04X", token.byte, token.start, token.byte)
        unmapped.append(token.byte)
        out.append(chr(token.byte))

    return DecodeResult(
        text="".join(out),
        token_count=len(tokens),
        unmapped_bytes=unmapped,
    )


def decode(text: str, strict: bool = False) -> str:
    r"""
    Decode CP1256 escape tokens back to Unicode text.

    >>> decode("hello\\u00C7world")
    'ا'
    """
    return decode_with_report(text, strict=strict).text
