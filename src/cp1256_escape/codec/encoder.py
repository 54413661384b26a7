"""
Unicode -> escaped CP1256 encoder.

Each character becomes one ``\\u00XX`` token when it is ASCII or in the
CP1256 table. Anything else falls back to its UTF-8 bytes, one token per
byte; that path is lossy and will not decode back to the same character.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from cp1256_escape.codec.token import format_token
from cp1256_escape.core.constants import ASCII_MAX
from cp1256_escape.core.errors import LossyConversionError
from cp1256_escape.core.table import ForwardTable, default_tables

logger = logging.getLogger(__name__)


@dataclass
class EncodeResult:
    """Result of an encode operation."""
    text: str
    token_count: int
    fallback_chars: list[str] = field(default_factory=list)

    @property
    def is_lossy(self) -> bool:
        """True if any character went through the UTF-8 fallback."""
        return bool(self.fallback_chars)


def _is_surrogate(cp: int) -> bool:
    return 0xD800 <= cp <= 0xDFFF


def _iter_scalars(text: str) -> Iterator[tuple[int, str]]:
    """
    Yield ``(position, char)`` for each scalar value in ``text``.

    A surrogate pair stored as two code points is joined into the single
    character it encodes; ``position`` is where the pair starts.
    """
    i = 0
    while i < len(text):
        cp = ord(text[i])
        if 0xD800 <= cp <= 0xDBFF and i + 1 < len(text):
            low = ord(text[i + 1])
            if 0xDC00 <= low <= 0xDFFF:
                yield i, chr(0x10000 + ((cp - 0xD800) << 10) + (low - 0xDC00))
                i += 2
                continue
        yield i, text[i]
        i += 1


def _fallback_bytes(char: str) -> bytes:
    # A lone surrogate has no UTF-8 form and becomes U+FFFD (EF BF BD)
    if _is_surrogate(ord(char)):
        char = "\N{REPLACEMENT CHARACTER}"
    return char.encode("utf-8")


def encode_with_report(
    text: str,
    strict: bool = False,
    forward: ForwardTable | None = None,
) -> EncodeResult:
    """
    Encode text to escape tokens and report which characters fell back.

    Args:
        text: Unicode text to encode
        strict: Raise instead of using the UTF-8 fallback
        forward: Table to use (default: the built-in CP1256 table)

    Returns:
        EncodeResult with the escaped text

    Raises:
        LossyConversionError: in strict mode, on the first character
            that is neither ASCII nor in the table
    """
    if forward is None:
        forward, _ = default_tables()

    out: list[str] = []
    fallback_chars: list[str] = []

    for pos, char in _iter_scalars(text):
        cp = ord(char)
        if cp <= ASCII_MAX:
            out.append(format_token(cp))
            continue

        byte = forward.lookup(cp)
        if byte is not None:
            out.append(format_token(byte))
            continue

        if strict:
            raise LossyConversionError(
                f"U+{cp:04X} at position {pos} has no CP1256 mapping",
                position=pos,
                char=char,
            )

        raw = _fallback_bytes(char)
        logger.debug("U+%04X at %d not in table, emitting %d UTF-8 bytes", cp, pos, len(raw))
        fallback_chars.append(char)
        out.extend(format_token(b) for b in raw)

    return EncodeResult(
        text="".join(out),
        token_count=len(out),
        fallback_chars=fallback_chars,
    )


def encode(text: str, strict: bool = False) -> str:
    r"""
    Encode Unicode text as concatenated CP1256 escape tokens.

    >>> encode("تصدير")
    '\\u00CA\\u00D5\\u00CF\\u00ED\\u00D1'
    """
    return encode_with_report(text, strict=strict).text
