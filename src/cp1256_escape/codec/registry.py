r"""
``cp1256-escaped`` text codec.

Importing this module registers the codec with :mod:`codecs`, so the
standard string APIs work::

    >>> import cp1256_escape
    >>> "سلام".encode("cp1256-escaped")
    b'\\u00D3\\u00E1\\u00C7\\u00E3'

The ``strict`` error handler (Python's default) raises
``UnicodeEncodeError``/``UnicodeDecodeError`` where the plain
encode/decode functions would take their lossy fallback. Any other
handler name selects the lenient fallback behaviour.
"""

from __future__ import annotations

import codecs
from typing import Optional

from cp1256_escape.codec.decoder import decode
from cp1256_escape.codec.encoder import encode
from cp1256_escape.codec.token import TokenScanner
from cp1256_escape.core.constants import TOKEN_LENGTH
from cp1256_escape.core.errors import LossyConversionError

NAME = "cp1256-escaped"
ALIASES = ("cp1256_escaped", "cp1256escaped")


def _encode_text(text: str, errors: str) -> bytes:
    try:
        escaped = encode(text, strict=(errors == "strict"))
    except LossyConversionError as exc:
        raise UnicodeEncodeError(
            NAME, text, exc.position, exc.position + 1, str(exc)
        ) from exc
    return escaped.encode("ascii")


def _decode_bytes(data: bytes, errors: str) -> str:
    # latin-1 keeps one character per byte, so positions line up
    text = bytes(data).decode("latin-1")
    try:
        return decode(text, strict=(errors == "strict"))
    except LossyConversionError as exc:
        raise UnicodeDecodeError(
            NAME, bytes(data), exc.position, exc.position + TOKEN_LENGTH, str(exc)
        ) from exc


def _complete_prefix(data: bytes) -> int:
    """Length of ``data`` that does not end in a partial token."""
    scanner = TokenScanner()
    scanner.feed(bytes(data).decode("latin-1"))
    return len(data) - len(scanner.pending)


class Codec(codecs.Codec):
    def encode(self, input: str, errors: str = "strict") -> tuple[bytes, int]:
        return _encode_text(input, errors), len(input)

    def decode(self, input: bytes, errors: str = "strict") -> tuple[str, int]:
        return _decode_bytes(input, errors), len(input)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input: str, final: bool = False) -> bytes:
        return _encode_text(input, self.errors)


class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
    """Holds back a trailing partial token until the next chunk arrives."""

    def _buffer_decode(self, input: bytes, errors: str, final: bool) -> tuple[str, int]:
        consumed = len(input) if final else _complete_prefix(input)
        return _decode_bytes(input[:consumed], errors), consumed


class StreamWriter(Codec, codecs.StreamWriter):
    pass


class StreamReader(Codec, codecs.StreamReader):
    def decode(self, input: bytes, errors: str = "strict") -> tuple[str, int]:
        consumed = _complete_prefix(input)
        return _decode_bytes(input[:consumed], errors), consumed


def getregentry() -> codecs.CodecInfo:
    """Return the codec registry entry."""
    return codecs.CodecInfo(
        name=NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamwriter=StreamWriter,
        streamreader=StreamReader,
    )


def search_function(encoding_name: str) -> Optional[codecs.CodecInfo]:
    normalized = encoding_name.lower().replace("-", "_").replace(" ", "_")
    if normalized in (NAME.replace("-", "_"),) + ALIASES:
        return getregentry()
    return None


codecs.register(search_function)
