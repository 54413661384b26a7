r"""
Escape-token grammar.

A token is the six characters ``\u00XX`` where ``XX`` is a byte value in
hex. Tokens are written with uppercase digits; either case is accepted
when scanning. Anything that is not a complete token is skipped.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterator, NamedTuple

from cp1256_escape.core.constants import BYTE_RANGE, TOKEN_MARKER, TOKEN_PAD

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def format_token(byte: int) -> str:
    r"""Format one byte as an escape token, e.g. 0xCA -> ``\u00CA``."""
    if not 0 <= byte < BYTE_RANGE:
        raise ValueError(f"Byte value must be 0-255, got {byte}")
    return f"{TOKEN_MARKER}{TOKEN_PAD}{byte:02X}"


class ScannedToken(NamedTuple):
    """A recognized token: its start offset in the input and its byte value."""
    start: int
    byte: int


class _State(Enum):
    START = auto()
    MARKER = auto()  # seen '\'
    PAD1 = auto()    # seen '\u'
    PAD2 = auto()    # seen '\u0'
    HEX1 = auto()    # seen '\u00'
    HEX2 = auto()    # seen '\u00X'


class TokenScanner:
    """
    Finite-state scanner that pulls escape tokens out of arbitrary text.

    Feed text in one or more chunks; a token split across a chunk
    boundary is buffered and completed by the next chunk. Offsets in the
    returned tokens are relative to the start of all text fed since the
    last reset.

    Example:
        >>> scanner = TokenScanner()
        >>> scanner.feed("ab\\u00C")
        []
        >>> scanner.feed("7cd")
        [ScannedToken(start=2, byte=199)]
    """

    def __init__(self) -> None:
        self._offset = 0
        self._reset_token()

    def _reset_token(self) -> None:
        self._state = _State.START
        self._buffer = ""
        self._start = 0
        self._high = 0

    @property
    def pending(self) -> str:
        """Characters of a partial token carried over to the next chunk."""
        return self._buffer

    def feed(self, chunk: str) -> list[ScannedToken]:
        """Scan a chunk and return the tokens completed within it."""
        tokens: list[ScannedToken] = []
        for i, char in enumerate(chunk):
            token = self._step(char, self._offset + i)
            if token is not None:
                tokens.append(token)
        self._offset += len(chunk)
        return tokens

    def flush(self) -> str:
        """Discard any partial token and return what was dropped."""
        dropped = self._buffer
        self._reset_token()
        return dropped

    def reset(self) -> None:
        """Forget partial state and restart offsets at zero."""
        self._offset = 0
        self._reset_token()

    def scan(self, text: str) -> Iterator[int]:
        """Yield the byte value of every token in ``text``, in order."""
        self.reset()
        for token in self.feed(text):
            yield token.byte
        self.flush()

    def _step(self, char: str, pos: int) -> ScannedToken | None:
        state = self._state

        if state is _State.MARKER and char == TOKEN_MARKER[1]:
            self._advance(char, _State.PAD1)
        elif state is _State.PAD1 and char == TOKEN_PAD[0]:
            self._advance(char, _State.PAD2)
        elif state is _State.PAD2 and char == TOKEN_PAD[1]:
            self._advance(char, _State.HEX1)
        elif state is _State.HEX1 and char in HEX_DIGITS:
            self._high = int(char, 16)
            self._advance(char, _State.HEX2)
        elif state is _State.HEX2 and char in HEX_DIGITS:
            token = ScannedToken(self._start, (self._high << 4) | int(char, 16))
            self._reset_token()
            return token
        else:
            # Mismatch or idle. The marker never recurs inside a token, so
            # only the current character can start a new one.
            self._reset_token()
            if char == TOKEN_MARKER[0]:
                self._start = pos
                self._advance(char, _State.MARKER)
        return None

    def _advance(self, char: str, state: _State) -> None:
        self._buffer += char
        self._state = state


def iter_tokens(text: str) -> Iterator[ScannedToken]:
    """Yield every complete token in ``text`` with its start offset."""
    yield from TokenScanner().feed(text)


def iter_token_bytes(text: str) -> Iterator[int]:
    """Yield the byte value of every complete token in ``text``."""
    return TokenScanner().scan(text)
