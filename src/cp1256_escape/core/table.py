"""Forward (Unicode -> byte) and reverse (byte -> Unicode) mapping tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Union

from cp1256_escape.core.constants import ASCII_MAX, BYTE_RANGE, FORWARD_ENTRIES
from cp1256_escape.core.errors import TableError

logger = logging.getLogger(__name__)

# Sentinel for a reverse slot with no defined codepoint
UNMAPPED = None

MAX_CODEPOINT = 0x10FFFF


@dataclass(frozen=True)
class CodepointByteEntry:
    """A single Unicode scalar value -> CP1256 byte pair."""
    codepoint: int
    byte: int

    def __post_init__(self) -> None:
        if not 0 <= self.codepoint <= MAX_CODEPOINT:
            raise TableError(f"Codepoint out of range: {self.codepoint:#x}")
        if not ASCII_MAX < self.byte < BYTE_RANGE:
            raise TableError(
                f"Byte for U+{self.codepoint:04X} must be 0x80-0xFF, got {self.byte:#04x}"
            )

    @property
    def char(self) -> str:
        return chr(self.codepoint)


EntryLike = Union[CodepointByteEntry, tuple[int, int]]


def _as_entry(item: EntryLike) -> CodepointByteEntry:
    if isinstance(item, CodepointByteEntry):
        return item
    codepoint, byte = item
    return CodepointByteEntry(codepoint, byte)


def check_injective(entries: Iterable[EntryLike]) -> None:
    """
    Verify that both the codepoint and byte columns are unique.

    Raises:
        TableError: naming the first duplicated codepoint or byte.
    """
    seen_codepoints: dict[int, int] = {}
    seen_bytes: dict[int, int] = {}
    for item in entries:
        entry = _as_entry(item)
        if entry.codepoint in seen_codepoints:
            raise TableError(
                f"Duplicate codepoint U+{entry.codepoint:04X} "
                f"(bytes {seen_codepoints[entry.codepoint]:#04x} and {entry.byte:#04x})"
            )
        if entry.byte in seen_bytes:
            raise TableError(
                f"Duplicate byte {entry.byte:#04x} "
                f"(U+{seen_bytes[entry.byte]:04X} and U+{entry.codepoint:04X})"
            )
        seen_codepoints[entry.codepoint] = entry.byte
        seen_bytes[entry.byte] = entry.codepoint


class ForwardTable:
    """
    Immutable Unicode -> CP1256 mapping.

    Built from a literal list of entries and checked for injectivity up
    front, so it can always be inverted without losing an entry.
    """

    __slots__ = ("_entries", "_by_codepoint")

    def __init__(self, entries: Iterable[EntryLike] = FORWARD_ENTRIES):
        resolved = tuple(_as_entry(item) for item in entries)
        check_injective(resolved)
        self._entries = resolved
        self._by_codepoint = {e.codepoint: e.byte for e in resolved}

    def lookup(self, codepoint: int) -> Optional[int]:
        """Return the mapped byte, or None if the codepoint is not present."""
        return self._by_codepoint.get(codepoint)

    @property
    def entries(self) -> tuple[CodepointByteEntry, ...]:
        return self._entries

    def __contains__(self, codepoint: object) -> bool:
        return codepoint in self._by_codepoint

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CodepointByteEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"ForwardTable({len(self)} entries)"


class ReverseTable:
    """
    256-slot byte -> codepoint table.

    Slots 0x00-0x7F are ASCII identity; 0x80-0xFF hold the inverted
    forward mapping or UNMAPPED.
    """

    __slots__ = ("_slots",)

    def __init__(self, slots: Iterable[Optional[int]]):
        resolved = tuple(slots)
        if len(resolved) != BYTE_RANGE:
            raise TableError(f"Reverse table needs {BYTE_RANGE} slots, got {len(resolved)}")
        self._slots = resolved

    def lookup(self, byte: int) -> Optional[int]:
        """Return the codepoint for a byte, or None when unmapped."""
        return self._slots[byte]

    def is_mapped(self, byte: int) -> bool:
        return self._slots[byte] is not UNMAPPED

    @property
    def slots(self) -> tuple[Optional[int], ...]:
        return self._slots

    @property
    def unmapped_bytes(self) -> tuple[int, ...]:
        return tuple(b for b, cp in enumerate(self._slots) if cp is UNMAPPED)

    def __getitem__(self, byte: int) -> Optional[int]:
        return self._slots[byte]

    def __len__(self) -> int:
        return BYTE_RANGE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseTable):
            return NotImplemented
        return self._slots == other._slots

    def __hash__(self) -> int:
        return hash(self._slots)

    def __repr__(self) -> str:
        mapped = BYTE_RANGE - len(self.unmapped_bytes)
        return f"ReverseTable({mapped}/{BYTE_RANGE} mapped)"


def build_reverse_table(forward: ForwardTable) -> ReverseTable:
    """Invert a forward table into a 256-slot reverse table."""
    slots: list[Optional[int]] = [
        b if b <= ASCII_MAX else UNMAPPED for b in range(BYTE_RANGE)
    ]
    for entry in forward:
        # ForwardTable is injective, so each upper slot is written at most once
        slots[entry.byte] = entry.codepoint
    table = ReverseTable(slots)
    logger.debug("Built %r from %r", table, forward)
    return table


@lru_cache(maxsize=None)
def default_tables() -> tuple[ForwardTable, ReverseTable]:
    """Process-wide CP1256 tables, built once on first use."""
    forward = ForwardTable(FORWARD_ENTRIES)
    return forward, build_reverse_table(forward)
