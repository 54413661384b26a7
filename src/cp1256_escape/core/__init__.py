"""Core data: mapping tables, constants and errors."""

from cp1256_escape.core.errors import Cp1256EscapeError, LossyConversionError, TableError
from cp1256_escape.core.table import (
    UNMAPPED,
    CodepointByteEntry,
    ForwardTable,
    ReverseTable,
    build_reverse_table,
    check_injective,
    default_tables,
)

__all__ = [
    "Cp1256EscapeError",
    "LossyConversionError",
    "TableError",
    "UNMAPPED",
    "CodepointByteEntry",
    "ForwardTable",
    "ReverseTable",
    "build_reverse_table",
    "check_injective",
    "default_tables",
]
