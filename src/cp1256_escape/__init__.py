r"""
cp1256-escape: Arabic-script text <-> escaped CP1256 bytes

Convert Unicode text (Arabic, Persian, Urdu) to the Windows-1256 code page
and write each byte as a six-character ``\u00XX`` token that is safe to
paste into plain-text fields, and back again.

Quick Start:
    >>> import cp1256_escape as cp
    >>> cp.encode("تصدير")
    '\\u00CA\\u00D5\\u00CF\\u00ED\\u00D1'
    >>> cp.decode("\\u00CA\\u00D5\\u00CF\\u00ED\\u00D1")
    'تصدير'

Features:
    - Built-in CP1256 table for Arabic, Persian/Urdu letters and punctuation
    - Permissive decoding: text between tokens is ignored
    - Never-fail fallbacks, with reports and a strict mode to detect them
    - ``cp1256-escaped`` codec for str.encode / bytes.decode
    - File conversion and a command-line tool
"""

__version__ = "0.1.0"

# Core types
from cp1256_escape.core.errors import Cp1256EscapeError, LossyConversionError, TableError
from cp1256_escape.core.table import (
    CodepointByteEntry,
    ForwardTable,
    ReverseTable,
    build_reverse_table,
    check_injective,
    default_tables,
)

# Conversion
from cp1256_escape.codec.encoder import EncodeResult, encode, encode_with_report
from cp1256_escape.codec.decoder import DecodeResult, decode, decode_with_report
from cp1256_escape.codec.token import TokenScanner, format_token

# Registers the cp1256-escaped codec
from cp1256_escape.codec import registry as _registry  # noqa: F401

# File I/O
from cp1256_escape.io.convert import decode_file, encode_file

__all__ = [
    # Version
    "__version__",
    # Errors
    "Cp1256EscapeError",
    "LossyConversionError",
    "TableError",
    # Tables
    "CodepointByteEntry",
    "ForwardTable",
    "ReverseTable",
    "build_reverse_table",
    "check_injective",
    "default_tables",
    # Conversion
    "encode",
    "encode_with_report",
    "EncodeResult",
    "decode",
    "decode_with_report",
    "DecodeResult",
    "TokenScanner",
    "format_token",
    # I/O
    "encode_file",
    "decode_file",
]
