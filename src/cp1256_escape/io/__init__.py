"""File conversion helpers."""

from cp1256_escape.io.convert import decode_file, encode_file, read_escaped, read_unicode

__all__ = ["encode_file", "decode_file", "read_escaped", "read_unicode"]
