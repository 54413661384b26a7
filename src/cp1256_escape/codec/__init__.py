"""Encoding/decoding between Unicode and escaped CP1256."""

from cp1256_escape.codec.token import TokenScanner, ScannedToken, format_token, iter_token_bytes
from cp1256_escape.codec.encoder import EncodeResult, encode, encode_with_report
from cp1256_escape.codec.decoder import DecodeResult, decode, decode_with_report

__all__ = [
    "TokenScanner",
    "ScannedToken",
    "format_token",
    "iter_token_bytes",
    "EncodeResult",
    "encode",
    "encode_with_report",
    "DecodeResult",
    "decode",
    "decode_with_report",
]
