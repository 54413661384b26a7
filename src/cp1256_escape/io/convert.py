"""Convert whole text files to and from the escaped CP1256 form."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from cp1256_escape.codec.decoder import DecodeResult, decode_with_report
from cp1256_escape.codec.encoder import EncodeResult, encode_with_report


def _default_dest(source: Path, suffix: str) -> Path:
    return source.with_stem(source.stem + suffix)


def read_unicode(source: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a text file to be encoded."""
    return Path(source).read_text(encoding=encoding)


def read_escaped(source: Union[str, Path]) -> str:
    """
    Read a file of escape tokens.

    Tokens are ASCII, and anything else is skipped by the decoder, so the
    file is read as latin-1, which accepts any byte.
    """
    return Path(source).read_text(encoding="latin-1")


def encode_file(
    source: Union[str, Path],
    dest: Union[str, Path, None] = None,
    encoding: str = "utf-8",
    strict: bool = False,
) -> tuple[Path, EncodeResult]:
    """
    Encode a Unicode text file to escape tokens.

    Args:
        source: Path to the input text file
        dest: Output path (default: input_escaped.ext)
        encoding: Text encoding of the input file
        strict: Raise LossyConversionError instead of falling back

    Returns:
        Tuple of (output_path, EncodeResult)
    """
    source = Path(source)
    dest = _default_dest(source, "_escaped") if dest is None else Path(dest)

    result = encode_with_report(read_unicode(source, encoding), strict=strict)
    dest.write_text(result.text, encoding="ascii")

    return dest, result


def decode_file(
    source: Union[str, Path],
    dest: Union[str, Path, None] = None,
    encoding: str = "utf-8",
    strict: bool = False,
) -> tuple[Path, DecodeResult]:
    """
    Decode a file of escape tokens back to Unicode text.

    Anything in the input that is not a token is ignored. The output is
    written with ``encoding``.

    Returns:
        Tuple of (output_path, DecodeResult)
    """
    source = Path(source)
    dest = _default_dest(source, "_decoded") if dest is None else Path(dest)

    result = decode_with_report(read_escaped(source), strict=strict)
    dest.write_text(result.text, encoding=encoding)

    return dest, result
