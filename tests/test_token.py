"""Tests for the escape-token grammar and scanner."""

import pytest

from cp1256_escape.codec.token import (
    ScannedToken,
    TokenScanner,
    format_token,
    iter_token_bytes,
    iter_tokens,
)


class TestFormatToken:
    """Tests for format_token."""

    def test_uppercase_hex(self) -> None:
        assert format_token(0xCA) == "\\u00CA"
        assert format_token(0xed) == "\\u00ED"

    def test_zero_padded(self) -> None:
        assert format_token(0x0A) == "\\u000A"
        assert format_token(0) == "\\u0000"

    def test_six_characters(self) -> None:
        assert all(len(format_token(b)) == 6 for b in range(256))

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            format_token(256)
        with pytest.raises(ValueError):
            format_token(-1)


class TestScanner:
    """Tests for TokenScanner."""

    def test_case_insensitive_hex(self) -> None:
        assert list(iter_token_bytes("\\u00ca\\u00Cb\\u00FF")) == [0xCA, 0xCB, 0xFF]

    def test_skips_surrounding_text(self) -> None:
        assert list(iter_token_bytes("hello\\u00C7world")) == [0xC7]

    def test_near_misses_ignored(self) -> None:
        text = "\\u0C7 \\u00G7 \\x00C7 u00C7 \\U00C7 \\u01C7 \\u00C"
        assert list(iter_token_bytes(text)) == []

    def test_extra_hex_digit_ignored(self) -> None:
        assert list(iter_token_bytes("\\u00C7F")) == [0xC7]

    def test_restarts_on_marker(self) -> None:
        assert list(iter_token_bytes("\\\\u00C7")) == [0xC7]
        assert list(iter_token_bytes("\\u0\\u00C7")) == [0xC7]

    def test_adjacent_tokens(self) -> None:
        assert list(iter_token_bytes("\\u0041\\u0042")) == [0x41, 0x42]

    def test_token_offsets(self) -> None:
        tokens = list(iter_tokens("ab\\u0041 \\u0042"))
        assert tokens == [ScannedToken(2, 0x41), ScannedToken(9, 0x42)]

    def test_split_across_chunks(self) -> None:
        scanner = TokenScanner()
        assert scanner.feed("ab\\u00C") == []
        assert scanner.pending == "\\u00C"
        assert scanner.feed("7cd") == [ScannedToken(start=2, byte=0xC7)]
        assert scanner.pending == ""

    def test_any_split_matches_one_shot(self) -> None:
        text = "x\\u00CAy\\u00d5z"
        expected = list(iter_token_bytes(text))
        for cut in range(len(text) + 1):
            scanner = TokenScanner()
            tokens = scanner.feed(text[:cut]) + scanner.feed(text[cut:])
            assert [t.byte for t in tokens] == expected

    def test_flush_drops_partial(self) -> None:
        scanner = TokenScanner()
        scanner.feed("\\u0")
        assert scanner.flush() == "\\u0"
        assert scanner.pending == ""
        assert scanner.feed("0C7") == []

    def test_scan_resets_offsets(self) -> None:
        scanner = TokenScanner()
        scanner.feed("abc\\u00")
        assert list(scanner.scan("\\u0041")) == [0x41]
        assert scanner.feed("\\u0042") == [ScannedToken(6, 0x42)]
