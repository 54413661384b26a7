"""Tests for encoding and decoding (no external files needed)."""

import pytest

from cp1256_escape.codec.decoder import decode, decode_with_report
from cp1256_escape.codec.encoder import encode, encode_with_report
from cp1256_escape.core.constants import FORWARD_ENTRIES
from cp1256_escape.core.errors import LossyConversionError
from cp1256_escape.core.table import ForwardTable, build_reverse_table


class TestEncode:
    """Tests for the encoder."""

    def test_export_word(self, export_word: str, export_escaped: str) -> None:
        assert encode(export_word) == export_escaped

    def test_empty(self) -> None:
        assert encode("") == ""

    def test_ascii_passthrough(self) -> None:
        assert encode("Hi!") == "\\u0048\\u0069\\u0021"
        assert encode("\n") == "\\u000A"

    def test_persian_and_punctuation(self) -> None:
        # peh, gaf, arabic comma, arabic question mark
        text = chr(0x067E) + chr(0x06AF) + chr(0x060C) + chr(0x061F)
        assert encode(text) == "\\u0081\\u0090\\u00A1\\u00BF"

    def test_emoji_fallback_is_utf8(self, grinning_face: str) -> None:
        assert encode(grinning_face) == "\\u00F0\\u009F\\u0098\\u0080"

    def test_latin_fallback(self) -> None:
        assert encode(chr(0xE9)) == "\\u00C3\\u00A9"

    def test_lone_surrogate_becomes_replacement_char(self) -> None:
        assert encode(chr(0xD800)) == "\\u00EF\\u00BF\\u00BD"
        assert encode(chr(0xDC00) + "a") == "\\u00EF\\u00BF\\u00BD\\u0061"

    def test_split_surrogate_pair_is_one_character(self, grinning_face: str) -> None:
        pair = chr(0xD83D) + chr(0xDE00)
        assert encode(pair) == encode(grinning_face)
        result = encode_with_report(pair)
        assert result.fallback_chars == [grinning_face]
        assert result.token_count == 4

    def test_report(self, grinning_face: str, alef: str) -> None:
        result = encode_with_report("a" + grinning_face + alef)
        assert result.text == "\\u0061\\u00F0\\u009F\\u0098\\u0080\\u00C7"
        assert result.token_count == 6
        assert result.fallback_chars == [grinning_face]
        assert result.is_lossy is True

    def test_report_exact(self, export_word: str) -> None:
        result = encode_with_report(export_word)
        assert result.token_count == 5
        assert result.is_lossy is False

    def test_strict_raises(self, grinning_face: str) -> None:
        with pytest.raises(LossyConversionError) as info:
            encode("ab" + grinning_face, strict=True)
        assert info.value.position == 2
        assert info.value.char == grinning_face
        assert info.value.byte is None

    def test_strict_accepts_repertoire(self, export_word: str, export_escaped: str) -> None:
        assert encode(export_word, strict=True) == export_escaped

    def test_custom_table(self, alef: str) -> None:
        forward = ForwardTable([(0x0627, 0x80)])
        assert encode_with_report(alef, forward=forward).text == "\\u0080"


class TestDecode:
    """Tests for the decoder."""

    def test_export_word(self, export_word: str, export_escaped: str) -> None:
        assert decode(export_escaped) == export_word

    def test_lowercase_tokens(self, export_word: str, export_escaped: str) -> None:
        assert decode(export_escaped.lower()) == export_word

    def test_permissive(self, alef: str) -> None:
        assert decode("hello\\u00C7world") == alef

    def test_no_tokens(self) -> None:
        assert decode("") == ""
        assert decode("plain text only") == ""

    def test_unmapped_byte_fallback(self) -> None:
        assert decode("\\u0080\\u00D7") == chr(0x80) + chr(0xD7)

    def test_report(self, alef: str) -> None:
        result = decode_with_report("\\u00C7 junk \\u0080")
        assert result.text == alef + chr(0x80)
        assert result.token_count == 2
        assert result.unmapped_bytes == [0x80]
        assert result.is_lossy is True

    def test_strict_raises(self) -> None:
        with pytest.raises(LossyConversionError) as info:
            decode("\\u00C7\\u0080", strict=True)
        assert info.value.position == 6
        assert info.value.byte == 0x80
        assert info.value.char is None

    def test_custom_table(self, alef: str) -> None:
        reverse = build_reverse_table(ForwardTable([(0x0627, 0x80)]))
        assert decode_with_report("\\u0080", reverse=reverse).text == alef


class TestRoundTrip:
    """Round-trip properties."""

    def test_ascii_identity(self) -> None:
        for v in range(0x80):
            assert decode(encode(chr(v))) == chr(v)

    def test_mapped_repertoire(self) -> None:
        for codepoint, _ in FORWARD_ENTRIES:
            assert decode(encode(chr(codepoint))) == chr(codepoint)

    def test_mixed_sentence(self, export_word: str) -> None:
        text = "Export: " + export_word + chr(0x061F)
        assert decode(encode(text)) == text

    def test_emoji_does_not_round_trip(self, grinning_face: str) -> None:
        # Expected lossy behaviour: UTF-8 bytes are read back as CP1256
        escaped = encode(grinning_face)
        assert escaped.count("\\u00") == 4
        decoded = decode(escaped)
        assert decoded != grinning_face
        assert decoded == chr(0x064B) + chr(0x06BA) + chr(0x98) + chr(0x80)
