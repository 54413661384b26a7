"""Shared pytest fixtures."""

import pytest

from cp1256_escape.core.table import ForwardTable, ReverseTable, default_tables


@pytest.fixture(scope="session")
def forward_table() -> ForwardTable:
    """The built-in Unicode -> CP1256 table."""
    return default_tables()[0]


@pytest.fixture(scope="session")
def reverse_table() -> ReverseTable:
    """The built-in CP1256 -> Unicode table."""
    return default_tables()[1]


@pytest.fixture
def export_word() -> str:
    """The Arabic word for "export"."""
    return "تصدير"


@pytest.fixture
def export_escaped() -> str:
    """Escaped CP1256 form of the export word: bytes CA D5 CF ED D1."""
    return "\\u00CA\\u00D5\\u00CF\\u00ED\\u00D1"


@pytest.fixture
def alef() -> str:
    """ARABIC LETTER ALEF, byte 0xC7."""
    return chr(0x0627)


@pytest.fixture
def grinning_face() -> str:
    """An emoji outside both ASCII and CP1256."""
    return chr(0x1F600)
