"""Shared constants for CP1256 escaping."""

# Escape token grammar: \u00XX, one token per byte
TOKEN_MARKER = "\\u"
TOKEN_PAD = "00"
TOKEN_LENGTH = len(TOKEN_MARKER) + len(TOKEN_PAD) + 2

ASCII_MAX = 0x7F
BYTE_RANGE = 256

# Unicode -> CP1256 (Windows Arabic) for the supported repertoire.
# Source: https://en.wikipedia.org/wiki/Windows-1256
# Only the upper half is listed; 0x00-0x7F is plain ASCII.
FORWARD_ENTRIES: tuple[tuple[int, int], ...] = (
    # Core Arabic letters
    (0x0621, 0xC1),  # HAMZA
    (0x0622, 0xC2),  # ALEF WITH MADDA ABOVE
    (0x0623, 0xC3),  # ALEF WITH HAMZA ABOVE
    (0x0624, 0xC4),  # WAW WITH HAMZA ABOVE
    (0x0625, 0xC5),  # ALEF WITH HAMZA BELOW
    (0x0626, 0xC6),  # YEH WITH HAMZA ABOVE
    (0x0627, 0xC7),  # ALEF
    (0x0628, 0xC8),  # BEH
    (0x0629, 0xC9),  # TEH MARBUTA
    (0x062A, 0xCA),  # TEH
    (0x062B, 0xCB),  # THEH
    (0x062C, 0xCC),  # JEEM
    (0x062D, 0xCD),  # HAH
    (0x062E, 0xCE),  # KHAH
    (0x062F, 0xCF),  # DAL
    (0x0630, 0xD0),  # THAL
    (0x0631, 0xD1),  # REH
    (0x0632, 0xD2),  # ZAIN
    (0x0633, 0xD3),  # SEEN
    (0x0634, 0xD4),  # SHEEN
    (0x0635, 0xD5),  # SAD
    (0x0636, 0xD6),  # DAD
    (0x0637, 0xD8),  # TAH (0xD7 is MULTIPLICATION SIGN)
    (0x0638, 0xD9),  # ZAH
    (0x0639, 0xDA),  # AIN
    (0x063A, 0xDB),  # GHAIN
    (0x0640, 0xDC),  # TATWEEL
    (0x0641, 0xDD),  # FEH
    (0x0642, 0xDE),  # QAF
    (0x0643, 0xDF),  # KAF
    (0x0644, 0xE1),  # LAM
    (0x0645, 0xE3),  # MEEM
    (0x0646, 0xE4),  # NOON
    (0x0647, 0xE5),  # HEH
    (0x0648, 0xE6),  # WAW
    (0x0649, 0xEC),  # ALEF MAKSURA
    (0x064A, 0xED),  # YEH
    # Harakat
    (0x064B, 0xF0),  # FATHATAN
    (0x064C, 0xF1),  # DAMMATAN
    (0x064D, 0xF2),  # KASRATAN
    (0x064E, 0xF3),  # FATHA
    (0x064F, 0xF5),  # DAMMA
    (0x0650, 0xF6),  # KASRA
    (0x0651, 0xF8),  # SHADDA
    (0x0652, 0xFA),  # SUKUN
    (0x06C1, 0xC0),  # HEH GOAL
    (0x06D2, 0xFF),  # YEH BARREE
    # Persian/Urdu extensions
    (0x067E, 0x81),  # PEH
    (0x0679, 0x8A),  # TTEH
    (0x0686, 0x8D),  # TCHEH
    (0x0698, 0x8E),  # JEH
    (0x0688, 0x8F),  # DDAL
    (0x06AF, 0x90),  # GAF
    (0x06BA, 0x9F),  # NOON GHUNNA
    (0x06BE, 0xAA),  # HEH DOACHASHMEE
    # Punctuation
    (0x060C, 0xA1),  # ARABIC COMMA
    (0x061B, 0xBA),  # ARABIC SEMICOLON
    (0x061F, 0xBF),  # ARABIC QUESTION MARK
)
