"""Static character tables: zero-width set, HTML entities, descriptions."""

import unicodedata
from html.entities import name2codepoint
from types import MappingProxyType

# Invisible characters that render no glyph but survive copy/paste
ZERO_WIDTH_CHARS = frozenset([
    '\u200b',  # Zero-width space
    '\u200c',  # Zero-width non-joiner
    '\u200d',  # Zero-width joiner
    '\u200e',  # Left-to-right mark
    '\u200f',  # Right-to-left mark
    '\ufeff',  # Byte order mark / zero-width no-break space
    '\u202a',  # Left-to-right embedding
    '\u202b',  # Right-to-left embedding
    '\u202c',  # Pop directional formatting
    '\u202d',  # Left-to-right override
    '\u202e',  # Right-to-left override
    '\u2060',  # Word joiner
    '\u2061',  # Function application
    '\u2062',  # Invisible times
    '\u2063',  # Invisible separator
    '\u2064',  # Invisible plus
    '\u206a',  # Inhibit symmetric swapping
    '\u206b',  # Activate symmetric swapping
    '\u206c',  # Inhibit Arabic form shaping
    '\u206d',  # Activate Arabic form shaping
    '\u206e',  # National digit shapes
    '\u206f',  # Nominal digit shapes
])

BOM = '\ufeff'


def _build_entity_table() -> MappingProxyType:
    table = {f"&{name};": chr(code) for name, code in name2codepoint.items()}
    table["&apos;"] = "'"
    # Decoded to a plain space so ASCII-only output keeps the word gap
    table["&nbsp;"] = " "
    return MappingProxyType(table)


HTML_ENTITIES = _build_entity_table()


CHAR_DESCRIPTIONS = MappingProxyType({
    '\u200b': "Zero Width Space",
    '\u200c': "Zero Width Non-Joiner",
    '\u200d': "Zero Width Joiner",
    '\u200e': "Left-to-Right Mark",
    '\u200f': "Right-to-Left Mark",
    '\ufeff': "BOM/Zero Width No-Break Space",
    '\u202a': "Left-to-Right Embedding",
    '\u202b': "Right-to-Left Embedding",
    '\u202c': "Pop Directional Formatting",
    '\u202d': "Left-to-Right Override",
    '\u202e': "Right-to-Left Override",
    '\u2060': "Word Joiner",
    '\u0000': "NULL character",
    '\u0001': "Start of Heading",
    '\u0002': "Start of Text",
    '\u0003': "End of Text",
    '\u0004': "End of Transmission",
    '\u0005': "Enquiry",
    '\u0006': "Acknowledge",
    '\u0007': "Bell",
    '\u0008': "Backspace",
    '\u000b': "Vertical Tab",
    '\u000c': "Form Feed",
    '\u000e': "Shift Out",
    '\u000f': "Shift In",
    '\r': "Carriage Return (CR)",
    '\n': "Line Feed (LF)",
})

# Go's unicode.IsSpace set; str.isspace() also accepts U+001C..U+001F
_ASCII_SPACES = frozenset('\t\n\v\f\r \x85\xa0')
_SEPARATOR_CATEGORIES = frozenset(['Zs', 'Zl', 'Zp'])


def is_zero_width(ch: str) -> bool:
    return ch in ZERO_WIDTH_CHARS


def is_control(ch: str) -> bool:
    """True for C0/C1 control characters (general category Cc)."""
    return unicodedata.category(ch) == 'Cc'


def is_space(ch: str) -> bool:
    if ch in _ASCII_SPACES:
        return True
    return ord(ch) > 0xff and unicodedata.category(ch) in _SEPARATOR_CATEGORIES


def describe_char(ch: str) -> str:
    """Human-readable description used by the detailed report."""
    desc = CHAR_DESCRIPTIONS.get(ch)
    if desc:
        return desc
    if ch.isprintable():
        return f"Character '{ch}'"
    if is_control(ch):
        return f"Control character (U+{ord(ch):04X})"
    return f"Non-printable (U+{ord(ch):04X})"
