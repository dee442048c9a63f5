"""Bidirectional character types, paragraph types, option flags and limits."""

from __future__ import annotations

import unicodedata
from enum import Enum, IntFlag

# Unicode code space handled by the library.
UNICODE_CHARS = 0x110000

# Unicode Bidirectional Algorithm limits.
BIDI_NUM_TYPES = 19
BIDI_MAX_EXPLICIT_LEVEL = 125
BIDI_MAX_RESOLVED_LEVELS = 127
BIDI_MAX_NESTED_BRACKET_PAIRS = 63

LEVEL_INVALID = BIDI_MAX_RESOLVED_LEVELS
SENTINEL = -1
NO_BRACKET = 0

# Bidirectional marks.
CHAR_LRM = 0x200E
CHAR_RLM = 0x200F
CHAR_LRE = 0x202A
CHAR_RLE = 0x202B
CHAR_PDF = 0x202C
CHAR_LRO = 0x202D
CHAR_RLO = 0x202E
CHAR_LRI = 0x2066
CHAR_RLI = 0x2067
CHAR_FSI = 0x2068
CHAR_PDI = 0x2069

# Line and paragraph separators.
CHAR_LS = 0x2028
CHAR_PS = 0x2029

# Arabic joining marks.
CHAR_ZWNJ = 0x200C
CHAR_ZWJ = 0x200D

# Hebrew and Arabic.
CHAR_HEBREW_ALEF = 0x05D0
CHAR_ARABIC_ALEF = 0x0627
CHAR_ARABIC_ZERO = 0x0660
CHAR_PERSIAN_ZERO = 0x06F0

CHAR_ZWNBSP = 0xFEFF
# Placed in a deleted slot, to be removed later.
CHAR_FILL = CHAR_ZWNBSP


class BidiType(Enum):
    """Bidirectional character type of the Unicode Bidirectional Algorithm."""

    LTR = 0
    RTL = 1
    AL = 2
    EN = 3
    AN = 4
    ES = 5
    ET = 6
    CS = 7
    NSM = 8
    BN = 9
    BS = 10
    SS = 11
    WS = 12
    ON = 13
    LRE = 14
    RLE = 15
    LRO = 16
    RLO = 17
    PDF = 18
    LRI = 19
    RLI = 20
    FSI = 21
    PDI = 22
    SENTINEL = 23

    # Aliases matching the short names used by the Unicode data files.
    L = 0
    R = 1
    B = 10
    S = 11


class ParType(Enum):
    """Paragraph base direction, requested or resolved."""

    LTR = "L"
    RTL = "R"
    ON = "n"
    WLTR = "l"
    WRTL = "r"


class Flags(IntFlag):
    """Option flags used by shaping and reordering."""

    SHAPE_MIRRORING = 0x00000001
    REORDER_NSM = 0x00000002
    SHAPE_ARAB_PRES = 0x00000100
    SHAPE_ARAB_LIGA = 0x00000200
    SHAPE_ARAB_CONSOLE = 0x00000400
    REMOVE_BIDI = 0x00010000
    REMOVE_JOINING = 0x00020000
    REMOVE_SPECIALS = 0x00040000

    DEFAULT = SHAPE_MIRRORING | REORDER_NSM | REMOVE_SPECIALS
    ARABIC = SHAPE_ARAB_PRES | SHAPE_ARAB_LIGA


_SYMBOLS = {
    BidiType.LTR: "L",
    BidiType.RTL: "R",
    BidiType.AL: "A",
    BidiType.EN: "1",
    BidiType.AN: "9",
    BidiType.ES: "w",
    BidiType.ET: "w",
    BidiType.CS: "w",
    BidiType.NSM: "`",
    BidiType.BN: "b",
    BidiType.BS: "B",
    BidiType.SS: "S",
    BidiType.WS: "_",
    BidiType.ON: "n",
    BidiType.LRE: "+",
    BidiType.RLE: "+",
    BidiType.LRO: "+",
    BidiType.RLO: "+",
    BidiType.PDF: "-",
    BidiType.LRI: "+",
    BidiType.RLI: "+",
    BidiType.FSI: "+",
    BidiType.PDI: "-",
    BidiType.SENTINEL: "$",
}

_EXPLICIT_OR_BN = frozenset(
    {
        BidiType.LRE,
        BidiType.RLE,
        BidiType.LRO,
        BidiType.RLO,
        BidiType.PDF,
        BidiType.BN,
    }
)

_ISOLATES = frozenset({BidiType.LRI, BidiType.RLI, BidiType.FSI, BidiType.PDI})


def is_explicit_or_bn(bidi_type: BidiType) -> bool:
    """Return True for explicit embedding/override marks and boundary neutrals."""
    return bidi_type in _EXPLICIT_OR_BN


def is_isolate(bidi_type: BidiType) -> bool:
    """Return True for isolate initiators and the isolate terminator."""
    return bidi_type in _ISOLATES


def level_is_rtl(level: int) -> bool:
    """Return True if an embedding level is right-to-left (odd)."""
    return bool(level & 1)


def _code_point(ch: str | int) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {len(ch)}")
        return ord(ch)
    if not 0 <= ch < UNICODE_CHARS:
        raise ValueError(f"code point out of range: {ch:#x}")
    return ch


def bidi_type_of(ch: str | int) -> BidiType:
    """Return the bidirectional type of a character or code point."""
    name = unicodedata.bidirectional(chr(_code_point(ch)))
    if not name:
        return BidiType.LTR
    return BidiType[name]


def char_from_bidi_type(bidi_type: BidiType) -> str:
    """Return the one-character debugging symbol of a bidi type."""
    return _SYMBOLS[bidi_type]