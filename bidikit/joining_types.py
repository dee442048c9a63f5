"""Arabic joining types, the bit masks they are built from, and queries on them."""

from __future__ import annotations

from enum import IntEnum, IntFlag

from bidikit.types import level_is_rtl


class JoiningMask(IntFlag):
    """Single-bit masks that joining types and Arabic properties are built from."""

    JOINS_RIGHT = 0x01
    JOINS_LEFT = 0x02
    ARAB_SHAPES = 0x04
    TRANSPARENT = 0x08
    IGNORED = 0x10
    LIGATURED = 0x20


_R = JoiningMask.JOINS_RIGHT
_L = JoiningMask.JOINS_LEFT
_SHAPES = JoiningMask.ARAB_SHAPES
_T = JoiningMask.TRANSPARENT
_G = JoiningMask.IGNORED


class JoiningType(IntEnum):
    """Primary Arabic joining class of a character."""

    U = 0
    R = _R | _SHAPES
    D = _R | _L | _SHAPES
    C = _R | _L
    T = _T | _SHAPES
    L = _L | _SHAPES
    G = _G


# Debugging symbol of each joining type, in the order the types are tested.
_SYMBOLS = {
    JoiningType.U: "|",
    JoiningType.R: "<",
    JoiningType.D: "+",
    JoiningType.C: "-",
    JoiningType.T: "^",
    JoiningType.L: ">",
    JoiningType.G: "~",
}

_JOINING_BITS = _T | _G | _R | _L
_SHAPING_BITS = _JOINING_BITS | _SHAPES
_SKIP_BITS = _T | _G

# Each class is recognised by masking a property and comparing the result.
_CLASSIFIERS = (
    (JoiningType.U, _JOINING_BITS, 0),
    (JoiningType.R, _JOINING_BITS, _R),
    (JoiningType.D, _SHAPING_BITS, _R | _L | _SHAPES),
    (JoiningType.C, _SHAPING_BITS, _R | _L),
    (JoiningType.T, _SKIP_BITS, _T),
    (JoiningType.L, _JOINING_BITS, _L),
    (JoiningType.G, _SKIP_BITS, _G),
)


def joining_type_name(value: int) -> str:
    """Return the short name of a joining type, or "?" if it is not one."""
    try:
        return JoiningType(value).name
    except ValueError:
        return "?"


def classify_joining(prop: int) -> JoiningType | None:
    """Return the joining class an Arabic property belongs to, if any."""
    for joining_type, mask, expected in _CLASSIFIERS:
        if prop & mask == expected:
            return joining_type
    return None


def joins_right(prop: int) -> bool:
    """Return True if the property may join to the right (R, D, C)."""
    return bool(prop & _R)


def joins_left(prop: int) -> bool:
    """Return True if the property may join to the left (L, D, C)."""
    return bool(prop & _L)


def arab_shapes(prop: int) -> bool:
    """Return True if the property may take Arabic shaping (R, D, L, T)."""
    return bool(prop & _SHAPES)


def is_join_skipped(prop: int) -> bool:
    """Return True if the property is skipped when joining (T, G)."""
    return bool(prop & _SKIP_BITS)


def is_join_base_shapes(prop: int) -> bool:
    """Return True for a base character that will be shaped (R, D, L)."""
    return prop & (_T | _G | _SHAPES) == _SHAPES


def joins_preceding_mask(level: int) -> JoiningMask:
    """Return the mask for joining to the preceding character at a level."""
    return _R if level_is_rtl(level) else _L


def joins_following_mask(level: int) -> JoiningMask:
    """Return the mask for joining to the following character at a level."""
    return _L if level_is_rtl(level) else _R


def join_shape(prop: int) -> int:
    """Return only the joining-direction bits of a property."""
    return prop & (_R | _L)


def char_from_joining_type(prop: int, visual: bool) -> str:
    """Return the debugging symbol of a property, swapping sides in visual order."""
    if visual and joins_right(prop) != joins_left(prop):
        prop ^= _R | _L
    joining_type = classify_joining(prop)
    if joining_type is None:
        return "?"
    return _SYMBOLS[joining_type]