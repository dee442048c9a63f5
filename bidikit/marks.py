"""Removal of bidi marks from text, and the library's debug switch."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bidikit.types import (
    CHAR_LRM,
    CHAR_RLM,
    bidi_type_of,
    is_explicit_or_bn,
    is_isolate,
)

_log = logging.getLogger(__name__)

_debug_enabled = False


def debug_status() -> bool:
    """Return whether debug output is switched on."""
    return _debug_enabled


def set_debug(state: bool) -> bool:
    """Switch debug output on or off and return the new state."""
    global _debug_enabled
    _debug_enabled = bool(state)
    return _debug_enabled


@dataclass(frozen=True)
class RemovalResult:
    """Text with its bidi marks removed, and the lists that go with it.

    ``text`` has the same kind as the input: a ``str`` for a string, a list
    of code points otherwise. ``positions_to_this`` keeps its original length
    and holds -1 where it pointed at a removed character; the other lists are
    shortened to the new length. Lists that were not given are ``None``.
    """

    text: str | list[int]
    positions_to_this: list[int] | None = None
    positions_from_this: list[int] | None = None
    embedding_levels: list[int] | None = None

    def __len__(self) -> int:
        return len(self.text)


def _is_mark(code_point: int) -> bool:
    if code_point in (CHAR_LRM, CHAR_RLM):
        return True
    bidi_type = bidi_type_of(code_point)
    return is_explicit_or_bn(bidi_type) or is_isolate(bidi_type)


def _check_length(name: str, values: Sequence[int] | None, expected: int) -> None:
    if values is not None and len(values) != expected:
        raise ValueError(f"{name} has length {len(values)}, expected {expected}")


def remove_bidi_marks(
    text: str | Sequence[int],
    positions_to_this: Sequence[int] | None = None,
    positions_from_this: Sequence[int] | None = None,
    embedding_levels: Sequence[int] | None = None,
) -> RemovalResult:
    """Remove explicit bidi marks, isolates, boundary neutrals, LRM and RLM.

    If ``text`` is the visual string, ``positions_to_this`` is the
    logical-to-visual map and ``positions_from_this`` the visual-to-logical
    one; for the logical string it is the other way round. When only
    ``positions_to_this`` is given, the inverse map is derived from it.
    """
    is_str = isinstance(text, str)
    codes = [ord(c) for c in text] if is_str else [int(c) for c in text]
    length = len(codes)

    _check_length("positions_to_this", positions_to_this, length)
    _check_length("positions_from_this", positions_from_this, length)
    _check_length("embedding_levels", embedding_levels, length)

    if debug_status():
        _log.debug("in remove_bidi_marks")

    from_this: list[int] | None
    if positions_from_this is not None:
        from_this = list(positions_from_this)
    elif positions_to_this is not None:
        from_this = [0] * length
        for index, position in enumerate(positions_to_this):
            if not 0 <= position < length:
                raise ValueError(f"position {position} out of range")
            from_this[position] = index
    else:
        from_this = None

    kept = [i for i, code in enumerate(codes) if not _is_mark(code)]

    new_codes = [codes[i] for i in kept]
    new_text: str | list[int] = "".join(map(chr, new_codes)) if is_str else new_codes
    new_levels = (
        [embedding_levels[i] for i in kept] if embedding_levels is not None else None
    )
    new_from = [from_this[i] for i in kept] if from_this is not None else None

    new_to: list[int] | None = None
    if positions_to_this is not None and new_from is not None:
        new_to = [-1] * length
        for new_index, position in enumerate(new_from):
            if not 0 <= position < length:
                raise ValueError(f"position {position} out of range")
            new_to[position] = new_index

    return RemovalResult(
        text=new_text,
        positions_to_this=new_to,
        positions_from_this=new_from if positions_from_this is not None else None,
        embedding_levels=new_levels,
    )