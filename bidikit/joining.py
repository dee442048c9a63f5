"""Arabic cursive joining, aware of the resolved embedding levels."""

from __future__ import annotations

from collections.abc import Sequence

from bidikit.joining_types import (
    JoiningMask,
    arab_shapes,
    is_join_skipped,
    joins_following_mask,
    joins_preceding_mask,
)
from bidikit.types import SENTINEL, BidiType, is_explicit_or_bn

_SKIP_BITS = int(JoiningMask.TRANSPARENT | JoiningMask.IGNORED)
_IGNORED = int(JoiningMask.IGNORED)


def _is_ignored(prop: int) -> bool:
    return prop & _SKIP_BITS == _IGNORED


def _levels_match(a: int, b: int) -> bool:
    return a == b or a == SENTINEL or b == SENTINEL


def join_arabic(
    bidi_types: Sequence[BidiType],
    embedding_levels: Sequence[int],
    ar_props: Sequence[int],
) -> list[int]:
    """Apply the Arabic cursive joining rules and return the updated properties.

    ``ar_props`` holds the joining types of the characters; the result keeps
    only the joining bits that actually connect to neighbouring characters.
    Skipped characters lying between two joined characters receive the
    joining bits of both sides, so marks can later be placed on a tatweel.
    """
    if not len(bidi_types) == len(embedding_levels) == len(ar_props):
        raise ValueError("bidi types, levels and properties must have the same length")

    props = [int(p) for p in ar_props]
    saved = 0
    saved_level = SENTINEL
    saved_shapes = False
    saved_following = 0
    joins = False

    for i, (bidi_type, embedding_level) in enumerate(zip(bidi_types, embedding_levels)):
        prop = props[i]
        if _is_ignored(prop):
            continue

        disjoin = False
        shapes = arab_shapes(prop)
        level = SENTINEL if is_explicit_or_bn(bidi_type) else embedding_level

        if joins and not _levels_match(saved_level, level):
            disjoin = True
            joins = False

        skipped = is_join_skipped(prop)
        if not skipped:
            preceding = int(joins_preceding_mask(level))
            if not joins:
                if shapes:
                    props[i] &= ~preceding
            elif not props[i] & preceding:
                disjoin = True
            else:
                for j in range(saved + 1, i):
                    props[j] |= preceding | saved_following

        if disjoin and saved_shapes:
            props[saved] &= ~saved_following

        if not skipped:
            saved = i
            saved_level = level
            saved_shapes = shapes
            saved_following = int(joins_following_mask(level))
            joins = bool(props[i] & saved_following)

    if joins and saved_shapes:
        props[saved] &= ~saved_following

    return props