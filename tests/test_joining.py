import pytest

from bidikit.joining import join_arabic
from bidikit.joining_types import (
    JoiningType,
    arab_shapes,
    join_shape,
    joins_left,
    joins_right,
)
from bidikit.types import BidiType

AL = BidiType.AL
D = JoiningType.D
U = JoiningType.U
T = JoiningType.T
G = JoiningType.G


def test_empty_input():
    assert join_arabic([], [], []) == []


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        join_arabic([AL, AL], [1], [D, D])


def test_isolated_dual_joiner_loses_join_bits():
    (prop,) = join_arabic([AL], [1], [D])
    assert join_shape(prop) == 0
    assert arab_shapes(prop)


def test_two_dual_joiners_rtl():
    first, second = join_arabic([AL, AL], [1, 1], [D, D])
    assert joins_left(first) and not joins_right(first)
    assert joins_right(second) and not joins_left(second)


def test_two_dual_joiners_ltr():
    first, second = join_arabic([AL, AL], [0, 0], [D, D])
    assert joins_right(first) and not joins_left(first)
    assert joins_left(second) and not joins_right(second)


def test_non_joiner_breaks_joining():
    result = join_arabic([AL, BidiType.ON, AL], [1, 1, 1], [D, U, D])
    assert [join_shape(p) for p in result] == [0, 0, 0]


def test_transparent_between_gets_both_sides():
    first, mark, last = join_arabic(
        [AL, BidiType.NSM, AL], [1, 1, 1], [D, T, D]
    )
    assert joins_left(first) and not joins_right(first)
    assert joins_right(mark) and joins_left(mark)
    assert joins_right(last) and not joins_left(last)


def test_level_change_disjoins():
    result = join_arabic([AL, AL], [1, 3], [D, D])
    assert [join_shape(p) for p in result] == [0, 0]


def test_explicit_or_bn_level_matches_anything():
    first, second = join_arabic([AL, BidiType.BN], [1, 2], [D, D])
    assert joins_left(first)
    assert joins_right(second)


def test_input_is_not_modified():
    props = [D, D]
    join_arabic([AL, AL], [1, 1], props)
    assert props == [D, D]


def test_worked_example_values():
    assert join_arabic([AL, AL], [1, 1], [D, D]) == [JoiningType.L, JoiningType.R]