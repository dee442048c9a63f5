import pytest

from bidikit.joining_types import (
    JoiningMask,
    JoiningType,
    arab_shapes,
    char_from_joining_type,
    classify_joining,
    is_join_base_shapes,
    is_join_skipped,
    join_shape,
    joining_type_name,
    joins_following_mask,
    joins_left,
    joins_preceding_mask,
    joins_right,
)


def test_mask_values_are_documented_constants():
    assert joins_right(0x01)
    assert not joins_left(0x01)
    assert joins_left(0x02)
    assert not joins_right(0x02)
    assert arab_shapes(0x04)
    assert is_join_skipped(0x08)
    assert is_join_skipped(0x10)
    assert joining_type_name(0x20) == "?"


@pytest.mark.parametrize(
    "raw, name",
    [
        (0x00, "U"),
        (0x01 | 0x04, "R"),
        (0x01 | 0x02 | 0x04, "D"),
        (0x01 | 0x02, "C"),
        (0x08 | 0x04, "T"),
        (0x02 | 0x04, "L"),
        (0x10, "G"),
    ],
)
def test_joining_type_composition(raw, name):
    assert joining_type_name(raw) == name
    assert classify_joining(raw) is JoiningType[name]


@pytest.mark.parametrize("jt", list(JoiningType))
def test_name_round_trip(jt):
    assert joining_type_name(jt) == jt.name
    assert JoiningType[joining_type_name(jt)] is jt


def test_name_of_unknown_value():
    assert joining_type_name(JoiningMask.LIGATURED) == "?"


@pytest.mark.parametrize("jt", list(JoiningType))
def test_classify_each_type(jt):
    assert classify_joining(jt) is jt


@pytest.mark.parametrize("jt", list(JoiningType))
def test_ligatured_bit_does_not_change_class(jt):
    assert classify_joining(jt | JoiningMask.LIGATURED) is jt


def test_classify_transparent_and_ignored_together():
    assert classify_joining(JoiningMask.TRANSPARENT | JoiningMask.IGNORED) is None
    assert char_from_joining_type(
        JoiningMask.TRANSPARENT | JoiningMask.IGNORED, False
    ) == "?"


def test_shaping_removed_from_dual_is_causing():
    prop = JoiningType.D & ~JoiningMask.ARAB_SHAPES
    assert classify_joining(prop) is JoiningType.C


@pytest.mark.parametrize(
    "jt, symbol",
    [
        (JoiningType.U, "|"),
        (JoiningType.R, "<"),
        (JoiningType.D, "+"),
        (JoiningType.C, "-"),
        (JoiningType.T, "^"),
        (JoiningType.L, ">"),
        (JoiningType.G, "~"),
    ],
)
def test_logical_symbols(jt, symbol):
    assert char_from_joining_type(jt, False) == symbol


def test_visual_swaps_one_sided_types():
    assert char_from_joining_type(JoiningType.R, True) == ">"
    assert char_from_joining_type(JoiningType.L, True) == "<"


@pytest.mark.parametrize(
    "jt", [JoiningType.U, JoiningType.D, JoiningType.C, JoiningType.T, JoiningType.G]
)
def test_visual_keeps_symmetric_types(jt):
    assert char_from_joining_type(jt, True) == char_from_joining_type(jt, False)


def test_join_direction_queries():
    assert joins_right(JoiningType.R) and not joins_left(JoiningType.R)
    assert joins_left(JoiningType.L) and not joins_right(JoiningType.L)
    assert joins_right(JoiningType.D) and joins_left(JoiningType.D)
    assert joins_right(JoiningType.C) and joins_left(JoiningType.C)
    assert not joins_right(JoiningType.U) and not joins_left(JoiningType.U)


def test_arab_shapes_query():
    shaping = {jt for jt in JoiningType if arab_shapes(jt)}
    assert shaping == {JoiningType.R, JoiningType.D, JoiningType.L, JoiningType.T}


def test_join_skipped_query():
    skipped = {jt for jt in JoiningType if is_join_skipped(jt)}
    assert skipped == {JoiningType.T, JoiningType.G}


def test_base_shapes_query():
    bases = {jt for jt in JoiningType if is_join_base_shapes(jt)}
    assert bases == {JoiningType.R, JoiningType.D, JoiningType.L}


@pytest.mark.parametrize("jt", list(JoiningType))
def test_join_shape_keeps_only_direction_bits(jt):
    shape = join_shape(jt)
    assert shape & ~(JoiningMask.JOINS_RIGHT | JoiningMask.JOINS_LEFT) == 0
    assert bool(shape & JoiningMask.JOINS_RIGHT) == joins_right(jt)
    assert bool(shape & JoiningMask.JOINS_LEFT) == joins_left(jt)


def test_preceding_and_following_masks():
    assert joins_preceding_mask(0) == JoiningMask.JOINS_LEFT
    assert joins_following_mask(0) == JoiningMask.JOINS_RIGHT
    assert joins_preceding_mask(1) == JoiningMask.JOINS_RIGHT
    assert joins_following_mask(1) == JoiningMask.JOINS_LEFT


@pytest.mark.parametrize("level", range(6))
def test_preceding_and_following_are_complementary(level):
    combined = joins_preceding_mask(level) | joins_following_mask(level)
    assert combined == JoiningMask.JOINS_RIGHT | JoiningMask.JOINS_LEFT
    assert joins_preceding_mask(level) != joins_following_mask(level)