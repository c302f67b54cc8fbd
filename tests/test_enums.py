import pytest

from pycubie.enums import Color, CubieKind

@pytest.mark.parametrize("color", list(Color))
def test_opposite_is_involution(color):
    assert Color.opposite(Color.opposite(color)) == color

@pytest.mark.parametrize("a, b", [
    (Color.BLUE, Color.GREEN),
    (Color.ORANGE, Color.RED),
    (Color.WHITE, Color.YELLOW),
    (Color.UNINIT, Color.UNINIT),
])
def test_opposite_pairs(a, b):
    assert a.opposite() == b
    assert b.opposite() == a

def test_only_uninit_pairs_with_itself():
    assert [c for c in Color if c.opposite() == c] == [Color.UNINIT]

def test_default_color():
    assert Color.new() == Color.UNINIT
    assert Color.new().is_uninit()
    assert not Color.RED.is_uninit()

def test_color_equality():
    assert Color.BLUE != Color.GREEN
    assert Color.BLUE == Color.BLUE

def test_kind_values_are_sticker_counts():
    assert [k.value for k in CubieKind] == [1, 2, 3]
