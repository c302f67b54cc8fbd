import pytest

from pycubie.cubie import Center, Corner, Edge, Sticker, cubie
from pycubie.enums import Color, CubieKind
from pycubie.error import InvalidCubieException, UnknownCubieKindException

BLUE = Sticker.from_color(Color.BLUE)
RED = Sticker.from_color(Color.RED)
WHITE = Sticker.from_color(Color.WHITE)
YELLOW = Sticker.from_color(Color.YELLOW)

def test_sticker_defaults_to_uninit():
    assert Sticker.new() == Sticker(Color.UNINIT)
    assert Sticker().color == Color.UNINIT

def test_sticker_equality_is_color_equality():
    assert Sticker.from_color(Color.RED) == RED
    assert RED != BLUE
    assert len({RED, Sticker.from_color(Color.RED), BLUE}) == 2

def test_sticker_is_immutable():
    with pytest.raises(AttributeError):
        RED.color = Color.BLUE

def test_sticker_opposite_color():
    assert WHITE.opposite_color() == Color.YELLOW

@pytest.mark.parametrize("cls, arity", [(Center, 1), (Edge, 2), (Corner, 3)])
def test_new_is_uninit_with_arity(cls, arity):
    c = cls.new()
    assert len(c.faces()) == arity
    assert all(s == Sticker() for s in c.faces())
    assert c.kind.value == arity

def test_from_fixed_keeps_order():
    c = Corner.from_fixed([BLUE, RED, WHITE])
    assert c.faces() == (BLUE, RED, WHITE)
    assert c.colors() == (Color.BLUE, Color.RED, Color.WHITE)

def test_from_fixed_rejects_wrong_length():
    with pytest.raises(InvalidCubieException):
        Edge.from_fixed([BLUE])
    with pytest.raises(InvalidCubieException):
        Corner.from_fixed([])

def test_direct_construction_checks_arity():
    with pytest.raises(InvalidCubieException):
        Corner((BLUE, RED, WHITE, YELLOW))
    with pytest.raises(InvalidCubieException):
        Center([BLUE, RED])
    assert Edge([BLUE, RED]).faces() == (BLUE, RED)

def test_center_from_flexible():
    assert Center.from_flexible([]).faces() == (Sticker(),)
    assert Center.from_flexible([RED] + [BLUE] * 9).faces() == (RED,)
    assert Center.from_flexible([WHITE]).faces() == (WHITE,)

def test_corner_from_flexible_replicates_first():
    assert Corner.from_flexible([RED]).faces() == (RED, RED, RED)
    assert Corner.from_flexible([RED, BLUE]).faces() == (RED, RED, RED)

def test_corner_from_flexible_truncates():
    assert Corner.from_flexible([RED, BLUE, WHITE, YELLOW]).faces() == (RED, BLUE, WHITE)

def test_edge_from_flexible():
    assert Edge.from_flexible([]).faces() == (Sticker(), Sticker())
    assert Edge.from_flexible([BLUE]).faces() == (BLUE, BLUE)
    assert Edge.from_flexible([BLUE, RED, WHITE]).faces() == (BLUE, RED)

def test_cubies_compare_by_stickers():
    assert Corner.new() == Corner.new()
    assert Corner.from_flexible([RED]) != Corner.new()
    assert Center.new() != Edge.new()

@pytest.mark.parametrize("tag, cls", [("center", Center), ("edge", Edge), ("corner", Corner)])
def test_cubie_tag(tag, cls):
    c = cubie(tag)
    assert isinstance(c, cls)
    assert c == cls.new()

def test_cubie_unknown_tag():
    with pytest.raises(UnknownCubieKindException):
        cubie("core")

def test_match_gets_kind_back():
    def describe(c):
        match c:
            case Corner(stickers=(a, _, _)):
                return f"corner {a.color.name}"
            case Edge():
                return "edge"
            case Center():
                return "center"

    assert describe(Corner.from_flexible([BLUE])) == "corner BLUE"
    assert describe(cubie("edge")) == "edge"
    assert describe(cubie("center")) == "center"

def test_kind():
    assert Center.new().kind == CubieKind.CENTER
    assert Edge.new().kind == CubieKind.EDGE
    assert Corner.new().kind == CubieKind.CORNER
