from __future__ import annotations
from enum import Enum

class Color(Enum):
    """
    Enums for the six standard sticker colors, plus UNINIT for stickers
    that have not been given a color yet. UNINIT is not a real color.
    """
    BLUE = 0
    GREEN = 1
    ORANGE = 2
    RED = 3
    WHITE = 4
    YELLOW = 5
    UNINIT = 6

    @staticmethod
    def new() -> Color:
        return Color.UNINIT

    def opposite(self) -> Color:
        """
        Returns the standardized opposite color.
        UNINIT is paired with itself, as it has no opposite.

        >>> Color.opposite(Color.BLUE)
        <Color.GREEN: 1>
        """
        return OPPOSITE_COLORS[self]

    def is_uninit(self) -> bool:
        return self is Color.UNINIT

OPPOSITE_COLORS = {
    Color.BLUE: Color.GREEN,
    Color.GREEN: Color.BLUE,
    Color.ORANGE: Color.RED,
    Color.RED: Color.ORANGE,
    Color.WHITE: Color.YELLOW,
    Color.YELLOW: Color.WHITE,
    Color.UNINIT: Color.UNINIT
}

class CubieKind(Enum):
    """
    The three kinds of cubies. The values are the number of stickers
    a cubie of that kind carries.
    """
    CENTER = 1
    EDGE = 2
    CORNER = 3

class FaceKind(Enum):
    """
    Enums for the six outer planes of the cube.
    """
    TOP = 0
    LEFT = 1
    RIGHT = 2
    FRONT = 3
    BACK = 4
    BOTTOM = 5

class CornerPosition(Enum):
    """
    Named corners, ordered (top/bottom, back/front, left/right).
    The values index into Cube.CORNER_INDICES.
    """
    TOP_BACK_LEFT = 0
    TOP_BACK_RIGHT = 1
    TOP_FRONT_LEFT = 2
    TOP_FRONT_RIGHT = 3
    BOTTOM_BACK_LEFT = 4
    BOTTOM_BACK_RIGHT = 5
    BOTTOM_FRONT_LEFT = 6
    BOTTOM_FRONT_RIGHT = 7

class RowPosition(Enum):
    """
    Rows run left to right, named by (layer, depth).
    MIDDLE_MIDDLE crosses the mechanical core, so it has no center cubie.
    The values index into Cube.ROW_INDICES.
    """
    TOP_BACK = 0
    TOP_MIDDLE = 1
    TOP_FRONT = 2
    MIDDLE_BACK = 3
    MIDDLE_MIDDLE = 4
    MIDDLE_FRONT = 5
    BOTTOM_BACK = 6
    BOTTOM_MIDDLE = 7
    BOTTOM_FRONT = 8

class ColumnPosition(Enum):
    """
    Columns run top to bottom, named by (depth, left/right position).
    MIDDLE_MIDDLE crosses the mechanical core, so it has no center cubie.
    The values index into Cube.COLUMN_INDICES.
    """
    BACK_LEFT = 0
    BACK_MIDDLE = 1
    BACK_RIGHT = 2
    MIDDLE_LEFT = 3
    MIDDLE_MIDDLE = 4
    MIDDLE_RIGHT = 5
    FRONT_LEFT = 6
    FRONT_MIDDLE = 7
    FRONT_RIGHT = 8
