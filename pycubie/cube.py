from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from pycubie.cubie import Cubie, Sticker, KIND_TO_CLASS, cubie
from pycubie.enums import CubieKind, FaceKind, CornerPosition, RowPosition, ColumnPosition
from pycubie.error import InvalidCubeStateException
from pycubie.utils import COLOR_TO_STRING, STRING_TO_COLOR, check_index

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Face:
    """ The 9 cubies on one outer plane, in raster order """
    elements: tuple[Cubie, ...]

@dataclass(frozen=True)
class Row:
    """
    Three cubies running left to right within one layer.
    The center is None for the row that crosses the mechanical core.
    """
    left: Cubie
    center: Optional[Cubie]
    right: Cubie

    def has_center(self) -> bool:
        return self.center is not None

@dataclass(frozen=True)
class Column:
    """
    Three cubies running top to bottom.
    The center is None for the column that crosses the mechanical core.
    """
    top: Cubie
    center: Optional[Cubie]
    bottom: Cubie

    def has_center(self) -> bool:
        return self.center is not None

class Cube():

    """
    Stores a 3x3 cube as a list of 26 cubies, in three layers
    (top, middle, bottom), each read back to front and left to right:

      Top       Middle      Bottom
     0  1  2    9 10 11    17 18 19
     3  4  5   12  .  13   20 21 22
     6  7  8   14 15 16    23 24 25

    0 is the top left corner cubie in the back. The middle layer only has
    8 cubies, as the mechanical core sits at its center ('.') and is not
    part of the model.

    Every view (faces, rows, columns, corners) hands out the cubie objects
    stored in `elements` itself, never copies.
    """

    KINDS = (
        CubieKind.CORNER, CubieKind.EDGE, CubieKind.CORNER,
        CubieKind.EDGE, CubieKind.CENTER, CubieKind.EDGE,
        CubieKind.CORNER, CubieKind.EDGE, CubieKind.CORNER,

        CubieKind.EDGE, CubieKind.CENTER, CubieKind.EDGE,
        CubieKind.CENTER, CubieKind.CENTER,
        CubieKind.EDGE, CubieKind.CENTER, CubieKind.EDGE,

        CubieKind.CORNER, CubieKind.EDGE, CubieKind.CORNER,
        CubieKind.EDGE, CubieKind.CENTER, CubieKind.EDGE,
        CubieKind.CORNER, CubieKind.EDGE, CubieKind.CORNER
    )

    # LAYOUT[layer, depth, x] -> slot index, -1 for the core
    LAYOUT = np.array([
        [[0, 1, 2], [3, 4, 5], [6, 7, 8]],
        [[9, 10, 11], [12, -1, 13], [14, 15, 16]],
        [[17, 18, 19], [20, 21, 22], [23, 24, 25]]
    ])
    LAYOUT.setflags(write=False)

    CORNER_INDICES = (0, 2, 6, 8, 17, 19, 23, 25)

    ROW_INDICES = (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (9, 10, 11), (12, None, 13), (14, 15, 16),
        (17, 18, 19), (20, 21, 22), (23, 24, 25)
    )

    COLUMN_INDICES = (
        (0, 9, 17), (1, 10, 18), (2, 11, 19),
        (3, 12, 20), (4, None, 21), (5, 13, 22),
        (6, 14, 23), (7, 15, 24), (8, 16, 25)
    )

    FACE_INDICES = {
        FaceKind.TOP: (0, 1, 2, 3, 4, 5, 6, 7, 8),
        FaceKind.LEFT: (0, 3, 6, 9, 12, 14, 17, 20, 23),
        FaceKind.RIGHT: (2, 5, 8, 11, 13, 16, 19, 22, 25),
        FaceKind.FRONT: (6, 7, 8, 14, 15, 16, 23, 24, 25),
        FaceKind.BACK: (0, 1, 2, 9, 10, 11, 17, 18, 19),
        FaceKind.BOTTOM: (17, 18, 19, 20, 21, 22, 23, 24, 25)
    }

    SIZE = len(KINDS)
    STICKER_COUNT = sum(k.value for k in KINDS)

    @staticmethod
    def new() -> Cube:
        return Cube()

    @staticmethod
    def from_stickers(stickers: Sequence[Sequence[Sticker]]) -> Cube:
        """
        Rebuilds a cube from one sticker sequence per slot, in slot order.
        Each sequence goes through the slot kind's from_flexible, so it
        may be shorter or longer than the cubie needs.
        """
        if len(stickers) != Cube.SIZE:
            raise InvalidCubeStateException(f"Expected {Cube.SIZE} sticker sequences, got {len(stickers)}")
        logger.debug("rebuilding cube from %d sticker sequences", len(stickers))
        return Cube([
            KIND_TO_CLASS[kind].from_flexible(seq)
            for kind, seq in zip(Cube.KINDS, stickers)
        ])

    @staticmethod
    def from_simple_string(cube_string: str) -> Cube:
        """
        Returns the cube represented by one letter per sticker
        (see to_simple_string).
        """

        if unknown := {*cube_string} - {*STRING_TO_COLOR.keys()}:
            raise InvalidCubeStateException(f"Invalid characters in string: {sorted(unknown)}")
        if len(cube_string) != Cube.STICKER_COUNT:
            raise InvalidCubeStateException(
                f"String of invalid length {len(cube_string)} (must be {Cube.STICKER_COUNT})"
            )

        c = 0
        stickers = []
        for kind in Cube.KINDS:
            stickers.append([Sticker(STRING_TO_COLOR[ch]) for ch in cube_string[c:c + kind.value]])
            c += kind.value
        return Cube.from_stickers(stickers)

    def __init__(self, elements: Optional[Sequence[Cubie]] = None):
        if elements is None:
            self._elements = tuple(cubie(kind.name.lower()) for kind in Cube.KINDS)
        else:
            if len(elements) != Cube.SIZE:
                raise InvalidCubeStateException(f"A cube holds {Cube.SIZE} cubies, got {len(elements)}")
            for i, element in enumerate(elements):
                Cube.__check_kind(i, element)
            self._elements = tuple(elements)
        logger.debug("assembled cube with %d cubies", len(self._elements))

    @staticmethod
    def __check_kind(index: int, element: Cubie) -> None:
        kind = Cube.KINDS[index]
        if element.kind != kind:
            raise InvalidCubeStateException(
                f"Slot {index} holds a {kind.name.lower()}, got {element.kind.name.lower()}"
            )

    @property
    def elements(self) -> tuple[Cubie, ...]:
        """ The 26 cubies in slot order. Use replace() to swap one out. """
        return self._elements

    def replace(self, index: int, element: Cubie) -> None:
        """
        Puts a new cubie in slot `index`, e.g. to recolor its stickers.
        The cubie must be of the kind the slot always holds.
        Views taken before the call keep the old cubie.
        """
        index = check_index(index, Cube.SIZE, "element")
        Cube.__check_kind(index, element)
        self._elements = self._elements[:index] + (element,) + self._elements[index + 1:]
        logger.debug("replaced %s in slot %d", element.kind.name.lower(), index)

    def __repr__(self):
        return f"Cube({self.to_simple_string()!r})"

    def to_simple_string(self) -> str:
        """
        Returns the cube as one letter per sticker, cubie by cubie in slot
        order: 8 corners x 3 + 12 edges x 2 + 6 centers x 1 = 54 letters.
        Uninitialized stickers are written as 'u'.

        >>> Cube().to_simple_string() == 'u' * 54
        True
        """
        return "".join(
            COLOR_TO_STRING[sticker.color]
            for element in self._elements
            for sticker in element.faces()
        )

    def kind_at(self, index: int) -> CubieKind:
        return Cube.KINDS[check_index(index, Cube.SIZE, "element")]

    def element_raw(self, index: int) -> Cubie:
        return self._elements[check_index(index, Cube.SIZE, "element")]

    def slot_at(self, layer: int, depth: int, x: int) -> Optional[Cubie]:
        """
        Gets the cubie at the given coordinates, each from 0 to 2:
            layer: top to bottom
            depth: back to front
            x: left to right
        Returns None at the mechanical core (1, 1, 1).
        """
        index = int(Cube.LAYOUT[
            check_index(layer, 3, "layer"),
            check_index(depth, 3, "depth"),
            check_index(x, 3, "x")
        ])
        return None if index < 0 else self._elements[index]

    def corners(self) -> tuple[Cubie, ...]:
        """
        Returns the 8 corners in the order
        TBL, TBR, TFL, TFR, BBL, BBR, BFL, BFR
        (top/bottom, back/front, left/right).
        """
        return tuple(self._elements[i] for i in Cube.CORNER_INDICES)

    def corner_raw(self, index: int) -> Cubie:
        return self._elements[Cube.CORNER_INDICES[check_index(index, len(Cube.CORNER_INDICES), "corner")]]

    def corner(self, position: CornerPosition) -> Cubie:
        return self.corner_raw(position.value)

    def __optional(self, index: Optional[int]) -> Optional[Cubie]:
        return None if index is None else self._elements[index]

    def row_raw(self, index: int) -> Row:
        left, center, right = Cube.ROW_INDICES[check_index(index, len(Cube.ROW_INDICES), "row")]
        return Row(self._elements[left], self.__optional(center), self._elements[right])

    def row(self, position: RowPosition) -> Row:
        return self.row_raw(position.value)

    def rows(self) -> tuple[Row, ...]:
        return tuple(self.row(p) for p in RowPosition)

    def column_raw(self, index: int) -> Column:
        top, center, bottom = Cube.COLUMN_INDICES[check_index(index, len(Cube.COLUMN_INDICES), "column")]
        return Column(self._elements[top], self.__optional(center), self._elements[bottom])

    def column(self, position: ColumnPosition) -> Column:
        return self.column_raw(position.value)

    def columns(self) -> tuple[Column, ...]:
        return tuple(self.column(p) for p in ColumnPosition)

    def face(self, kind: FaceKind) -> Face:
        indices = Cube.FACE_INDICES[kind]
        assert len(indices) == 9, f"Face table for {kind.name} must list 9 slots"
        return Face(tuple(self._elements[i] for i in indices))

    def faces(self) -> dict[FaceKind, Face]:
        return {kind: self.face(kind) for kind in FaceKind}
