from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Sequence, Union

from pycubie.enums import Color, CubieKind
from pycubie.error import InvalidCubieException, UnknownCubieKindException
from pycubie.utils import reconcile

@dataclass(frozen=True)
class Sticker:
    """
    A single colored facet on one side of a cubie.
    Two stickers are equal if and only if their colors are equal.
    Stickers are never changed in place, only replaced.
    """
    color: Color = Color.UNINIT

    @classmethod
    def new(cls) -> Sticker:
        return cls()

    @classmethod
    def from_color(cls, color: Color) -> Sticker:
        return cls(color)

    def opposite_color(self) -> Color:
        return self.color.opposite()

@dataclass(frozen=True)
class _CubieBase:
    """
    A cubie is an individual "subcube" of a twisty cube puzzle. It has one to
    three stickers depending on if it is a center (1 sticker), an edge
    (2 stickers) or a corner (3 stickers). The number of stickers is fixed
    for the life of the cubie.

    Use the `Cubie` union to hold any kind, and match on the concrete
    class to get the kind back:

        match cube.elements[0]:
            case Corner(stickers=(a, b, c)): ...
            case Edge(): ...
    """
    ARITY: ClassVar[int] = 0
    KIND: ClassVar[CubieKind]

    stickers: tuple[Sticker, ...] = field(default=())

    def __post_init__(self):
        if not self.stickers:
            object.__setattr__(self, "stickers", (Sticker(),) * self.ARITY)
        elif not isinstance(self.stickers, tuple):
            object.__setattr__(self, "stickers", tuple(self.stickers))
        if len(self.stickers) != self.ARITY:
            raise InvalidCubieException(
                f"{type(self).__name__} must have exactly {self.ARITY} stickers, got {len(self.stickers)}"
            )

    @classmethod
    def new(cls):
        """ Returns a cubie whose stickers are all uninitialized """
        return cls((Sticker(),) * cls.ARITY)

    @classmethod
    def from_fixed(cls, stickers: Sequence[Sticker]):
        """ Builds a cubie from exactly ARITY stickers, kept in order """
        stickers = tuple(stickers)
        if len(stickers) != cls.ARITY:
            raise InvalidCubieException(
                f"{cls.__name__}.from_fixed needs {cls.ARITY} stickers, got {len(stickers)}"
            )
        return cls(stickers)

    @classmethod
    def from_flexible(cls, stickers: Sequence[Sticker]):
        """
        Builds a cubie from any number of stickers:
            none: same as new()
            fewer than ARITY: the first sticker on every side
            ARITY or more: the first ARITY stickers
        """
        return cls(reconcile(stickers, cls.ARITY, Sticker()))

    @property
    def kind(self) -> CubieKind:
        return self.KIND

    def faces(self) -> tuple[Sticker, ...]:
        return self.stickers

    def colors(self) -> tuple[Color, ...]:
        return tuple(s.color for s in self.stickers)

@dataclass(frozen=True)
class Center(_CubieBase):
    ARITY: ClassVar[int] = 1
    KIND: ClassVar[CubieKind] = CubieKind.CENTER

@dataclass(frozen=True)
class Edge(_CubieBase):
    ARITY: ClassVar[int] = 2
    KIND: ClassVar[CubieKind] = CubieKind.EDGE

@dataclass(frozen=True)
class Corner(_CubieBase):
    ARITY: ClassVar[int] = 3
    KIND: ClassVar[CubieKind] = CubieKind.CORNER

Cubie = Union[Center, Edge, Corner]

KIND_TO_CLASS: dict[CubieKind, type] = {
    CubieKind.CENTER: Center,
    CubieKind.EDGE: Edge,
    CubieKind.CORNER: Corner
}

def cubie(tag: str) -> Cubie:
    """
    Returns a new uninitialized cubie of the kind named by `tag`:
    "center", "corner" or "edge".
    """
    match tag:
        case "center":
            return Center.new()
        case "corner":
            return Corner.new()
        case "edge":
            return Edge.new()
        case _:
            raise UnknownCubieKindException(f"Cubie type not found: {tag!r}")
