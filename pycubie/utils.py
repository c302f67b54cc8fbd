from __future__ import annotations
import logging
import operator
from typing import Sequence, TypeVar

from pycubie.enums import Color
from pycubie.error import InvalidPositionException

logger = logging.getLogger(__name__)

T = TypeVar("T")

COLOR_TO_STRING = {
    Color.BLUE: 'b',
    Color.GREEN: 'g',
    Color.ORANGE: 'o',
    Color.RED: 'r',
    Color.WHITE: 'w',
    Color.YELLOW: 'y',
    Color.UNINIT: 'u'
}

STRING_TO_COLOR = {
    v: k for k, v in COLOR_TO_STRING.items()
}

def reconcile(items: Sequence[T], arity: int, default: T) -> tuple[T, ...]:
    """
    Fits a sequence of any length to exactly `arity` items.
        empty: `arity` copies of the default
        shorter than arity: the first item, repeated `arity` times
        arity or longer: the first `arity` items

    >>> reconcile(['a'], 3, '-')
    ('a', 'a', 'a')
    >>> reconcile(['a', 'b', 'c', 'd'], 3, '-')
    ('a', 'b', 'c')
    >>> reconcile([], 2, '-')
    ('-', '-')
    """

    items = tuple(items)
    if not items:
        return (default,) * arity
    if len(items) < arity:
        logger.debug("replicating first of %d items into %d slots", len(items), arity)
        return (items[0],) * arity
    if len(items) > arity:
        logger.debug("truncating %d items to %d", len(items), arity)
    return items[:arity]

def check_index(index: int, size: int, table: str) -> int:
    """
    Returns the index if it addresses one of the `size` entries of a table.
    Anything else means a lookup table or its caller is broken.
    """
    message = f"Invalid {table} index {index!r} (expected 0-{size - 1})"
    if isinstance(index, bool):
        raise InvalidPositionException(message)
    try:
        position = operator.index(index)
    except TypeError:
        raise InvalidPositionException(message) from None
    if not 0 <= position < size:
        raise InvalidPositionException(message)
    return position
