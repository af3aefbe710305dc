"""
Smart Constructors for Hardcoded Shapes
=======================================

Names for polygons and for the three rank families (simplex, hyperblock,
orthoplex). Low ranks get their hardcoded names:

    rank   simplex     hyperblock    orthoplex
    -1     nullitope   nullitope     nullitope
     0     point       point         point
     1     dyad        dyad          dyad
     2     triangle    rectangle     orthodiagonal
    ≥3     Simplex     Hyperblock    Orthoplex

Abstract names cannot tell a rectangle or an orthodiagonal quadrilateral
from a square, so both collapse to Square under Abs.
"""

from typing import Optional

from ..spec.capsules import NameData, check_name_type, is_regular
from ..spec.constants import NULLITOPE_RANK
from ..spec.structures import (
    Dyad,
    Generic,
    Hyperblock,
    Name,
    Nullitope,
    Orthodiagonal,
    Orthoplex,
    Point,
    Polygon,
    Rectangle,
    Simplex,
    Square,
    Triangle,
)


def _low_rank(rank: int) -> Optional[Name]:
    """Hardcoded names for ranks -1, 0, 1; None otherwise."""
    if rank == NULLITOPE_RANK:
        return Nullitope()
    if rank == 0:
        return Point()
    if rank == 1:
        return Dyad()
    return None


def rectangle(name_type) -> Name:
    """Rectangle, or Square if the name is abstract."""
    if check_name_type(name_type).is_abstract():
        return Square()
    return Rectangle()


def orthodiagonal(name_type) -> Name:
    """Orthodiagonal quadrilateral, or Square if the name is abstract."""
    if check_name_type(name_type).is_abstract():
        return Square()
    return Orthodiagonal()


def polygon(name_type, regular: NameData, n: int) -> Name:
    """The name for a polygon (not necessarily regular) of `n` sides."""
    check_name_type(name_type)
    if n == 3:
        return Triangle(regular)
    if n == 4 and regular.satisfies(is_regular):
        return Square()
    return Polygon(regular, n)


def generic(name_type, facet_count: int, rank: int) -> Name:
    """
    The name for a polytope known only by its facet count and rank.

    Rank 2 uses the same scheme as irregular polygons.
    """
    check_name_type(name_type)
    hardcoded = _low_rank(rank)
    if hardcoded is not None:
        return hardcoded
    if rank == 2:
        return polygon(name_type, name_type.regular(), facet_count)
    return Generic(facet_count, rank)


def simplex(name_type, regular: NameData, rank: int) -> Name:
    """The name for an n-simplex, regular or not."""
    check_name_type(name_type)
    hardcoded = _low_rank(rank)
    if hardcoded is not None:
        return hardcoded
    if rank == 2:
        return Triangle(regular)
    return Simplex(regular, rank)


def hyperblock(name_type, regular: NameData, rank: int) -> Name:
    """The name for an n-block, regular or not."""
    check_name_type(name_type)
    hardcoded = _low_rank(rank)
    if hardcoded is not None:
        return hardcoded
    if rank == 2:
        return rectangle(name_type)
    return Hyperblock(regular, rank)


def orthoplex(name_type, regular: NameData, rank: int) -> Name:
    """The name for an n-orthoplex, regular or not."""
    check_name_type(name_type)
    hardcoded = _low_rank(rank)
    if hardcoded is not None:
        return hardcoded
    if rank == 2:
        return orthodiagonal(name_type)
    return Orthoplex(regular, rank)
