"""
Multi-Modifier Names
====================

Multipyramids, multiprisms, multitegums and multicombs of a list of bases.
The bases are used in roughly the same order as they were given.

ALGORITHM (pyramid shown, prism/tegum mirror it):
    1. Walk the bases once.
       - Units are absorbed into a running count instead of being kept:
             Point +1, Dyad +2, Triangle +3, Simplex(rank) +(rank + 1)
       - A nested Multipyramid is spliced in place (associativity).
       - Anything else is kept as is.
    2. count ≥ 2: all absorbed units combine into one simplex of rank
       count - 1, appended to the bases.
    3. 0 bases → Nullitope, 1 base → that base, ≥2 → Multipyramid.
    4. count == 1: a single unit must still show up as one pyramid, so
       the result of step 3 is wrapped in Pyramid (through pyramid()
       unless it is a Multipyramid, so Pyramid(Nullitope) becomes Point).

UNIT COUNTS:
    pyramid   Nullitope 0, Point 1, Dyad 2, Triangle 3, Simplex rank+1
    prism     Point 0, Dyad 1, Square/Rectangle 2, Hyperblock rank
    tegum     Point 0, Dyad 1, Square/Orthodiagonal 2, Orthoplex rank

    Prisms and tegums combine `count` units into a rank-`count`
    hyperblock/orthoplex. A Nullitope base absorbs their whole product.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from ..spec.capsules import check_name_type
from ..spec.structures import (
    Dyad,
    Hyperblock,
    Multicomb,
    Multiprism,
    Multipyramid,
    Multitegum,
    Name,
    Nullitope,
    Orthodiagonal,
    Orthoplex,
    Point,
    Prism,
    Pyramid,
    Rectangle,
    Simplex,
    Square,
    Tegum,
    Triangle,
)
from .polygons import hyperblock, orthoplex, simplex


def _pyramid_units(base: Name) -> Optional[int]:
    if isinstance(base, Nullitope):
        return 0
    if isinstance(base, Point):
        return 1
    if isinstance(base, Dyad):
        return 2
    if isinstance(base, Triangle):
        return 3
    if isinstance(base, Simplex):
        return base.rank + 1
    return None


def _prism_units(base: Name) -> Optional[int]:
    if isinstance(base, Point):
        return 0
    if isinstance(base, Dyad):
        return 1
    if isinstance(base, (Square, Rectangle)):
        return 2
    if isinstance(base, Hyperblock):
        return base.rank
    return None


def _tegum_units(base: Name) -> Optional[int]:
    if isinstance(base, Point):
        return 0
    if isinstance(base, Dyad):
        return 1
    if isinstance(base, (Square, Orthodiagonal)):
        return 2
    if isinstance(base, Orthoplex):
        return base.rank
    return None


def _collect(bases: Iterable[Name],
             kind: type,
             units: Callable[[Name], Optional[int]],
             absorbing: bool) -> Tuple[Optional[List[Name]], int]:
    """
    Split bases into kept bases and an absorbed unit count.

    Returns (None, 0) if an absorbing Nullitope was found.
    """
    new_bases = []
    count = 0

    for base in bases:
        if absorbing and isinstance(base, Nullitope):
            return None, 0
        if type(base) is kind:
            new_bases.extend(base.bases)
            continue
        unit = units(base)
        if unit is None:
            new_bases.append(base)
        else:
            count += unit

    return new_bases, count


def _assemble(new_bases: List[Name], kind: type, empty: Name) -> Name:
    """Either the multi-modifier, the single base, or the empty product."""
    if len(new_bases) == 0:
        return empty
    if len(new_bases) == 1:
        return new_bases[0]
    return kind(tuple(new_bases))


def _merge(bases: Iterable[Name],
           kind: type,
           wrap: type,
           unary: Callable[[Name], Name],
           units: Callable[[Name], Optional[int]],
           combine: Callable[[int], Name],
           empty: Name,
           absorbing: bool) -> Name:
    new_bases, count = _collect(bases, kind, units, absorbing)
    if new_bases is None:
        return Nullitope()

    # More than one unit: combine all of them into a single literal.
    if count >= 2:
        new_bases.append(combine(count))

    merged = _assemble(new_bases, kind, empty)

    # Exactly one unit: apply it at the end. Anything but the multi-modifier
    # itself goes through the smart constructor, so that e.g. a lone point
    # pyramid is a point and not Pyramid(Nullitope).
    if count == 1:
        if isinstance(merged, kind):
            return wrap(merged)
        return unary(merged)
    return merged


def multipyramid(name_type, bases: Iterable[Name]) -> Name:
    """Makes a multipyramid out of a list of names."""
    from .modifiers import pyramid

    check_name_type(name_type)
    return _merge(
        bases, Multipyramid, Pyramid, lambda name: pyramid(name_type, name),
        _pyramid_units,
        lambda count: simplex(name_type, name_type.regular(), count - 1),
        empty=Nullitope(), absorbing=False,
    )


def multiprism(name_type, bases: Iterable[Name]) -> Name:
    """Makes a multiprism out of a list of names."""
    from .modifiers import prism

    check_name_type(name_type)
    return _merge(
        bases, Multiprism, Prism, lambda name: prism(name_type, name),
        _prism_units,
        lambda count: hyperblock(name_type, name_type.regular(), count),
        empty=Point(), absorbing=True,
    )


def multitegum(name_type, bases: Iterable[Name]) -> Name:
    """Makes a multitegum out of a list of names."""
    from .modifiers import tegum

    check_name_type(name_type)
    return _merge(
        bases, Multitegum, Tegum, lambda name: tegum(name_type, name),
        _tegum_units,
        lambda count: orthoplex(name_type, name_type.regular(), count),
        empty=Point(), absorbing=True,
    )


def multicomb(name_type, bases: Iterable[Name]) -> Name:
    """Makes a multicomb out of a list of names. Only flattens, never absorbs."""
    check_name_type(name_type)
    new_bases = []
    for base in bases:
        if isinstance(base, Multicomb):
            new_bases.extend(base.bases)
        else:
            new_bases.append(base)
    return _assemble(new_bases, Multicomb, Point())
