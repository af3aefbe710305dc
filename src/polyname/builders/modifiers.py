"""
Pyramid, Prism, Tegum and Antiprism Names
=========================================

Several "modifier of a modifier" combinations have a strictly simpler
name, and there is no simplification pass afterwards, so every collapse
has to be detected right here.

RULES (pyramid shown; prism uses Hyperblock/rectangle, tegum uses
Orthoplex/orthodiagonal):
    Nullitope → Point,  Point → Dyad,  Dyad → Triangle
    Triangle, Simplex   irregular → Simplex of one rank more
                        regular   → Pyramid(...) (a regular pyramid is not
                                    an irregular simplex)
    Pyramid(base)       → multipyramid([Dyad, base])
    Multipyramid(bases) → multipyramid(bases + [Point])
    anything else       → Pyramid(base)

"Irregular" means the regularity capsule cannot rule it out. Abstract
capsules never rule anything out, so under Abs every triangle and simplex
counts as irregular here.

prism and tegum only collapse Rectangle and Orthodiagonal into rank 3. Under
Abs both of those are Square, so prism(Abs, prism(Abs, Dyad())) stays
Prism(Square()) even though multiprism(Abs, [Dyad()] * 3) gives the
rank 3 Hyperblock. The abstract cube has two names.
"""

from ..spec.capsules import Regular, check_name_type
from ..spec.structures import (
    Dyad,
    Hyperblock,
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
    RankFamily,
    Rectangle,
    Simplex,
    Tegum,
    Triangle,
    Antiprism,
)
from .multi import multiprism, multipyramid, multitegum
from .polygons import orthodiagonal, rectangle


def _may_be_irregular(name: Name) -> bool:
    return name.regular.contains(Regular())


def _grow_family(name: RankFamily, wrap: type) -> Name:
    """Irregular family members gain a rank, regular ones are wrapped."""
    if _may_be_irregular(name):
        return type(name)(name.regular, name.rank + 1)
    return wrap(name)


def pyramid(name_type, base: Name) -> Name:
    """Builds a pyramid name from a given name."""
    check_name_type(name_type)

    # Hardcoded cases.
    if isinstance(base, Nullitope):
        return Point()
    if isinstance(base, Point):
        return Dyad()
    if isinstance(base, Dyad):
        return Triangle(name_type.regular())

    if isinstance(base, Triangle):
        if _may_be_irregular(base):
            return Simplex(base.regular, 3)
        return Pyramid(base)

    if isinstance(base, Simplex):
        return _grow_family(base, Pyramid)

    # Pyramids of pyramids become multipyramids.
    if isinstance(base, Pyramid):
        return multipyramid(name_type, [Dyad(), base.base])
    if isinstance(base, Multipyramid):
        return multipyramid(name_type, base.bases + (Point(),))

    return Pyramid(base)


def prism(name_type, base: Name) -> Name:
    """Builds a prism name from a given name."""
    check_name_type(name_type)

    if isinstance(base, Nullitope):
        return Nullitope()
    if isinstance(base, Point):
        return Dyad()
    if isinstance(base, Dyad):
        return rectangle(name_type)
    if isinstance(base, Rectangle):
        return Hyperblock(name_type.regular(), 3)

    if isinstance(base, Hyperblock):
        return _grow_family(base, Prism)

    if isinstance(base, Prism):
        return multiprism(name_type, [rectangle(name_type), base.base])
    if isinstance(base, Multiprism):
        return multiprism(name_type, base.bases + (Dyad(),))

    return Prism(base)


def tegum(name_type, base: Name) -> Name:
    """Builds a tegum name from a given name."""
    check_name_type(name_type)

    if isinstance(base, Nullitope):
        return Nullitope()
    if isinstance(base, Point):
        return Dyad()
    if isinstance(base, Dyad):
        return orthodiagonal(name_type)
    if isinstance(base, Orthodiagonal):
        return Orthoplex(name_type.regular(), 3)

    if isinstance(base, Orthoplex):
        return _grow_family(base, Tegum)

    if isinstance(base, Tegum):
        return multitegum(name_type, [orthodiagonal(name_type), base.base])
    if isinstance(base, Multitegum):
        return multitegum(name_type, base.bases + (Dyad(),))

    return Tegum(base)


def antiprism(name_type, base: Name) -> Name:
    """Builds an antiprism name from a given name."""
    check_name_type(name_type)

    if isinstance(base, Nullitope):
        return Point()
    if isinstance(base, Point):
        return Dyad()
    if isinstance(base, Dyad):
        return orthodiagonal(name_type)

    # Simplex antiprisms are irregular orthoplices.
    if isinstance(base, Simplex):
        return Orthoplex(name_type.regular(), base.rank + 1)

    return Antiprism(base)
