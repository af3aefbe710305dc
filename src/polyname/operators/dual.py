"""
Dual Names
==========

The dual of a name, taken about a given center.

RULES:
    Nullitope, Point, Dyad          self-dual
    Square, Rectangle               → orthodiagonal
    Orthodiagonal                   → irregular 4-gon
    Triangle, Polygon, Simplex      → same kind
    Hyperblock ↔ Orthoplex
        The regularity record survives only if the shape is regular about
        (within EPS_CENTER of) the center of the dual. Otherwise the dual
        is irregular.
    Dual(base, c₀)                  → base if c == c₀, else Generic
    Pyramid/Prism/Tegum             Abs: distribute (Pyramid ↔ Pyramid, Prism ↔ Tegum)
                                    Con: Dual(modifier, c)
    Antiprism(base)                 → Antitegum(base, c)
    Antitegum(base, c₀)             → Antiprism(base) if c == c₀,
                                      else Dual(Antitegum(base, c₀), c)
    Multi* (all four)               same split as modifiers, per base
                                    (Multiprism ↔ Multitegum)
    anything else                   → Dual(name, c)

ABSTRACT VS CONCRETE:
    Abstract names have no geometry that depends on the center, so the
    dual distributes over modifiers. Concrete names keep the dual as an
    explicit node instead.

PRECISION LOSS:
    The dual of a dual about a different center has no symbolic name here.
    It falls back to Generic(facet_count, rank), which is why the facet
    count and rank of the polytope are passed in.
"""

import logging

import numpy as np

from ..builders.polygons import orthodiagonal, polygon
from ..spec.capsules import NameData, Regular, check_name_type
from ..spec.constants import EPS_CENTER
from ..spec.structures import (
    Antiprism,
    Antitegum,
    Dual,
    Dyad,
    Generic,
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
    Polygon,
    Prism,
    Pyramid,
    Rectangle,
    Simplex,
    Square,
    Tegum,
    Triangle,
)

logger = logging.getLogger(__name__)

# Kind of the dual of each rank family / modifier / multi-modifier.
_FAMILY_DUALS = {Simplex: Simplex, Hyperblock: Orthoplex, Orthoplex: Hyperblock}
_MODIFIER_DUALS = {Pyramid: Pyramid, Prism: Tegum, Tegum: Prism}
_MULTI_DUALS = {
    Multipyramid: Multipyramid,
    Multiprism: Multitegum,
    Multitegum: Multiprism,
    Multicomb: Multicomb,
}


def _regular_about(regular: NameData, center: NameData) -> NameData:
    """
    Keep a regularity record if the shape is regular about `center`.

    Returns the record itself, or a default (irregular) one.
    """
    def matches(record: Regular) -> bool:
        if not record.is_yes:
            return True
        return center.satisfies(
            lambda c: np.linalg.norm(np.asarray(c) - record.center) < EPS_CENTER
        )

    if regular.satisfies(matches):
        return regular
    return type(regular)(Regular())


def dual(name_type, name: Name, center, facet_count: int, rank: int) -> Name:
    """
    Builds the dual name of a given name.

    Args:
        name_type: Abs or Con
        name: Name to dualize
        center: Center of the dual, as a point capsule (a raw point is
                wrapped with name_type.point)
        facet_count: Facet count of the polytope `name` refers to
        rank: Rank of the polytope `name` refers to

    Returns:
        The dual name, in normal form
    """
    check_name_type(name_type)
    if not isinstance(center, NameData):
        center = name_type.point(center)

    # Self-dual polytopes.
    if isinstance(name, (Nullitope, Point, Dyad)):
        return name

    # Other hardcoded cases.
    if isinstance(name, Triangle):
        return Triangle(_regular_about(name.regular, center))
    if isinstance(name, (Square, Rectangle)):
        return orthodiagonal(name_type)
    if isinstance(name, Orthodiagonal):
        return polygon(name_type, name_type.regular(), 4)

    # Duals of duals become the original polytopes if possible.
    if isinstance(name, Dual):
        if center == name.center:
            return name.base
        logger.debug(
            "dual of a dual about a different center, falling back to "
            "Generic(facet_count=%d, rank=%d)", facet_count, rank,
        )
        return Generic(facet_count, rank)

    # Regular duals.
    if isinstance(name, Polygon):
        return Polygon(_regular_about(name.regular, center), name.n)
    if type(name) in _FAMILY_DUALS:
        dual_kind = _FAMILY_DUALS[type(name)]
        return dual_kind(_regular_about(name.regular, center), name.rank)

    # Duals of modifiers.
    if type(name) in _MODIFIER_DUALS:
        if name_type.is_abstract():
            dual_kind = _MODIFIER_DUALS[type(name)]
            return dual_kind(dual(name_type, name.base, center, facet_count, rank))
        return Dual(name, center)

    if isinstance(name, Antiprism):
        return Antitegum(name.base, center)
    if isinstance(name, Antitegum):
        if center == name.center:
            return Antiprism(name.base)
        return Dual(name, center)

    # Duals of multi-modifiers.
    if type(name) in _MULTI_DUALS:
        if name_type.is_abstract():
            dual_kind = _MULTI_DUALS[type(name)]
            return dual_kind(tuple(
                dual(name_type, base, center, facet_count, rank)
                for base in name.bases
            ))
        return Dual(name, center)

    return Dual(name, center)
