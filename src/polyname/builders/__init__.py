"""
Name builders - smart constructors that always return names in normal form.

EXPORTS:
- Hardcoded shapes: generic, polygon, rectangle, orthodiagonal
- Rank families: simplex, hyperblock, orthoplex
- Modifiers: pyramid, prism, tegum, antiprism
- Multi-modifiers: multipyramid, multiprism, multitegum, multicomb
"""

from .polygons import (
    generic,
    polygon,
    rectangle,
    orthodiagonal,
    simplex,
    hyperblock,
    orthoplex,
)

from .multi import multipyramid, multiprism, multitegum, multicomb

from .modifiers import pyramid, prism, tegum, antiprism
