"""
polyname
========

Symbolic names for polytopes, kept in normal form as they are built.

Modules:
    spec           - Constants, capsules, the name tree and its validator
    builders       - Smart constructors (polygons, families, modifiers, multi-modifiers)
    operators      - Dual and Petrial
    serialization  - JSON codec and geometry file header line

Requirements:
    Python >= 3.9
    numpy >= 1.20
"""

import sys

# Python version check
if sys.version_info < (3, 9):
    raise ImportError(f"polyname requires Python >= 3.9, got {sys.version}")

# numpy version check
import numpy as np
_numpy_version = tuple(int(p) for p in np.__version__.split('.')[:2] if p.isdigit())
if _numpy_version < (1, 20):
    raise ImportError(f"polyname requires numpy >= 1.20, got {np.__version__}")

from .spec import (  # noqa: E402,F401
    Abs,
    AbsData,
    Con,
    ConData,
    NameData,
    NameType,
    Regular,
    Name,
    Nullitope,
    Point,
    Dyad,
    Triangle,
    Square,
    Rectangle,
    Orthodiagonal,
    Polygon,
    Pyramid,
    Prism,
    Tegum,
    Multipyramid,
    Multiprism,
    Multitegum,
    Multicomb,
    Antiprism,
    Antitegum,
    Petrial,
    Dual,
    Simplex,
    Hyperblock,
    Orthoplex,
    Generic,
    Small,
    Great,
    Stellated,
    default_name,
    is_valid,
    validate_name,
)
from .builders import (  # noqa: E402,F401
    generic,
    polygon,
    rectangle,
    orthodiagonal,
    simplex,
    hyperblock,
    orthoplex,
    pyramid,
    prism,
    tegum,
    antiprism,
    multipyramid,
    multiprism,
    multitegum,
    multicomb,
)
from .operators import dual, petrial  # noqa: E402,F401
from .serialization import to_data, from_data, to_src, from_src, from_off  # noqa: E402,F401

__version__ = "0.1.0"
