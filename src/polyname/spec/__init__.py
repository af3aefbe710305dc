"""Constants, capsules, and the name tree contract."""

from .constants import (
    EPS_CENTER,
    MIN_NAMED_RANK,
    MAX_GENERIC_RANK,
    MIN_GENERIC_FACETS,
    MIN_REGULAR_POLYGON,
    MIN_IRREGULAR_POLYGON,
    HEADER_MARKER,
)

from .capsules import (
    Abs,
    AbsData,
    Con,
    ConData,
    NameData,
    NameType,
    Regular,
    as_point,
    check_name_type,
    is_regular,
)

from .structures import (
    Name,
    Modifier,
    MultiModifier,
    RankFamily,
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
    NAME_KINDS,
    default_name,
    is_valid,
    validate_name,
)
