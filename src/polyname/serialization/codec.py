"""
Name Codec
==========

Lossless mapping between names and plain JSON-compatible data.

LAYOUT (externally tagged):
    unit kinds          "Point"
    single child        {"Pyramid": <name>}
    multi-modifiers     {"Multiprism": [<name>, ...]}
    record kinds        {"Simplex": {"regular": <regular>, "rank": 3}}
                        {"Dual": {"base": <name>, "center": <point>}}

CAPSULES:
    AbsData             null
    ConData(Regular)    "No"  or  {"Yes": {"center": [x, y, ...]}}
    ConData(point)      [x, y, ...]

Decoding needs to know the marker, since the payload of a capsule depends
on it. Every malformed payload raises ValueError.
"""

from dataclasses import fields
from typing import Any

from ..spec.capsules import AbsData, ConData, NameData, Regular, check_name_type
from ..spec.structures import (
    NAME_KINDS,
    Great,
    MultiModifier,
    Name,
    Prism,
    Pyramid,
    Small,
    Stellated,
    Tegum,
)

# Kinds encoded as a bare child rather than a record.
NEWTYPE_KINDS = (Pyramid, Prism, Tegum, Small, Great, Stellated)


# =============================================================================
# Encoding
# =============================================================================

def _encode_regular(capsule: NameData) -> Any:
    if isinstance(capsule, AbsData):
        return None
    record = capsule.value
    if record.is_yes:
        return {"Yes": {"center": record.center.tolist()}}
    return "No"


def _encode_point(capsule: NameData) -> Any:
    if isinstance(capsule, AbsData):
        return None
    return [float(x) for x in capsule.value]


def to_data(name: Name) -> Any:
    """Encode a name as JSON-compatible data."""
    if not isinstance(name, Name):
        raise TypeError(f"Expected a Name, got {type(name).__name__}")

    tag = type(name).__name__
    if isinstance(name, NEWTYPE_KINDS):
        return {tag: to_data(name.base)}
    if isinstance(name, MultiModifier):
        return {tag: [to_data(base) for base in name.bases]}

    record = {}
    for f in fields(name):
        value = getattr(name, f.name)
        if f.name == 'base':
            record[f.name] = to_data(value)
        elif f.name == 'regular':
            record[f.name] = _encode_regular(value)
        elif f.name == 'center':
            record[f.name] = _encode_point(value)
        else:
            record[f.name] = value

    if not record:
        return tag
    return {tag: record}


# =============================================================================
# Decoding
# =============================================================================

def _decode_int(value: Any, what: str) -> int:
    # bool is an int subclass, but never a valid count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def _decode_coords(value: Any, what: str) -> list:
    if not isinstance(value, list) or not all(
            isinstance(x, (int, float)) and not isinstance(x, bool) for x in value):
        raise ValueError(f"{what} must be a list of numbers, got {value!r}")
    return [float(x) for x in value]


def _decode_regular(name_type, value: Any) -> NameData:
    if name_type.data_regular is AbsData:
        if value is not None:
            raise ValueError(f"Abstract regularity must be null, got {value!r}")
        return AbsData()

    if value == "No":
        return ConData(Regular())
    if isinstance(value, dict) and list(value) == ["Yes"]:
        inner = value["Yes"]
        if isinstance(inner, dict) and list(inner) == ["center"]:
            return ConData(Regular.yes(_decode_coords(inner["center"], "center")))
    raise ValueError(f"Malformed regularity record: {value!r}")


def _decode_point(name_type, value: Any) -> NameData:
    if name_type.data_point is AbsData:
        if value is not None:
            raise ValueError(f"Abstract point must be null, got {value!r}")
        return AbsData()
    return ConData(_decode_coords(value, "point"))


def _decode(name_type, data: Any) -> Name:
    if isinstance(data, str):
        kind = NAME_KINDS.get(data)
        if kind is None or fields(kind):
            raise ValueError(f"Unknown unit name {data!r}")
        return kind()

    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"Expected a single-key object or a string, got {data!r}")

    (tag, payload), = data.items()
    kind = NAME_KINDS.get(tag)
    if kind is None:
        raise ValueError(f"Unknown name kind {tag!r}")

    if issubclass(kind, NEWTYPE_KINDS):
        return kind(_decode(name_type, payload))

    if issubclass(kind, MultiModifier):
        if not isinstance(payload, list):
            raise ValueError(f"{tag} expects a list of bases, got {payload!r}")
        return kind(tuple(_decode(name_type, base) for base in payload))

    expected = [f.name for f in fields(kind)]
    if not expected:
        raise ValueError(f"{tag} is a unit name and takes no payload")
    if not isinstance(payload, dict) or sorted(payload) != sorted(expected):
        raise ValueError(f"{tag} expects fields {expected}, got {payload!r}")

    values = {}
    for key in expected:
        value = payload[key]
        if key == 'base':
            values[key] = _decode(name_type, value)
        elif key == 'regular':
            values[key] = _decode_regular(name_type, value)
        elif key == 'center':
            values[key] = _decode_point(name_type, value)
        else:
            values[key] = _decode_int(value, f"{tag}.{key}")
    return kind(**values)


def from_data(name_type, data: Any) -> Name:
    """
    Decode a name from JSON-compatible data.

    FAIL-FAST:
        Raises ValueError on any malformed payload.
    """
    check_name_type(name_type)
    return _decode(name_type, data)
