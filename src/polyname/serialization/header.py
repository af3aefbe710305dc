"""
Header Line
===========

A geometry file may carry its name on the first line, as the marker
character followed by the compact JSON form of the name:

    #{"Pyramid":{"Polygon":{"regular":"No","n":7}}}

Reading never fails loudly. A missing marker, an unreadable line or a
malformed payload all mean "no name available", and the caller falls back
to computing a name from the geometry.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from ..spec.constants import HEADER_MARKER
from ..spec.structures import Name
from .codec import from_data, to_data

logger = logging.getLogger(__name__)


def to_src(name: Name) -> str:
    """The header line (without newline) carrying `name`."""
    return HEADER_MARKER + json.dumps(to_data(name), separators=(",", ":"))


def from_src(name_type, first_line: str) -> Optional[Name]:
    """
    Gets the name from the first line of a geometry file.

    Returns:
        The decoded name, or None if there is none
    """
    line = first_line.rstrip("\r\n")
    if not line.startswith(HEADER_MARKER):
        logger.debug("header line has no %r marker", HEADER_MARKER)
        return None

    payload = line[len(HEADER_MARKER):]
    if not payload:
        return None

    try:
        return from_data(name_type, json.loads(payload))
    except (ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError; deep nesting is a RecursionError.
        logger.debug("header line is not a valid name: %s", e)
        return None


def from_off(name_type, path: Union[str, Path]) -> Optional[Name]:
    """
    Reads a name serialized on the first line of a geometry file.

    Returns None if the file cannot be read or carries no name.
    """
    try:
        with open(path, encoding="utf-8") as f:
            first_line = f.readline()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("cannot read header of %s: %s", path, e)
        return None

    return from_src(name_type, first_line)
