"""Name serialization - JSON codec and the header line of geometry files."""

from .codec import to_data, from_data
from .header import to_src, from_src, from_off
