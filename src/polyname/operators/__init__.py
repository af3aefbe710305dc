"""Name operators - dual and Petrial."""

from .dual import dual
from .petrial import petrial
