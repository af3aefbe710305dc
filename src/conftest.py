"""
Pytest Configuration
====================

Makes polyname importable from a source checkout, without installing it.

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """Put src/ first on sys.path before any test module imports polyname."""
    src_root = str(Path(__file__).parent)
    if src_root not in sys.path:
        sys.path.insert(0, src_root)
