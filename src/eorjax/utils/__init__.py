"""Shared utility functions for eorjax.

Provides angle normalization and degree/radian conversion helpers.
"""

from eorjax.utils._angle import anp, from_radians, to_radians

__all__ = [
    "anp",
    "from_radians",
    "to_radians",
]
