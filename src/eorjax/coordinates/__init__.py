"""Coordinate transformations.

This sub-module provides functions for converting between common
coordinate representations:

- **Geodetic**: reference ellipsoid ``(elong, phi, height)`` <-> geocentric ``[x, y, z]``
- **Spherical**: ``(theta, phi)`` <-> unit vector, and angular separation
- **Horizon**: azimuth/altitude <-> hour angle/declination, parallactic angle
"""

from .geodetic import (
    gc2gd,
    gc2gde,
    gd2gc,
    gd2gce,
    position_ecef_to_geodetic,
    position_geodetic_to_ecef,
)
from .horizon import ae2hd, hd2ae, hd2pa
from .spherical import c2s, s2c, sepp, seps

__all__ = [
    "gc2gde",
    "gd2gce",
    "gc2gd",
    "gd2gc",
    "position_ecef_to_geodetic",
    "position_geodetic_to_ecef",
    "c2s",
    "s2c",
    "sepp",
    "seps",
    "ae2hd",
    "hd2ae",
    "hd2pa",
]
