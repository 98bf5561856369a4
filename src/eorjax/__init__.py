"""
eorjax is a JAX implementation of the IAU 2006/2000A Earth orientation models: precession, nutation, the CIO locator, Earth rotation and sidereal time, together with geodetic coordinate conversions.
"""

from .constants import (
    DPI,
    D2PI,
    DAS2R,
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    DJ00,
    DJM0,
    DJC,
    JD_MJD_OFFSET,
    MJD2000,
    WGS84_a,
    WGS84_f,
)

from .config import set_dtype, get_dtype
from .errors import EarthOrientationError, InvalidValueError, UnrealisticError
from .ellipsoid import Ellipsoid

from .matrices import (
    Rx,
    Rz,
)

from .utils import anp

from .time import (
    epj,
    epj2jd,
)

from .nutation import (
    nut00a,
    nut06a,
)

from .precession import (
    obl06,
    p06e,
    pfw06,
    fw2m,
    pmat06,
    pnm06a,
    bpn2xy,
)

from .cio import (
    s06,
    xys06a,
)

from .sidereal import (
    era00,
    eors,
    gmst06,
    gst06,
    gst06a,
)

from .coordinates import (
    gc2gde,
    gd2gce,
    gc2gd,
    gd2gc,
    position_ecef_to_geodetic,
    position_geodetic_to_ecef,
    c2s,
    s2c,
    sepp,
    seps,
    ae2hd,
    hd2ae,
    hd2pa,
)

__all__ = [
    # Constants
    "DPI",
    "D2PI",
    "DAS2R",
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "DJ00",
    "DJM0",
    "DJC",
    "JD_MJD_OFFSET",
    "MJD2000",
    "WGS84_a",
    "WGS84_f",
    # Configuration
    "set_dtype",
    "get_dtype",
    # Errors
    "EarthOrientationError",
    "InvalidValueError",
    "UnrealisticError",
    # Ellipsoids
    "Ellipsoid",
    # Rotations
    "Rx",
    "Rz",
    "anp",
    # Time
    "epj",
    "epj2jd",
    # Nutation
    "nut00a",
    "nut06a",
    # Precession
    "obl06",
    "p06e",
    "pfw06",
    "fw2m",
    "pmat06",
    "pnm06a",
    "bpn2xy",
    # CIO locator
    "s06",
    "xys06a",
    # Earth rotation and sidereal time
    "era00",
    "eors",
    "gmst06",
    "gst06",
    "gst06a",
    # Coordinates
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
