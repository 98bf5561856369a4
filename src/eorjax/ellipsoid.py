"""Named reference ellipsoids.

The geodetic conversions in :mod:`eorjax.coordinates.geodetic` accept raw
equatorial radius and flattening; :class:`Ellipsoid` is a convenience for
the common reference systems.
"""

from __future__ import annotations

import enum

from eorjax.errors import InvalidValueError


class Ellipsoid(enum.Enum):
    """Reference ellipsoids with fixed ``(a, f)`` parameters.

    Attributes:
        WGS84: World Geodetic System 1984.
        GRS80: Geodetic Reference System 1980.
        WGS72: World Geodetic System 1972.

    References:
        1. Department of Defense World Geodetic System 1984, NIMA TR8350.2,
           Third Edition, p3-2.
        2. Moritz, H., Bull. Geodesique 66-2, 187 (1992).
        3. The Department of Defense World Geodetic System 1972, World
           Geodetic System Committee, May 1974.
    """

    WGS84 = "WGS84"
    GRS80 = "GRS80"
    WGS72 = "WGS72"

    @property
    def params(self) -> tuple[float, float]:
        """Equatorial radius [m] and flattening of the ellipsoid."""
        return _PARAMS[self]

    @classmethod
    def from_name(cls, name: str) -> Ellipsoid:
        """Look up an ellipsoid by name, ignoring case.

        Args:
            name: Ellipsoid name, e.g. ``"wgs84"``.

        Returns:
            The matching :class:`Ellipsoid`.

        Raises:
            InvalidValueError: If no ellipsoid has that name.
        """
        try:
            return cls(name.upper())
        except ValueError:
            raise InvalidValueError("Ellipsoid.from_name", "name") from None


_PARAMS = {
    Ellipsoid.WGS84: (6378137.0, 1.0 / 298.257223563),
    Ellipsoid.GRS80: (6378137.0, 1.0 / 298.257222101),
    Ellipsoid.WGS72: (6378135.0, 1.0 / 298.26),
}
