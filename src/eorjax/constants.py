"""
The `constants` module defines the mathematical, time and geodetic constants
used by the Earth orientation models.

The upper-case short names (``DAS2R``, ``DJ00``, ...) carry the exact values
of the ERFA/SOFA constants so that the models reproduce the reference
library to the last bit where the arithmetic allows it.
"""

# Mathematical Constants
"""
Pi. Units: *rad*
"""
DPI = 3.141592653589793238462643

"""
2 Pi. Units: *rad*
"""
D2PI = 6.283185307179586476925287

"""
Radians to degrees. Units: *deg/rad*
"""
DR2D = 57.29577951308232087679815

"""
Degrees to radians. Units: *rad/deg*
"""
DD2R = 1.745329251994329576923691e-2

"""
Radians to arcseconds. Units: *as/rad*
"""
DR2AS = 206264.8062470963551564734

"""
Arcseconds to radians. Units: *rad/as*
"""
DAS2R = 4.848136811095359935899141e-6

"""
Seconds of time to radians. Units: *rad/s*
"""
DS2R = 7.272205216643039903848712e-5

"""
Arcseconds in a full circle. Units: *as*
"""
TURNAS = 1296000.0

"""
Milliarcseconds to radians. Units: *rad/mas*
"""
DMAS2R = DAS2R / 1e3

"""
Units of 0.1 microarcsecond to radians, the unit of the nutation series.
"""
U2R = DAS2R / 1e7

"""
Constant to convert degrees to radians. Alias of ``DD2R``. Units: *rad/deg*
"""
DEG2RAD = DD2R

"""
Constant to convert radians to degrees. Alias of ``DR2D``. Units: *deg/rad*
"""
RAD2DEG = DR2D

"""
Constant to convert arcseconds to radians. Alias of ``DAS2R``. Units: *rad/as*
"""
AS2RAD = DAS2R

"""
Constant to convert radians to arcseconds. Alias of ``DR2AS``. Units: *as/rad*
"""
RAD2AS = DR2AS

# Time Constants

"""
Seconds per day. Units: *s*
"""
DAYSEC = 86400.0

"""
Days per Julian year. Units: *days*
"""
DJY = 365.25

"""
Days per Julian century. Units: *days*
"""
DJC = 36525.0

"""
Days per Julian millennium. Units: *days*
"""
DJM = 365250.0

"""
Julian Date of the J2000.0 reference epoch. Units: *days*
"""
DJ00 = 2451545.0

"""
Julian Date of the Modified Julian Date zero point. Units: *days*
"""
DJM0 = 2400000.5

"""
Modified Julian Date of the J2000.0 reference epoch. Units: *days*
"""
DJM00 = 51544.5

"""
Offset between Julian Date and Modified Julian Date. Alias of ``DJM0``. Units: *days*
"""
JD_MJD_OFFSET = DJM0

"""
Modified Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
MJD2000 = DJM00

# Earth Constants

"""
Earth's semi-major axis as defined by the WGS84 geodetic system. [m]

References:

1. NIMA Technical Report TR8350.2
"""
WGS84_a = 6378137.0  # WGS-84 semi-major axis

"""
Earth's ellipsoidal flattening.  WGS84 Value.

References:

1. NIMA Technical Report TR8350.2
"""
WGS84_f = 1.0 / 298.257223563  # WGS-84 flattening
