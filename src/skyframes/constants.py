"""
The `constants` module defines the angular constants used by the celestial frame conversions.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

# Earth Orientation Constants
"""
Mean obliquity of the ecliptic at J2000. Units: *arcseconds*

References:

1. N. Capitaine, P. Wallace, and J. Chapront, *Expressions for IAU 2000 precession quantities*, 2003
"""
OBLIQUITY_J2000 = 84381.406

# Galactic Frame Constants
"""
Right ascension of the north galactic pole (ICRS, J2000). Units: *deg*

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, Vol. 1, Sec. 1.5.3, 1997
"""
GALACTIC_POLE_RA = 192.85948

"""
Declination of the north galactic pole (ICRS, J2000). Units: *deg*

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, Vol. 1, Sec. 1.5.3, 1997
"""
GALACTIC_POLE_DEC = 27.12825

"""
Galactic longitude of the north celestial pole (ICRS, J2000). Units: *deg*

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, Vol. 1, Sec. 1.5.3, 1997
"""
GALACTIC_NCP_LON = 122.93192
