"""
The `constants` module defines the mathematical and physical constants used by the
coordinate conversions.

Units follow the classical heliocentric convention: distances in astronomical
units, velocities in AU/day, masses in solar masses.
"""

from math import pi as PI

# Mathematical Constants
"""
Full turn. Equal to 2pi. Units: *rad*
"""
PI2 = PI + PI

"""
Square of pi. Used by the Markley starter of the Kepler solver.
"""
PI_SQ = PI * PI

"""
Constant to convert degrees to radians. Equal to pi/180. Units: *rad/deg*
"""
DEG2RAD = PI / 180.0

"""
Constant to convert radians to degrees. Equal to 180/pi. Units: *deg/rad*
"""
RAD2DEG = 180.0 / PI

# Physical Constants
"""
Gaussian gravitational constant. Units: *AU^(3/2) / (solar mass^(1/2) day)*

References:

1. C. F. Gauss, *Theoria Motus Corporum Coelestium*, 1809.
"""
GAUSS_K = 0.01720209895

"""
Square of the Gaussian gravitational constant, used as G in the mass
parameter mu = G (m0 + m). Units: *AU^3 / (solar mass day^2)*
"""
GAUSS_K2 = 2.9591220828559115e-04
