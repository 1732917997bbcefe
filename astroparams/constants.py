"""
Calibration constants for the astrophysical parameter solvers.

All stellar quantities are solar-relative: the Sun maps to 1.0 in mass,
radius, luminosity and main-sequence lifetime, and to T_SUN kelvin in
effective temperature. Orbital quantities use solar units (AU, years,
solar masses), in which Kepler's third law reads a^3 = M * P^2.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

import math

# Solar effective temperature used for normalization (K)
T_SUN = 5770.0

# Power-law exponents of the solar-relative scaling laws, in terms of
# T_norm = Teff / T_SUN:
#   M = T_norm^2, R = T_norm^1.8, L = T_norm^7.6, V = T_norm^-5
MASS_EXPONENT = 2.0
RADIUS_EXPONENT = 1.8
LUMINOSITY_EXPONENT = 7.6
LIFETIME_EXPONENT = -5.0

# Default rounding for stellar scaling results (digits)
STELLAR_PRECISION = 6

# Span assigned to the coolest tabulated subclass (M9), which has no
# cooler neighbour to difference against (K)
TERMINAL_SPAN = 100.0

# Spectral classes, hottest first
SPECTRAL_CLASSES = ("O", "B", "A", "F", "G", "K", "M")
SUBCLASSES_PER_CLASS = 10

# Habitability index calibration.
# Inner branch: 1 - INNER_CURVATURE * (1 - ratio)^2, anchored at
# index(0.75) = 0.5.
INNER_ANCHOR_RATIO = 0.75
INNER_ANCHOR_INDEX = 0.5
INNER_CURVATURE = (1.0 - INNER_ANCHOR_INDEX) / (1.0 - INNER_ANCHOR_RATIO) ** 2  # 8.0

# Outer branch: 1 + OUTER_CURVATURE * (ratio - 1)^2, anchored at
# index(2.5) = 1.628.
OUTER_ANCHOR_RATIO = 2.5
OUTER_ANCHOR_INDEX = 1.628
OUTER_CURVATURE = (OUTER_ANCHOR_INDEX - 1.0) / (OUTER_ANCHOR_RATIO - 1.0) ** 2  # 0.27911...

# Ratio at which the inner branch reaches zero; at or below it the
# position is uninhabitable.
INNER_FLOOR_RATIO = 1.0 - 1.0 / math.sqrt(INNER_CURVATURE)  # 0.6464...

# Default rounding for habitability results (digits)
HABITABILITY_PRECISION = 3

# Reference value of the orbital configuration index for a symmetric
# configuration (mass ratio equal to axis ratio)
CONFIGURATION_REFERENCE = 1.0


def verify_calibration():
    """Verify the habitability calibration reproduces its anchors."""
    inner = 1.0 - INNER_CURVATURE * (1.0 - INNER_ANCHOR_RATIO) ** 2
    outer = 1.0 + OUTER_CURVATURE * (OUTER_ANCHOR_RATIO - 1.0) ** 2
    ok = (abs(inner - INNER_ANCHOR_INDEX) < 1e-12
          and abs(outer - OUTER_ANCHOR_INDEX) < 1e-12)
    return ok, (inner, outer)
