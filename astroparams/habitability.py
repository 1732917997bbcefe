"""
Habitability index relative to a star's nucleal zone.

The index is a function of ratio = orbital_distance / nucleal_radius,
normalized so the nucleal radius itself scores 1.0:

    ratio < 1  (inner, hotter):  index = 1 - 8 * (1 - ratio)^2
    ratio >= 1 (outer, cooler):  index = 1 + c * (ratio - 1)^2

with c calibrated so index(2.5) = 1.628. The two branches meet at 1.0
with zero slope, and the curve rises monotonically with ratio. Inner
positions whose index falls to 0 or below (ratio <= 0.646) are
Uninhabitable, as is any non-positive distance.

    index(1.0)  = 1.000
    index(0.75) = 0.500
    index(2.5)  = 1.628
    index(0.25) = Uninhabitable
"""

import math

from astroparams.constants import (
    INNER_CURVATURE,
    OUTER_CURVATURE,
    HABITABILITY_PRECISION,
)
from astroparams.errors import (
    AstroValidationError,
    require_number,
    require_positive,
    require_precision,
)
from astroparams.results import UndefinedResult, Uninhabitable, is_sentinel


def habitability_index(orbital_distance, nucleal_radius=1.0,
                       precision=HABITABILITY_PRECISION):
    """
    Habitability index of an orbit.

    Parameters
    ----------
    orbital_distance : float
        Orbital distance in AU.
    nucleal_radius : float, optional
        Radius of the centre of the habitable zone in AU (default 1.0).
    precision : int, optional
        Digits to round to (default 3). None disables rounding.

    Returns
    -------
    float, Uninhabitable or UndefinedResult
        Below 1.0 the position is inside the ideal band (hotter), above
        1.0 outside it (cooler). UndefinedResult when the ratio is so
        large that the index is not a finite float.

    Raises
    ------
    AstroValidationError
        If an argument is not a finite number, or nucleal_radius <= 0.
    """
    orbital_distance = require_number(orbital_distance, "orbital_distance")
    nucleal_radius = require_positive(
        nucleal_radius, "nucleal_radius", AstroValidationError)
    precision = require_precision(precision)

    if orbital_distance <= 0:
        return Uninhabitable("orbital distance must be positive")

    ratio = orbital_distance / nucleal_radius
    if ratio < 1.0:
        gap = 1.0 - ratio
        index = 1.0 - INNER_CURVATURE * gap * gap
    else:
        gap = ratio - 1.0
        index = 1.0 + OUTER_CURVATURE * gap * gap
    if not math.isfinite(index):
        return UndefinedResult(
            "ratio {!r} is outside floating point range".format(ratio))

    if precision is not None:
        index = round(index, precision)
    # A rounded index of 0.0 or below is past the inner floor
    if index <= 0:
        return Uninhabitable(
            "ratio {:.4g} is inside the inner habitability floor".format(ratio))
    return index


def habitability_zone(index):
    """
    Classify a habitability result.

    Returns one of "uninhabitable", "inner" (< 1.0), "nucleal" (== 1.0),
    "outer" (> 1.0) or "undefined" for an UndefinedResult.
    """
    if isinstance(index, Uninhabitable):
        return "uninhabitable"
    if isinstance(index, UndefinedResult):
        return "undefined"
    if is_sentinel(index):
        raise AstroValidationError(
            "Cannot classify sentinel {!r}".format(index))
    index = require_number(index, "index")
    if index < 1.0:
        return "inner"
    if index > 1.0:
        return "outer"
    return "nucleal"
