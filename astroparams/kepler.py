"""
Two-body Keplerian orbits in solar units.

Kepler's third law with the semi-major axis in AU, the period in years
and the total system mass in solar masses:

    a^3 = M * P^2

solve_orbit() takes any two of (mass, period, axis) and solves the one
invariant for the third, so every returned OrbitalSystem satisfies the
law by construction. solve_axis / solve_period / solve_mass are thin
wrappers around it.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from astroparams.constants import CONFIGURATION_REFERENCE
from astroparams.errors import (
    AstroValidationError,
    InvalidOrbitalParameterError,
    require_positive,
    require_precision,
)


class OrbitalSystem:
    """
    A two-body orbit satisfying a^3 = M * P^2.

    Parameters
    ----------
    axis : float
        Semi-major axis in AU.
    period : float
        Sidereal period in years.
    total_mass : float
        Combined mass of both bodies in solar masses.
    solved_for : str
        Which of 'axis', 'period', 'mass' was derived.
    """

    def __init__(self, axis, period, total_mass, solved_for):
        self.axis = axis
        self.period = period
        self.total_mass = total_mass
        self.solved_for = solved_for

    def residual(self):
        """Relative violation of the third law (0.0 for an exact solution)."""
        lhs = self.axis ** 3
        rhs = self.total_mass * self.period ** 2
        return abs(lhs - rhs) / max(lhs, rhs)

    def to_dict(self):
        return {
            "axis": self.axis,
            "period": self.period,
            "mass": self.total_mass,
            "solved_for": self.solved_for,
        }


def solve_orbit(mass=None, period=None, axis=None, precision=None):
    """
    Solve a^3 = M * P^2 for whichever quantity is missing.

    Parameters
    ----------
    mass : float, optional
        Total system mass in solar masses.
    period : float, optional
        Orbital period in years.
    axis : float, optional
        Semi-major axis in AU.
    precision : int, optional
        Digits to round the solved quantity to. None (default) keeps full
        precision.

    Returns
    -------
    OrbitalSystem

    Raises
    ------
    AstroValidationError
        Unless exactly two of mass, period, axis are given, or if the
        solved quantity rounds to 0 at ``precision``.
    InvalidOrbitalParameterError
        If a supplied quantity is non-positive or not finite, or the
        solved one falls outside floating point range.
    """
    supplied = [name for name, v in (("mass", mass), ("period", period), ("axis", axis))
                if v is not None]
    if len(supplied) != 2:
        raise AstroValidationError(
            "Exactly two of mass, period, axis are required; got {}".format(
                supplied or "none"))
    precision = require_precision(precision)

    mass = None if mass is None else require_positive(mass, "mass")
    period = None if period is None else require_positive(period, "period")
    axis = None if axis is None else require_positive(axis, "axis")

    out_of_range = InvalidOrbitalParameterError(
        "Orbit with given {} is outside floating point range".format(
            " and ".join(supplied)))
    try:
        if axis is None:
            solved_for = "axis"
            axis = (mass * period * period) ** (1.0 / 3.0)
        elif period is None:
            solved_for = "period"
            period = math.sqrt(axis ** 3 / mass)
        else:
            solved_for = "mass"
            mass = axis ** 3 / (period * period)
    except (OverflowError, ZeroDivisionError):
        raise out_of_range
    if not all(0 < v < math.inf for v in (mass, period, axis)):
        raise out_of_range

    if precision is not None:
        if solved_for == "axis":
            axis = round(axis, precision)
        elif solved_for == "period":
            period = round(period, precision)
        else:
            mass = round(mass, precision)
        if min(mass, period, axis) <= 0:
            raise AstroValidationError(
                "Solved {} rounds to 0 at precision {}".format(solved_for, precision))
    return OrbitalSystem(axis, period, mass, solved_for)


def solve_axis(mass, period, precision=None):
    """Semi-major axis (AU) from total mass and period."""
    return solve_orbit(mass=mass, period=period, precision=precision).axis


def solve_period(mass, axis, precision=None):
    """Period (years) from total mass and semi-major axis."""
    return solve_orbit(mass=mass, axis=axis, precision=precision).period


def solve_mass(period, axis, precision=None):
    """Total mass (solar masses) from period and semi-major axis."""
    return solve_orbit(period=period, axis=axis, precision=precision).total_mass


def configuration_index(mass1, mass2, axis1, axis2):
    """
    Symmetry index of a two-body configuration.

    Compares the mass ratio m1/m2 with the axis ratio a1/a2:

        q = (m1 / m2) / (a1 / a2)
        index = max(q, 1 / q)

    The index is CONFIGURATION_REFERENCE (1.0) when the two ratios are
    equal and grows without bound as they diverge. It is symmetric:
    swapping the two bodies, or inverting the mismatch, gives the same
    value.

    Raises
    ------
    InvalidOrbitalParameterError
        If any mass or axis is non-positive or not finite, or the index
        itself is too large for a float.
    """
    mass1 = require_positive(mass1, "mass1")
    mass2 = require_positive(mass2, "mass2")
    axis1 = require_positive(axis1, "axis1")
    axis2 = require_positive(axis2, "axis2")

    numerator = mass1 * axis2
    denominator = mass2 * axis1
    if 0.0 < numerator < math.inf and 0.0 < denominator < math.inf:
        q = numerator / denominator
        if 0.0 < q < math.inf and math.isfinite(1.0 / q):
            return CONFIGURATION_REFERENCE * max(q, 1.0 / q)

    # The products left float range; work with the log of the ratio
    log_q = (math.log(mass1) - math.log(mass2)
             + math.log(axis2) - math.log(axis1))
    try:
        return CONFIGURATION_REFERENCE * math.exp(abs(log_q))
    except OverflowError:
        raise InvalidOrbitalParameterError(
            "Configuration index for masses {!r}, {!r} and axes {!r}, {!r} "
            "is outside floating point range".format(mass1, mass2, axis1, axis2))
