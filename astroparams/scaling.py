"""
Solar-relative stellar scaling laws.

Every main-sequence attribute is a power law in the normalized
effective temperature T_norm = Teff / T_SUN:

    K = T_norm * 5770        effective temperature (kelvin)
    T = T_norm               normalized temperature
    M = T_norm^2             mass           (solar masses)
    R = T_norm^1.8           radius         (solar radii)
    L = T_norm^7.6           luminosity     (solar luminosities)
    V = T_norm^-5            lifetime       (solar lifetimes)

Given any ONE attribute, the matching inverse law recovers T_norm and
the forward laws rebuild the other five. The supplied attribute is kept
verbatim and flagged as "given" so a caller can tell it apart from the
derived values.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math
from collections import OrderedDict
from enum import Enum

from astroparams import spectral
from astroparams.constants import (
    T_SUN,
    MASS_EXPONENT,
    RADIUS_EXPONENT,
    LUMINOSITY_EXPONENT,
    LIFETIME_EXPONENT,
    STELLAR_PRECISION,
)
from astroparams.errors import UnknownModeError, require_number, require_precision
from astroparams.results import UndefinedResult


class StellarMode(Enum):
    """Which stellar attribute the caller supplied."""

    K = "K"  # effective temperature, kelvin
    T = "T"  # normalized temperature
    M = "M"  # mass
    R = "R"  # radius
    L = "L"  # luminosity
    V = "V"  # lifetime

    @classmethod
    def coerce(cls, mode):
        """Accept a StellarMode or its one-letter code (any case)."""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.strip().upper())
            except ValueError:
                pass
        raise UnknownModeError(
            "Unknown stellar mode {!r}; expected one of {}".format(
                mode, ", ".join(m.value for m in cls)))


# Inverse laws: supplied attribute -> T_norm
_INVERSE = {
    StellarMode.K: lambda k: k / T_SUN,
    StellarMode.T: lambda t: t,
    StellarMode.M: lambda m: m ** (1.0 / MASS_EXPONENT),
    StellarMode.R: lambda r: r ** (1.0 / RADIUS_EXPONENT),
    StellarMode.L: lambda lum: lum ** (1.0 / LUMINOSITY_EXPONENT),
    StellarMode.V: lambda v: v ** (1.0 / LIFETIME_EXPONENT),
}

# Forward laws: T_norm -> attribute
_FORWARD = OrderedDict([
    (StellarMode.K, lambda t: t * T_SUN),
    (StellarMode.T, lambda t: t),
    (StellarMode.M, lambda t: t ** MASS_EXPONENT),
    (StellarMode.R, lambda t: t ** RADIUS_EXPONENT),
    (StellarMode.L, lambda t: t ** LUMINOSITY_EXPONENT),
    (StellarMode.V, lambda t: t ** LIFETIME_EXPONENT),
])


class StellarState:
    """
    Full set of solar-relative attributes derived from one input.

    Parameters
    ----------
    t_norm : float
        Normalized effective temperature.
    given : StellarMode
        The attribute the caller supplied.
    values : OrderedDict
        StellarMode -> value for all six attributes.
    """

    def __init__(self, t_norm, given, values):
        self.t_norm = t_norm
        self.given = given
        self.values = values

    def __getitem__(self, mode):
        return self.values[StellarMode.coerce(mode)]

    def is_given(self, mode):
        """True if ``mode`` is the attribute that was supplied."""
        return StellarMode.coerce(mode) is self.given

    def to_dict(self):
        """Serialize as {"K": ..., ..., "V": ..., "given": "M"}."""
        result = OrderedDict((mode.value, value) for mode, value in self.values.items())
        result["given"] = self.given.value
        return result


def resolve(mode, value, precision=STELLAR_PRECISION):
    """
    Derive all six stellar attributes from one supplied attribute.

    Parameters
    ----------
    mode : StellarMode or str
        Which attribute ``value`` is (K, T, M, R, L or V).
    value : float
        The supplied attribute. Must be > 0.
    precision : int, optional
        Digits to round derived values to (default 6). None disables
        rounding. The supplied value itself is never rounded.

    Returns
    -------
    StellarState or UndefinedResult
        UndefinedResult when ``value <= 0``: the inverse laws raise a
        non-positive base to a fractional or negative power, and a zero
        temperature has no finite lifetime.

    Raises
    ------
    UnknownModeError
        If ``mode`` is not one of the six codes.
    AstroValidationError
        If ``value`` is not a finite number.
    """
    mode = StellarMode.coerce(mode)
    value = require_number(value, mode.value)
    precision = require_precision(precision)

    if value <= 0:
        return UndefinedResult(
            "{} must be positive for the scaling laws, got {!r}".format(
                mode.value, value))

    values = OrderedDict()
    try:
        t_norm = _INVERSE[mode](value)
        for target, law in _FORWARD.items():
            if target is mode:
                values[target] = value
                continue
            derived = law(t_norm)
            if precision is not None:
                derived = round(derived, precision)
            values[target] = derived
    except (OverflowError, ZeroDivisionError):
        return UndefinedResult(
            "{}={!r} is outside the range of the scaling laws".format(
                mode.value, value))

    if not all(math.isfinite(v) for v in values.values()):
        return UndefinedResult(
            "{}={!r} is outside the range of the scaling laws".format(
                mode.value, value))
    return StellarState(t_norm, mode, values)


def resolve_spectral(label, precision=STELLAR_PRECISION):
    """
    Stellar attributes of a spectral subclass label such as "G2" or "K3.5".

    The label's temperature is looked up in the spectral table and
    resolved as a K (kelvin) input.

    Raises
    ------
    InvalidClassError, InvalidSubclassError
        If ``label`` is not a valid subclass label.
    """
    return resolve(StellarMode.K, spectral.temperature_of(label), precision)
