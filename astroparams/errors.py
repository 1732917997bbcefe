"""
Input validation errors raised at solver boundaries.

Every error here derives from AstroValidationError, which is itself a
ValueError, so the service layer can map any of them to an HTTP 400
with a single ``except ValueError``.

Mathematically undefined results are NOT errors: they are returned as
sentinels from astroparams.results.
"""

import math
import numbers


class AstroValidationError(ValueError):
    """Argument has the wrong shape or type for the solver."""


class InvalidClassError(AstroValidationError):
    """Spectral class letter is not one of O, B, A, F, G, K, M."""


class InvalidSubclassError(AstroValidationError):
    """Spectral subclass is missing, malformed, or outside [0, 10)."""


class UnknownModeError(AstroValidationError):
    """Mode code (or combination of supplied quantities) is not recognised."""


class InvalidOrbitalParameterError(AstroValidationError):
    """Mass, period or axis is non-positive or not finite."""


def require_number(value, name, error=AstroValidationError):
    """
    Coerce ``value`` to a finite float or raise ``error``.

    Booleans and strings are rejected rather than silently coerced.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise error("{} must be a number, got {!r}".format(name, value))
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise error("{} must be finite, got {!r}".format(name, value))
    return value


def require_positive(value, name, error=InvalidOrbitalParameterError):
    """Coerce ``value`` to a finite float > 0 or raise ``error``."""
    value = require_number(value, name, error)
    if value <= 0:
        raise error("{} must be positive, got {!r}".format(name, value))
    return value


def require_precision(precision):
    """Validate an optional rounding precision (None means no rounding)."""
    if precision is None:
        return None
    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
        raise AstroValidationError(
            "precision must be an integer, got {!r}".format(precision))
    if precision < 0 or precision > 15:
        raise AstroValidationError(
            "precision must be between 0 and 15, got {}".format(precision))
    return int(precision)
