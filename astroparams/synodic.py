"""
Synodic / sidereal period resolution.

Two bodies with sidereal periods P and Q return to conjunction every
synodic period S, where

    1/S = |1/P - 1/Q|

All three wrappers (solve_for_p, solve_for_q, solve_for_s) go through
solve_synodic(), which is the only place the relation is written down.

Solving a SIDEREAL period from the other sidereal period and S has two
roots, depending on whether the missing body orbits faster (inner) or
slower (outer) than the known one:

    inner:  1/X = 1/known + 1/S
    outer:  1/X = 1/known - 1/S

By default body 1 (P) is taken as the inner body: solving for Q uses the
outer root, solving for P the inner root. Pass ``branch`` to override.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math
from enum import Enum

from astroparams.errors import (
    AstroValidationError,
    UnknownModeError,
    require_positive,
    require_precision,
)
from astroparams.results import NoConjunction, UndefinedResult, is_sentinel


class SynodicBranch(Enum):
    """Which root to take when solving for a sidereal period."""

    INNER = "inner"
    OUTER = "outer"

    @classmethod
    def coerce(cls, branch):
        if isinstance(branch, cls):
            return branch
        if isinstance(branch, str):
            try:
                return cls(branch.strip().lower())
            except ValueError:
                pass
        raise UnknownModeError(
            "Unknown synodic branch {!r}; expected 'inner' or 'outer'".format(branch))


# Default root per missing quantity (body 1 is the inner body)
_DEFAULT_BRANCH = {
    "P": SynodicBranch.INNER,
    "Q": SynodicBranch.OUTER,
}


class SynodicTriple:
    """Sidereal periods P, Q and synodic period S, with 1/S = |1/P - 1/Q|."""

    def __init__(self, P, Q, S, solved_for):
        self.P = P
        self.Q = Q
        self.S = S
        self.solved_for = solved_for

    def to_dict(self):
        return {
            "P": self.P,
            "Q": self.Q,
            "S": self.S,
            "solved_for": self.solved_for,
        }


def solve_synodic(P=None, Q=None, S=None, branch=None, precision=None):
    """
    Solve 1/S = |1/P - 1/Q| for whichever period is missing.

    Parameters
    ----------
    P, Q : float, optional
        Sidereal periods of body 1 and body 2 (any consistent unit).
    S : float, optional
        Synodic period, same unit.
    branch : SynodicBranch or str, optional
        'inner' or 'outer'; only used when solving for P or Q.
    precision : int, optional
        Digits to round the solved period to. None keeps full precision.

    Returns
    -------
    SynodicTriple, NoConjunction or UndefinedResult
        NoConjunction when P == Q (the bodies never realign).
        UndefinedResult when the chosen branch has no positive root, or
        the solved period is outside floating point range.

    Raises
    ------
    AstroValidationError
        Unless exactly two of P, Q, S are supplied, or if the solved
        period rounds to 0 at ``precision``.
    InvalidOrbitalParameterError
        If a supplied period is non-positive or not finite.
    UnknownModeError
        If ``branch`` is not 'inner' or 'outer'.
    """
    supplied = [name for name, v in (("P", P), ("Q", Q), ("S", S)) if v is not None]
    if len(supplied) != 2:
        raise AstroValidationError(
            "Exactly two of P, Q, S are required; got {}".format(
                ", ".join(supplied) or "none"))
    precision = require_precision(precision)
    if branch is not None:
        branch = SynodicBranch.coerce(branch)

    P = None if P is None else require_positive(P, "P")
    Q = None if Q is None else require_positive(Q, "Q")
    S = None if S is None else require_positive(S, "S")

    if S is None:
        solved_for = "S"
        rate = abs(1.0 / P - 1.0 / Q)
        # Periods too close for their reciprocals to differ never realign
        if P == Q or rate == 0:
            return NoConjunction(P)
    else:
        solved_for = "Q" if Q is None else "P"
        known = P if Q is None else Q
        root = branch or _DEFAULT_BRANCH[solved_for]
        if root is SynodicBranch.INNER:
            rate = 1.0 / known + 1.0 / S
        else:
            rate = 1.0 / known - 1.0 / S
        if rate <= 0:
            return UndefinedResult(
                "No positive {} on the {} branch for {}={!r}, S={!r}".format(
                    solved_for, root.value,
                    "P" if solved_for == "Q" else "Q", known, S))
    solved = 1.0 / rate
    if not 0 < solved < math.inf:
        return UndefinedResult(
            "Solved {} is outside floating point range".format(solved_for))

    if precision is not None:
        solved = round(solved, precision)
        if solved <= 0:
            raise AstroValidationError(
                "Solved {} rounds to 0 at precision {}".format(solved_for, precision))
    if solved_for == "S":
        S = solved
    elif solved_for == "P":
        P = solved
    else:
        Q = solved
    return SynodicTriple(P, Q, S, solved_for)


def _pick(result, name):
    if is_sentinel(result):
        return result
    return getattr(result, name)


def solve_for_p(Q, S, branch=None, precision=None):
    """Sidereal period of body 1 from Q and S (inner root by default)."""
    return _pick(solve_synodic(Q=Q, S=S, branch=branch, precision=precision), "P")


def solve_for_q(P, S, branch=None, precision=None):
    """Sidereal period of body 2 from P and S (outer root by default)."""
    return _pick(solve_synodic(P=P, S=S, branch=branch, precision=precision), "Q")


def solve_for_s(P, Q, precision=None):
    """Synodic period of two bodies, or NoConjunction if P == Q."""
    return _pick(solve_synodic(P=P, Q=Q, precision=precision), "S")
