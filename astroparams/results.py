"""
Typed sentinel results.

Solvers return a sentinel instead of a number when the answer is a
meaningful non-numeric outcome the caller is expected to branch on.
Two families are kept distinct:

    Business sentinels - valid answers that happen not to be numbers:
        Uninhabitable  - position is outside any habitable band
        NoConjunction  - equal sidereal periods never realign

    Domain sentinel - the requested quantity is mathematically undefined:
        UndefinedResult - e.g. a non-positive base under a fractional
                          exponent, or a synodic branch with no positive root

Sentinels are plain objects, never numbers, so a caller cannot mistake
one for 0.0. They serialize via to_dict().

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""


class Sentinel:
    """Base class for non-numeric solver results."""

    kind = ""
    is_domain_error = False

    def __init__(self, reason=""):
        self.reason = reason

    def to_dict(self):
        """Serialize for the JSON API."""
        result = {"sentinel": self.kind}
        if self.reason:
            result["reason"] = self.reason
        return result

    def __eq__(self, other):
        return type(self) is type(other) and self.reason == other.reason

    def __hash__(self):
        return hash((type(self), self.reason))

    def __repr__(self):
        if self.reason:
            return "{}({!r})".format(type(self).__name__, self.reason)
        return "{}()".format(type(self).__name__)


class Uninhabitable(Sentinel):
    """The orbital position lies outside the habitable band."""

    kind = "uninhabitable"


class NoConjunction(Sentinel):
    """
    Two bodies with equal sidereal periods never return to conjunction,
    so their synodic period is infinite.
    """

    kind = "no_conjunction"

    def __init__(self, period, reason=""):
        super().__init__(reason or "equal sidereal periods")
        self.period = period

    def to_dict(self):
        result = super().to_dict()
        result["period"] = self.period
        return result

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.period == other.period)

    def __hash__(self):
        return hash((type(self), self.period))


class UndefinedResult(Sentinel):
    """The requested quantity is mathematically undefined for the input."""

    kind = "undefined"
    is_domain_error = True


def is_sentinel(value):
    """True if ``value`` is any solver sentinel."""
    return isinstance(value, Sentinel)
