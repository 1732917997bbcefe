"""
AstrophysicalParameterEngine: one entry point over all solvers.

The caller names the quantities it knows; the engine picks the solver
from WHICH quantities were supplied:

    spectral_class                 -> temperature + stellar attributes
    temperature (K)                -> spectral subclass + stellar attributes
    one of T_norm, mass_ratio,
      radius, luminosity, lifetime -> stellar attributes
    two of mass, period, axis      -> Keplerian orbit
    two of P, Q, S (+ branch)      -> synodic / sidereal periods
    orbital_distance
      (+ nucleal_radius)           -> habitability index

``precision`` is passed through to the chosen solver when given.

The engine holds no state: every call re-derives everything from its
arguments, and all solvers share only the read-only spectral table.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
from collections import OrderedDict

from astroparams import habitability, kepler, scaling, spectral, synodic
from astroparams.errors import UnknownModeError
from astroparams.results import is_sentinel
from astroparams.scaling import StellarMode

log = logging.getLogger(__name__)


# Stellar quantity name -> scaling mode
STELLAR_QUANTITIES = OrderedDict([
    ("T_norm", StellarMode.T),
    ("mass_ratio", StellarMode.M),
    ("radius", StellarMode.R),
    ("luminosity", StellarMode.L),
    ("lifetime", StellarMode.V),
])

# mode -> (keys that select it, optional keys it also accepts)
DISPATCH = OrderedDict([
    ("spectral", (frozenset(["spectral_class"]), frozenset())),
    ("temperature", (frozenset(["temperature"]), frozenset())),
    ("stellar", (frozenset(STELLAR_QUANTITIES), frozenset())),
    ("orbit", (frozenset(["mass", "period", "axis"]), frozenset())),
    ("synodic", (frozenset(["P", "Q", "S"]), frozenset(["branch"]))),
    ("habitability", (frozenset(["orbital_distance"]), frozenset(["nucleal_radius"]))),
])


def serialize(value):
    """JSON-ready form of a solver result, sentinel or plain number."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class EngineResult:
    """
    Output of one engine dispatch.

    Parameters
    ----------
    mode : str
        The dispatch mode that ran (a key of DISPATCH).
    supplied : dict
        The quantities the caller gave.
    values : OrderedDict
        Named results. Each is a float, a str, a result object
        (StellarState, OrbitalSystem, SynodicTriple) or a sentinel.
    """

    def __init__(self, mode, supplied, values):
        self.mode = mode
        self.supplied = supplied
        self.values = values

    def __getitem__(self, name):
        return self.values[name]

    def has_sentinel(self):
        """True if any of the results is a sentinel."""
        return any(is_sentinel(v) for v in self.values.values())

    def to_dict(self):
        return {
            "mode": self.mode,
            "supplied": self.supplied,
            "results": OrderedDict(
                (name, serialize(v)) for name, v in self.values.items()),
        }


class AstrophysicalParameterEngine:
    """Facade dispatching to the solver matching the supplied quantities."""

    def resolve(self, /, **quantities):
        """Keyword form of resolve_mapping()."""
        return self.resolve_mapping(quantities)

    def resolve_mapping(self, quantities):
        """
        Resolve whatever follows from the supplied quantities.

        Parameters
        ----------
        quantities : mapping
            Quantity name -> value (see module docstring). None values are
            treated as not supplied. Names need not be Python identifiers, so
            request bodies can be passed through unchanged.

        Returns
        -------
        EngineResult

        Raises
        ------
        UnknownModeError
            If nothing was supplied, a name is unrecognised, or the names
            span more than one solver.
        AstroValidationError
            Propagated from the chosen solver for malformed values.
        """
        supplied = OrderedDict(
            (k, v) for k, v in quantities.items() if v is not None)
        options = {}
        if "precision" in supplied:
            options["precision"] = supplied.pop("precision")

        mode = self._select_mode(supplied)
        log.debug("Dispatching %s to %s solver", sorted(supplied), mode)

        handler = getattr(self, "_resolve_" + mode)
        values = handler(supplied, **options)
        return EngineResult(mode, dict(supplied), values)

    def _select_mode(self, supplied):
        if not supplied:
            raise UnknownModeError("No quantities supplied")

        known = set()
        for selectors, optional in DISPATCH.values():
            known |= selectors | optional
        unknown = sorted(set(supplied) - known)
        if unknown:
            raise UnknownModeError(
                "Unrecognised quantities: {}".format(", ".join(unknown)))

        names = set(supplied)
        matches = [mode for mode, (selectors, optional) in DISPATCH.items()
                   if names & selectors]
        if len(matches) != 1:
            raise UnknownModeError(
                "Quantities {} do not select exactly one solver (matched: {})".format(
                    sorted(names), ", ".join(matches) or "none"))

        mode = matches[0]
        selectors, optional = DISPATCH[mode]
        stray = names - selectors - optional
        if stray:
            raise UnknownModeError(
                "Quantities {} cannot be combined with the {} solver".format(
                    sorted(stray), mode))
        return mode

    # ------------------------------------------------------------------
    # Per-mode handlers
    # ------------------------------------------------------------------

    def _resolve_spectral(self, supplied, **options):
        state = scaling.resolve_spectral(supplied["spectral_class"], **options)
        return OrderedDict([
            ("temperature", state[StellarMode.K]),
            ("stellar", state),
        ])

    def _resolve_temperature(self, supplied, **options):
        temperature = supplied["temperature"]
        return OrderedDict([
            ("spectral_class", spectral.subclass_of(temperature)),
            ("stellar", scaling.resolve(StellarMode.K, temperature, **options)),
        ])

    def _resolve_stellar(self, supplied, **options):
        if len(supplied) != 1:
            raise UnknownModeError(
                "Exactly one stellar quantity is required; got {}".format(
                    sorted(supplied)))
        (name, value), = supplied.items()
        return OrderedDict([
            ("stellar", scaling.resolve(STELLAR_QUANTITIES[name], value, **options)),
        ])

    def _resolve_orbit(self, supplied, **options):
        return OrderedDict([
            ("orbit", kepler.solve_orbit(**supplied, **options)),
        ])

    def _resolve_synodic(self, supplied, **options):
        return OrderedDict([
            ("synodic", synodic.solve_synodic(**supplied, **options)),
        ])

    def _resolve_habitability(self, supplied, **options):
        index = habitability.habitability_index(
            supplied["orbital_distance"],
            supplied.get("nucleal_radius", 1.0),
            **options)
        return OrderedDict([
            ("index", index),
            ("zone", habitability.habitability_zone(index)),
        ])

    # ------------------------------------------------------------------
    # Direct solver access
    # ------------------------------------------------------------------

    def temperature_of(self, label):
        return spectral.temperature_of(label)

    def subclass_of(self, temperature):
        return spectral.subclass_of(temperature)

    def spectral_table(self, class_filter=None):
        return spectral.display(class_filter)

    def stellar(self, mode, value, **options):
        return scaling.resolve(mode, value, **options)

    def orbit(self, mass=None, period=None, axis=None, **options):
        return kepler.solve_orbit(mass=mass, period=period, axis=axis, **options)

    def configuration_index(self, mass1, mass2, axis1, axis2):
        return kepler.configuration_index(mass1, mass2, axis1, axis2)

    def synodic(self, P=None, Q=None, S=None, **options):
        return synodic.solve_synodic(P=P, Q=Q, S=S, **options)

    def habitability(self, orbital_distance, nucleal_radius=1.0, **options):
        return habitability.habitability_index(
            orbital_distance, nucleal_radius, **options)
