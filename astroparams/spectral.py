"""
Spectral classification: subclass label <-> effective temperature.

The reference table holds 70 entries (O0..M9), each with the high edge
of its temperature band and the band width (span). A label such as
"G7.3" sits 30% of the way down the G7 band:

    T(G7.3) = high_temp(G7) - 0.3 * span(G7)

The inverse locates the band containing a temperature by binary search
over the (strictly descending) high-edge sequence.

Clamping: temperatures hotter than O0 map to "O0.0"; temperatures
cooler than the bottom of the M9 band map to "M9.9". Neither raises.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import re
from collections import OrderedDict, namedtuple

import numpy as np

from astroparams.constants import (
    SPECTRAL_CLASSES,
    SUBCLASSES_PER_CLASS,
    TERMINAL_SPAN,
)
from astroparams.data.spectral_types import get_class_temps
from astroparams.errors import (
    AstroValidationError,
    InvalidClassError,
    InvalidSubclassError,
    require_number,
)


SpectralSubclassEntry = namedtuple(
    "SpectralSubclassEntry", ["spectral_class", "subclass", "high_temp", "span"])

# Subclass number with optional decimal part: "7", "7.", "7.3", "7.35"
_SUBCLASS_PATTERN = re.compile(r"^(\d+)(?:\.(\d*))?$")


def entry_label(entry):
    """Integer subclass label of an entry, e.g. 'G7'."""
    return "{}{}".format(entry.spectral_class, entry.subclass)


class SpectralTable:
    """
    Immutable, sorted spectral subclass table.

    Entries are namedtuples in descending temperature order. The
    temperatures are also held as a read-only numpy array (negated, so
    it is ascending) for O(log n) lookup with np.searchsorted.

    Parameters
    ----------
    entries : iterable of SpectralSubclassEntry
        Must be strictly descending in high_temp.
    """

    def __init__(self, entries):
        self._entries = tuple(entries)
        temps = np.array([e.high_temp for e in self._entries], dtype=float)
        if len(temps) == 0:
            raise ValueError("Spectral table must not be empty")
        if np.any(np.diff(temps) >= 0):
            raise ValueError("Spectral table temperatures must be strictly descending")
        self._neg_temps = -temps
        self._neg_temps.setflags(write=False)

    @classmethod
    def build(cls):
        """
        Build the table from the reference anchors in astroparams.data.spectral_types.

        Spans are differenced here: span(i) = high(i) - high(i+1); the
        last (coolest) entry takes TERMINAL_SPAN.
        """
        anchors = []
        for spectral_class in SPECTRAL_CLASSES:
            temps = get_class_temps(spectral_class)
            if temps is None or len(temps) != SUBCLASSES_PER_CLASS:
                raise ValueError(
                    "Class {} needs {} subclass temperatures".format(
                        spectral_class, SUBCLASSES_PER_CLASS))
            for subclass, temp in enumerate(temps):
                anchors.append((spectral_class, subclass, float(temp)))

        entries = []
        for i, (spectral_class, subclass, high) in enumerate(anchors):
            if i + 1 < len(anchors):
                span = high - anchors[i + 1][2]
            else:
                span = TERMINAL_SPAN
            entries.append(SpectralSubclassEntry(spectral_class, subclass, high, span))
        return cls(entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, i):
        return self._entries[i]

    def entry(self, spectral_class, subclass):
        """Return the entry for e.g. ('G', 7)."""
        i = SPECTRAL_CLASSES.index(spectral_class) * SUBCLASSES_PER_CLASS + subclass
        return self._entries[i]

    def locate(self, temperature):
        """
        Index of the entry whose band contains ``temperature``.

        Returns the largest i with high_temp(i) >= temperature, or -1
        when the temperature is hotter than the first entry.
        """
        return int(np.searchsorted(self._neg_temps, -temperature, side="right")) - 1

    def rows(self, spectral_class):
        """The ten entries of one class, hottest first."""
        start = SPECTRAL_CLASSES.index(spectral_class) * SUBCLASSES_PER_CLASS
        return self._entries[start:start + SUBCLASSES_PER_CLASS]


# Built once at import; never mutated.
SPECTRAL_TABLE = SpectralTable.build()


def parse_label(label):
    """
    Split a spectral label into (class, base subclass, fraction).

    Parameters
    ----------
    label : str
        e.g. "G7.3", "o4.4", "M9". Surrounding whitespace is ignored.

    Returns
    -------
    tuple
        (class letter, int subclass 0..9, fraction in [0, 1)).

    Raises
    ------
    InvalidClassError
        If the class letter is not one of O, B, A, F, G, K, M.
    InvalidSubclassError
        If the numeric part is missing, malformed or outside [0, 10).
    """
    if not isinstance(label, str):
        raise AstroValidationError(
            "Spectral label must be a string, got {!r}".format(label))
    text = label.strip()
    if not text:
        raise InvalidClassError("Spectral label is empty")

    spectral_class = text[0].upper()
    if spectral_class not in SPECTRAL_CLASSES:
        raise InvalidClassError(
            "Unknown spectral class '{}' in label '{}'".format(text[0], label))

    match = _SUBCLASS_PATTERN.match(text[1:])
    if not match:
        raise InvalidSubclassError(
            "Malformed subclass '{}' in label '{}'".format(text[1:], label))

    subclass = int(match.group(1))
    if subclass >= SUBCLASSES_PER_CLASS:
        raise InvalidSubclassError(
            "Subclass {} out of range [0, 10) in label '{}'".format(
                text[1:], label))
    decimals = match.group(2)
    fraction = float("0." + decimals) if decimals else 0.0
    return spectral_class, subclass, fraction


def temperature_of(label):
    """
    Effective temperature (K) of a spectral subclass label.

    >>> round(temperature_of("G7.3"))
    5529
    """
    spectral_class, subclass, fraction = parse_label(label)
    entry = SPECTRAL_TABLE.entry(spectral_class, subclass)
    return entry.high_temp - fraction * entry.span


def subclass_of(temperature):
    """
    Spectral subclass label, to one decimal, for a temperature (K).

    Out-of-range temperatures are clamped to "O0.0" (too hot) or
    "M9.9" (too cool).
    """
    temperature = require_number(temperature, "temperature")
    i = SPECTRAL_TABLE.locate(temperature)
    if i < 0:
        return "{}.0".format(entry_label(SPECTRAL_TABLE[0]))

    entry = SPECTRAL_TABLE[i]
    fraction = (entry.high_temp - temperature) / entry.span
    fraction = min(max(fraction, 0.0), 1.0)
    tenths = int(round(fraction * 10))
    if tenths >= 10:
        # Rounded onto the next band's top edge
        if i + 1 < len(SPECTRAL_TABLE):
            entry = SPECTRAL_TABLE[i + 1]
            tenths = 0
        else:
            tenths = 9
    return "{}.{}".format(entry_label(entry), tenths)


def display(class_filter=None):
    """
    Tabulate the reference table.

    Parameters
    ----------
    class_filter : str, optional
        One class letter. When given, only that class's ten rows are
        returned.

    Returns
    -------
    OrderedDict or list
        Without a filter: class letter -> list of rows, hottest class
        first. With a filter: the list of that class's rows. Each row is
        {"subclass": "G7", "high_temp": 5550.0, "span": 70.0}.
    """
    def _row(entry):
        return {
            "subclass": entry_label(entry),
            "high_temp": entry.high_temp,
            "span": entry.span,
        }

    if class_filter is not None:
        if not isinstance(class_filter, str) or class_filter.strip().upper() not in SPECTRAL_CLASSES:
            raise InvalidClassError(
                "Unknown spectral class filter {!r}".format(class_filter))
        return [_row(e) for e in SPECTRAL_TABLE.rows(class_filter.strip().upper())]

    grouped = OrderedDict()
    for spectral_class in SPECTRAL_CLASSES:
        grouped[spectral_class] = [_row(e) for e in SPECTRAL_TABLE.rows(spectral_class)]
    return grouped
