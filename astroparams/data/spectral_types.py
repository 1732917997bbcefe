"""
Main-sequence spectral subclass temperature anchors.

Each class (O, B, A, F, G, K, M) has ten subclasses 0..9. The value
listed for a subclass is the HIGH edge of its temperature band in
kelvin; the band extends down to the high edge of the next-cooler
subclass. Fractional subclasses (e.g. G7.3) are interpolated linearly
inside the band.

The sequence is strictly descending from O0 to M9. Spans are not
stored here: they are differenced once when the table is built
(astroparams.spectral.SpectralTable), so there is a single source of
truth for the band widths.

Reference checks:
  G2 = 5770 K (the Sun, T_SUN)
  G7.3 = 5550 - 0.3 * (5550 - 5480) = 5529 K
  O4.4 = 43000 - 0.4 * (43000 - 41250) = 42300 K

IMPORTANT: No unicode characters (Windows charmap constraint).
"""

# High-edge temperatures (K) for subclasses 0..9 of each class
SUBCLASS_HIGH_TEMPS = {
    "O": (54000, 51000, 48500, 45500, 43000, 41250, 39000, 37000, 35500, 33000),
    "B": (31400, 26000, 20600, 17000, 16400, 15700, 14500, 14000, 12300, 10700),
    "A": (9700, 9300, 8800, 8600, 8250, 8100, 7910, 7760, 7590, 7400),
    "F": (7220, 7020, 6820, 6750, 6670, 6550, 6350, 6280, 6180, 6050),
    "G": (5930, 5860, 5770, 5720, 5680, 5660, 5600, 5550, 5480, 5380),
    "K": (5270, 5170, 5100, 4830, 4600, 4440, 4300, 4100, 3990, 3930),
    "M": (3850, 3660, 3560, 3430, 3210, 3060, 2810, 2680, 2570, 2380),
}


def get_class_temps(spectral_class):
    """Return the ten high-edge temperatures of a class, or None."""
    return SUBCLASS_HIGH_TEMPS.get(spectral_class)
