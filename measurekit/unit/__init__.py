"""Unit resolution engine.

This package holds the Unit class, which resolves any unit (base or composite)
to its base units and an exact conversion factor, and the process-wide store
that scopes unit names by dimension and system.

Architecture:
    - unit_base: Unit with base-signature and factor algebra
    - unit_store: UnitStore registry with (dimension, system, token) lookup

Example:
    >>> from fractions import Fraction
    >>> from measurekit.unit import Unit, UNITS
    >>>
    >>> meter = Unit.register("meter", "SI", "L", abbreviation="m")
    >>> km = Unit.register("kilometer", "SI", "L", abbreviation="km",
    ...                    reference_units={meter: 1}, reference_factor=1000)
    >>> sq_m = Unit.register("square meter", "SI", "A", abbreviation="m2",
    ...                      reference_units={meter: 2})
    >>> km.convert(meter)
    Fraction(1000, 1)
    >>> dict(sq_m.base_signature)
    {<Unit L:SI:meter>: 2}
"""

from .unit_base import Exponent, Factor, Unit, as_exponent, as_factor
from .unit_store import UNITS, UnitStore

__all__ = [
    "Unit",
    "UnitStore",
    "UNITS",
    "Exponent",
    "Factor",
    "as_exponent",
    "as_factor",
]
