"""Dimensional analysis and unit conversion for human-readable quantities.

measurekit models physical dimensions, groups units into systems, converts
exactly between commensurable units and parses or formats quantity strings
such as ``15'11"``, ``1.85 miles`` or ``430hp``.

Framework Components:
    Dimensions (measurekit.dimension):
        • Dimension: fundamental (M, L, T...) or composite ({L: 1, T: -1})
        • Value equality for composites, so Torque and Energy compare equal

    Systems and Locales (measurekit.system):
        • System: identity of a family of units (SI, US, Imp...)
        • Locale: ordered systems used to bias parsing and unit selection

    Units (measurekit.unit):
        • Unit: base or composite unit with an exact, memoized factor
        • UNITS: store scoping names and abbreviations by (dimension, system)

    Metrics (measurekit.metric):
        • Metric: preference-ranked units for an application quantity
        • preferred / localize / change_system: best-fit unit selection

    Measures (measurekit.measure):
        • Measure: float subclass tagged with a unit and a metric
        • parse: quantity strings to measures; render: %U-aware templates

    Configuration (measurekit.config):
        • SelectionSettings: constants of the selection heuristics
        • Configurator: context-carrying builder for unit catalogs
        • load_standard_catalog: SI, US, Imperial, Admiralty and universal units

Usage Example:
    >>> import measurekit
    >>> measurekit.load_standard_catalog()
    >>> hp = measurekit.parse("430hp", "mechanical power")
    >>> print(hp.localize("FI").render("%.0f %U"))
    321 kW
    >>> length = measurekit.parse("15ft11in", "length", locale="US")
    >>> length.render("%4.2f (%U)")
    '15.92 (ft)'

Every store is process-wide; measurekit.reset() clears them all.
"""

import logging

from .config import DEFAULT_SELECTION, SelectionSettings
from .config.builder import BuilderContext, Configurator
from .config.catalog import load_standard_catalog
from .dimension import DIMENSIONS, Dimension
from .errors import (
    CollisionError,
    CyclicReferenceError,
    IncommensurableError,
    InconsistentUnitsError,
    InvalidConfigurationError,
    MeasureError,
    NoSuitableUnitError,
    UnknownEntryError,
    UnresolvedUnitError,
)
from .measure import Measure, parse, render
from .metric import METRICS, Metric
from .system import LOCALES, SYSTEMS, Locale, System
from .unit import UNITS, Unit

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def reset() -> None:
    """Clear every process-wide store (metrics and units first)."""
    for store in (METRICS, UNITS, LOCALES, SYSTEMS, DIMENSIONS):
        store.reset()


__all__ = [
    "Dimension",
    "DIMENSIONS",
    "System",
    "SYSTEMS",
    "Locale",
    "LOCALES",
    "Unit",
    "UNITS",
    "Metric",
    "METRICS",
    "Measure",
    "parse",
    "render",
    "SelectionSettings",
    "DEFAULT_SELECTION",
    "BuilderContext",
    "Configurator",
    "load_standard_catalog",
    "reset",
    "MeasureError",
    "CollisionError",
    "CyclicReferenceError",
    "IncommensurableError",
    "InconsistentUnitsError",
    "InvalidConfigurationError",
    "NoSuitableUnitError",
    "UnknownEntryError",
    "UnresolvedUnitError",
]
