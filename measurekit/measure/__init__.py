"""Measures: parsing, conversion and display of quantities.

Exports:
    Measure: Float tagged with a unit and a metric
    parse: Parse a quantity string such as "15ft11in" into a Measure
    tokenize: Split a quantity string into (number, unit text) pairs
    render: Format a measure with a %U-aware template
"""

from .formatting import count_specifiers, render, substitute_unit
from .measure import Measure, metric_for
from .parser import NUMERIC_PATTERN, parse, tokenize

__all__ = [
    "Measure",
    "metric_for",
    "parse",
    "tokenize",
    "NUMERIC_PATTERN",
    "render",
    "substitute_unit",
    "count_specifiers",
]
