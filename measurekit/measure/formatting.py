"""Template rendering for measures.

Templates use printf-style specifiers (Python's ``%`` operator) with one
addition, the unit specifier:

    %U      replaced with the unit's abbreviation (its name if it has none)
    %#U     replaced with the unit's full name

The unit specifier takes the same width and precision modifiers as ``%s``,
e.g. ``%-8U`` or ``%#10.10U``. ``%%`` is a literal percent sign. Every other
specifier receives the measure's value, so a template may show the value more
than once: ``"%4.2f (%U)\\t%%\\t<%10.7f%U>"`` renders 15 ft 4 in as
``"15.33 (ft)\\t%\\t<15.3333333ft>"``.

Before substitution the value is rounded to the metric's configured
``precision`` (decimal places) for the unit, when there is one.

Functions:
    render: Format a measure with a template.
    substitute_unit: Replace unit specifiers in a template.
    count_specifiers: Number of value specifiers in a template.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..unit import Unit
    from .measure import Measure

UNIT_SPECIFIER = re.compile(r"%%|%(#)?([-\d.]*)U")
VALUE_SPECIFIER = re.compile(r"%(?:%|[#0\- +]*\d*(?:\.\d*)?[diouxXeEfFgGcrsa])")


def substitute_unit(template: str, unit: Unit) -> str:
    """Replace every %U specifier with the unit's abbreviation or name."""

    def replace(match: re.Match) -> str:
        if match.group(0) == "%%":
            return "%%"
        text = unit.name if match.group(1) else unit.label
        # Escape so a '%' inside a unit label survives the value pass.
        return (f"%{match.group(2)}s" % text).replace("%", "%%")

    return UNIT_SPECIFIER.sub(replace, template)


def count_specifiers(template: str) -> int:
    """Number of value specifiers in template, not counting %%."""
    return sum(1 for match in VALUE_SPECIFIER.finditer(template) if match.group(0) != "%%")


def render(measure: Measure, template: str | None = None) -> str:
    """Format a measure.

    Args:
        measure: Measure to format.
        template: Format template. Defaults to the metric's ``format``
            preference for the unit, then the unit's own format.

    Returns:
        The rendered string.
    """
    options = measure.metric.preferences(measure.unit) if measure.metric is not None else {}
    template = template or options.get("format") or measure.unit.format
    precision = options.get("precision")
    value = measure.native if precision is None else round(float(measure), precision)
    template = substitute_unit(template, measure.unit)
    return template % ((value,) * count_specifiers(template))
