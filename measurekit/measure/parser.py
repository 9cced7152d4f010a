"""Parsing of human-readable quantity strings.

A quantity string is one or more tokens, each a number optionally followed by
unit text: ``"15ft11in"``, ``"1 foot 11 inches"``, ``"6'4\\""``, ``"430hp"``.
Scientific notation is not supported.

Resolution rules:
    - A token without unit text takes the first candidate unit.
    - Unit text is matched against the detectors of the metric's units, in
      preference order, optionally restricted to a system and reordered by a
      locale's system priority (the default locale when none is given).
    - Once a token resolves, later tokens are restricted to the same system,
      so ``6'4"`` reads as US feet and US inches, never US feet and Imperial
      inches.
    - Tokens are summed left to right in the unit of the first token.

A string without any token yields None, not zero.

Functions:
    parse: Parse a string into a single Measure.
    tokenize: Split a string into (number, unit text) pairs.
"""

from __future__ import annotations

import logging
import re

from ..errors import InconsistentUnitsError, UnresolvedUnitError
from ..metric import Metric, resolve_metric
from ..system import LOCALES, Locale, System, resolve_system
from ..unit import Unit
from .measure import Measure

logger = logging.getLogger(__name__)

# A number (leading digit or leading decimal point) followed by optional
# whitespace and unit text that starts with a non-digit.
NUMERIC_PATTERN = re.compile(r"((?=\d|\.\d)\d*(?:\.\d*)?)\s*(\D\w*?)?(?=\b|\d|\W|$)")


def tokenize(text: str) -> list[tuple[str, str]]:
    """Split text into (number, unit text) pairs; unit text may be empty."""
    return NUMERIC_PATTERN.findall(str(text))


def _resolve_unit(metric: Metric, token: str, system: System | None, locale: Locale | None) -> Unit:
    candidates = metric.candidates(system, locale)
    if not token:
        unit = candidates[0] if candidates else metric.default_unit
        if unit is None:
            msg = f"Metric {metric} has no unit to apply to a bare number"
            raise UnresolvedUnitError(msg)
        return unit
    for unit in candidates:
        if unit.match(token):
            return unit
    if system is not None and metric.find_unit(token, None, locale) is not None:
        msg = f"Unit {token!r} is not part of system {system}"
        raise InconsistentUnitsError(msg)
    msg = f"Unit cannot be determined ({token})"
    raise UnresolvedUnitError(msg)


def parse(
    text: str,
    metric: Metric | str | None,
    system: System | str | None = None,
    locale: Locale | str | None = None,
) -> Measure | None:
    """Parse a quantity string into a Measure.

    Args:
        text: String such as "15ft11in" or "1.85 miles".
        metric: Metric (or registered metric name, None for the default
            metric) supplying the candidate units.
        system: Restrict unit resolution to this system.
        locale: Prefer units of the locale's systems, in order; defaults to
            the default locale.

    Returns:
        A Measure in the unit of the first token, or None if text contains no
        number at all.

    Raises:
        UnknownEntryError: If the metric or system is not registered.
        UnresolvedUnitError: If unit text matches no candidate unit.
        InconsistentUnitsError: If unit text only matches units of another
            system than the one already in use.
    """
    metric = resolve_metric(metric)
    system = resolve_system(system)
    locale = LOCALES.default if locale is None else LOCALES.lookup(locale)

    elements: list[Measure] = []
    for number, token in tokenize(text):
        unit = _resolve_unit(metric, token.strip(), system, locale)
        system = unit.system
        elements.append(Measure(float(number), unit, metric))

    if not elements:
        logger.debug("No quantity found in %r", text)
        return None

    total = elements[0]
    for element in elements[1:]:
        total = Measure(float(total) + float(element.convert(total.unit)), total.unit, metric)
    return total
