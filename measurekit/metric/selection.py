"""Best-fit unit selection heuristics.

Three questions are answered here, each returning a Unit:

    preferred(metric, value, unit)
        Which unit of the metric shows this value at the most human scale?
    localize(metric, value, unit, locale)
        Same, but restricted to the first system of the locale that has any
        candidate (e.g. a GB reader gets Imperial units when they exist).
    change_system(metric, unit, system)
        Which unit of another system is the natural counterpart of this one?

Magnitudes are compared in orders of magnitude (log10 of the size relative to
the base units). Only candidates that resolve to the same base units as the
source unit are considered, and candidates are scored in (name, system) order
so that ties always go to the same unit.

Scoring:
    Human-scale fit (preferred, localize), lowest wins:
        |log10(candidate.factor) - target_oom| - λ * preference
    with target_oom = log10(|value|) + log10(unit.factor).

    System change, highest wins:
        w1 * exp(-k * |log10(candidate.factor) - log10(unit.factor)|) + w2 * preference

    λ, k, w1 and w2 come from SelectionSettings.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from ..config.settings import DEFAULT_SELECTION, SelectionSettings
from ..errors import NoSuitableUnitError
from ..system import Locale, System, resolve_system
from ..unit import Unit
from .metric import Metric

logger = logging.getLogger(__name__)


def order_of_magnitude(value: float, unit: Unit) -> float:
    """log10 of a value's size in base units. A zero value uses the unit's own size."""
    oom = math.log10(float(unit.factor))
    scaled = abs(float(value))
    if scaled == 0 or not math.isfinite(scaled):
        return oom
    return oom + math.log10(scaled)


def _compatible(metric: Metric, unit: Unit) -> list[Unit]:
    return [candidate for candidate in metric.units if unit.shares_base(candidate)]


def _arrays(metric: Metric, pool: Sequence[Unit]) -> tuple[np.ndarray, np.ndarray]:
    ooms = np.log10(np.array([float(u.factor) for u in pool], dtype=float))
    preferences = np.array([metric.preference(u) for u in pool], dtype=float)
    return ooms, preferences


def best_fit(
    metric: Metric,
    value: float,
    unit: Unit,
    pool: Sequence[Unit],
    settings: SelectionSettings = DEFAULT_SELECTION,
) -> Unit | None:
    """Candidate of pool closest to the value's order of magnitude.

    Returns:
        The selected unit, or None when pool is empty.
    """
    if not pool:
        return None
    ranked = sorted(pool, key=lambda u: u.sort_key)
    ooms, preferences = _arrays(metric, ranked)
    target = order_of_magnitude(value, unit)
    scores = np.abs(ooms - target) - settings.localize_preference_weight * preferences
    return ranked[int(np.argmin(scores))]


def preferred(
    metric: Metric,
    value: float,
    unit: Unit,
    settings: SelectionSettings = DEFAULT_SELECTION,
) -> Unit:
    """Most human-scale unit for a value among all of the metric's units.

    Falls back to unit itself when the metric has no compatible unit.
    """
    choice = best_fit(metric, value, unit, _compatible(metric, unit), settings) or unit
    logger.debug("Preferred unit for %s %r in %s: %r", value, unit, metric, choice)
    return choice


def localize(
    metric: Metric,
    value: float,
    unit: Unit,
    locale: Locale,
    fallback: bool = False,
    settings: SelectionSettings = DEFAULT_SELECTION,
) -> Unit:
    """Most human-scale unit for a value within the locale's first usable system.

    Args:
        metric: Metric providing candidate units and preferences.
        value: Value expressed in unit.
        unit: Unit the value is currently expressed in.
        locale: Locale whose systems are tried in order.
        fallback: Consider every compatible unit when no locale system has one.
        settings: Selection constants.

    Raises:
        NoSuitableUnitError: If no locale system offers a compatible unit and
            fallback is disabled (or there are no compatible units at all).
    """
    pool = _compatible(metric, unit)
    for system in locale.systems:
        in_system = [u for u in pool if u.system == system]
        if in_system:
            choice = best_fit(metric, value, unit, in_system, settings)
            logger.debug("Localized %s %r to %r for %s", value, unit, choice, locale)
            return choice
    if fallback and pool:
        return best_fit(metric, value, unit, pool, settings)
    msg = f"No unit for {unit!r} in any system of locale {locale}"
    raise NoSuitableUnitError(msg)


def change_system(
    metric: Metric,
    unit: Unit,
    system: System | str,
    fallback: bool = False,
    settings: SelectionSettings = DEFAULT_SELECTION,
) -> Unit:
    """Counterpart of unit in another system, by magnitude fit and preference.

    Args:
        metric: Metric providing candidate units and preferences.
        unit: Unit to find a counterpart for.
        system: Target system (instance or registered key).
        fallback: Score every compatible unit when the system has none.
        settings: Selection constants.

    Raises:
        NoSuitableUnitError: If the target system has no compatible unit and
            fallback is disabled (or there are no compatible units at all).
    """
    system = resolve_system(system)
    pool = _compatible(metric, unit)
    in_system = [u for u in pool if u.system == system]
    if not in_system:
        if not (fallback and pool):
            msg = f"No unit for {unit!r} in system {system}"
            raise NoSuitableUnitError(msg)
        in_system = pool
    ranked = sorted(in_system, key=lambda u: u.sort_key)
    ooms, preferences = _arrays(metric, ranked)
    delta = np.abs(ooms - math.log10(float(unit.factor)))
    scores = settings.fit_weight * np.exp(-settings.oom_decay * delta) + settings.preference_weight * preferences
    choice = ranked[int(np.argmax(scores))]
    logger.debug("Changed system of %r to %r (%s)", unit, choice, system)
    return choice
