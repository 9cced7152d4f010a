"""Metrics: dimension-scoped unit collections with preferences.

A Metric names a measurable thing in an application domain ("length over all",
"engine displacement", "draft") and records which units are preferred for it,
with what weight, display format and precision. Metrics may inherit from a
parent metric; a child sees its parent's units and may override their options.

Classes:
    Metric: Preference-ranked collection of units sharing a dimension.
    MetricRegistry: Store of metrics by name; the unnamed metric is the default.

Module Attributes:
    METRICS: Process-wide metric registry.
    PREFERENCE_OPTIONS: Option names accepted by Metric.prefer.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterator

from ..dimension import Dimension, resolve_dimension
from ..errors import IncommensurableError, InvalidConfigurationError
from ..registry import Registry
from ..system import Locale, System, resolve_system
from ..unit import UNITS, Unit

logger = logging.getLogger(__name__)

PREFERENCE_OPTIONS = frozenset({"preference", "precision", "format"})


class Metric:
    """A named, dimension-scoped collection of units with a preference ranking.

    Attributes:
        name (str | None): Metric name; None for the registry default.
        dimension (Dimension | None): Dimension shared by every unit.
        parent (Metric | None): Metric whose units and options are inherited.
    """

    def __init__(self, name: str | None = None, dimension: Dimension | str | None = None, parent: Metric | None = None):
        self.name = None if name is None else str(name)
        self.dimension = resolve_dimension(dimension)
        self.parent = parent
        if parent is not None and parent.dimension != self.dimension:
            msg = f"Metric {self} cannot inherit from {parent} of dimension {parent.dimension}"
            raise InvalidConfigurationError(msg)
        self._preferences: dict[Unit, dict] = {}

    @classmethod
    def register(cls, name: str | None, dimension: Dimension | str | None = None, parent: Metric | None = None) -> Metric:
        """Create a metric and store it by name.

        Raises:
            CollisionError: If a metric with this name is already registered.
        """
        return METRICS.register(cls(name, dimension, parent))

    def prefer(self, unit: Unit, **options) -> dict:
        """Add a unit to this metric, with optional display and ranking options.

        Args:
            unit: Unit of this metric's dimension.
            **options: Any of ``preference`` (number, higher ranks first),
                ``precision`` (decimal places for display) and ``format``
                (display template).

        Returns:
            The options now stored for the unit.

        Raises:
            IncommensurableError: If the unit has a different dimension.
            InvalidConfigurationError: If an option is unknown or malformed.
        """
        if unit.dimension != self.dimension:
            msg = f"Unit {unit} is not compatible with dimension {self.dimension or '<nil>'}"
            raise IncommensurableError(msg)
        unknown = set(options) - PREFERENCE_OPTIONS
        if unknown:
            msg = f"Unknown preference options: {', '.join(sorted(unknown))}"
            raise InvalidConfigurationError(msg)
        preference = options.get("preference", 0)
        if isinstance(preference, bool) or not isinstance(preference, numbers.Real):
            msg = f"Invalid preference {preference!r} for {unit}"
            raise InvalidConfigurationError(msg)
        precision = options.get("precision", 0)
        if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
            msg = f"Invalid precision {precision!r} for {unit}"
            raise InvalidConfigurationError(msg)
        if not isinstance(options.get("format", ""), str):
            msg = f"Invalid format {options['format']!r} for {unit}"
            raise InvalidConfigurationError(msg)

        stored = self._preferences.setdefault(unit, {})
        stored.update(options)
        logger.debug("Metric %s prefers %r with %s", self, unit, stored)
        return dict(stored)

    def preferences(self, unit: Unit) -> dict:
        """Options for a unit, own options overriding the parent's."""
        baseline = self.parent.preferences(unit) if self.parent is not None else {}
        return {**baseline, **self._preferences.get(unit, {})}

    def preference(self, unit: Unit) -> float:
        """Ranking weight of a unit: the configured preference or the unit's own."""
        return self.preferences(unit).get("preference", unit.preference)

    def _preferred_units(self) -> list[Unit]:
        inherited = self.parent._preferred_units() if self.parent is not None else []
        return list(dict.fromkeys([*self._preferences, *inherited]))

    @property
    def units(self) -> list[Unit]:
        """Visible units, most preferred first, then by name and system.

        When neither this metric nor an ancestor prefers any unit, every
        registered unit of the dimension is visible.
        """
        units = self._preferred_units() or UNITS.for_dimension(self.dimension)
        return sorted(units, key=lambda u: (-self.preference(u), *u.sort_key))

    @property
    def default_unit(self) -> Unit | None:
        """The most preferred visible unit, if any."""
        units = self.units
        return units[0] if units else None

    def candidates(self, system: System | str | None = None, locale: Locale | None = None) -> list[Unit]:
        """Visible units, optionally restricted to a system and ordered by a locale.

        Args:
            system: Keep only units of this system.
            locale: Stably reorder units by the locale's system priority.
        """
        units = self.units
        system = resolve_system(system)
        if system is not None:
            units = [u for u in units if u.system == system]
        if locale is not None:
            units = sorted(units, key=lambda u: locale.rank(u.system))
        return units

    def find_unit(self, token: str, system: System | str | None = None, locale: Locale | None = None) -> Unit | None:
        """First candidate unit whose detector matches token."""
        for unit in self.candidates(system, locale):
            if unit.match(token):
                return unit
        return None

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def __contains__(self, unit: object) -> bool:
        return unit in self.units

    def __len__(self) -> int:
        return len(self.units)

    def __str__(self) -> str:
        return self.name if self.name is not None else f"<default {self.dimension or 'dimensionless'}>"

    def __repr__(self) -> str:
        dimension = "<nil>" if self.dimension is None else self.dimension.symbol
        return f"<Metric {self.name or '<nil>'}: {dimension}>"


class MetricRegistry(Registry[Metric]):
    """Registry of metrics keyed by name; the name None is the default metric."""

    def __init__(self):
        super().__init__("metric")

    def register(self, metric: Metric) -> Metric:  # type: ignore[override]
        return super().register(metric, metric.name)

    @property
    def default(self) -> Metric | None:
        """The metric registered without a name, if any."""
        return self.get(None)

    def for_dimension(self, dimension: Dimension | str | None) -> Metric | None:
        """Metric named by the dimension's symbol, else the first of that dimension."""
        dimension = resolve_dimension(dimension)
        if dimension is not None:
            named = self.get(dimension.symbol)
            if named is not None and named.dimension == dimension:
                return named
        for metric in self:
            if metric.dimension == dimension:
                return metric
        return None


METRICS = MetricRegistry()


def resolve_metric(value: Metric | str | None) -> Metric:
    """Return a Metric for an instance or a registered name (None is the default).

    Raises:
        UnknownEntryError: If no metric is registered under that name.
    """
    if isinstance(value, Metric):
        return value
    return METRICS[value]
