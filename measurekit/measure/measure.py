"""Measures: numeric values tagged with a unit and a metric.

A Measure is a float that knows what it measures. It behaves like its numeric
value in arithmetic and formatting, while arithmetic and comparisons with other
measures convert through the unit algebra first.

Classes:
    Measure: Immutable float subclass carrying a Unit and a Metric.

Example:
    >>> depth = Measure(15.25, foot)
    >>> depth.convert(inch)
    <Measure 183 in (<Unit L:US:inch>)>
    >>> depth + Measure(9, inch)
    <Measure 16 ft (<Unit L:US:foot>)>
    >>> str(Measure(1.85, nautical_mile))
    '1.85nm'
"""

from __future__ import annotations

import numbers

from ..config.settings import DEFAULT_SELECTION, SelectionSettings
from ..errors import IncommensurableError
from ..metric import METRICS, Metric, change_system, localize, preferred, resolve_metric
from ..system import LOCALES, Locale, System
from ..unit import Unit
from .formatting import render


def metric_for(unit: Unit, metric: Metric | str | None = None) -> Metric:
    """The given metric, else the registered metric of the unit's dimension.

    When nothing is registered for the dimension, an unregistered metric
    exposing every unit of the dimension is returned.
    """
    if metric is not None:
        return resolve_metric(metric)
    return METRICS.for_dimension(unit.dimension) or Metric(None, unit.dimension)


class Measure(float):
    """A numeric value expressed in a unit.

    Attributes:
        unit (Unit): Unit the value is expressed in.
        metric (Metric): Metric used for display options and unit selection.
    """

    __slots__ = ("unit", "metric")

    def __new__(cls, value: numbers.Real, unit: Unit, metric: Metric | str | None = None):
        """Create a measure of value in unit.

        Args:
            value: Numeric value in unit's scale.
            unit: Unit of the value.
            metric: Metric (or registered metric name); defaults to the metric
                registered for the unit's dimension.
        """
        measure = float.__new__(cls, value)
        object.__setattr__(measure, "unit", unit)
        object.__setattr__(measure, "metric", metric_for(unit, metric))
        return measure

    def __setattr__(self, name, value):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self):
        return (type(self), (float(self), self.unit, self.metric))

    @classmethod
    def parse(cls, text: str, metric: Metric | str | None, system=None, locale=None) -> Measure | None:
        """Parse a quantity string; see measurekit.measure.parser.parse."""
        from .parser import parse

        return parse(text, metric, system, locale)

    @property
    def native(self) -> int | float:
        """The value as an int for whole counts (dimensionless units), else a float."""
        value = float(self)
        if self.unit.dimension is None and value.is_integer():
            return int(value)
        return value

    # -------------------------------- Conversion --------------------------------
    def convert(self, unit: Unit) -> Measure:
        """Express this measure in another unit.

        Raises:
            IncommensurableError: If the units cannot be converted.
        """
        return Measure(float(self) * self.unit.convert(unit), unit, self.metric)

    def base(self) -> Measure:
        """Express this measure in its base unit.

        Raises:
            IncommensurableError: If the unit resolves to a product of base
                units, for which no single base unit exists.
        """
        signature = dict(self.unit.base_signature)
        if len(signature) != 1 or next(iter(signature.values())) != 1:
            msg = f"Composed unit {self.unit!r} cannot be converted to a base unit"
            raise IncommensurableError(msg)
        return self.convert(next(iter(signature)))

    def preferred(self, settings: SelectionSettings = DEFAULT_SELECTION) -> Measure:
        """Convert to the metric's most human-scale unit for this value."""
        return self.convert(preferred(self.metric, self, self.unit, settings))

    def localize(
        self,
        locale: Locale | str,
        fallback: bool = False,
        settings: SelectionSettings = DEFAULT_SELECTION,
    ) -> Measure:
        """Convert to the most human-scale unit of the locale's first usable system.

        Raises:
            NoSuitableUnitError: If no locale system has a compatible unit and
                fallback is disabled.
        """
        locale = LOCALES.lookup(locale)
        return self.convert(localize(self.metric, self, self.unit, locale, fallback, settings))

    def change_system(
        self,
        system: System | str,
        fallback: bool = False,
        settings: SelectionSettings = DEFAULT_SELECTION,
    ) -> Measure:
        """Convert to the natural counterpart unit in another system.

        Raises:
            NoSuitableUnitError: If the system has no compatible unit and
                fallback is disabled.
        """
        return self.convert(change_system(self.metric, self.unit, system, fallback, settings))

    def _coerce(self, other) -> float | None:
        """Value of other in this measure's unit, or None if not a number."""
        if isinstance(other, Measure):
            return float(other) * other.unit.convert(self.unit)
        if isinstance(other, numbers.Real):
            return float(other)
        return None

    def _rebuild(self, value: float) -> Measure:
        return Measure(value, self.unit, self.metric)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other) -> Measure:
        """Add a measure (converted into this unit) or a plain number."""
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._rebuild(float(self) + value)

    def __radd__(self, other) -> Measure:
        return self.__add__(other)

    def __sub__(self, other) -> Measure:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._rebuild(float(self) - value)

    def __rsub__(self, other) -> Measure:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._rebuild(value - float(self))

    def __mul__(self, k) -> Measure:
        """Scale by a plain number. Products of measures are not supported."""
        if isinstance(k, Measure) or not isinstance(k, numbers.Real):
            return NotImplemented
        return self._rebuild(float(self) * float(k))

    def __rmul__(self, k) -> Measure:
        return self.__mul__(k)

    def __truediv__(self, k) -> Measure:
        if isinstance(k, Measure) or not isinstance(k, numbers.Real):
            return NotImplemented
        return self._rebuild(float(self) / float(k))

    def __neg__(self) -> Measure:
        return self._rebuild(-float(self))

    def __pos__(self) -> Measure:
        return self

    def __abs__(self) -> Measure:
        return self._rebuild(abs(float(self)))

    # -------------------------------- Comparisons --------------------------------
    def __eq__(self, other) -> bool:
        """Equal to a measure of the same base units and value; never to a plain number."""
        if not isinstance(other, Measure):
            return False if isinstance(other, numbers.Real) else NotImplemented
        if not self.unit.shares_base(other.unit):
            return False
        return float(self) == self._coerce(other)

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other) -> bool:
        value = self._coerce(other)
        return NotImplemented if value is None else float(self) < value

    def __le__(self, other) -> bool:
        value = self._coerce(other)
        return NotImplemented if value is None else float(self) <= value

    def __gt__(self, other) -> bool:
        value = self._coerce(other)
        return NotImplemented if value is None else float(self) > value

    def __ge__(self, other) -> bool:
        value = self._coerce(other)
        return NotImplemented if value is None else float(self) >= value

    def __hash__(self) -> int:
        # Equal measures may differ in value and unit, but never in base units.
        return hash(frozenset(self.unit.base_signature.items()))

    # -------------------------------- Display --------------------------------
    def render(self, template: str | None = None) -> str:
        """Format with a template; see measurekit.measure.formatting.render."""
        return render(self, template)

    def __str__(self) -> str:
        return self.render()

    def __format__(self, spec: str) -> str:
        return format(self.native, spec) if spec else str(self)

    def __repr__(self) -> str:
        return f"<Measure {self.native:g} {self.unit.label} ({self.unit!r})>"
