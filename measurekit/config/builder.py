"""Builder for declaring units within a dimension/system/unit context.

Declaring a catalog of units means repeating the same dimension and system for
dozens of units, and defining most units relative to the previous one. The
Configurator carries that context explicitly: each scoping call returns a new
configurator whose BuilderContext is a copy of the current one with one field
overridden, so sibling declarations never leak context into each other.

Classes:
    BuilderContext: Immutable (dimension, system, unit) triple.
    Configurator: Registration helpers bound to a BuilderContext.

Example:
    >>> length = Configurator().dimension("L")
    >>> us = length.system("US")
    >>> yard = us.reference("yard", "yd", UNITS["L", "SI", "m"], 0.9144)
    >>> foot = yard.derive("foot", "ft", Fraction(1, 3))
    >>> foot.derive("inch", "in", Fraction(1, 12))
    >>> yard.derive("furlong", None, 220).derive("mile", "mi", 8)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from ..dimension import Dimension, resolve_dimension
from ..errors import InvalidConfigurationError
from ..metric import Metric, resolve_metric
from ..system import System, resolve_system
from ..unit import Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuilderContext:
    """The dimension, system and unit new declarations apply to.

    Attributes:
        dimension: Dimension of new units (None for counts).
        system: System of new units.
        unit: Unit that derive() and alias() are relative to.
    """

    dimension: Dimension | None = None
    system: System | None = None
    unit: Unit | None = None


class Configurator:
    """Registers units, scoped by an explicit BuilderContext.

    Every method that changes the scope or registers a unit returns a new
    Configurator; the receiver is never modified.
    """

    def __init__(self, context: BuilderContext | None = None):
        self.context = context or BuilderContext()

    def _with(self, **changes: Any) -> Configurator:
        return type(self)(replace(self.context, **changes))

    def dimension(self, dimension: Dimension | str | None) -> Configurator:
        """Scope new units to a dimension (instance, name or symbol)."""
        return self._with(dimension=resolve_dimension(dimension))

    def system(self, system: System | str) -> Configurator:
        """Scope new units to a system (instance, name or abbreviation)."""
        return self._with(system=resolve_system(system))

    def _register(self, name: str, **options: Any) -> Configurator:
        unit = Unit.register(name, self.context.system, self.context.dimension, **options)
        return self._with(unit=unit)

    def base(self, name: str, abbreviation: str | None = None, **options: Any) -> Configurator:
        """Register a base unit in the current context."""
        return self._register(name, abbreviation=abbreviation, **options)

    def derive(self, name: str, abbreviation: str | None, factor, **options: Any) -> Configurator:
        """Register a unit worth factor times the context unit."""
        if self.context.unit is None:
            msg = f"Cannot derive {name}: no unit in context"
            raise InvalidConfigurationError(msg)
        return self._register(
            name,
            abbreviation=abbreviation,
            reference_units={self.context.unit: 1},
            reference_factor=factor,
            **options,
        )

    def alias(self, name: str, abbreviation: str | None = None, **options: Any) -> Configurator:
        """Register another name for the context unit."""
        return self.derive(name, abbreviation, 1, **options)

    def reference(self, name: str, abbreviation: str | None, unit: Unit, factor, **options: Any) -> Configurator:
        """Register a unit worth factor times an arbitrary unit."""
        return self._register(
            name,
            abbreviation=abbreviation,
            reference_units={unit: 1},
            reference_factor=factor,
            **options,
        )

    def combine(self, name: str, abbreviation: str | None, components: dict, **options: Any) -> Configurator:
        """Register a unit composed of several units with exponents.

        A ``reference_factor`` option scales the product, e.g. the pound-force
        is 32.17405 lb ft s^-2.
        """
        options.setdefault("reference_factor", 1)
        return self._register(name, abbreviation=abbreviation, reference_units=components, **options)

    def prefer(self, metric: Metric | str | None, **options: Any) -> Configurator:
        """Prefer the context unit in a metric (instance or registered name)."""
        if self.context.unit is None:
            msg = "Cannot prefer: no unit in context"
            raise InvalidConfigurationError(msg)
        resolve_metric(metric).prefer(self.context.unit, **options)
        return self

    @property
    def unit(self) -> Unit | None:
        """The unit in context, if any."""
        return self.context.unit

    def __repr__(self) -> str:
        c = self.context
        return f"<Configurator {c.dimension or '<nil>'}:{c.system or '<nil>'}:{c.unit or '<nil>'}>"
