"""Process-wide store of registered units.

Units are scoped by (dimension, system): within one scope, names and
abbreviations share a single namespace, so "ft" cannot be both the US foot's
abbreviation and the name of another US length unit, while the US foot and
the Imperial foot coexist.

Classes:
    UnitStore: Registry with scoped lookup.

Module Attributes:
    UNITS: The process-wide unit store.

Example:
    >>> meter = Unit.register("meter", "SI", "L", abbreviation="m")
    >>> UNITS["L", "SI", "m"] is meter
    True
"""

from __future__ import annotations

from collections.abc import Iterator

from ..dimension import Dimension, resolve_dimension
from ..errors import CollisionError, UnknownEntryError
from ..registry import Registry
from ..system import resolve_system
from .unit_base import Unit


class UnitStore(Registry[Unit]):
    """Registry of units keyed by (dimension, system, name or abbreviation)."""

    def __init__(self):
        super().__init__("unit")

    def register(self, unit: Unit) -> Unit:  # type: ignore[override]
        """Store a unit under its name and abbreviation within its scope.

        Raises:
            CollisionError: If the name or abbreviation is taken in the scope.
        """
        keys = [(unit.dimension, unit.system, unit.name)]
        if unit.abbreviation is not None:
            keys.append((unit.dimension, unit.system, unit.abbreviation))
        try:
            return super().register(unit, *keys)
        except CollisionError as exc:
            msg = f"Namespace collision: {exc}"
            raise CollisionError(msg) from None

    def find(self, dimension, system, token: str) -> Unit | None:
        """Return the unit named or abbreviated token in a scope, or None."""
        try:
            return self.lookup(dimension, system, token)
        except UnknownEntryError:
            return None

    def lookup(self, dimension, system, token: str) -> Unit:
        """Return the unit named or abbreviated token in a scope.

        Args:
            dimension: Dimension instance, registered name/symbol, or None.
            system: System instance, registered name/abbreviation, or None.
            token: Unit name or abbreviation.

        Raises:
            UnknownEntryError: If the dimension, system or unit is unknown.
        """
        return self[resolve_dimension(dimension), resolve_system(system), str(token)]

    def __getitem__(self, key) -> Unit:
        if isinstance(key, tuple) and len(key) == 3:
            dimension, system, token = key
            key = (resolve_dimension(dimension), resolve_system(system), str(token))
        return super().__getitem__(key)

    def for_dimension(self, dimension: Dimension | str | None) -> list[Unit]:
        """All registered units of a dimension, in registration order."""
        dimension = resolve_dimension(dimension)
        return [unit for unit in self if unit.dimension == dimension]

    def iter_system(self, system) -> Iterator[Unit]:
        """Registered units belonging to a system."""
        system = resolve_system(system)
        return (unit for unit in self if unit.system == system)


UNITS = UnitStore()
