"""Systems of measurement.

A System is a pure identity marker ("SI", "US", "Imp") used to scope unit names,
so that the US yard and the Imperial yard can coexist. It carries no
computation.

Classes:
    System: Immutable system label.

Module Attributes:
    SYSTEMS: Process-wide registry keyed by name and abbreviation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..registry import Registry


@dataclass(frozen=True)
class System:
    """A named system of units.

    Two systems are equal when their names are equal; the abbreviation is
    display metadata only.

    Attributes:
        name: Full name, e.g. "International System of Units".
        abbreviation: Optional short form, e.g. "SI".
    """

    name: str
    abbreviation: str | None = field(default=None, compare=False)

    @classmethod
    def register(cls, name: str, abbreviation: str | None = None) -> System:
        """Create a system and store it under its name and abbreviation.

        Raises:
            CollisionError: If the name or abbreviation is already registered.
        """
        system = cls(str(name), None if abbreviation is None else str(abbreviation))
        keys = [system.name] if system.abbreviation is None else [system.name, system.abbreviation]
        return SYSTEMS.register(system, *keys)

    @property
    def label(self) -> str:
        """Abbreviation when available, otherwise the name."""
        return self.abbreviation or self.name

    def __str__(self) -> str:
        return self.name


SYSTEMS: Registry[System] = Registry("system")


def resolve_system(value) -> System | None:
    """Return a System for an instance, a registered name/abbreviation, or None.

    Raises:
        UnknownEntryError: If a string does not name a registered system.
    """
    if value is None or isinstance(value, System):
        return value
    return SYSTEMS[str(value)]
