"""Locales: prioritized lists of systems.

A locale resolves ambiguity between systems that reuse unit names (a US gallon
is not an Imperial gallon) and biases unit selection toward a region's
conventions. Referencing a locale that was never registered creates it on the
fly with a private copy of the default locale's systems.

Classes:
    Locale: Named, ordered list of systems.
    LocaleRegistry: Store with auto-creation and a lazily created default.

Module Attributes:
    LOCALES: Process-wide locale registry.

Example:
    >>> LOCALES.default.systems = [si, us]
    >>> ca = LOCALES.lookup("CA")  # auto-created from the default
    >>> ca.systems == [si, us] and ca.systems is not LOCALES.default.systems
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..registry import Registry
from .system import System, resolve_system

logger = logging.getLogger(__name__)

DEFAULT_LOCALE_NAME = "DEFAULT"


class Locale:
    """An ordered preference list of systems.

    Attributes:
        name (str): Locale name, e.g. "US".
        systems (list[System]): Systems from most to least preferred.
    """

    def __init__(self, name: str, systems: Iterable[System | str] | None = None):
        self.name = str(name)
        self.systems = [resolve_system(s) for s in systems or ()]

    def rank(self, system: System | None) -> int:
        """Position of system in this locale; unknown systems rank last."""
        try:
            return self.systems.index(system)
        except ValueError:
            return len(self.systems)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        labels = ", ".join(s.label for s in self.systems)
        return f"<Locale {self.name}: [{labels}]>"


class LocaleRegistry(Registry[Locale]):
    """Locale store that auto-creates locales on first reference."""

    def __init__(self):
        super().__init__("locale")
        self._default: Locale | None = None

    @property
    def default(self) -> Locale:
        """The locale whose systems seed auto-created locales."""
        if self._default is None:
            self._default = Locale(DEFAULT_LOCALE_NAME)
        return self._default

    def register(self, name: str, systems: Iterable[System | str] | None = None) -> Locale:
        """Create and store a locale.

        Raises:
            CollisionError: If a locale with this name already exists.
        """
        locale = Locale(name, systems)
        return super().register(locale, locale.name)

    def lookup(self, name: Locale | str) -> Locale:
        """Return the named locale, creating it from the default if needed."""
        if isinstance(name, Locale):
            return name
        locale = self.get(str(name))
        if locale is None:
            locale = self.register(name, list(self.default.systems))
            logger.debug("Auto-created locale %s from default systems", locale)
        return locale

    def reset(self) -> None:
        super().reset()
        self._default = None


LOCALES = LocaleRegistry()
