"""Systems of measurement and locales.

Exports:
    System: Named system of units (identity only)
    SYSTEMS: Process-wide system registry
    Locale: Ordered list of preferred systems
    LOCALES: Process-wide locale registry with auto-creation
    resolve_system: Turn a name, abbreviation or instance into a System
"""

from .locale import LOCALES, Locale, LocaleRegistry
from .system import SYSTEMS, System, resolve_system

__all__ = ["System", "SYSTEMS", "Locale", "LocaleRegistry", "LOCALES", "resolve_system"]
