"""Configuration: selection settings, the unit builder and the standard catalog.

Only the settings are imported here; the builder and catalog depend on the
metric package, which itself reads the settings. Import them directly:

    >>> from measurekit.config.builder import Configurator
    >>> from measurekit.config.catalog import load_standard_catalog
"""

from .settings import DEFAULT_SELECTION, SelectionSettings

__all__ = ["SelectionSettings", "DEFAULT_SELECTION"]
