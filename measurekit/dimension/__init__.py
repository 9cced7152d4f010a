"""Physical dimensions and their registry.

Exports:
    Dimension: Named dimension with exponents over fundamental dimensions
    DIMENSIONS: Process-wide dimension registry
    resolve_dimension: Turn a name, symbol or instance into a Dimension
"""

from .dimension import DIMENSIONS, Dimension, resolve_dimension

__all__ = ["Dimension", "DIMENSIONS", "resolve_dimension"]
