"""Physical dimensions expressed as exponents over fundamental dimensions.

A fundamental dimension (Length, Mass, Time...) has no exponents. Every other
dimension is a mapping from fundamental dimensions to integer exponents, e.g.
Force = {Mass: 1, Length: 1, Time: -2}.

Equality follows the physics rather than the label: two composite dimensions
with the same exponents are equal even if they are named differently (Torque
and Energy), while fundamental dimensions compare by name.

Classes:
    Dimension: Immutable dimension value.

Module Attributes:
    DIMENSIONS: Process-wide registry keyed by name and symbol.

Example:
    >>> length = Dimension.register("Length")
    >>> time = Dimension.register("Time")
    >>> velocity = Dimension.register("Velocity", "Vel", {length: 1, time: -1})
    >>> velocity.fundamental
    False
    >>> DIMENSIONS["L"] is length
    True
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from types import MappingProxyType

from ..errors import InvalidConfigurationError
from ..registry import Registry


class Dimension:
    """A physical dimension.

    Attributes:
        name (str): Full name, e.g. "Length".
        symbol (str): Short symbol, e.g. "L". Defaults to the first letter of
            the name, upper-cased.
        exponents (Mapping[Dimension, int]): Exponents over fundamental
            dimensions. Empty for fundamental dimensions.
    """

    __slots__ = ("name", "symbol", "exponents", "_hash")

    def __init__(self, name: str, symbol: str | None = None, exponents: Mapping | None = None):
        self.name = str(name)
        self.symbol = self.name[:1].upper() if symbol is None else str(symbol)
        resolved: dict[Dimension, int] = {}
        for key, exponent in (exponents or {}).items():
            dimension = resolve_dimension(key)
            if dimension is None or not dimension.fundamental:
                msg = f"Invalid fundamental dimension {key!r} in {self.name}"
                raise InvalidConfigurationError(msg)
            if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
                msg = f"Invalid exponent {exponent!r} for {dimension} in {self.name}"
                raise InvalidConfigurationError(msg)
            if exponent:
                resolved[dimension] = resolved.get(dimension, 0) + int(exponent)
        self.exponents = MappingProxyType(resolved)
        if resolved:
            self._hash = hash(frozenset(resolved.items()))
        else:
            self._hash = hash(self.name)

    @classmethod
    def register(cls, name: str, symbol: str | None = None, exponents: Mapping | None = None) -> Dimension:
        """Create a dimension and store it under its name and symbol.

        Raises:
            CollisionError: If the name or symbol is already registered.
            InvalidConfigurationError: If an exponent is not an integer or does
                not refer to a fundamental dimension.
        """
        dimension = cls(name, symbol, exponents)
        return DIMENSIONS.register(dimension, dimension.name, dimension.symbol)

    @property
    def fundamental(self) -> bool:
        """True if this dimension has no exponents."""
        return not self.exponents

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        if self.fundamental and other.fundamental:
            return self.name == other.name
        return dict(self.exponents) == dict(other.exponents)

    def __hash__(self) -> int:
        return self._hash

    def __setattr__(self, key, value):
        if hasattr(self, "_hash"):
            msg = f"{type(self).__name__} is immutable"
            raise AttributeError(msg)
        super().__setattr__(key, value)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        if self.fundamental:
            return f"<Dimension {self.symbol}: {self.name}>"
        basis = " ".join(f"{d.symbol}^{e}" for d, e in self.exponents.items())
        return f"<Dimension {self.symbol}: {self.name} ({basis})>"


DIMENSIONS: Registry[Dimension] = Registry("dimension")


def resolve_dimension(value) -> Dimension | None:
    """Return a Dimension for an instance, a registered name/symbol, or None.

    Raises:
        UnknownEntryError: If a string does not name a registered dimension.
    """
    if value is None or isinstance(value, Dimension):
        return value
    return DIMENSIONS[str(value)]
