"""Unit resolution engine: base signatures and conversion factors.

A Unit is either a base unit (meter, kilogram, second) or is defined by
reference to other units: a scalar reference factor times a product of
referenced units raised to integer or rational exponents. The references form
a directed acyclic graph, and every question about a unit (what it is made of,
how big it is) is answered by walking that graph down to base units.

Key Concepts:
    - Base signature: the unit resolved to base units and exponents, e.g.
      newton -> {kilogram: 1, meter: 1, second: -2}
    - Factor: size of the unit relative to the product of its base units,
      e.g. yard -> 0.9144, square yard -> 0.9144 ** 2
    - Commensurable: same Dimension, hence convertible in principle
    - Equivalent: same base signature and same factor, regardless of name

Numeric precision:
    Integer and Fraction factors stay exact, so chains such as
    kilometer -> meter -> millimeter never accumulate rounding error. A float
    factor such as 0.9144 stays a float, and any product involving a float
    is a float.

Classes:
    Unit: A named scale within a system and dimension.

Example:
    >>> meter = Unit("meter", si, length, abbreviation="m")
    >>> yard = Unit("yard", us, length, reference_units={meter: 1}, reference_factor=0.9144)
    >>> foot = Unit("foot", us, length, reference_units={yard: 1}, reference_factor=Fraction(1, 3))
    >>> yard.convert(meter)
    0.9144
    >>> dict(foot.base_signature)
    {<Unit L:SI:meter>: 1}
"""

from __future__ import annotations

import numbers
import re
from collections.abc import Mapping
from fractions import Fraction
from types import MappingProxyType
from typing import ClassVar

from ..dimension import Dimension, resolve_dimension
from ..errors import CyclicReferenceError, IncommensurableError, InvalidConfigurationError
from ..system import System, resolve_system

Exponent = int | Fraction
Factor = int | Fraction | float


def as_exponent(value) -> Exponent:
    """Validate an exponent and normalize whole rationals to int.

    Raises:
        InvalidConfigurationError: If value is not an integer or a rational.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Rational):
        msg = f"Invalid exponent {value!r}: expected an integer or a Fraction"
        raise InvalidConfigurationError(msg)
    value = Fraction(value)
    return value.numerator if value.denominator == 1 else value


def as_factor(value) -> Factor:
    """Validate a reference factor, keeping rationals exact.

    Raises:
        InvalidConfigurationError: If value is not a positive real number.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        msg = f"Invalid reference factor {value!r}: expected a number"
        raise InvalidConfigurationError(msg)
    if not value > 0:
        msg = f"Invalid reference factor {value!r}: must be positive"
        raise InvalidConfigurationError(msg)
    if isinstance(value, numbers.Rational):
        return Fraction(value)
    return float(value)


def power(factor: Factor, exponent: Exponent) -> Factor:
    """Raise a factor to an exponent, exactly when both allow it."""
    if isinstance(exponent, int):
        return factor**exponent
    return float(factor) ** float(exponent)


class Unit:
    """A named scale within a system and dimension.

    Identity (``==`` and ``hash``) is keyed on (dimension, system, name), which
    is how units are stored and looked up. Use equivalent() to compare what two
    units actually measure.

    Attributes:
        name (str): Unit name, e.g. "foot".
        system (System | None): System the unit belongs to.
        dimension (Dimension | None): Dimension, or None for counts.
        reference_units (Mapping[Unit, Exponent]): Units this one is defined by.
        reference_factor (Factor): Scalar multiplier applied to the references.
        abbreviation (str | None): Short display form, e.g. "ft".
        detector (re.Pattern): Pattern matching textual spellings of the unit.
        format (str): Default display template, see measurekit.measure.
        preference (float): Selection weight; higher is more preferred.
    """

    __slots__ = (
        "name",
        "system",
        "dimension",
        "reference_units",
        "reference_factor",
        "abbreviation",
        "detector",
        "format",
        "preference",
        "_factor",
        "_signature",
    )

    DEFAULT_FORMAT: ClassVar[str] = "%s%U"
    DIMENSIONLESS_FORMAT: ClassVar[str] = "%s %U"

    def __init__(
        self,
        name: str,
        system: System | str | None,
        dimension: Dimension | str | None = None,
        *,
        reference_units: Mapping[Unit, Exponent] | None = None,
        reference_factor: Factor = 1,
        abbreviation: str | None = None,
        detector: str | re.Pattern | None = None,
        format: str | None = None,
        preference: float = 0,
    ):
        self.name = str(name)
        self.system = resolve_system(system)
        self.dimension = resolve_dimension(dimension)
        self.abbreviation = None if abbreviation is None else str(abbreviation)

        references: dict[Unit, Exponent] = {}
        for unit, exponent in (reference_units or {}).items():
            if not isinstance(unit, Unit):
                msg = f"Invalid reference unit {unit!r} for {self.name}"
                raise InvalidConfigurationError(msg)
            references[unit] = as_exponent(exponent)
        self.reference_units = MappingProxyType(references)
        self.reference_factor = as_factor(reference_factor)
        if not references and self.reference_factor != 1:
            msg = f"Base unit {self.name} cannot have a reference factor of {reference_factor!r}"
            raise InvalidConfigurationError(msg)

        if isinstance(preference, bool) or not isinstance(preference, numbers.Real):
            msg = f"Invalid preference {preference!r} for {self.name}"
            raise InvalidConfigurationError(msg)
        self.preference = preference

        if detector is None:
            spellings = [self.name] if self.abbreviation is None else [self.name, self.abbreviation]
            detector = r"\A(" + "|".join(re.escape(s) for s in spellings) + r")\Z"
        self.detector = re.compile(detector) if isinstance(detector, str) else detector
        if format is None:
            format = self.DIMENSIONLESS_FORMAT if self.dimension is None else self.DEFAULT_FORMAT
        self.format = format

        self._factor = None
        self._signature = None
        self._check_acyclic()

    @classmethod
    def register(cls, name: str, system, dimension=None, **options) -> Unit:
        """Create a unit and add it to the process-wide unit store.

        Raises:
            CollisionError: If the name or abbreviation is already used within
                the same (dimension, system) scope.
        """
        from .unit_store import UNITS

        return UNITS.register(cls(name, system, dimension, **options))

    # ------------------------------------------------------------------ identity
    @property
    def key(self) -> tuple:
        """Identity key (dimension, system, name)."""
        return (self.dimension, self.system, self.name)

    @property
    def sort_key(self) -> tuple[str, str, str]:
        """Stable ordering key: name, then system name, then dimension name."""
        return (
            self.name,
            "" if self.system is None else self.system.name,
            "" if self.dimension is None else self.dimension.name,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    # ---------------------------------------------------------------- resolution
    @property
    def is_base(self) -> bool:
        """True if this unit is not defined by reference to other units."""
        return not self.reference_units

    @property
    def base_signature(self) -> Mapping[Unit, Exponent]:
        """Base units and exponents this unit ultimately resolves to."""
        if self._signature is None:
            self._signature = MappingProxyType(self._resolve_signature())
        return self._signature

    def _resolve_signature(self) -> dict[Unit, Exponent]:
        if self.is_base:
            return {self: 1}
        merged: dict[Unit, Exponent] = {}
        for unit, exponent in self.reference_units.items():
            for base, base_exponent in unit.base_signature.items():
                merged[base] = merged.get(base, 0) + base_exponent * exponent
        ordered = sorted(merged.items(), key=lambda item: item[0].sort_key)
        return {base: as_exponent(e) for base, e in ordered if e != 0}

    @property
    def factor(self) -> Factor:
        """Size of this unit relative to its base signature."""
        if self._factor is None:
            if self.is_base:
                factor = Fraction(1)
            else:
                factor = self.reference_factor
                for unit, exponent in self.reference_units.items():
                    factor = factor * power(unit.factor, exponent)
            self._factor = factor
        return self._factor

    def _check_acyclic(self) -> None:
        """Reject a reference graph in which this unit reaches itself."""
        seen: set[int] = set()
        pending = list(self.reference_units)
        while pending:
            unit = pending.pop()
            if unit.key == self.key:
                msg = f"Unit {self.name} is defined in terms of itself"
                raise CyclicReferenceError(msg)
            if id(unit) in seen:
                continue
            seen.add(id(unit))
            pending.extend(unit.reference_units)

    # ---------------------------------------------------------------- comparison
    def commensurable(self, other: Unit) -> bool:
        """True if both units measure the same dimension."""
        return self.dimension == other.dimension

    def shares_base(self, other: Unit) -> bool:
        """True if both units are commensurable and resolve to the same base units."""
        return self.commensurable(other) and self.base_signature == other.base_signature

    def equivalent(self, other: Unit) -> bool:
        """True if both units have the same base signature and factor."""
        return self.base_signature == other.base_signature and self.factor == other.factor

    def convert(self, other: Unit) -> Factor:
        """Return the factor converting a value in this unit into other.

        Args:
            other: Target unit.

        Returns:
            Exactly 1 for equivalent units, otherwise self.factor / other.factor.

        Raises:
            IncommensurableError: If the dimensions differ, or the units are not
                connected to the same base units.
        """
        if not self.commensurable(other):
            msg = f"Units {self!r} and {other!r} are not commensurable"
            raise IncommensurableError(msg)
        if self is other or self.equivalent(other):
            return Fraction(1)
        if self.base_signature != other.base_signature:
            msg = f"Units {self!r} and {other!r} do not resolve to the same base units"
            raise IncommensurableError(msg)
        return self.factor / other.factor

    def match(self, text: str) -> re.Match | None:
        """Match text against this unit's detector."""
        return self.detector.match(text)

    @property
    def label(self) -> str:
        """Abbreviation when available, otherwise the name."""
        return self.abbreviation or self.name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        dimension = "<nil>" if self.dimension is None else self.dimension.symbol
        system = "<nil>" if self.system is None else self.system.label
        return f"<Unit {dimension}:{system}:{self.name}>"
