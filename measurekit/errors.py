"""Exception taxonomy for the measurement library.

Every error raised by measurekit derives from MeasureError and from the
builtin exception that best matches its meaning, so a caller may catch the
specific class or the builtin.

Classes:
    MeasureError: Root of all library errors.
    CollisionError: Duplicate name, symbol or abbreviation at registration.
    UnknownEntryError: Lookup of a name that was never registered.
    IncommensurableError: Conversion or comparison across dimensions.
    InconsistentUnitsError: A compound expression mixes unit systems.
    NoSuitableUnitError: No unit available for a requested system or locale.
    UnresolvedUnitError: A parsed token does not match any candidate unit.
    InvalidConfigurationError: Malformed exponent, factor or preference.
    CyclicReferenceError: A unit references itself through its reference graph.
"""

from __future__ import annotations


class MeasureError(Exception):
    """Base class for all measurekit errors."""


class CollisionError(MeasureError, ValueError):
    """Raised when a registration key is already taken in its scope."""


class UnknownEntryError(MeasureError, KeyError):
    """Raised when a registry lookup does not find the requested key."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class IncommensurableError(MeasureError, TypeError):
    """Raised when two units do not share a dimension or base units."""


class InconsistentUnitsError(MeasureError, ValueError):
    """Raised when a compound quantity string mixes units of different systems."""


class NoSuitableUnitError(MeasureError, LookupError):
    """Raised when no unit exists in the requested system or locale."""


class UnresolvedUnitError(MeasureError, ValueError):
    """Raised when a unit token cannot be matched to any candidate unit."""


class InvalidConfigurationError(MeasureError, ValueError):
    """Raised when a dimension, unit or metric is declared with invalid values."""


class CyclicReferenceError(InvalidConfigurationError):
    """Raised when a unit is (transitively) defined in terms of itself."""
