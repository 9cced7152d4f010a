"""Process-wide keyed stores for dimensions, systems, units, metrics and locales.

Each kind of entity lives in its own Registry instance. A registry maps one or
more keys (name, symbol, abbreviation...) to an entry, rejects keys that are
already taken, and can be reset between independent configuration runs.

Lifecycle:
    Stores are created empty at import time, populated during configuration
    (see measurekit.config) and cleared with reset(). Lookups are read-only and
    take no lock; register() and reset() are serialized with a re-entrant lock.

Example:
    >>> colors = Registry("color")
    >>> colors.register("#f00", "red", "r")
    '#f00'
    >>> colors["r"]
    '#f00'
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from .errors import CollisionError, UnknownEntryError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry(Generic[T]):
    """Ordered store mapping hashable keys to entries.

    All keys of a registry share a single namespace: a name registered by one
    entry cannot be used as the symbol of another.

    Attributes:
        kind: Human-readable entity name used in error messages.
    """

    def __init__(self, kind: str):
        self.kind = kind
        self._index: dict[Hashable, T] = {}
        self._entries: list[T] = []
        self._lock = threading.RLock()

    def register(self, entry: T, *keys: Hashable) -> T:
        """Store an entry under every given key.

        Args:
            entry: The object to store.
            *keys: Keys the entry can be looked up by. Duplicates are ignored.

        Returns:
            The registered entry.

        Raises:
            CollisionError: If any key is already registered.
        """
        unique = list(dict.fromkeys(keys))
        with self._lock:
            for key in unique:
                if key in self._index:
                    msg = f"{self.kind.capitalize()} {self._describe(key)} already exists"
                    raise CollisionError(msg)
            for key in unique:
                self._index[key] = entry
            self._entries.append(entry)
        logger.debug("Registered %s %r", self.kind, entry)
        return entry

    def get(self, key: Hashable, default: T | None = None) -> T | None:
        """Return the entry for key, or default when it is not registered."""
        return self._index.get(key, default)

    def __getitem__(self, key: Hashable) -> T:
        try:
            return self._index[key]
        except KeyError:
            msg = f"Unknown {self.kind} {self._describe(key)}"
            raise UnknownEntryError(msg) from None

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def reset(self) -> None:
        """Remove every entry from the store."""
        with self._lock:
            self._index.clear()
            self._entries.clear()
        logger.debug("Reset %s registry", self.kind)

    @staticmethod
    def _describe(key: Hashable) -> str:
        if isinstance(key, tuple):
            return ":".join("<nil>" if k is None else str(k) for k in key)
        return "<nil>" if key is None else str(key)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind}: {len(self)} entries>"
