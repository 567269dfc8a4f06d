"""Named predicate registry.

A registry is owned by the caller and populated before validation starts.
Each validation pass works against an immutable snapshot, so registering a new
predicate never affects a pass that is already running.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

from .predicates import CATALOG, Predicate

logger = logging.getLogger(__name__)


class AtomRegistry:
    """Mapping from predicate name to predicate."""

    def __init__(self, atoms: Mapping[str, Predicate] | None = None):
        self._atoms: dict[str, Predicate] = dict(atoms or {})

    @classmethod
    def default(cls) -> "AtomRegistry":
        """Registry holding the shipped catalog."""
        return cls(CATALOG)

    def register(self, name: str, predicate: Callable[[Any], bool]) -> None:
        """Register a predicate; an existing name is silently replaced."""
        if name in self._atoms:
            logger.debug(f"Replacing predicate '{name}'")
        self._atoms[name] = predicate

    def unregister(self, name: str) -> None:
        self._atoms.pop(name, None)

    def get(self, name: str) -> Predicate | None:
        return self._atoms.get(name)

    def names(self) -> list[str]:
        return sorted(self._atoms)

    def snapshot(self) -> Mapping[str, Predicate]:
        """Read-only copy used for the duration of one validation pass."""
        return MappingProxyType(dict(self._atoms))

    def __contains__(self, name: object) -> bool:
        return name in self._atoms

    def __iter__(self) -> Iterator[str]:
        return iter(self._atoms)

    def __len__(self) -> int:
        return len(self._atoms)


# Process-wide registry used by validators built without an explicit one.
default_registry = AtomRegistry.default()


def register(name: str, predicate: Callable[[Any], bool]) -> None:
    """Register a predicate on the process-wide registry.

    Intended for start-up code; registering while validations run in other
    threads is not supported.
    """
    default_registry.register(name, predicate)
