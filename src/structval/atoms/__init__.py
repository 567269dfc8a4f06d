"""Format predicates ("atoms") and their registry."""

from .predicates import CATALOG, Predicate
from .registry import AtomRegistry, default_registry, register

__all__ = [
    "AtomRegistry",
    "CATALOG",
    "Predicate",
    "default_registry",
    "register",
]
