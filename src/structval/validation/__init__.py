"""Validation engine for nested runtime values.

This package walks a value graph, resolves the rule for every node from the
node's own constraint expression and an external rule table, and aggregates
every violation into one ordered report.
"""

from .engine import ValidationPass, Validator, get_validator
from .framework import (
    INVALID_DATA,
    InvalidDataError,
    ValidationError,
    ValidationResult,
    ValidationStatus,
)
from .grammar import parse_rule
from .inspection import NodeKind, field_tags
from .resolver import RuleTable
from .rules import Rule

__all__ = [
    "Validator",
    "ValidationPass",
    "get_validator",
    "ValidationResult",
    "ValidationError",
    "ValidationStatus",
    "InvalidDataError",
    "INVALID_DATA",
    "Rule",
    "RuleTable",
    "parse_rule",
    "NodeKind",
    "field_tags",
]
