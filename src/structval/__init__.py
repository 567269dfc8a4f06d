"""structval - structural validation for nested Python values.

structval walks records, sequences and mappings, evaluates per-field
constraints written in a compact grammar or supplied through a path-addressed
rule table, and reports every violation with the path it occurred at.
"""

__version__ = "0.1.0"
__description__ = "Structural validation engine for nested Python values"

from structval.atoms import AtomRegistry, register
from structval.casing import NameCase
from structval.messages import Printer
from structval.paths import FieldPath
from structval.validation import (
    InvalidDataError,
    Rule,
    RuleTable,
    ValidationError,
    ValidationResult,
    Validator,
    field_tags,
    get_validator,
    parse_rule,
)

__all__ = [
    "__version__",
    "__description__",
    "AtomRegistry",
    "FieldPath",
    "InvalidDataError",
    "NameCase",
    "Printer",
    "Rule",
    "RuleTable",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "field_tags",
    "get_validator",
    "parse_rule",
    "register",
]
