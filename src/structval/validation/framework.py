"""Validation report types.

A report is an ordered list of path-scoped violations. Order follows the
traversal: pre-order, record fields in declaration order, sequence and mapping
entries in iteration order, group violations after the children they cover.
"""

from dataclasses import dataclass, field
from enum import Enum

INVALID_DATA = "invalid-data"


class ValidationStatus(str, Enum):
    """Overall outcome of a validation pass."""
    PASS = "pass"
    FAIL = "fail"


@dataclass
class ValidationError:
    """A single violation addressed to one or more field paths."""
    fields: list[str]
    message: str
    code: str = INVALID_DATA

    def __str__(self) -> str:
        location = ",".join(f"`{path}`" for path in self.fields)
        return f"{location} {self.message}"


@dataclass
class ValidationResult:
    """Aggregated violations of one validation pass."""
    status: ValidationStatus = ValidationStatus.PASS
    errors: list[ValidationError] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass, 1 = fail."""
        return 0 if self.ok else 1

    def add_error(self, fields: list[str], message: str) -> None:
        """Record a violation."""
        self.errors.append(ValidationError(list(fields), message))
        self.status = ValidationStatus.FAIL

    def increment_counter(self, name: str, value: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def raise_for_errors(self) -> None:
        """Raise InvalidDataError when any violation was recorded."""
        if not self.ok:
            raise InvalidDataError(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": self.counters,
            "errors": [
                {
                    "fields": error.fields,
                    "message": error.message,
                    "code": error.code,
                }
                for error in self.errors
            ]
        }

    def __iter__(self):
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, index: int) -> ValidationError:
        return self.errors[index]

    def __str__(self) -> str:
        if self.ok:
            return ""
        return f"[{INVALID_DATA}] " + "; ".join(str(error) for error in self.errors)


class InvalidDataError(ValueError):
    """Raised by ``Validator.check`` when the value has violations."""

    code = INVALID_DATA

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(str(result))

    @property
    def errors(self) -> list[ValidationError]:
        return self.result.errors
