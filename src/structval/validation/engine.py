"""Traversal engine and per-node rule evaluation."""

import logging
import re
from typing import Any, Mapping, Union

from ..atoms import AtomRegistry, Predicate, default_registry
from ..casing import NameCase, transform_name
from ..messages import (
    CALLBACK_REJECTED,
    ENUM_MISMATCH,
    FORMAT_MISMATCH,
    GREATER_THAN_MAX,
    LESS_THAN_MIN,
    NOT_ALLOW_EMPTY,
    PATTERN_MISMATCH,
    Printer,
)
from ..paths import FieldPath
from .framework import ValidationResult
from .grammar import parse_number
from .groups import GroupTracker
from .inspection import (
    COMPOSITE_KINDS,
    NodeKind,
    is_empty,
    iter_entries,
    iter_record_fields,
    kind_of,
)
from .resolver import RuleSource, RuleTable
from .rules import Number, Rule

Overlay = Union[RuleTable, Mapping[str, RuleSource]]


class ValidationPass:
    """State of one validation call: rule table, predicate snapshot and report."""

    def __init__(self, table: RuleTable, atoms: Mapping[str, Predicate],
                 name_case: NameCase, printer: Printer, log: logging.Logger):
        self.table = table
        self.atoms = atoms
        self.name_case = name_case
        self.printer = printer
        self.log = log
        self.result = ValidationResult()

    def fail(self, path: FieldPath, key: str, *args: Any) -> None:
        text = str(path)
        self.result.add_error([text], self.printer.render(key, text, *args))

    def walk(self, value: Any, path: FieldPath) -> None:
        """Validate the children of a composite value.

        Scalars and ``None`` have no children; as a root they are vacuously valid.
        """
        kind = kind_of(value)
        if kind == NodeKind.RECORD:
            self.walk_record(value, path)
        elif kind in (NodeKind.SEQUENCE, NodeKind.MAPPING):
            self.walk_entries(value, kind, path)

    def walk_record(self, record: Any, path: FieldPath) -> None:
        groups = GroupTracker()
        for field in iter_record_fields(record):
            child = path.child(transform_name(field.name, self.name_case))
            rule = self.table.resolve(child, field.constraint)
            empty = self.evaluate(rule, field.value, child)
            groups.record(child, rule.must, empty)
        groups.check(self.printer, self.result)

    def walk_entries(self, value: Any, kind: NodeKind, path: FieldPath) -> None:
        groups = GroupTracker()
        for segment, item in iter_entries(value, kind):
            child = path.child(segment)
            rule = self.table.resolve(child)
            empty = self.evaluate(rule, item, child)
            groups.record(child, rule.must, empty)
        groups.check(self.printer, self.result)

    def evaluate(self, rule: Rule, value: Any, path: FieldPath) -> bool:
        """Apply ``rule`` to one node and report whether the node was empty."""
        self.result.increment_counter("nodes_evaluated")
        kind = kind_of(value)
        empty = is_empty(value, kind)

        if rule.callback is not None:
            self.run_callback(rule, value, path)
            return empty

        if empty:
            if not rule.omitempty:
                self.fail(path, NOT_ALLOW_EMPTY)
            return True

        if kind in COMPOSITE_KINDS:
            self.walk(value, path)
        elif kind == NodeKind.STRING:
            self.check_string(rule, value, path)
        elif kind == NodeKind.NUMBER:
            self.check_number(rule, value, path)
        return False

    def run_callback(self, rule: Rule, value: Any, path: FieldPath) -> None:
        """A callback rejects by raising ValueError, returning False or returning an exception."""
        try:
            outcome = rule.callback(value)
        except ValueError as e:
            outcome = e
        if isinstance(outcome, Exception):
            text = str(path)
            message = str(outcome) or self.printer.render(CALLBACK_REJECTED, text)
            self.result.add_error([text], message)
        elif outcome is False:
            self.fail(path, CALLBACK_REJECTED)

    def check_string(self, rule: Rule, text: str, path: FieldPath) -> None:
        # formats, pattern, enum and length bounds are exclusive: first configured one decides
        if rule.formats:
            predicates = [self.atoms[name] for name in rule.formats if name in self.atoms]
            if predicates:
                if not any(predicate(text) for predicate in predicates):
                    self.fail(path, FORMAT_MISMATCH, ",".join(rule.formats))
                return
            self.log.warning(f"Not found [is a] definition for {rule.formats} at `{path}`")

        if rule.pattern is not None:
            try:
                compiled = re.compile(rule.pattern)
            except re.error as e:
                self.log.warning(f"Compile regexp for `{path}` failed: {e}")
                return
            if compiled.search(text) is None:
                self.fail(path, PATTERN_MISMATCH)
            return

        if rule.enum:
            if text not in rule.enum:
                self.fail(path, ENUM_MISMATCH, ",".join(rule.enum), text)
            return

        self.check_bounds(rule, len(text), path)

    def check_number(self, rule: Rule, number: Number, path: FieldPath) -> None:
        if rule.enum:
            allowed = []
            for literal in rule.enum:
                try:
                    allowed.append(parse_number(literal))
                except ValueError:
                    self.log.warning(f"Ignoring non-numeric enum value [{literal}] at `{path}`")
            if number not in allowed:
                self.fail(path, ENUM_MISMATCH, ",".join(rule.enum), number)
            return

        self.check_bounds(rule, number, path)

    def check_bounds(self, rule: Rule, actual: Number, path: FieldPath) -> None:
        # min and max fire independently
        if rule.min is not None and actual < rule.min:
            self.fail(path, LESS_THAN_MIN, rule.min, actual)
        if rule.max is not None and actual > rule.max:
            self.fail(path, GREATER_THAN_MAX, rule.max, actual)


class Validator:
    """Validates arbitrary nested values against per-field rules.

    Args:
        rules: Base rule table, or a mapping of path pattern to rule source
        atoms: Predicate registry (the process-wide registry when omitted)
        name_case: Casing applied to record field names in paths
        printer: Message renderer (English when omitted)
        logger: Sink for configuration defects
    """

    def __init__(self, rules: Overlay | None = None, *,
                 atoms: AtomRegistry | None = None,
                 name_case: NameCase | str = NameCase.AS_DECLARED,
                 printer: Printer | None = None,
                 logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)
        if isinstance(rules, RuleTable):
            self.rules = rules
        else:
            self.rules = RuleTable(rules, log=self.logger)
        self.atoms = atoms if atoms is not None else default_registry
        self.name_case = NameCase(name_case)
        self.printer = printer or Printer()

    @classmethod
    def from_config(cls, config, **kwargs) -> "Validator":
        """Build a validator from a ``StructvalConfig``."""
        kwargs.setdefault("name_case", config.validation.name_case)
        kwargs.setdefault("printer", Printer(config.validation.locale))
        return cls(config.rules, **kwargs)

    def validate(self, value: Any, *overlays: Overlay) -> ValidationResult:
        """Validate ``value`` and return every violation found.

        Args:
            value: Root value (record, sequence or mapping)
            overlays: Extra rule tables merged over the base table for this
                call only; later overlays win

        Returns:
            ValidationResult; empty when the value is valid
        """
        table = self.rules.overlay(*overlays) if overlays else self.rules
        validation = ValidationPass(
            table, self.atoms.snapshot(), self.name_case, self.printer, self.logger
        )
        validation.walk(value, FieldPath.root())

        result = validation.result
        self.logger.debug(
            f"Validation finished with status {result.status.value}: "
            f"{len(result.errors)} violations, {result.counters.get('nodes_evaluated', 0)} nodes"
        )
        return result

    def check(self, value: Any, *overlays: Overlay) -> None:
        """Validate ``value`` and raise InvalidDataError on any violation."""
        self.validate(value, *overlays).raise_for_errors()


def get_validator(rules: Overlay | None = None, **options) -> Validator:
    """Convenience factory mirroring the ``Validator`` constructor."""
    return Validator(rules, **options)
