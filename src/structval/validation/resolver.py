"""Rule table and rule resolution.

A rule table maps path text (exact, or a pattern with ``*`` wildcard segments)
to a rule source: constraint grammar text, a structured ``Rule`` or a bare
callback. Sources are normalised to ``Rule`` when the table is built, so
evaluation never needs to know where a rule came from.
"""

import logging
from typing import Iterator, Mapping, Union

from ..paths import FieldPath, RulePattern
from .grammar import parse_rule
from .rules import Callback, Rule

logger = logging.getLogger(__name__)

RuleSource = Union[str, Rule, Callback]


def normalize_source(source: RuleSource, log: logging.Logger | None = None) -> Rule:
    """Turn any rule source into a structured rule.

    Raises:
        TypeError: If ``source`` is not grammar text, a Rule or a callable
    """
    if isinstance(source, str):
        return parse_rule(source, log=log)
    if isinstance(source, Rule):
        return source.copy()
    if callable(source):
        return Rule(callback=source)
    raise TypeError(f"Unsupported rule source: {type(source).__name__}")


class RuleTable:
    """Read-only mapping from path pattern to rule."""

    def __init__(self, entries: Mapping[str, RuleSource] | None = None,
                 log: logging.Logger | None = None):
        self._log = log or logger
        self._rules: dict[str, Rule] = {}
        for key, source in (entries or {}).items():
            self._rules[self._normalize_key(key)] = normalize_source(source, self._log)
        self._index_patterns()

    @staticmethod
    def _normalize_key(key: str) -> str:
        return str(FieldPath.parse(key))

    def _index_patterns(self) -> None:
        # wildcard patterns bucketed by segment count, in table order
        self._patterns: dict[int, list[tuple[RulePattern, Rule]]] = {}
        for key, rule in self._rules.items():
            pattern = RulePattern.parse(key)
            if pattern.has_wildcard:
                self._patterns.setdefault(len(pattern.segments), []).append((pattern, rule))

    def overlay(self, *tables: Union["RuleTable", Mapping[str, RuleSource]]) -> "RuleTable":
        """Return a private copy with ``tables`` merged in; later tables win."""
        merged = RuleTable(log=self._log)
        merged._rules = dict(self._rules)
        for table in tables:
            if not isinstance(table, RuleTable):
                table = RuleTable(table, log=self._log)
            merged._rules.update(table._rules)
        merged._index_patterns()
        return merged

    def lookup(self, path: FieldPath) -> Rule | None:
        """Find the table rule for ``path``: exact match first, then wildcards."""
        rule = self._rules.get(str(path))
        if rule is not None:
            return rule
        for pattern, candidate in self._patterns.get(len(path), []):
            if pattern.matches(path):
                return candidate
        return None

    def resolve(self, path: FieldPath, inline: str = "") -> Rule:
        """Effective rule for ``path``.

        Args:
            path: Node address
            inline: The node's own constraint expression, applied on top of
                the table rule

        Returns:
            A fresh rule the caller may modify
        """
        found = self.lookup(path)
        rule = found.copy() if found is not None else Rule()
        if inline:
            parse_rule(inline, rule, log=self._log)
        return rule

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._normalize_key(key) in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
