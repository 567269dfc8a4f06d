"""Constraint grammar parser.

A constraint expression is a ``;``-separated list of clauses. A clause is the
bare word ``omitempty`` or a ``key:value`` pair:

    must:id,contact;omitempty;regexp:^[a-z]+$
    enum:a,b,c
    min:1;max:10
    range:1,10
    is:email,phone

Only the first ``:`` separates key and value, so regular expressions keep
their own colons. Clauses the parser does not understand are logged and
skipped; parsing never fails the whole rule.
"""

import logging
import math
import re

from .rules import Number, Rule

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = ";"
KEY_SEPARATOR = ":"
LIST_SEPARATOR = ","
OMITEMPTY = "omitempty"

INTEGER_RE = re.compile(r"[-+]?[0-9]+", re.ASCII)
DECIMAL_RE = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?", re.ASCII)


def parse_number(text: str) -> Number:
    """Parse a numeric literal, keeping integers integral.

    Only plain ASCII decimal literals are accepted: no digit separators,
    no non-ASCII digits, no ``nan``/``inf``.

    Raises:
        ValueError: If ``text`` is not a finite number
    """
    text = text.strip()
    if INTEGER_RE.fullmatch(text):
        return int(text)
    if not DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {text!r}")
    return number


def _split_list(value: str) -> list[str]:
    return value.split(LIST_SEPARATOR)


def parse_rule(text: str, rule: Rule | None = None,
               log: logging.Logger | None = None) -> Rule:
    """Parse a constraint expression into ``rule``.

    Clauses override values already present on ``rule``; list-valued keys
    replace rather than append.

    Args:
        text: Constraint expression
        rule: Rule to merge into (a new one when omitted)
        log: Logger for unrecognised clauses (module logger when omitted)

    Returns:
        The updated rule
    """
    rule = rule if rule is not None else Rule()
    log = log or logger

    for clause in text.split(CLAUSE_SEPARATOR):
        if not clause:
            continue
        if clause == OMITEMPTY:
            rule.omitempty = True
            continue

        key, sep, value = clause.partition(KEY_SEPARATOR)
        if not sep:
            log.warning(f"Can't recognize rule clause [{clause}]")
            continue

        try:
            _apply_clause(rule, key, value, log)
        except ValueError as e:
            log.warning(f"Ignoring rule clause [{clause}]: {e}")

    return rule


def _apply_clause(rule: Rule, key: str, value: str, log: logging.Logger) -> None:
    if key == "must":
        rule.must = _split_list(value)
    elif key == "regexp":
        rule.pattern = value
    elif key == "enum":
        rule.enum = _split_list(value)
    elif key == "min":
        rule.min = parse_number(value)
    elif key == "max":
        rule.max = parse_number(value)
    elif key == "range":
        bounds = _split_list(value)
        if len(bounds) == 1:
            rule.max = parse_number(bounds[0])
            return
        if len(bounds) > 2:
            log.warning(f"range takes two bounds, ignoring extra values in [{value}]")
        lower, upper = parse_number(bounds[0]), parse_number(bounds[1])
        rule.min, rule.max = lower, upper
    elif key == "is":
        # "is:" with nothing after it leaves the format list untouched
        if value:
            rule.formats = _split_list(value)
    else:
        log.warning(f"Can't recognize rule key [{key}]")
