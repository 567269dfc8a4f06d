"""Rule descriptor applied to one node."""

from dataclasses import dataclass, field
from typing import Any, Callable

Number = int | float
Callback = Callable[[Any], Any]


@dataclass
class Rule:
    """Merged constraints for one node.

    When ``callback`` is set it alone decides pass/fail for the node; all other
    constraints are ignored.
    """
    formats: list[str] = field(default_factory=list)
    must: list[str] = field(default_factory=list)
    enum: list[str] = field(default_factory=list)
    min: Number | None = None
    max: Number | None = None
    pattern: str | None = None
    omitempty: bool = False
    callback: Callback | None = None

    def copy(self) -> "Rule":
        return Rule(
            formats=list(self.formats),
            must=list(self.must),
            enum=list(self.enum),
            min=self.min,
            max=self.max,
            pattern=self.pattern,
            omitempty=self.omitempty,
            callback=self.callback,
        )

    def to_grammar(self) -> str:
        """Canonical constraint expression for this rule.

        The callback has no textual form and is left out.
        """
        clauses = []
        if self.omitempty:
            clauses.append("omitempty")
        if self.must:
            clauses.append("must:" + ",".join(self.must))
        if self.formats:
            clauses.append("is:" + ",".join(self.formats))
        if self.enum:
            clauses.append("enum:" + ",".join(self.enum))
        if self.min is not None:
            clauses.append(f"min:{self.min}")
        if self.max is not None:
            clauses.append(f"max:{self.max}")
        if self.pattern is not None:
            clauses.append(f"regexp:{self.pattern}")
        return ";".join(clauses)
