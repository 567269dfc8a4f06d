"""Field paths and rule patterns.

A FieldPath addresses one node inside the validated value. Its text form joins
segments with a leading separator, so the root is the empty string and the
field ``A`` of the root record is ``.A``. The same text form keys the rule
table, where any segment may be the ``*`` wildcard.
"""

from dataclasses import dataclass

SEPARATOR = "."
WILDCARD = "*"

Segment = str | int


@dataclass(frozen=True)
class FieldPath:
    """Address of a node inside the validated value."""
    segments: tuple[Segment, ...] = ()

    @classmethod
    def root(cls) -> "FieldPath":
        return cls()

    @classmethod
    def parse(cls, text: str) -> "FieldPath":
        """Parse the dotted text form.

        Examples:
            >>> FieldPath.parse(".hello.B.BB").segments
            ('hello', 'B', 'BB')
            >>> FieldPath.parse("").segments
            ()
        """
        return cls(tuple(split_path(text)))

    def child(self, segment: Segment) -> "FieldPath":
        return FieldPath(self.segments + (segment,))

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return "".join(f"{SEPARATOR}{segment}" for segment in self.segments)


def split_path(text: str) -> list[str]:
    """Split path text into segment strings.

    A leading separator is optional, so ``A.B`` and ``.A.B`` are the same path.
    """
    if not text:
        return []
    if text.startswith(SEPARATOR):
        text = text[len(SEPARATOR):]
    return text.split(SEPARATOR)


@dataclass(frozen=True)
class RulePattern:
    """A FieldPath whose segments may be wildcards."""
    text: str
    segments: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> "RulePattern":
        return cls(text, tuple(split_path(text)))

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD in self.segments

    def matches(self, path: FieldPath) -> bool:
        """Check whether this pattern addresses ``path``.

        A wildcard matches exactly one segment; lengths must agree.

        Examples:
            >>> RulePattern.parse(".*.B.BB").matches(FieldPath.parse(".hello.B.BB"))
            True
            >>> RulePattern.parse(".*.B.BB").matches(FieldPath.parse(".hello.B"))
            False
        """
        if len(self.segments) != len(path.segments):
            return False
        for expected, actual in zip(self.segments, path.segments):
            if expected != WILDCARD and expected != str(actual):
                return False
        return True
