"""At-least-one-of group constraints over one composite's direct children."""

from ..messages import GROUP_UNVALUED, Printer
from ..paths import FieldPath
from .framework import ValidationResult


class GroupTracker:
    """Collects group membership and emptiness for the children of one composite.

    Groups never reach across composites: a tracker lives for exactly one
    record, sequence or mapping.
    """

    def __init__(self):
        self.members: dict[str, list[FieldPath]] = {}
        self.empties: dict[FieldPath, bool] = {}

    def record(self, path: FieldPath, groups: list[str], empty: bool) -> None:
        self.empties[path] = empty
        for group in groups:
            self.members.setdefault(group, []).append(path)

    def check(self, printer: Printer, result: ValidationResult) -> None:
        """Append one violation per group whose members are all empty."""
        for paths in self.members.values():
            result.increment_counter("groups_checked")
            if not all(self.empties.get(path, True) for path in paths):
                continue
            fields = [str(path) for path in paths]
            result.add_error(fields, printer.render(GROUP_UNVALUED, fields[0], ",".join(fields)))
