"""Tests for at-least-one-of group tracking."""

from structval.messages import Printer
from structval.paths import FieldPath
from structval.validation.framework import ValidationResult
from structval.validation.groups import GroupTracker


class TestGroupTracker:
    """Test group emptiness checks within one composite."""

    def setup_method(self):
        self.tracker = GroupTracker()
        self.result = ValidationResult()
        self.printer = Printer()

    def test_all_empty_reports_every_member(self):
        self.tracker.record(FieldPath.parse(".Email"), ["contact"], True)
        self.tracker.record(FieldPath.parse(".Phone"), ["contact"], True)
        self.tracker.check(self.printer, self.result)

        assert len(self.result) == 1
        assert self.result[0].fields == [".Email", ".Phone"]
        assert self.result[0].message == "at least one of [.Email,.Phone] should be valued"

    def test_one_valued_member_satisfies_group(self):
        self.tracker.record(FieldPath.parse(".Email"), ["contact"], False)
        self.tracker.record(FieldPath.parse(".Phone"), ["contact"], True)
        self.tracker.check(self.printer, self.result)

        assert self.result.ok
        assert self.result.counters["groups_checked"] == 1

    def test_field_in_several_groups(self):
        self.tracker.record(FieldPath.parse(".A"), ["g1", "g2"], False)
        self.tracker.record(FieldPath.parse(".B"), ["g2"], True)
        self.tracker.record(FieldPath.parse(".C"), ["g3"], True)
        self.tracker.check(self.printer, self.result)

        assert [error.fields for error in self.result] == [[".C"]]
        assert self.result.counters["groups_checked"] == 3

    def test_no_groups(self):
        self.tracker.record(FieldPath.parse(".A"), [], True)
        self.tracker.check(self.printer, self.result)

        assert self.result.ok
        assert "groups_checked" not in self.result.counters
