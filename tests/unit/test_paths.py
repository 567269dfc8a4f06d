"""Tests for field paths and rule patterns."""

from structval.paths import FieldPath, RulePattern, split_path


class TestFieldPath:
    """Test FieldPath construction and text form."""

    def test_root_is_empty_text(self):
        assert str(FieldPath.root()) == ""
        assert len(FieldPath.root()) == 0

    def test_child(self):
        path = FieldPath.root().child("A").child(0).child("AA")
        assert str(path) == ".A.0.AA"
        assert path.segments == ("A", 0, "AA")

    def test_parse_round_trip(self):
        assert str(FieldPath.parse(".hello.B.BB")) == ".hello.B.BB"

    def test_paths_are_hashable(self):
        assert {FieldPath.parse(".A"): 1}[FieldPath(("A",))] == 1


class TestSplitPath:
    """Test path text splitting."""

    def test_leading_separator_optional(self):
        assert split_path(".A.B") == split_path("A.B") == ["A", "B"]

    def test_empty(self):
        assert split_path("") == []


class TestRulePattern:
    """Test wildcard matching."""

    def test_wildcard(self):
        pattern = RulePattern.parse(".*.B.BB")
        assert pattern.has_wildcard
        assert pattern.matches(FieldPath.parse(".hello.B.BB"))
        assert not pattern.matches(FieldPath.parse(".hello.B"))
        assert not pattern.matches(FieldPath.parse(".hello.C.BB"))

    def test_matches_integer_segments(self):
        pattern = RulePattern.parse(".items.*.id")
        assert pattern.matches(FieldPath(("items", 3, "id")))

    def test_literal_pattern(self):
        pattern = RulePattern.parse(".A")
        assert not pattern.has_wildcard
        assert pattern.matches(FieldPath.parse(".A"))
