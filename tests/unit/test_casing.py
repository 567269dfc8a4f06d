"""Tests for field name casing."""

import pytest

from structval.casing import NameCase, split_words, transform_name


class TestSplitWords:
    """Test identifier word splitting."""

    @pytest.mark.parametrize("name,words", [
        ("PtrIntId", ["Ptr", "Int", "Id"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("email_addr", ["email", "addr"]),
        ("AA", ["AA"]),
        ("v2Name", ["v", "2", "Name"]),
    ])
    def test_split(self, name, words):
        assert split_words(name) == words


class TestTransformName:
    """Test rendering names in each casing."""

    def test_as_declared(self):
        assert transform_name("PtrIntId") == "PtrIntId"

    @pytest.mark.parametrize("case,expected", [
        (NameCase.SNAKE, "ptr_int_id"),
        (NameCase.KEBAB, "ptr-int-id"),
        (NameCase.CAMEL, "ptrIntId"),
        (NameCase.PASCAL, "PtrIntId"),
    ])
    def test_cases(self, case, expected):
        assert transform_name("PtrIntId", case) == expected

    def test_snake_acronym(self):
        assert transform_name("AA", NameCase.SNAKE) == "aa"
        assert transform_name("HTTPServer", "snake") == "http_server"

    def test_camel_from_snake(self):
        assert transform_name("email_addr", NameCase.CAMEL) == "emailAddr"

    def test_unknown_case_rejected(self):
        with pytest.raises(ValueError):
            transform_name("x", "screaming")
