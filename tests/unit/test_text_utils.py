"""Tests for the limited whitespace splitter."""

from __future__ import annotations

from crontab_parser.utils.text_utils import fields_n, is_space, trim_space


class TestFieldsN:
    def test_two_fields_keeps_internal_whitespace(self) -> None:
        assert fields_n("root echo  hi", 2) == ["root", "echo  hi"]

    def test_rest_is_trimmed(self) -> None:
        assert fields_n("  root   echo hi   ", 2) == ["root", "echo hi"]

    def test_tabs_are_separators(self) -> None:
        assert fields_n("root\techo\thi", 2) == ["root", "echo\thi"]

    def test_single_token(self) -> None:
        assert fields_n("root", 2) == ["root"]

    def test_empty(self) -> None:
        assert fields_n("", 2) == []
        assert fields_n("   ", 2) == []

    def test_three_fields(self) -> None:
        assert fields_n("a b c d  e", 3) == ["a", "b", "c d  e"]

    def test_n_below_two_returns_whole_string(self) -> None:
        assert fields_n(" a  b ", 1) == ["a  b"]

    def test_fewer_tokens_than_n(self) -> None:
        assert fields_n("a b", 5) == ["a", "b"]

    def test_ascii_separators_are_not_whitespace(self) -> None:
        assert fields_n("a\x1cb c", 2) == ["a\x1cb", "c"]
        assert fields_n("\x1fa b\x1f", 2) == ["\x1fa", "b\x1f"]

    def test_unicode_whitespace_separates(self) -> None:
        assert fields_n("root echo　hi", 2) == ["root", "echo　hi"]


class TestTrimSpace:
    def test_keeps_ascii_separators(self) -> None:
        assert trim_space("\x1c a \x1c") == "\x1c a \x1c"

    def test_strips_unicode_whitespace(self) -> None:
        assert trim_space("  a b\t\n") == "a b"

    def test_is_space(self) -> None:
        assert is_space("\t")
        assert is_space("\u0085")
        assert not is_space("\x1e")
        assert not is_space("a")
