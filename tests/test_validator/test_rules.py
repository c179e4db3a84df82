"""Tests for validation rule helpers."""

from __future__ import annotations

import math

import pytest

from skillstash.validator.rules import (
    as_boolean,
    as_number,
    as_string_array,
    count_lines,
    is_kebab_case,
)


class TestIsKebabCase:
    @pytest.mark.parametrize(
        "name", ["my-skill", "skill", "multi-word-name", "skill123", "skill-v2", "a-1-b"],
    )
    def test_accepts_valid_names(self, name: str) -> None:
        assert is_kebab_case(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            "MySkill",
            "my_skill",
            "my skill",
            "MY-SKILL",
            "-leading-hyphen",
            "trailing-hyphen-",
            "double--hyphen",
            "",
            "skill\n",
        ],
    )
    def test_rejects_invalid_names(self, name: str) -> None:
        assert is_kebab_case(name) is False


class TestCountLines:
    def test_single_line(self) -> None:
        assert count_lines("hello") == 1

    def test_multiple_lines(self) -> None:
        assert count_lines("line1\nline2\nline3") == 3

    def test_empty_content_is_one_line(self) -> None:
        assert count_lines("") == 1

    def test_trailing_newline_adds_segment(self) -> None:
        assert count_lines("line1\nline2\n") == 3

    def test_matches_newline_count_plus_one(self) -> None:
        text = "a\n\nb\r\nc\n"
        assert count_lines(text) == text.count("\n") + 1


class TestAsNumber:
    def test_returns_valid_numbers(self) -> None:
        assert as_number(42, 0) == 42
        assert as_number(0, 100) == 0
        assert as_number(-5, 0) == -5
        assert as_number(2.5, 0) == 2.5

    def test_fallback_for_invalid_values(self) -> None:
        assert as_number("42", 0) == 0
        assert as_number(None, 100) == 100
        assert as_number(math.nan, 10) == 10
        assert as_number(math.inf, 10) == 10

    def test_bool_is_not_a_number(self) -> None:
        assert as_number(True, 7) == 7

    def test_huge_int_is_returned_without_overflow(self) -> None:
        assert as_number(10**400, 5) == 10**400


class TestAsBoolean:
    def test_returns_booleans(self) -> None:
        assert as_boolean(True, False) is True
        assert as_boolean(False, True) is False

    def test_fallback_for_non_booleans(self) -> None:
        assert as_boolean("true", False) is False
        assert as_boolean(1, False) is False
        assert as_boolean(None, True) is True


class TestAsStringArray:
    def test_returns_string_lists(self) -> None:
        assert as_string_array(["a", "b"], []) == ["a", "b"]
        assert as_string_array([], ["default"]) == []

    def test_fallback_for_invalid_values(self) -> None:
        assert as_string_array("string", ["default"]) == ["default"]
        assert as_string_array([1, 2, 3], ["default"]) == ["default"]
        assert as_string_array(["a", 1, "b"], ["default"]) == ["default"]
        assert as_string_array(None, ["default"]) == ["default"]
