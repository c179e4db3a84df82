"""Small predicates and coercions shared by the validator and config loader."""

from __future__ import annotations

import math
import re
from typing import Any

KEBAB_CASE_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def is_kebab_case(name: str) -> bool:
    """Check that a name is lowercase alphanumeric runs joined by single hyphens."""
    return KEBAB_CASE_RE.fullmatch(name) is not None


def count_lines(content: str) -> int:
    """Count newline-delimited segments, including a trailing empty one."""
    return content.count("\n") + 1


def as_number(value: Any, fallback: float) -> float:
    """Return ``value`` if it is a finite int or float, else ``fallback``."""
    # bool is an int subclass but never a number in config files
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return fallback


def as_boolean(value: Any, fallback: bool) -> bool:
    return value if isinstance(value, bool) else fallback


def as_string_array(value: Any, fallback: list[str]) -> list[str]:
    """Return ``value`` as a list if every element is a string, else ``fallback``."""
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return list(value)
    return fallback
