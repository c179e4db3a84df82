"""Skill naming utilities."""

from __future__ import annotations

import re
from typing import NamedTuple

from skillstash.validator.rules import is_kebab_case

__all__ = ["NormalizedName", "is_kebab_case", "normalize_skill_name", "title_from_kebab"]


class NormalizedName(NamedTuple):
    name: str
    changed: bool


def normalize_skill_name(raw: str) -> NormalizedName:
    """Turn free-form input (e.g. an issue title) into a kebab-case skill name."""
    trimmed = raw.strip()
    name = re.sub(r"[^a-z0-9\s-]", "", trimmed.lower())
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"-+", "-", name)
    name = re.sub(r"^-|-$", "", name)
    return NormalizedName(name=name, changed=name != trimmed)


def title_from_kebab(name: str) -> str:
    """'my-skill-name' -> 'My Skill Name'."""
    return " ".join(part[0].upper() + part[1:] for part in name.split("-") if part)
