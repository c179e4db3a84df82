"""Skill naming and path helpers."""

from skillstash.skill.naming import (
    NormalizedName,
    is_kebab_case,
    normalize_skill_name,
    title_from_kebab,
)
from skillstash.skill.paths import (
    compose_prompt,
    load_skillstash_skill,
    skill_directory,
    skill_file_path,
    skillstash_skill_path,
)

__all__ = [
    "NormalizedName",
    "compose_prompt",
    "is_kebab_case",
    "load_skillstash_skill",
    "normalize_skill_name",
    "skill_directory",
    "skill_file_path",
    "skillstash_skill_path",
    "title_from_kebab",
]
