"""Skill validation: discovery, frontmatter parsing, rules and reporting."""

from skillstash.config.models import DEFAULT_VALIDATION_CONFIG, ValidationConfig
from skillstash.validator.discovery import find_skills
from skillstash.validator.frontmatter import extract_frontmatter
from skillstash.validator.models import (
    FrontmatterResult,
    SkillValidation,
    ValidationIssue,
    ValidationSeverity,
    ValidationSummary,
)
from skillstash.validator.pipeline import has_errors, validate_all_skills, validate_skill
from skillstash.validator.reporter import (
    COLORS,
    format_results,
    format_results_plain,
    print_results,
    summarize_results,
)
from skillstash.validator.rules import (
    as_boolean,
    as_number,
    as_string_array,
    count_lines,
    is_kebab_case,
)

__all__ = [
    "COLORS",
    "DEFAULT_VALIDATION_CONFIG",
    "FrontmatterResult",
    "SkillValidation",
    "ValidationConfig",
    "ValidationIssue",
    "ValidationSeverity",
    "ValidationSummary",
    "as_boolean",
    "as_number",
    "as_string_array",
    "count_lines",
    "extract_frontmatter",
    "find_skills",
    "format_results",
    "format_results_plain",
    "has_errors",
    "is_kebab_case",
    "print_results",
    "summarize_results",
    "validate_all_skills",
    "validate_skill",
]
