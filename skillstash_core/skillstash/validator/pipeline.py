"""Validation pipeline: runs every rule against each discovered skill."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from skillstash.config.models import ValidationConfig
from skillstash.validator.discovery import SKILL_FILE, find_skills
from skillstash.validator.frontmatter import extract_frontmatter
from skillstash.validator.models import SkillValidation, ValidationIssue
from skillstash.validator.rules import count_lines, is_kebab_case

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    """A frontmatter value counts as empty when it would stringify to nothing."""
    if value is None:
        return True
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return str(value).strip() == ""


def _check_frontmatter(
    content: str, skill_name: str, skill_md: str, config: ValidationConfig,
) -> list[ValidationIssue]:
    """Run the line-count and frontmatter rules on SKILL.md content."""
    issues: list[ValidationIssue] = []

    line_count = count_lines(content)
    if line_count > config.max_lines:
        issues.append(
            ValidationIssue(
                file=skill_md,
                message=f"SKILL.md has {line_count} lines (max: {config.max_lines})",
            )
        )

    result = extract_frontmatter(content)
    if result.error is not None:
        issues.append(ValidationIssue(file=skill_md, message=result.error))
        return issues

    frontmatter = result.frontmatter or {}
    for field in config.required_frontmatter:
        if _is_blank(frontmatter.get(field)):
            issues.append(
                ValidationIssue(
                    file=skill_md,
                    message=f"Missing or empty required frontmatter field: '{field}'",
                )
            )

    declared = frontmatter.get("name")
    if declared and declared != skill_name:
        issues.append(
            ValidationIssue(
                file=skill_md,
                message=(
                    f"Frontmatter 'name' field ('{declared}') must match "
                    f"directory name ('{skill_name}')"
                ),
            )
        )

    return issues


async def validate_skill(skill_path: str | Path, config: ValidationConfig) -> SkillValidation:
    """Validate a single skill directory.

    Order: 1. directory naming → 2. required files → 3. SKILL.md content
    (line count, frontmatter). Content rules only run when SKILL.md exists;
    a failure to read or parse it becomes a single error.
    """
    path = Path(skill_path)
    skill_name = path.name
    errors: list[ValidationIssue] = []

    if config.enforce_kebab_case and not is_kebab_case(skill_name):
        errors.append(
            ValidationIssue(
                file=str(path),
                message=(
                    f"Skill directory name '{skill_name}' must be kebab-case "
                    "(lowercase with hyphens)"
                ),
            )
        )

    for required in config.required_files:
        if not await asyncio.to_thread((path / required).exists):
            errors.append(
                ValidationIssue(file=str(path), message=f"Missing required file: {required}")
            )

    skill_md = path / SKILL_FILE
    if await asyncio.to_thread(skill_md.exists):
        try:
            content = await asyncio.to_thread(skill_md.read_text, encoding="utf-8")
            errors.extend(_check_frontmatter(content, skill_name, str(skill_md), config))
        except Exception as e:
            logger.warning("Failed to read or parse %s: %s", skill_md, e)
            errors.append(
                ValidationIssue(
                    file=str(skill_md),
                    message=f"Failed to read or parse SKILL.md: {e}",
                )
            )

    logger.debug("Validated %s: %d error(s)", skill_name, len(errors))
    return SkillValidation(
        skill_path=str(path),
        skill_name=skill_name,
        errors=errors,
        warnings=[],
    )


async def validate_all_skills(config: ValidationConfig, cwd: Path) -> list[SkillValidation]:
    """Discover and validate every skill under ``cwd / config.skills_dir``.

    Skills are validated concurrently; results come back in discovery order.
    """
    skill_paths = await find_skills(config.skills_dir, cwd)
    return list(await asyncio.gather(*(validate_skill(p, config) for p in skill_paths)))


def has_errors(results: list[SkillValidation]) -> bool:
    """True if any skill has at least one error (warnings never count)."""
    return any(r.errors for r in results)
