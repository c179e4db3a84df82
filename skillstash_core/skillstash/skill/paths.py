"""Filesystem locations of skills and of the bundled workflow-role skills."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from skillstash.config.models import WORKFLOW_ROLES, WorkflowRole
from skillstash.validator.discovery import SKILL_FILE

logger = logging.getLogger(__name__)

SKILLS_DIR = "skills"

# Internal skills that drive each workflow role, under .agents/skills/
ROLE_SKILLS: dict[WorkflowRole, str] = {
    role: f"skillstash-{role}" for role in WORKFLOW_ROLES
}


def skill_directory(name: str, cwd: Path) -> Path:
    return Path(cwd) / SKILLS_DIR / name


def skill_file_path(name: str, cwd: Path) -> Path:
    return skill_directory(name, cwd) / SKILL_FILE


def skillstash_skill_path(role: WorkflowRole, cwd: Path) -> Path:
    """Return the SKILL.md that instructs the agent playing ``role``."""
    if role not in ROLE_SKILLS:
        raise ValueError(f"Unknown workflow role: {role!r}")
    return Path(cwd) / ".agents" / "skills" / ROLE_SKILLS[role] / SKILL_FILE


async def load_skillstash_skill(role: WorkflowRole, cwd: Path) -> str:
    path = skillstash_skill_path(role, cwd)
    logger.debug("Loading %s skill from %s", role, path)
    return await asyncio.to_thread(path.read_text, encoding="utf-8")


async def compose_prompt(
    role: WorkflowRole,
    cwd: Path,
    context_blocks: list[str] | None = None,
) -> str:
    """Build an agent prompt from the role's skill plus optional context blocks.

    Blocks are trimmed; empty ones are dropped. Parts are separated by a blank line.
    """
    skill = await load_skillstash_skill(role, cwd)
    blocks = [block.strip() for block in context_blocks or []]
    return "\n\n".join([skill.strip(), *(block for block in blocks if block)])
