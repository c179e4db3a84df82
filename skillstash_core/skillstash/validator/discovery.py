"""Skill discovery: find directories that hold a SKILL.md marker file."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SKILL_FILE = "SKILL.md"


def _scan(skills_path: Path) -> list[str]:
    """Match ``*/SKILL.md`` one level deep, skipping dot-directories."""
    skills = []
    for marker in skills_path.glob(f"*/{SKILL_FILE}"):
        skill_dir = marker.parent
        if skill_dir.name.startswith(".") or not marker.is_file():
            continue
        skills.append(str(skill_dir))
    return sorted(skills)


async def find_skills(skills_dir: str | Path, cwd: Path) -> list[str]:
    """Return sorted absolute paths of skill directories under ``cwd / skills_dir``.

    A missing skills directory yields an empty list rather than an error.
    """
    skills_path = Path(cwd).absolute() / skills_dir
    if not await asyncio.to_thread(skills_path.is_dir):
        logger.info("Skills directory %s does not exist", skills_path)
        return []

    skills = await asyncio.to_thread(_scan, skills_path)
    logger.info("Found %d skill(s) in %s", len(skills), skills_path)
    return skills
