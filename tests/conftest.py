"""Shared test fixtures and configuration."""

import sys
from pathlib import Path
from typing import Callable

# Add skillstash_core/ to Python path so `from skillstash.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "skillstash_core"))

import pytest


def skill_md(name: str = "my-skill", description: str = "A test skill", body: str = "") -> str:
    """Build a minimal SKILL.md document."""
    return f"---\nname: {name}\ndescription: {description}\n---\n\n# {name}\n{body}"


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def write_skill(skills_root: Path) -> Callable[..., Path]:
    """Create ``skills/<dirname>/SKILL.md``; pass content=None to omit the file."""

    def _write(dirname: str, content: str | None = None) -> Path:
        skill_dir = skills_root / dirname
        skill_dir.mkdir(parents=True, exist_ok=True)
        if content is not None:
            (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        return skill_dir

    return _write
