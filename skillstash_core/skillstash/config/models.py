"""Configuration models for a skillstash repository."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

AgentName = Literal["claude", "codex"]
WorkflowRole = Literal["research", "author", "review"]
ReviewMode = Literal["auto", "required", "skip"]

WORKFLOW_ROLES: tuple[WorkflowRole, ...] = ("research", "author", "review")


class ValidationConfig(BaseModel):
    """Rules applied when validating the skills directory."""

    model_config = ConfigDict(frozen=True)

    skills_dir: str = "skills"
    max_lines: int = 500
    required_files: tuple[str, ...] = ("SKILL.md",)
    required_frontmatter: tuple[str, ...] = ("name", "description")
    enforce_kebab_case: bool = True


DEFAULT_VALIDATION_CONFIG = ValidationConfig()


class DefaultsConfig(BaseModel):
    review: ReviewMode = "auto"


class LabelsConfig(BaseModel):
    """Issue/PR labels that switch review behaviour."""

    require_review: str = "review:required"
    skip_review: str = "review:skip"


class AgentsConfig(BaseModel):
    """Which coding agent runs each workflow role."""

    default: AgentName = "claude"
    roles: dict[WorkflowRole, AgentName | Literal["default"]] = Field(default_factory=dict)


class WorkflowStep(BaseModel):
    role: WorkflowRole
    agent: str = "default"


class StashConfig(BaseModel):
    """Top-level project configuration (``.skillstash/config.yml``)."""

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    labels: LabelsConfig = Field(default_factory=LabelsConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    agents: AgentsConfig = Field(default_factory=AgentsConfig)
    workflow: list[WorkflowStep] = Field(default_factory=list)


DEFAULT_CONFIG = StashConfig()
