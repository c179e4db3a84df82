"""Validation data models."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    error = "error"
    warning = "warning"


class ValidationIssue(BaseModel):
    """A single validation finding, tied to the file it was found in."""

    model_config = ConfigDict(frozen=True)

    file: str
    message: str
    severity: ValidationSeverity = ValidationSeverity.error


class SkillValidation(BaseModel):
    """Result of validating one skill directory."""

    model_config = ConfigDict(frozen=True)

    skill_path: str
    skill_name: str
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_consistency(self) -> SkillValidation:
        if self.skill_name != PurePath(self.skill_path).name:
            raise ValueError(
                f"skill_name '{self.skill_name}' must be the last segment of '{self.skill_path}'"
            )
        if any(i.severity != ValidationSeverity.error for i in self.errors):
            raise ValueError("errors may only hold error-severity issues")
        if any(i.severity != ValidationSeverity.warning for i in self.warnings):
            raise ValueError("warnings may only hold warning-severity issues")
        return self

    @property
    def passed(self) -> bool:
        return not self.errors


class FrontmatterResult(BaseModel):
    """Outcome of extracting YAML frontmatter from a document.

    Either ``frontmatter`` holds the parsed mapping, or ``error`` explains
    why there is none.
    """

    frontmatter: dict[Any, Any] | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> FrontmatterResult:
        if self.frontmatter is None and self.error is None:
            raise ValueError("error must be set when frontmatter is absent")
        if self.frontmatter is not None and self.error is not None:
            raise ValueError("frontmatter and error are mutually exclusive")
        return self


class ValidationSummary(BaseModel):
    """Aggregate counts over a validation run."""

    skills_checked: int = 0
    total_errors: int = 0
    total_warnings: int = 0

    @computed_field
    @property
    def passed(self) -> bool:
        return self.total_errors == 0
