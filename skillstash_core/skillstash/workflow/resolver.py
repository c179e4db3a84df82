"""Resolve which agent runs each workflow role, and the review mode for a request."""

from __future__ import annotations

from typing import get_args

from pydantic import BaseModel

from skillstash.config.models import (
    WORKFLOW_ROLES,
    AgentName,
    ReviewMode,
    StashConfig,
    WorkflowRole,
    WorkflowStep,
)

KNOWN_AGENTS: frozenset[str] = frozenset(get_args(AgentName))


class ResolvedStep(BaseModel):
    role: WorkflowRole
    agent: AgentName


def resolve_agent(
    config: StashConfig, role: WorkflowRole, override: str | None = None,
) -> AgentName:
    """Pick the agent for ``role``: explicit override, then role mapping, then default.

    "default" and unknown agent names both resolve to ``config.agents.default``.
    """
    candidate = override if override is not None else config.agents.roles.get(role, "default")
    if candidate in KNOWN_AGENTS:
        return candidate  # type: ignore[return-value]
    return config.agents.default


def resolve_workflow(config: StashConfig) -> list[ResolvedStep]:
    """Return the configured workflow, or research -> author -> review by default."""
    steps = config.workflow or [
        WorkflowStep(role=role, agent=config.agents.roles.get(role, "default"))
        for role in WORKFLOW_ROLES
    ]
    return [
        ResolvedStep(role=step.role, agent=resolve_agent(config, step.role, step.agent))
        for step in steps
    ]


def resolve_review_mode(labels: list[str], config: StashConfig) -> ReviewMode:
    """Labels on the issue/PR override the configured default review mode."""
    if config.labels.require_review in labels:
        return "required"
    if config.labels.skip_review in labels:
        return "skip"
    return config.defaults.review
