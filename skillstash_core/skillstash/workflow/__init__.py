"""Workflow helpers: agent resolution and branch naming."""

from skillstash.workflow.branch import BranchAction, branch_name
from skillstash.workflow.resolver import (
    ResolvedStep,
    resolve_agent,
    resolve_review_mode,
    resolve_workflow,
)

__all__ = [
    "BranchAction",
    "ResolvedStep",
    "branch_name",
    "resolve_agent",
    "resolve_review_mode",
    "resolve_workflow",
]
