"""GitHub event models and issue field extraction."""

from skillstash.github.events import (
    AutomationMode,
    IssueEvent,
    PullRequestEvent,
    resolve_automation_mode,
)
from skillstash.github.fields import extract_field, issue_title_to_name, sanitize_lines

__all__ = [
    "AutomationMode",
    "IssueEvent",
    "PullRequestEvent",
    "extract_field",
    "issue_title_to_name",
    "resolve_automation_mode",
    "sanitize_lines",
]
