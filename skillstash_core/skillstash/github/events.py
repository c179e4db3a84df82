"""GitHub webhook payload models (only the fields skill workflows read)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

AutomationMode = Literal["app", "github"]


class Label(BaseModel):
    name: str


class Owner(BaseModel):
    login: str


class Repository(BaseModel):
    owner: Owner
    name: str
    full_name: str = ""


class Issue(BaseModel):
    number: int
    title: str
    body: str | None = None
    labels: list[Label] = Field(default_factory=list)


class PullRequestHead(BaseModel):
    ref: str


class PullRequest(BaseModel):
    number: int
    title: str
    body: str | None = None
    head: PullRequestHead
    labels: list[Label] = Field(default_factory=list)


class IssueEvent(BaseModel):
    """Payload of an ``issues`` event."""

    issue: Issue
    repository: Repository

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.issue.labels]


class PullRequestEvent(BaseModel):
    """Payload of a ``pull_request`` event."""

    pull_request: PullRequest
    repository: Repository

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.pull_request.labels]


def resolve_automation_mode(has_app_token: bool) -> AutomationMode:
    """Act as the GitHub App when its token is available, else as the Actions bot."""
    return "app" if has_app_token else "github"
