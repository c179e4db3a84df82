"""Branch naming for skill changes."""

from __future__ import annotations

from typing import Literal

BranchAction = Literal["add", "update", "remove"]


def branch_name(name: str, action: BranchAction = "add") -> str:
    return f"skill/{action}-{name}"
