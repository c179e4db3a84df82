"""Extract values from issue-form markdown bodies and titles."""

from __future__ import annotations

import re

ISSUE_TITLE_RE = re.compile(r"skill:\s*(.+)", re.IGNORECASE)


def extract_field(body: str, label: str) -> str | None:
    """Return the text under a ``### <label>`` heading, up to the next ``###``.

    Heading match is case-insensitive. Returns None when the heading is
    missing or its section is blank.
    """
    pattern = re.compile(
        rf"###\s+{re.escape(label)}\s*\n+(.*?)(?=\n###\s|\Z)",
        re.IGNORECASE | re.DOTALL,
    )
    match = pattern.search(body)
    if match is None:
        return None
    value = match.group(1).strip()
    return value or None


def sanitize_lines(value: str) -> str:
    """Trim every line and drop the empty ones."""
    lines = (line.strip() for line in re.split(r"\r?\n", value))
    return "\n".join(line for line in lines if line)


def issue_title_to_name(title: str) -> str | None:
    """'skill: my-new-skill' -> 'my-new-skill'."""
    match = ISSUE_TITLE_RE.search(title)
    return match.group(1).strip() if match else None
