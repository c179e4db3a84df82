"""YAML frontmatter extraction using ruamel.yaml."""

from __future__ import annotations

import re
from io import StringIO
from typing import Any

from ruamel.yaml import YAML, YAMLError

from skillstash.validator.models import FrontmatterResult

# Block must open on the very first line; \Z keeps "$" from matching before a final newline.
FRONTMATTER_RE = re.compile(r"---\s*\r?\n(.*?)\r?\n---\s*(?:\r?\n|\Z)", re.DOTALL)

NO_FRONTMATTER_ERROR = "No YAML frontmatter found (must start with --- and end with ---)"


def _to_plain(obj: Any) -> Any:
    """Convert ruamel containers to plain dicts and lists, recursively."""
    if hasattr(obj, "items"):
        return {key: _to_plain(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_to_plain(item) for item in obj]
    return obj


def extract_frontmatter(content: str) -> FrontmatterResult:
    """Extract and parse the YAML frontmatter block at the top of a document.

    Returns a FrontmatterResult holding the parsed mapping on success,
    or an error message when the block is missing or not valid YAML.
    """
    match = FRONTMATTER_RE.match(content)
    if match is None:
        return FrontmatterResult(error=NO_FRONTMATTER_ERROR)

    yaml = YAML(typ="safe")
    try:
        parsed = yaml.load(StringIO(match.group(1)))
    except (YAMLError, RecursionError) as e:
        return FrontmatterResult(error=f"Invalid YAML in frontmatter: {e}")

    if parsed is None:
        parsed = {}
    if not hasattr(parsed, "items"):
        return FrontmatterResult(
            error=(
                "Invalid YAML in frontmatter: frontmatter must be a mapping, "
                f"got {type(parsed).__name__}"
            )
        )

    try:
        plain = _to_plain(parsed)
    except RecursionError:
        # Self-referencing anchors (e.g. "a: &x [*x]") cannot become plain data.
        return FrontmatterResult(
            error="Invalid YAML in frontmatter: recursive alias in frontmatter"
        )

    return FrontmatterResult(frontmatter=plain)
