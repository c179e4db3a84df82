"""Tests for YAML frontmatter extraction."""

from __future__ import annotations

from skillstash.validator.frontmatter import NO_FRONTMATTER_ERROR, extract_frontmatter


def test_extracts_valid_frontmatter() -> None:
    content = "---\nname: my-skill\ndescription: A test skill\n---\n\n# Content here\n"
    result = extract_frontmatter(content)
    assert result.error is None
    assert result.frontmatter == {"name": "my-skill", "description": "A test skill"}


def test_missing_frontmatter() -> None:
    result = extract_frontmatter("# Just content\nNo frontmatter here")
    assert result.frontmatter is None
    assert result.error == NO_FRONTMATTER_ERROR


def test_leading_content_is_not_tolerated() -> None:
    content = "\n---\nname: my-skill\n---\n"
    result = extract_frontmatter(content)
    assert result.frontmatter is None
    assert "No YAML frontmatter found" in result.error


def test_unterminated_block() -> None:
    result = extract_frontmatter("---\nname: my-skill\n\n# Body")
    assert result.frontmatter is None
    assert "No YAML frontmatter found" in result.error


def test_invalid_yaml() -> None:
    content = "---\nname: [invalid: yaml\n---\n\n# Content"
    result = extract_frontmatter(content)
    assert result.frontmatter is None
    assert result.error.startswith("Invalid YAML in frontmatter: ")


def test_recursive_alias_is_reported_not_raised() -> None:
    result = extract_frontmatter("---\nname: &a [*a]\ndescription: x\n---\n")
    assert result.frontmatter is None
    assert result.error.startswith("Invalid YAML in frontmatter: ")


def test_non_mapping_frontmatter() -> None:
    result = extract_frontmatter("---\n- one\n- two\n---\n")
    assert result.frontmatter is None
    assert "must be a mapping" in result.error


def test_closing_delimiter_at_end_of_input() -> None:
    result = extract_frontmatter("---\nname: my-skill\n---")
    assert result.frontmatter == {"name": "my-skill"}


def test_crlf_line_endings() -> None:
    result = extract_frontmatter("---\r\nname: my-skill\r\ndescription: x\r\n---\r\nbody")
    assert result.error is None
    assert result.frontmatter["name"] == "my-skill"


def test_additional_fields_round_trip() -> None:
    content = (
        "---\n"
        "name: my-skill\n"
        "description: Test\n"
        "custom_field: value\n"
        "tags:\n"
        "  - one\n"
        "  - two\n"
        "metadata:\n"
        "  version: 2\n"
        "  enabled: true\n"
        "  owners: [alice, bob]\n"
        "---\n"
    )
    result = extract_frontmatter(content)
    assert result.error is None
    assert result.frontmatter == {
        "name": "my-skill",
        "description": "Test",
        "custom_field": "value",
        "tags": ["one", "two"],
        "metadata": {"version": 2, "enabled": True, "owners": ["alice", "bob"]},
    }
    assert type(result.frontmatter["metadata"]) is dict
    assert type(result.frontmatter["tags"]) is list
