"""Render validation results for the terminal or plain-text logs."""

from __future__ import annotations

import sys
from typing import TextIO

from skillstash.config.models import ValidationConfig
from skillstash.validator.models import SkillValidation, ValidationSummary

COLORS = {
    "reset": "\033[0m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "gray": "\033[90m",
    "bold": "\033[1m",
}


def summarize_results(results: list[SkillValidation]) -> ValidationSummary:
    total_errors = sum(len(r.errors) for r in results)
    total_warnings = sum(len(r.warnings) for r in results)
    return ValidationSummary(
        skills_checked=len(results),
        total_errors=total_errors,
        total_warnings=total_warnings,
    )


def format_results(results: list[SkillValidation], config: ValidationConfig) -> str:
    """Format results with ANSI colors and status glyphs."""
    c = COLORS
    lines = [f"{c['bold']}Skills Validation Report{c['reset']}", ""]

    if not results:
        lines.append(f"{c['gray']}No skills found in {config.skills_dir}/{c['reset']}")
        lines.append("")
        return "\n".join(lines)

    for result in results:
        has_issues = bool(result.errors or result.warnings)
        icon, color = ("✗", c["red"]) if has_issues else ("✓", c["green"])
        lines.append(f"{color}{icon}{c['reset']} {c['bold']}{result.skill_name}{c['reset']}")

        for error in result.errors:
            lines.append(f"  {c['red']}ERROR{c['reset']} {error.message}")
            lines.append(f"  {c['gray']}{error.file}{c['reset']}")
        for warning in result.warnings:
            lines.append(f"  {c['yellow']}WARN{c['reset']} {warning.message}")
            lines.append(f"  {c['gray']}{warning.file}{c['reset']}")

        if not has_issues:
            lines.append(f"  {c['gray']}All checks passed{c['reset']}")
        lines.append("")

    summary = summarize_results(results)
    error_color = c["red"] if summary.total_errors else c["green"]
    warning_color = c["yellow"] if summary.total_warnings else c["green"]
    lines.extend([
        f"{c['bold']}Summary{c['reset']}",
        f"  Skills checked: {summary.skills_checked}",
        f"  Errors: {error_color}{summary.total_errors}{c['reset']}",
        f"  Warnings: {warning_color}{summary.total_warnings}{c['reset']}",
        "",
    ])
    return "\n".join(lines)


def print_results(
    results: list[SkillValidation],
    config: ValidationConfig,
    stream: TextIO | None = None,
) -> None:
    """Write the colored report to ``stream`` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    out.write("\n" + format_results(results, config) + "\n")


def format_results_plain(
    results: list[SkillValidation],
    config: ValidationConfig | None = None,
) -> str:
    """Format results without colors, using [PASS]/[FAIL] labels."""
    lines = ["Skills Validation Report", ""]

    if not results:
        lines.append(f"No skills found in {config.skills_dir}/" if config else "No skills found")
        return "\n".join(lines)

    for result in results:
        status = "FAIL" if result.errors else "PASS"
        lines.append(f"[{status}] {result.skill_name}")
        for error in result.errors:
            lines.append(f"  ERROR: {error.message}")
            lines.append(f"    {error.file}")
        for warning in result.warnings:
            lines.append(f"  WARN: {warning.message}")
            lines.append(f"    {warning.file}")

    summary = summarize_results(results)
    lines.extend([
        "",
        f"Skills checked: {summary.skills_checked}",
        f"Errors: {summary.total_errors}",
        f"Warnings: {summary.total_warnings}",
    ])
    return "\n".join(lines)
