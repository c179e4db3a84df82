"""skillstash-validate -- command-line entrypoint for skill validation."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from skillstash.config.loader import ConfigError, load_config
from skillstash.validator.pipeline import has_errors, validate_all_skills
from skillstash.validator.reporter import format_results_plain, print_results

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillstash-validate",
        description="Validate skills (SKILL.md frontmatter, naming, size).",
    )
    parser.add_argument(
        "--cwd", type=Path, default=None,
        help="Repository root (default: current directory)",
    )
    parser.add_argument("--skills-dir", default=None, help="Override validation.skills_dir")
    parser.add_argument("--max-lines", type=int, default=None, help="Override validation.max_lines")
    parser.add_argument("--plain", action="store_true", help="Plain output without colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run validation and return the process exit status."""
    args = build_parser().parse_args(argv)

    debug = args.verbose or os.environ.get("SKILLSTASH_DEBUG", "").lower() == "true"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    cwd = args.cwd if args.cwd is not None else Path.cwd()
    try:
        config = load_config(cwd)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    overrides = {}
    if args.skills_dir is not None:
        overrides["skills_dir"] = args.skills_dir
    if args.max_lines is not None:
        overrides["max_lines"] = args.max_lines
    validation = config.validation.model_copy(update=overrides)
    logger.debug("Validation config: %s", validation.model_dump())

    results = asyncio.run(validate_all_skills(validation, cwd))

    if args.plain or not sys.stdout.isatty():
        print(format_results_plain(results, validation))
    else:
        print_results(results, validation)

    return EXIT_ERRORS if has_errors(results) else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
