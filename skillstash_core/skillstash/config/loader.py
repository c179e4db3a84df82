"""Load ``.skillstash/config.yml`` into a StashConfig."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML, YAMLError

from skillstash.config.models import (
    DEFAULT_CONFIG,
    DEFAULT_VALIDATION_CONFIG,
    StashConfig,
    ValidationConfig,
)
from skillstash.validator.rules import as_boolean, as_number, as_string_array

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(".skillstash") / "config.yml"


class ConfigError(ValueError):
    """Raised when the config file exists but cannot be used."""


def _lookup(section: dict[str, Any], snake: str, camel: str) -> Any:
    """Read a key in either spelling, snake_case winning when both are present."""
    if snake in section:
        return section[snake]
    return section.get(camel)


def _coerce_validation(section: Any) -> ValidationConfig:
    """Build a ValidationConfig from loosely typed YAML, falling back per field."""
    if not isinstance(section, dict):
        return DEFAULT_VALIDATION_CONFIG

    d = DEFAULT_VALIDATION_CONFIG
    skills_dir = _lookup(section, "skills_dir", "skillsDir")
    max_lines = as_number(_lookup(section, "max_lines", "maxLines"), d.max_lines)

    return ValidationConfig(
        skills_dir=skills_dir if isinstance(skills_dir, str) and skills_dir else d.skills_dir,
        max_lines=int(max_lines),
        required_files=as_string_array(
            _lookup(section, "required_files", "requiredFiles"), list(d.required_files)
        ),
        required_frontmatter=as_string_array(
            _lookup(section, "required_frontmatter", "requiredFrontmatter"),
            list(d.required_frontmatter),
        ),
        enforce_kebab_case=as_boolean(
            _lookup(section, "enforce_kebab_case", "enforceKebabCase"), d.enforce_kebab_case
        ),
    )


def parse_config(text: str) -> StashConfig:
    """Parse config YAML text. Missing sections keep their defaults."""
    yaml = YAML(typ="safe")
    try:
        raw = yaml.load(StringIO(text))
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in config: {e}") from e

    if raw is None:
        return DEFAULT_CONFIG
    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a mapping, got {type(raw).__name__}")

    data = {key: value for key, value in raw.items() if key != "validation"}
    try:
        config = StashConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e

    return config.model_copy(update={"validation": _coerce_validation(raw.get("validation"))})


def load_config(cwd: Path) -> StashConfig:
    """Load the project config under ``cwd``, or the defaults if there is none."""
    path = Path(cwd) / CONFIG_PATH
    if not path.exists():
        logger.info("No config at %s, using defaults", path)
        return DEFAULT_CONFIG

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    config = parse_config(text)
    logger.info("Loaded config from %s", path)
    return config
