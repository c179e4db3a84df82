"""Project configuration: models, defaults and loading."""

from skillstash.config.loader import ConfigError, load_config, parse_config
from skillstash.config.models import (
    DEFAULT_CONFIG,
    DEFAULT_VALIDATION_CONFIG,
    AgentName,
    AgentsConfig,
    DefaultsConfig,
    LabelsConfig,
    ReviewMode,
    StashConfig,
    ValidationConfig,
    WorkflowRole,
    WorkflowStep,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_VALIDATION_CONFIG",
    "AgentName",
    "AgentsConfig",
    "ConfigError",
    "DefaultsConfig",
    "LabelsConfig",
    "ReviewMode",
    "StashConfig",
    "ValidationConfig",
    "WorkflowRole",
    "WorkflowStep",
    "load_config",
    "parse_config",
]
