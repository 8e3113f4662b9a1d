"""
Configuration loader with deep merge.

Precedence order (lowest to highest):
1. Defaults (defined in the Pydantic schemas)
2. YAML file
3. Environment variables
4. CLI arguments

The merge is recursive so every key is preserved at every level.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from .schema import AppConfig


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursive dictionary merge.

    Args:
        base: Base dictionary
        override: Dictionary whose values win over base

    Returns:
        New merged dictionary. Override wins on leaf conflicts.

    Example:
        >>> base = {"a": {"b": 1, "c": 2}, "d": 3}
        >>> override = {"a": {"b": 99}, "e": 4}
        >>> deep_merge(base, override)
        {"a": {"b": 99, "c": 2}, "d": 3, "e": 4}
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_config(config_path: Path | None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file, or None to skip

    Returns:
        Dictionary with the configuration, or an empty dict without a file
    """
    if not config_path:
        return {}

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
        return data if data else {}


def load_env_overrides() -> dict[str, Any]:
    """Load overrides from environment variables.

    Supported variables:
        TEXTINDEXER_LOG_LEVEL: overrides logging.level
        TEXTINDEXER_WORKSPACE: overrides workspace.root
        TEXTINDEXER_BATCH_POLICY: overrides indexer.batch_failure_policy

    Returns:
        Dictionary with the overrides from env vars
    """
    overrides: dict[str, Any] = {}

    if log_level := os.environ.get("TEXTINDEXER_LOG_LEVEL"):
        overrides.setdefault("logging", {})["level"] = log_level.lower()

    if workspace := os.environ.get("TEXTINDEXER_WORKSPACE"):
        overrides.setdefault("workspace", {})["root"] = workspace

    if policy := os.environ.get("TEXTINDEXER_BATCH_POLICY"):
        overrides.setdefault("indexer", {})["batch_failure_policy"] = policy.lower()

    return overrides


def apply_cli_overrides(config_dict: dict[str, Any], cli_args: dict[str, Any]) -> dict[str, Any]:
    """Apply overrides from CLI arguments.

    Args:
        config_dict: Base configuration (already merged with YAML and env)
        cli_args: Dictionary of CLI arguments

    Returns:
        Configuration with the CLI overrides applied
    """
    overrides: dict[str, Any] = {}

    # Workspace overrides
    if cli_args.get("workspace"):
        overrides.setdefault("workspace", {})["root"] = cli_args["workspace"]

    # Indexer overrides
    if cli_args.get("batch_policy"):
        overrides.setdefault("indexer", {})["batch_failure_policy"] = cli_args["batch_policy"]

    if cli_args.get("recursive") is not None:
        overrides.setdefault("indexer", {})["recursive"] = cli_args["recursive"]

    # Logging overrides
    if cli_args.get("log_level"):
        overrides.setdefault("logging", {})["level"] = cli_args["log_level"]

    if cli_args.get("log_file"):
        overrides.setdefault("logging", {})["file"] = cli_args["log_file"]

    if cli_args.get("verbose") is not None:
        overrides.setdefault("logging", {})["verbose"] = cli_args["verbose"]

    return deep_merge(config_dict, overrides)


def load_config(
    config_path: Path | None = None,
    cli_args: dict[str, Any] | None = None,
) -> AppConfig:
    """Load and validate the complete application configuration.

    Args:
        config_path: Path to the YAML configuration file
        cli_args: Dictionary of CLI arguments

    Returns:
        Validated, complete AppConfig

    Raises:
        FileNotFoundError: If config_path does not exist
        ValidationError: If the final configuration is not valid
    """
    cli_args = cli_args or {}

    yaml_config = load_yaml_config(config_path)

    env_overrides = load_env_overrides()
    merged = deep_merge(yaml_config, env_overrides)

    merged = apply_cli_overrides(merged, cli_args)

    # Pydantic fills in the defaults for anything still missing
    return AppConfig(**merged)
