"""Configuration loading for mmpolicy.

This module handles loading YAML/JSON files and validating them against
the package's Pydantic models. It provides clear, user-friendly error
messages.
"""

import json
import pathlib
from typing import Any, Union

import yaml
from pydantic import ValidationError

from mmpolicy.utils import get_file_extension, get_logger, is_supported_config_format

from .options import RunOptions

logger = get_logger(__name__)


class ConfigValidationError(Exception):
    """Raised when a configuration file cannot be loaded or validated."""

    pass


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load a mapping from a YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing configuration

    Raises:
        ConfigValidationError: If file cannot be loaded or parsed
    """
    config_path = pathlib.Path(config_path).expanduser()

    if not config_path.is_file():
        raise ConfigValidationError(f"Configuration file not found: {config_path}")

    if not is_supported_config_format(config_path):
        raise ConfigValidationError(
            f"Unsupported file format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if get_file_extension(config_path) == "json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigValidationError(f"Failed to read configuration file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigValidationError(f"Failed to decode configuration file {config_path}: Encoding error: {e}") from e

    if config is None:
        raise ConfigValidationError(f"Configuration file is empty: {config_path}")

    if not isinstance(config, dict):
        raise ConfigValidationError(
            f"Configuration must be a dictionary, got {type(config).__name__}"
        )

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def format_validation_error(error: ValidationError) -> str:
    """Format a Pydantic validation error for user-friendly display.

    Args:
        error: Exception from Pydantic validation

    Returns:
        One line per offending field
    """
    errors = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
        error_msg = err.get("msg", "Validation error")
        error_type = err.get("type", "unknown")
        errors.append(f"  {field_path}: {error_msg} ({error_type})")
    return "\n".join(errors)


def validate_run_options(config: dict[str, Any]) -> RunOptions:
    """Validate a mapping against RunOptions.

    Args:
        config: Configuration dictionary

    Returns:
        Validated RunOptions instance

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        return RunOptions.model_validate(config)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Run options validation failed:\n{format_validation_error(e)}"
        ) from e


def load_run_options(config_path: Union[str, pathlib.Path]) -> RunOptions:
    """Load and validate run options from a YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Validated RunOptions instance

    Raises:
        ConfigValidationError: If loading or validation fails
    """
    return validate_run_options(load_config_file(config_path))
