"""Load policy descriptions from YAML/JSON files.

A description is a mapping validated by `Policy`, for example:

    name: size
    rules:
      - kind: {type: external_list, name: size, exec: ""}
      - label: size
        kind:
          type: list
          name: size
          directories_plus: true
          show: [KB_ALLOCATED]
          where: {type: user, id: 1000}

This is not a parser for the policy grammar itself.
"""

import pathlib
from typing import Any, Union

from pydantic import ValidationError

from mmpolicy.config.loader import ConfigValidationError, format_validation_error, load_config_file

from .schema import Policy


def validate_policy(config: dict[str, Any]) -> Policy:
    """Validate a mapping against Policy.

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        return Policy.model_validate(config)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Policy validation failed:\n{format_validation_error(e)}"
        ) from e


def load_policy(config_path: Union[str, pathlib.Path]) -> Policy:
    """Load and validate a policy description file.

    Raises:
        ConfigValidationError: If loading or validation fails
    """
    return validate_policy(load_config_file(config_path))
