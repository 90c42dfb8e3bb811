"""Run configuration for `mmapplypolicy`."""

from .loader import (
    ConfigValidationError,
    format_validation_error,
    load_config_file,
    load_run_options,
    validate_run_options,
)
from .options import RunOptions

__all__ = [
    "ConfigValidationError",
    "RunOptions",
    "format_validation_error",
    "load_config_file",
    "load_run_options",
    "validate_run_options",
]
