"""Shared utilities for mmpolicy.

This module provides common utilities used across the package.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_INPUT,
    EXIT_POLICY_FAILED,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    MMAPPLYPOLICY,
    QUIET_INFORMATION_LEVEL,
    SUPPORTED_CONFIG_FORMATS,
)
from .file_helpers import (
    file_name_component,
    get_file_extension,
    is_supported_config_format,
)
from .logging import get_logger, log_level_for, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "EXIT_INVALID_INPUT",
    "EXIT_POLICY_FAILED",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "MMAPPLYPOLICY",
    "QUIET_INFORMATION_LEVEL",
    "SUPPORTED_CONFIG_FORMATS",
    "file_name_component",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "log_level_for",
    "setup_logging",
]
