"""Constants for mmpolicy.

This module defines shared constants used across the package.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_POLICY_FAILED = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "mmpolicy"
APP_VERSION = "0.1.0"

# External policy engine
MMAPPLYPOLICY = "mmapplypolicy"
QUIET_INFORMATION_LEVEL = "0"

# Supported file formats
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

