"""Running policies with `mmapplypolicy`."""

from .errors import (
    ApplyPolicyError,
    ApplyPolicyFailedError,
    CreatePolicyFileError,
    InvalidFileListPrefixError,
    PolicyRunError,
    WritePolicyError,
)
from .orchestrator import (
    PolicyRunner,
    build_command,
    child_stdout,
    report_paths,
    run_policy,
    validate_file_list_prefix,
)

__all__ = [
    "ApplyPolicyError",
    "ApplyPolicyFailedError",
    "CreatePolicyFileError",
    "InvalidFileListPrefixError",
    "PolicyRunError",
    "PolicyRunner",
    "WritePolicyError",
    "build_command",
    "child_stdout",
    "report_paths",
    "run_policy",
    "validate_file_list_prefix",
]
