"""Construct, write and run IBM Storage Scale file system policies.

Example:

    from mmpolicy import ExternalList, FileList, Policy, Rule, RunOptions, Show, run_policy

    policy = Policy.new("size")
    policy.rules.append(Rule.of(ExternalList(name="size", exec="")))
    policy.rules.append(
        Rule(label="size", kind=FileList(name="size", directories_plus=True, show=[Show.KB_ALLOCATED]))
    )

    options = RunOptions(action="defer", choice_algorithm="fast", information_level="0")
    reports = run_policy(policy, "/data/test", "/work/.policy/size.policy", "/work/.policy/report", options)
"""

from .config import ConfigValidationError, RunOptions, load_run_options
from .core import (
    ApplyPolicyError,
    ApplyPolicyFailedError,
    CreatePolicyFileError,
    InvalidFileListPrefixError,
    PolicyRunError,
    PolicyRunner,
    WritePolicyError,
    run_policy,
)
from .policy import (
    ExternalList,
    FileList,
    GroupFilter,
    Policy,
    Rule,
    Show,
    UserFilter,
    load_policy,
    render_policy,
    write_policy,
)
from .utils import APP_VERSION as __version__

__all__ = [
    "ApplyPolicyError",
    "ApplyPolicyFailedError",
    "ConfigValidationError",
    "CreatePolicyFileError",
    "ExternalList",
    "FileList",
    "GroupFilter",
    "InvalidFileListPrefixError",
    "Policy",
    "PolicyRunError",
    "PolicyRunner",
    "Rule",
    "RunOptions",
    "Show",
    "UserFilter",
    "WritePolicyError",
    "load_policy",
    "load_run_options",
    "render_policy",
    "run_policy",
    "write_policy",
]
