"""Policy document model and writer.

The model describes a policy as typed rules; the writer renders it into
the text grammar consumed by `mmapplypolicy`.
"""

from .loader import load_policy, validate_policy
from .schema import (
    ExternalList,
    FileList,
    Filter,
    GroupFilter,
    Policy,
    Rule,
    RuleKind,
    Show,
    UserFilter,
)
from .writer import format_show, render_policy, write_policy

__all__ = [
    "ExternalList",
    "FileList",
    "Filter",
    "GroupFilter",
    "Policy",
    "Rule",
    "RuleKind",
    "Show",
    "UserFilter",
    "format_show",
    "load_policy",
    "render_policy",
    "validate_policy",
    "write_policy",
]
