"""Policy writer.

This module renders a `Policy` into the text grammar read by
`mmapplypolicy -P`. Rendering is deterministic: the same policy always
produces the same text.
"""

import io
from typing import TextIO

from .schema import ExternalList, FileList, GroupFilter, Policy, Rule, Show, UserFilter

INDENT = "  "
SHOW_SEPARATOR = " || ' ' || "


def write_policy(policy: Policy, output: TextIO) -> None:
    """Write the policy to `output`.

    Rules are separated by a single blank line. Errors may only come from
    `output` itself and are propagated unchanged.

    Args:
        policy: Policy to render
        output: Text sink with a `write` method
    """
    for index, rule in enumerate(policy.rules):
        if index:
            output.write("\n")
        _write_rule(rule, output)


def render_policy(policy: Policy) -> str:
    """Render the policy to a string.

    Args:
        policy: Policy to render

    Returns:
        Policy text, empty for a policy without rules
    """
    buffer = io.StringIO()
    write_policy(policy, buffer)
    return buffer.getvalue()


def _write_rule(rule: Rule, output: TextIO) -> None:
    if rule.label is not None:
        output.write(f"RULE '{rule.label}'\n")
    else:
        output.write("RULE\n")

    kind = rule.kind
    if isinstance(kind, ExternalList):
        output.write(f"{INDENT}EXTERNAL LIST '{kind.name}'\n")
        output.write(f"{INDENT}EXEC '{kind.exec}'\n")
    elif isinstance(kind, FileList):
        _write_list(kind, output)
    else:
        raise TypeError(f"Unsupported rule kind: {type(kind).__name__}")


def _write_list(rule: FileList, output: TextIO) -> None:
    output.write(f"{INDENT}LIST '{rule.name}'\n")

    if rule.directories_plus:
        output.write(f"{INDENT}DIRECTORIES_PLUS\n")

    if rule.show:
        output.write(f"{INDENT}SHOW({format_show(rule.show)})\n")

    if rule.where is not None:
        if isinstance(rule.where, GroupFilter):
            condition = f"GROUP_ID = {rule.where.id}"
        elif isinstance(rule.where, UserFilter):
            condition = f"USER_ID = {rule.where.id}"
        else:
            raise TypeError(f"Unsupported filter: {type(rule.where).__name__}")
        output.write(f"{INDENT}WHERE {condition}\n")


def format_show(attributes: list[Show]) -> str:
    """Join attributes into the body of a `SHOW(...)` clause.

    Args:
        attributes: Attributes in display order

    Returns:
        e.g. `VARCHAR(MODE) || ' ' || VARCHAR(NLINK)`
    """
    return SHOW_SEPARATOR.join(f"VARCHAR({attribute.value})" for attribute in attributes)
