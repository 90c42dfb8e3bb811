"""Policy runner for `mmapplypolicy`.

This module defines the PolicyRunner class which writes a policy to disk,
runs `mmapplypolicy` on it and predicts the list files the engine writes.

Each run is one blocking, non-reentrant sequence:
- validate the file list prefix (before any I/O)
- create and write the policy file
- spawn `mmapplypolicy` and wait for it
- on success, compute report paths; on failure, raise

Nothing is retried and no state is kept between runs.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import Optional, Union

from mmpolicy.config import RunOptions
from mmpolicy.policy import Policy, write_policy
from mmpolicy.utils import MMAPPLYPOLICY, QUIET_INFORMATION_LEVEL, file_name_component, get_logger

from .errors import (
    ApplyPolicyError,
    ApplyPolicyFailedError,
    CreatePolicyFileError,
    InvalidFileListPrefixError,
    WritePolicyError,
)

logger = get_logger(__name__)

StrPath = Union[str, os.PathLike]

STDERR_FILENO = 2


def validate_file_list_prefix(prefix: Path) -> None:
    """Check that the prefix is an existing directory or names a file.

    Raises:
        InvalidFileListPrefixError: If it is neither
    """
    if not prefix.is_dir() and file_name_component(prefix) is None:
        raise InvalidFileListPrefixError(prefix)


def build_command(
    executable: str,
    target: StrPath,
    policy_path: StrPath,
    file_list_prefix: Optional[StrPath] = None,
    options: Optional[RunOptions] = None,
) -> list[str]:
    """Build the `mmapplypolicy` argument vector.

    Switches are appended in a fixed order and only when their value is set.

    Args:
        executable: Name or path of the policy engine binary
        target: Device or directory the policy is applied to
        policy_path: Path of the written policy file
        file_list_prefix: Optional prefix for list files, passed as `-f`
        options: Run options

    Returns:
        Argument vector, executable first
    """
    options = options or RunOptions()

    command = [executable, os.fspath(target), "-P", os.fspath(policy_path)]

    if options.action is not None:
        command += ["-I", options.action]

    if options.information_level is not None:
        command += ["-L", options.information_level]

    if options.choice_algorithm is not None:
        command += ["--choice-algorithm", options.choice_algorithm]

    if file_list_prefix is not None:
        command += ["-f", os.fspath(file_list_prefix)]

    if options.nodes is not None:
        command += ["-N", options.nodes]

    if options.local_work_dir is not None:
        command += ["-s", os.fspath(options.local_work_dir)]

    if options.global_work_dir is not None:
        command += ["-g", os.fspath(options.global_work_dir)]

    return command


def child_stdout(options: Optional[RunOptions]) -> Optional[int]:
    """Select where the engine's stdout goes.

    Returns:
        DEVNULL for information level "0", this process's stderr for any
        other level, None (inherit) when no level is given
    """
    if options is None or options.information_level is None:
        return None
    if options.information_level == QUIET_INFORMATION_LEVEL:
        return subprocess.DEVNULL
    return STDERR_FILENO


def report_paths(policy: Policy, file_list_prefix: Optional[StrPath]) -> list[Path]:
    """Predict the list files `mmapplypolicy -f` writes for a policy.

    Only EXTERNAL LIST rules produce list files. For a directory prefix the
    engine writes `<prefix>/list.<name>`, otherwise `<prefix>.list.<name>`
    next to the prefix. The files are not checked for existence.

    Args:
        policy: Policy that was run
        file_list_prefix: Prefix passed as `-f`, or None

    Returns:
        Report paths in rule order, empty without a prefix

    Raises:
        InvalidFileListPrefixError: If the prefix is neither a directory nor has a file name
    """
    if file_list_prefix is None:
        return []

    prefix = Path(file_list_prefix)

    if prefix.is_dir():
        return [prefix / f"list.{rule.name}" for rule in policy.external_lists]

    stem = file_name_component(prefix)
    if stem is None:
        raise InvalidFileListPrefixError(prefix)

    return [prefix.parent / f"{stem}.list.{rule.name}" for rule in policy.external_lists]


class PolicyRunner:
    """Writes and runs policies with `mmapplypolicy`.

    Args:
        executable: Policy engine binary, `mmapplypolicy` unless overridden
    """

    def __init__(self, executable: str = MMAPPLYPOLICY):
        self.executable = executable

    def run(
        self,
        policy: Policy,
        target: StrPath,
        policy_path: StrPath,
        file_list_prefix: Optional[StrPath] = None,
        options: Optional[RunOptions] = None,
    ) -> list[Path]:
        """Write and run the policy.

        Args:
            policy: Policy to run
            target: Device or directory passed as the first argument
            policy_path: File the policy is written to, truncated if it exists
            file_list_prefix: Optional prefix for list files (`-f`)
            options: Switches forwarded to `mmapplypolicy`

        Returns:
            Paths of the list files written for EXTERNAL LIST rules

        Raises:
            InvalidFileListPrefixError: Before any I/O, if the prefix is unusable
            CreatePolicyFileError: If the policy file cannot be created
            WritePolicyError: If the policy cannot be written
            ApplyPolicyError: If `mmapplypolicy` cannot be started or waited on
            ApplyPolicyFailedError: If `mmapplypolicy` exits unsuccessfully
        """
        prefix = Path(file_list_prefix) if file_list_prefix is not None else None
        if prefix is not None:
            validate_file_list_prefix(prefix)

        policy_path = Path(policy_path)
        self._write_policy_file(policy, policy_path)

        command = build_command(self.executable, target, policy_path, prefix, options)
        self._execute(command, child_stdout(options))

        reports = report_paths(policy, prefix)
        logger.info(f"Policy '{policy.name}' applied to {target}, {len(reports)} report(s)")
        return reports

    def _write_policy_file(self, policy: Policy, policy_path: Path) -> None:
        try:
            policy_file = open(
                policy_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n"
            )
        except OSError as e:
            raise CreatePolicyFileError(policy_path, e) from e

        try:
            with policy_file:
                write_policy(policy, policy_file)
        except (OSError, UnicodeError) as e:
            raise WritePolicyError(policy_path, e) from e

        logger.debug(f"Policy '{policy.name}' written to {policy_path}")

    def _execute(self, command: list[str], stdout: Optional[int]) -> None:
        logger.debug(f"running external process: {command}")

        if stdout == STDERR_FILENO:
            sys.stderr.flush()

        try:
            process = subprocess.Popen(command, stdout=stdout)
        except OSError as e:
            raise ApplyPolicyError(f"`{self.executable}` failed to start", e) from e

        with process:
            try:
                returncode = process.wait()
            except OSError as e:
                raise ApplyPolicyError(f"failed waiting on `{self.executable}`", e) from e

        if returncode == 0:
            return

        if returncode > 0:
            message = f"`{self.executable}` failed with exit status {returncode}"
        else:
            message = f"`{self.executable}` failed, terminated by signal {-returncode}"

        logger.error(message)
        raise ApplyPolicyFailedError(message, returncode=returncode)


def run_policy(
    policy: Policy,
    target: StrPath,
    policy_path: StrPath,
    file_list_prefix: Optional[StrPath] = None,
    options: Optional[RunOptions] = None,
) -> list[Path]:
    """Write and run a policy with the default `mmapplypolicy` binary.

    See `PolicyRunner.run`.
    """
    return PolicyRunner().run(policy, target, policy_path, file_list_prefix, options)
