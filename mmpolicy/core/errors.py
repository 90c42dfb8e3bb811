"""Errors raised while writing and running a policy."""

from pathlib import Path
from typing import Optional, Union


class PolicyRunError(Exception):
    """Base class for failures of `PolicyRunner.run`."""

    pass


class InvalidFileListPrefixError(PolicyRunError):
    """Raised when the file list prefix can name neither a directory nor a file."""

    def __init__(self, prefix: Path):
        self.prefix = prefix
        super().__init__(
            "prefix needs to be either an existing directory or have a file name "
            f"component in its path: `{prefix}`"
        )


class CreatePolicyFileError(PolicyRunError):
    """Raised when the policy file cannot be created."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"creating policy file `{path}`: {cause}")


class WritePolicyError(PolicyRunError):
    """Raised when the policy cannot be written to the policy file."""

    def __init__(self, path: Path, cause: Union[OSError, UnicodeError]):
        self.path = path
        self.cause = cause
        super().__init__(f"writing policy file to `{path}`: {cause}")


class ApplyPolicyError(PolicyRunError):
    """Raised when `mmapplypolicy` cannot be started or waited on."""

    def __init__(self, phase: str, cause: OSError):
        self.phase = phase
        self.cause = cause
        super().__init__(f"{phase}: {cause}")


class ApplyPolicyFailedError(PolicyRunError):
    """Raised when `mmapplypolicy` ran but did not succeed.

    `returncode` follows `subprocess` conventions: negative values mean the
    process was killed by a signal and has no exit status.
    """

    def __init__(self, message: str, returncode: Optional[int] = None):
        self.returncode = returncode
        super().__init__(message)

    @property
    def exit_status(self) -> Optional[int]:
        if self.returncode is None or self.returncode < 0:
            return None
        return self.returncode
