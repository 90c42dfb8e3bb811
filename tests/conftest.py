import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mmpolicy.core import orchestrator  # noqa: E402  (import after sys.path tweak)
from mmpolicy.policy import ExternalList, FileList, Policy, Rule, Show  # noqa: E402


class FakeProcess:
    """Stands in for `subprocess.Popen`, recording how it was created."""

    instances: list["FakeProcess"] = []
    returncode = 0
    start_error: OSError | None = None
    wait_error: OSError | None = None

    def __init__(self, args, stdout=None, **kwargs):
        if FakeProcess.start_error is not None:
            raise FakeProcess.start_error
        self.args = args
        self.stdout = stdout
        self.kwargs = kwargs
        self.exited = False
        FakeProcess.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True
        return False

    def wait(self):
        if FakeProcess.wait_error is not None:
            raise FakeProcess.wait_error
        return FakeProcess.returncode


@pytest.fixture
def fake_popen(monkeypatch):
    """Replace process creation in the orchestrator with FakeProcess."""
    FakeProcess.instances = []
    FakeProcess.returncode = 0
    FakeProcess.start_error = None
    FakeProcess.wait_error = None
    monkeypatch.setattr(orchestrator.subprocess, "Popen", FakeProcess)
    yield FakeProcess


@pytest.fixture
def size_policy():
    """One EXTERNAL LIST rule named `size` followed by a LIST rule."""
    policy = Policy.new("size")
    policy.rules.append(Rule.of(ExternalList(name="size", exec="")))
    policy.rules.append(
        Rule(
            label="size",
            kind=FileList(name="size", directories_plus=True, show=[Show.KB_ALLOCATED]),
        )
    )
    return policy
