"""Policy document model using Pydantic.

This module defines the in-memory representation of a Storage Scale policy:
a named, ordered collection of rules. The models carry no behavior beyond
construction and validation; rendering lives in `mmpolicy.policy.writer`.

Names, labels and commands are rendered inside single quotes without any
escaping, so values containing `'` produce malformed policy text.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Show(str, Enum):
    """Attributes displayed by a LIST rule.

    Each value is the policy grammar keyword wrapped in `VARCHAR(...)`.
    """

    MODE = "MODE"
    NLINK = "NLINK"
    FILE_SIZE = "FILE_SIZE"
    KB_ALLOCATED = "KB_ALLOCATED"


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class GroupFilter(_Model):
    """`WHERE GROUP_ID = <id>`"""

    type: Literal["group"] = "group"
    id: int = Field(..., ge=0, description="Numeric group id")


class UserFilter(_Model):
    """`WHERE USER_ID = <id>`"""

    type: Literal["user"] = "user"
    id: int = Field(..., ge=0, description="Numeric user id")


Filter = Annotated[Union[GroupFilter, UserFilter], Field(discriminator="type")]


class ExternalList(_Model):
    """`EXTERNAL LIST` rule running a command for the selected files."""

    type: Literal["external_list"] = "external_list"
    name: str = Field(..., description="Name of the external list")
    exec: str = Field(..., description="Command executed by the engine")


class FileList(_Model):
    """`LIST` rule selecting files into a named list."""

    type: Literal["list"] = "list"
    name: str = Field(..., description="Name of the list")
    directories_plus: bool = Field(
        default=False, description="Whether to select all objects, not just regular files"
    )
    show: list[Show] = Field(default_factory=list, description="Attributes to display")
    where: Optional[Filter] = Field(default=None, description="Optional filter")


RuleKind = Annotated[Union[ExternalList, FileList], Field(discriminator="type")]


class Rule(_Model):
    """Single policy rule, optionally labelled."""

    label: Optional[str] = Field(default=None, description="Rule name shown in the header")
    kind: RuleKind

    @classmethod
    def of(cls, kind: Union[ExternalList, FileList]) -> "Rule":
        """Return an unlabelled rule of the given kind."""
        return cls(kind=kind)


class Policy(_Model):
    """Policy with rules.

    The policy itself is immutable, but `rules` is an ordinary list the
    caller appends to. Rule order is preserved when rendering.
    """

    name: str = Field(..., description="Name of the policy")
    rules: list[Rule] = Field(default_factory=list, description="Ordered rules")

    @classmethod
    def new(cls, name: str) -> "Policy":
        """Return an empty, named policy."""
        return cls(name=name)

    @property
    def external_lists(self) -> list[ExternalList]:
        """External list rules in rule order."""
        return [rule.kind for rule in self.rules if isinstance(rule.kind, ExternalList)]
