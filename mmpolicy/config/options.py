"""Options for running `mmapplypolicy`.

Each field maps to exactly one `mmapplypolicy` switch. A field left as
None omits the switch, leaving the engine's own default in effect.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RunOptions(BaseModel):
    """Options for running `mmapplypolicy`."""

    nodes: Optional[str] = Field(
        default=None, description="Nodes for parallel execution, used with `-N`"
    )
    local_work_dir: Optional[Path] = Field(
        default=None, description="Local work directory for parallel execution, used with `-s`"
    )
    global_work_dir: Optional[Path] = Field(
        default=None, description="Global work directory for parallel execution, used with `-g`"
    )
    action: Optional[str] = Field(
        default=None, description="Action performed on files, used with `-I`"
    )
    information_level: Optional[str] = Field(
        default=None, description="Level of information displayed, used with `-L`"
    )
    choice_algorithm: Optional[str] = Field(
        default=None, description="Choice algorithm, used with `--choice-algorithm`"
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        coerce_numbers_to_str=True,  # `-L 0` written unquoted in YAML
    )

    def merged(self, other: "RunOptions") -> "RunOptions":
        """Return a copy where every field set in `other` wins."""
        return self.model_copy(update=other.model_dump(exclude_none=True))
