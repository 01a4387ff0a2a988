"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Validation at the edge: an invocation is checked once, then frozen.
- Outcomes are tagged values, so the reporter can match on them exhaustively.

Note:
- These models describe *what* happened to a path, not *how* it is printed.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class InvocationRequest(BaseModel):
    """Parsed command-line input for one run.

    Built once at startup and never mutated; the pipeline only reads it.
    """

    model_config = ConfigDict(frozen=True)

    directories: list[str] = Field(
        ...,
        min_length=1,
        description="Raw directory paths, exactly as given by the user.",
    )
    parents: bool = Field(
        default=False,
        description="Create missing parent directories.",
    )
    no_error: bool = Field(
        default=False,
        description="Do not report folders that already exist.",
    )
    verbose: bool = Field(
        default=False,
        description="Report successfully created folders.",
    )
    mode: str | None = Field(
        default=None,
        description="Octal permission mode applied after creation.",
    )


class OutcomeKind(str, Enum):
    """Classification of a directory-creation attempt."""

    SUCCESS = "success"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    OTHER = "other"


class CreationOutcome(BaseModel):
    """Result of creating one directory.

    `path` is the raw path; `detail` carries the OS error description for
    failures (always present for `OutcomeKind.OTHER`).
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(
        ...,
        description="Raw path the creation was attempted on.",
    )
    kind: OutcomeKind = Field(
        ...,
        description="Outcome classification.",
    )
    detail: str | None = Field(
        default=None,
        description="OS error description, if the creation failed.",
    )

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS
