"""Directory creation pipeline.

One invocation is a linear loop over the raw paths:
resolve -> create -> report -> (optionally) apply mode.

Printing is delegated to an `OutcomeReporter` so the loop stays free of UI
concerns and can be reused by tests or other entry points. Fatal conditions
are raised as `MkdError` subclasses and stop the loop immediately.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field

from adapters import filesystem
from core.domain.models import CreationOutcome, InvocationRequest, OutcomeKind
from core.errors import InvalidModeError, PermissionApplyError, WorkingDirectoryError
from core.interfaces.reporter import OutcomeReporter

ROOT_SEPARATOR = "/"

_OCTAL_MODE = re.compile(r"[0-7]+")
_MAX_MODE = 0o7777


@dataclass
class InvocationSummary:
    """Per-kind outcome counts for one run."""

    counts: Counter[OutcomeKind] = field(default_factory=Counter)

    @property
    def processed(self) -> int:
        return sum(self.counts.values())

    @property
    def created(self) -> int:
        return self.counts[OutcomeKind.SUCCESS]

    @property
    def failed(self) -> int:
        return self.processed - self.created


def resolve_path(raw_path: str, cwd: str) -> str:
    """Absolute form of `raw_path`: unchanged if rooted, else `cwd/raw_path`."""

    if raw_path.startswith(ROOT_SEPARATOR):
        return raw_path
    return f"{cwd}/{raw_path}"


def current_working_directory() -> str:
    try:
        return filesystem.current_directory()
    except OSError as exc:
        raise WorkingDirectoryError(f"Couldn't get path: {exc.strerror or exc}") from exc


def classify_os_error(exc: OSError) -> OutcomeKind:
    """Map an `OSError` raised while creating a directory to an `OutcomeKind`."""

    if isinstance(exc, PermissionError):
        return OutcomeKind.PERMISSION_DENIED
    if isinstance(exc, FileExistsError):
        return OutcomeKind.ALREADY_EXISTS
    if isinstance(exc, FileNotFoundError):
        return OutcomeKind.NOT_FOUND
    return OutcomeKind.OTHER


def create_directory(raw_path: str, *, parents: bool) -> CreationOutcome:
    """Create one directory and classify the result; never raises `OSError`."""

    try:
        filesystem.make_directory(raw_path, parents=parents)
    except OSError as exc:
        return CreationOutcome(
            path=raw_path,
            kind=classify_os_error(exc),
            detail=exc.strerror or str(exc),
        )
    return CreationOutcome(path=raw_path, kind=OutcomeKind.SUCCESS)


def parse_mode(text: str) -> int:
    """Parse an octal permission mode such as `755` or `0700`."""

    if not _OCTAL_MODE.fullmatch(text):
        raise InvalidModeError(text)
    mode = int(text, 8)
    if mode > _MAX_MODE:
        raise InvalidModeError(text)
    return mode


def apply_mode(resolved_path: str, mode: int | None) -> None:
    """Set the permission bits of `resolved_path` wholesale (no-op without mode)."""

    if mode is None:
        return
    try:
        filesystem.set_mode(resolved_path, mode)
    except OSError as exc:
        raise PermissionApplyError(resolved_path, exc.strerror or str(exc)) from exc


def _resolve(raw_path: str) -> str:
    # cwd is only needed (and only allowed to fail) for relative paths
    if raw_path.startswith(ROOT_SEPARATOR):
        return raw_path
    return resolve_path(raw_path, current_working_directory())


def run_invocation(
    request: InvocationRequest,
    *,
    reporter: OutcomeReporter,
) -> InvocationSummary:
    """Process every path of `request` in order.

    Raises:
    - `InvalidModeError` before anything is created when `mode` is unparsable.
    - `WorkingDirectoryError` / `PermissionApplyError` on the first path that
      hits them; later paths are left untouched.
    """

    mode = parse_mode(request.mode) if request.mode is not None else None
    summary = InvocationSummary()

    for raw_path in request.directories:
        resolved = _resolve(raw_path)
        outcome = create_directory(raw_path, parents=request.parents)
        summary.counts[outcome.kind] += 1
        reporter.report(outcome)
        apply_mode(resolved, mode)

    return summary
