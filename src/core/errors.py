"""Fatal errors for a `mkd` invocation.

Two tiers exist:
- Per-path failures (permission denied, already exists, missing parent...)
  are values (`CreationOutcome`), reported and skipped.
- The conditions below abort the whole run. They never reach the reporter;
  the CLI prints them on stderr and exits with code 1.
"""

from __future__ import annotations


class MkdError(Exception):
    """Base class for conditions that terminate the invocation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WorkingDirectoryError(MkdError):
    """The current working directory could not be determined."""


class InvalidModeError(MkdError):
    """The `--mode` value is not an octal permission mode."""

    def __init__(self, mode: str) -> None:
        super().__init__(f"Error parsing mode '{mode}': expected octal digits, at most 7777 (e.g. 755)")
        self.mode = mode


class PermissionApplyError(MkdError):
    """The permission mode could not be applied to a created folder."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Couldn't set permission on '{path}': {reason}")
        self.path = path
        self.reason = reason


class CompletionInstallError(MkdError):
    """Shell completion could not be written (usually the shell rc file)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Insufficient permissions: {reason}")
        self.reason = reason
