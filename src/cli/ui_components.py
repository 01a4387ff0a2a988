"""UI components for the CLI (Rich).

Why separate components:
- Keeps the command function free of message formatting.
- The message policy can be tested without a terminal (`Text.plain`).
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.color import ColorChoice
from core.domain.models import CreationOutcome, OutcomeKind
from core.errors import MkdError

PATH_STYLE = "bright_yellow"
ERROR_STYLE = "red"
HINT_STYLE = "bright_black"

PERMISSION_HINT = (
    "Potential Fixes:\n"
    "- Change folder owner or folder permissions\n"
    "- Run with Sudo"
)
PARENTS_HINT = "Tip: Use -p or --parents to automatically create parent folders."


def build_consoles(color: ColorChoice) -> tuple[Console, Console]:
    """Return `(stdout, stderr)` consoles honoring the color choice.

    Highlighting is off: paths are user data and are printed literally.
    """

    options = color.console_options()
    return (
        Console(highlight=False, **options),
        Console(stderr=True, highlight=False, **options),
    )


def build_outcome_message(
    outcome: CreationOutcome,
    *,
    no_error: bool,
    verbose: bool,
) -> Text | None:
    """Message for one outcome, or `None` when nothing should be shown."""

    kind = outcome.kind
    if kind is OutcomeKind.SUCCESS:
        if not verbose:
            return None
        return Text(f"{outcome.path}: Folder created successfully", style=PATH_STYLE)

    if kind is OutcomeKind.ALREADY_EXISTS and no_error:
        return None

    message = Text()
    message.append(outcome.path, style=PATH_STYLE)
    message.append(": ")
    if kind is OutcomeKind.PERMISSION_DENIED:
        message.append("Permission denied", style=ERROR_STYLE)
        message.append("\n\n")
        message.append(PERMISSION_HINT, style=HINT_STYLE)
    elif kind is OutcomeKind.ALREADY_EXISTS:
        message.append("Folder already exists", style=ERROR_STYLE)
    elif kind is OutcomeKind.NOT_FOUND:
        message.append("Parent folder doesn't exist", style=ERROR_STYLE)
        message.append("\n\n")
        message.append(PARENTS_HINT, style=HINT_STYLE)
    elif kind is OutcomeKind.OTHER:
        message.append(f"Unknown error: {outcome.detail}")
    else:
        raise ValueError(f"Unhandled outcome kind: {kind!r}")
    return message


class ConsoleReporter:
    """`OutcomeReporter` that prints to a Rich console as paths are processed."""

    def __init__(self, console: Console, *, no_error: bool, verbose: bool) -> None:
        self._console = console
        self._no_error = no_error
        self._verbose = verbose

    def report(self, outcome: CreationOutcome) -> None:
        message = build_outcome_message(
            outcome,
            no_error=self._no_error,
            verbose=self._verbose,
        )
        if message is not None:
            self._console.print(message, soft_wrap=True)


def print_fatal(console: Console, error: MkdError) -> None:
    console.print(
        Text.assemble(("mkd: ", "bold " + ERROR_STYLE), (error.message, ERROR_STYLE)),
        soft_wrap=True,
    )
