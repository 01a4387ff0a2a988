"""`mkd` command-line entry point (Typer).

The command only translates options into an `InvocationRequest`, wires the
Rich reporter and turns fatal `MkdError`s into exit code 1. Everything else
lives in `core.services.creation_pipeline`.
"""

from __future__ import annotations

from typing import Annotated

import typer
from pydantic import ValidationError

from cli.ui_components import ConsoleReporter, build_consoles, print_fatal
from core.config import AppSettings
from core.domain.color import ColorChoice
from core.domain.models import InvocationRequest
from core.errors import CompletionInstallError, MkdError
from core.services.creation_pipeline import run_invocation

__version__ = "0.1.0"

app = typer.Typer(
    help="Modern replacement for mkdir.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mkd {__version__}")
        raise typer.Exit()


@app.command(no_args_is_help=True)
def mkd(
    directories: Annotated[
        list[str],
        typer.Argument(
            metavar="DIRECTORY...",
            help="Path to the directory.",
            show_default=False,
        ),
    ],
    parents: Annotated[
        bool,
        typer.Option("--parents", "-p", help="Create parent directories if they don't exist."),
    ] = False,
    no_error: Annotated[
        bool,
        typer.Option("--no-error", "-e", help="Ignore error if folder exists."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable output on success."),
    ] = False,
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Permission of new folders (octal, e.g. 755)."),
    ] = None,
    color: Annotated[
        ColorChoice | None,
        typer.Option(
            "--color",
            case_sensitive=False,
            help="Colorize output (defaults to MKD_COLOR, else auto).",
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Create the DIRECTORY(ies), if they do not already exist."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="MKD_* environment") from exc

    out, err = build_consoles(color or settings.color)
    request = InvocationRequest(
        directories=directories,
        parents=parents,
        no_error=no_error,
        verbose=verbose,
        mode=mode,
    )
    reporter = ConsoleReporter(out, no_error=no_error, verbose=verbose)

    try:
        run_invocation(request, reporter=reporter)
    except MkdError as exc:
        print_fatal(err, exc)
        raise typer.Exit(code=1) from exc


def run() -> None:
    try:
        app(prog_name="mkd")
    except OSError as exc:
        # only --install-completion (typer writing shell rc files) gets here
        _, err = build_consoles(ColorChoice.default())
        print_fatal(err, CompletionInstallError(exc.strerror or str(exc)))
        raise SystemExit(1) from exc


if __name__ == "__main__":
    run()
