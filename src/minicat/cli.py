"""CLI adapter for ``minicat`` built on ``lib_cli_exit_tools``.

Purpose
-------
Map process arguments onto a :class:`~minicat.domain.config.CatConfig` and
hand it to :func:`minicat.core.run`. Argument problems are the only fatal
errors; they are reported as click usage errors with exit code ``1``.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works
  and hyphen-prefixed tokens survive as file names.
* :class:`CatCommand` – command class normalising usage-error exit codes.
* :func:`cli` – the ``minicat [FILES...] [-n | -b]`` command.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. It invokes the composition root and never touches the source
adapter directly. ``lib_cli_exit_tools`` centralises the exit code strategy
and traceback rendering for unexpected failures.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import run
from .domain.config import CatConfig
from .domain.errors import ConflictingFlags

CLICK_CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
}
USAGE_EXIT_CODE: Final[int] = 1
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("minicat")
    except metadata.PackageNotFoundError:
        return "0.0.0"


class CatCommand(click.RichCommand):
    """Rich command whose parsing failures exit with :data:`USAGE_EXIT_CODE`.

    Why
    ----
    Click reports usage errors with exit status ``2``; ``minicat`` treats every
    argument failure (unknown option value, conflicting flags) as status ``1``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = USAGE_EXIT_CODE
            raise


@click.command(
    "minicat",
    cls=CatCommand,
    help="Concatenate FILES (or standard input) to standard output.",
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="minicat",
    message="minicat version %(version)s",
)
@click.argument("files", nargs=-1, type=str, metavar="[FILES]...")
@click.option("-n", "--number", "number", is_flag=True, default=False, help="Number all output lines")
@click.option(
    "-b",
    "--number-nonblank",
    "number_nonblank",
    is_flag=True,
    default=False,
    help="Number only non-blank output lines (conflicts with -n)",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    files: Sequence[str],
    number: bool,
    number_nonblank: bool,
    traceback: bool,
) -> None:
    """Build the configuration and stream every source to standard output.

    Files that cannot be opened are reported on stderr and skipped; they do
    not change the exit status.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["-n"], input="alpha\\nbeta\\n")
    >>> result.stdout
    '1\\talpha\\n2\\tbeta\\n'
    """

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    config = _build_config(ctx, files, number=number, number_nonblank=number_nonblank)
    run(config)


def _build_config(ctx: click.Context, files: Sequence[str], *, number: bool, number_nonblank: bool) -> CatConfig:
    """Translate parsed parameters into :class:`CatConfig` or fail with a usage error."""

    try:
        return CatConfig(files, number=number, number_nonblank=number_nonblank)
    except ConflictingFlags as exc:
        error = click.UsageError(str(exc), ctx=ctx)
        error.exit_code = USAGE_EXIT_CODE
        raise error from exc


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="minicat",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
