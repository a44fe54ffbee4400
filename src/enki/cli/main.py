"""CLI entry point for enki."""
from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Optional, Tuple

import click

from enki import __version__
from enki.reporting import EXPORT_FORMATS, ExportSettings
from enki.suite import Suite, load_suite, run_suite


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"enki {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the enki version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for enki."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.argument("targets", nargs=-1)
@click.option(
    "--suite",
    "suite_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML suite file listing test cases and exporters.",
)
@click.option(
    "--format",
    "export_format",
    type=click.Choice(EXPORT_FORMATS),
    help="Output format (text by default; overrides the suite exporters).",
)
@click.option("--output", "output_path", type=str, help="Write results to this file instead of stdout.")
@click.option("--durations", is_flag=True, help="Include test durations in the output (also applied to suite exporters).")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in console output (also applied to suite exporters).")
@click.pass_obj
def run(
    state: CliState,
    targets: Tuple[str, ...],
    suite_path: Optional[str],
    export_format: Optional[str],
    output_path: Optional[str],
    durations: bool,
    no_color: bool,
) -> None:
    """Run test cases given as module:Class TARGETS and export their results."""

    try:
        suite = _build_suite(targets, suite_path, export_format, output_path, durations, no_color)
        outcome = run_suite(suite)
    except click.ClickException:
        raise
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc
    if state.verbose:
        click.echo(
            f"{outcome.cases} test case(s), {outcome.failed_cases} with failures",
            err=True,
        )
    raise click.exceptions.Exit(outcome.exit_code)


def _build_suite(
    targets: Tuple[str, ...],
    suite_path: Optional[str],
    export_format: Optional[str],
    output_path: Optional[str],
    durations: bool,
    no_color: bool,
) -> Suite:
    base = load_suite(suite_path) if suite_path else Suite(cases=())
    cases = tuple(base.cases) + targets
    if not cases:
        raise click.UsageError("Provide at least one TARGET or --suite")
    exports = tuple(base.exports)
    if export_format or output_path or not exports:
        exports = (
            ExportSettings(
                format=export_format or "text",
                path=output_path,
                durations=durations,
                color=not no_color,
            ),
        )
    else:
        exports = tuple(
            dataclasses.replace(
                item,
                durations=item.durations or durations,
                color=item.color and not no_color,
            )
            for item in exports
        )
    return Suite(cases=cases, exports=exports, suite_dir=base.suite_dir)


def main(argv: Optional[list[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="enki", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
