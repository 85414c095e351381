#!/usr/bin/env python3
"""
Main CLI Entry Point for dualrun.

Provides command-line tools around example execution:
- Inspect which contexts the current filters allow
- Parse verbosity tokens
- Run an example function locally, on the cluster, or both
"""

import importlib
import json
import sys
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from dualrun.core.arguments import INCLUDE_KEYWORD, CommandLineArguments
from dualrun.core.config import CONTEXT_NAMES, DualRunSettings
from dualrun.core.context import create_context
from dualrun.core.environment import ConfigurationProvider
from dualrun.core.level_parser import DEFAULT_NAMESPACE, parse_level
from dualrun.core.logging import configure_logging
from dualrun.core.model import InvalidTargetError, OutcomeReport
from dualrun.core.run_gate import ContextKind, allowed
from dualrun.datastructures.level import Level

console = Console()


def setup_logging(
    verbose: bool = False,
    switches: tuple[str, ...] = (),
    namespace: str = DEFAULT_NAMESPACE,
    debug_scopes: tuple[str, ...] = (),
) -> tuple[int, ...]:
    """Setup logging from --verbose or a ``<namespace>.verbose.<level>`` switch."""
    arguments = CommandLineArguments.from_tokens(
        build_tokens((), False, namespace, switches), namespace
    )
    level = arguments.level
    if arguments.quiet:
        level = Level.FINE if verbose else Level.INFO
    return configure_logging(level, debug_scopes=debug_scopes, colorize=True)


def build_tokens(
    include: tuple[str, ...],
    times: bool,
    namespace: str,
    switches: tuple[str, ...] = (),
) -> list[str]:
    tokens: list[str] = []
    for tags in include:
        tokens.extend([INCLUDE_KEYWORD, tags])
    if times:
        tokens.append(f"{namespace}.times")
    tokens.extend(f"{namespace}.{switch}" for switch in switches)
    return tokens


def load_target(target: str) -> Callable[..., Any]:
    """Import ``module:function`` and return the function."""
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise InvalidTargetError(target, "expected module:function")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidTargetError(target, str(e)) from e

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise InvalidTargetError(target, f"{part!r} not found") from e
    if not callable(obj):
        raise InvalidTargetError(target, "not callable")
    return obj


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--switch",
    "-s",
    "switches",
    multiple=True,
    help="Adds the token <namespace>.SWITCH, e.g. verbose.finer or times",
)
@click.option(
    "--debug-scope",
    "debug_scopes",
    multiple=True,
    help="Log DEBUG records of this module (e.g. core.context)",
)
@click.pass_context
def cli(ctx, verbose: bool, switches: tuple[str, ...], debug_scopes: tuple[str, ...]):
    """
    dualrun Example Execution CLI.

    Runs example bodies locally, on the cluster, or locally then on the
    cluster, and reports the merged outcome.
    """
    settings = DualRunSettings.from_environment()
    setup_logging(verbose, switches, settings.namespace, debug_scopes)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["switches"] = switches
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("token")
@click.pass_context
def level(ctx, token: str):
    """Show the verbosity level selected by a token."""
    settings: DualRunSettings = ctx.obj["settings"]
    console.print(parse_level(token, settings.namespace).name)


@cli.command()
@click.option(
    "--include", "-i", multiple=True, help="Comma separated tags (hadoop, local, cluster)"
)
@click.pass_context
def gate(ctx, include: tuple[str, ...]):
    """Show which execution contexts the filters allow."""
    settings: DualRunSettings = ctx.obj["settings"]
    arguments = CommandLineArguments.from_tokens(
        build_tokens(include, False, settings.namespace), settings.namespace
    )

    table = Table(title="Execution Contexts")
    table.add_column("Context", style="cyan")
    table.add_column("Allowed")
    for kind in ContextKind:
        permitted = allowed(kind, arguments.filters)
        table.add_row(kind.value, "[green]yes[/green]" if permitted else "[red]no[/red]")
    console.print(table)


@cli.command()
@click.argument("target")
@click.option(
    "--context",
    "context_name",
    type=click.Choice(CONTEXT_NAMES),
    default=None,
    help="Where to run the example (default: local-then-cluster)",
)
@click.option(
    "--include", "-i", multiple=True, help="Comma separated tags (hadoop, local, cluster)"
)
@click.option("--times", is_flag=True, help="Annotate outcomes with execution times")
@click.option(
    "--output",
    "-o",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_context
def run(
    ctx,
    target: str,
    context_name: str | None,
    include: tuple[str, ...],
    times: bool,
    output: str,
):
    """Run an example function given as module:function."""
    settings: DualRunSettings = ctx.obj["settings"]
    try:
        body = load_target(target)
    except InvalidTargetError as e:
        raise click.BadParameter(str(e), param_hint="TARGET") from e

    tokens = build_tokens(include, times, settings.namespace, ctx.obj["switches"])
    arguments = CommandLineArguments.from_tokens(tokens, settings.namespace)
    context = create_context(
        context_name or settings.default_context,
        ConfigurationProvider(settings=settings),
        arguments,
    )
    report = OutcomeReport.from_outcome(context.run(body))

    if output == "json":
        console.print_json(json.dumps(report.model_dump(mode="json")))
    else:
        table = Table(title=f"Outcome of {target}")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        for field_name, value in report.model_dump().items():
            if value in (None, "", ()):
                continue
            if isinstance(value, tuple):
                value = "".join(value)
            table.add_row(field_name, str(value))
        console.print(table)

    if not report.passing:
        sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
