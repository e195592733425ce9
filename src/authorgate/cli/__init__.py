"""AuthorGate CLI -- check change sets from the terminal or a CI job.

This module is NEVER imported from authorgate/__init__.py.
It is only loaded via the ``authorgate`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging
import sys

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install authorgate[cli]"
    ) from None

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def setup_logging(verbosity: int) -> None:
    """Route library logging to stderr at a level chosen by ``-v`` count."""
    logging.basicConfig(
        level=_LOG_LEVELS.get(verbosity, logging.DEBUG),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@click.group()
@click.option(
    "-v", "--verbose", "verbosity",
    count=True,
    help="Increase log output (-v info, -vv debug).",
)
@click.pass_context
def cli(ctx: click.Context, verbosity: int) -> None:
    """AuthorGate: decide whether a change set should build, by commit author."""
    ctx.ensure_object(dict)
    ctx.obj["verbosity"] = verbosity
    if verbosity:
        setup_logging(verbosity)


# Register subcommands after cli group is defined
from authorgate.cli.commands.check import check  # noqa: E402
from authorgate.cli.commands.parse import parse  # noqa: E402
from authorgate.cli.commands.strategies import strategies  # noqa: E402

cli.add_command(check)
cli.add_command(parse)
cli.add_command(strategies)
