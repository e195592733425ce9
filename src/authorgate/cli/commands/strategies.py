"""authorgate strategies -- list registered build strategies."""

from __future__ import annotations

import click

from authorgate.cli.formatting import format_strategies, get_console


@click.command()
def strategies() -> None:
    """List the available build strategies."""
    from authorgate.strategy.registry import default_registry

    format_strategies(default_registry().entries(), get_console())
