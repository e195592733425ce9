"""authorgate parse -- show the commits in a raw change log."""

from __future__ import annotations

from typing import BinaryIO

import click

from authorgate.cli.formatting import (
    format_commits_compact,
    format_commits_verbose,
    format_error,
    get_console,
)


@click.command()
@click.argument("log_file", default="-", type=click.File("rb"))
@click.option("-v", "--verbose", is_flag=True, help="Show verbose commit details.")
def parse(log_file: BinaryIO, verbose: bool) -> None:
    """Parse a `git log --raw --format=raw` dump (file or stdin)."""
    from authorgate.changelog import parse_changelog

    console = get_console()
    try:
        commits = parse_changelog(log_file.read())
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None

    if verbose:
        format_commits_verbose(commits, console)
    else:
        format_commits_compact(commits, console)
