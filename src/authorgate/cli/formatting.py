"""Rich formatting helpers for the AuthorGate CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from authorgate.models.commit import Commit
    from authorgate.models.decision import Decision
    from authorgate.strategy.registry import StrategyEntry


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def _format_time(timestamp: int | None, tz: str | None) -> str:
    if timestamp is None:
        return ""
    when = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return when.strftime("%Y-%m-%d %H:%M") + (f" {tz}" if tz else "")


def format_commits_compact(commits: list[Commit], console: Console) -> None:
    """Display commits in compact table format."""
    if not commits:
        console.print("[dim]No commits.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Commit", style="yellow", width=8)
    table.add_column("Author", style="cyan")
    table.add_column("Title")

    for commit in commits:
        table.add_row(
            commit.commit_id[:8],
            escape(commit.author_email),
            escape(commit.title),
        )

    console.print(table)


def format_commits_verbose(commits: list[Commit], console: Console) -> None:
    """Display commits with full details."""
    if not commits:
        console.print("[dim]No commits.[/dim]")
        return

    for i, commit in enumerate(commits):
        if i > 0:
            console.print()

        console.print(f"[yellow]commit {commit.commit_id}[/yellow]")
        console.print(
            f"  Author:    {escape(commit.author_name)} <{escape(commit.author_email)}>"
        )
        if commit.author_time is not None:
            console.print(f"  Date:      {_format_time(commit.author_time, commit.author_tz)}")
        if commit.committer_email is not None:
            console.print(
                f"  Committer: {escape(commit.committer_name or '')} "
                f"<{escape(commit.committer_email)}>"
            )
        if commit.parents:
            console.print(f"  Parents:   {' '.join(p[:8] for p in commit.parents)}")
        if commit.message:
            console.print(f"  Message:   {escape(commit.title)}")
        for affected in commit.paths:
            if affected.src_path:
                console.print(
                    f"    [cyan]{affected.edit_type.value}[/cyan] "
                    f"{escape(affected.src_path)} -> {escape(affected.path)}"
                )
            else:
                console.print(f"    [cyan]{affected.edit_type.value}[/cyan] {escape(affected.path)}")


def format_decision(decision: Decision, console: Console) -> None:
    """Display a build decision."""
    if decision.build:
        verdict = "[bold green]BUILD[/bold green]"
    else:
        verdict = "[bold red]SKIP[/bold red]"

    console.print(f"{verdict}  [dim]({decision.reason.value})[/dim]")
    if decision.author_email:
        console.print(
            f"  Decided by: {escape(decision.author_email)} "
            f"([yellow]{(decision.commit_id or '')[:8]}[/yellow])"
        )
    console.print(f"  Commits examined: {decision.commits_examined}")
    if decision.error:
        console.print(f"  [red]Failed open:[/red] {escape(decision.error)}")


def format_strategies(entries: list[StrategyEntry], console: Console) -> None:
    """Display registered strategies."""
    if not entries:
        console.print("[dim]No strategies registered.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Name", style="green")
    table.add_column("Display name")
    for entry in entries:
        table.add_row(entry.name, escape(entry.display_name))
    console.print(table)
