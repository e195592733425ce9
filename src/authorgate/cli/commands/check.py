"""authorgate check -- decide whether a revision range should build."""

from __future__ import annotations

import click

from authorgate.cli.formatting import format_decision, format_error, get_console


@click.command()
@click.argument("repo", default=".", type=click.Path(file_okay=False))
@click.option("--current", "current_rev", required=True, help="Revision being built.")
@click.option("--previous", "previous_rev", default=None, help="Last built revision (omit for full history).")
@click.option("--branch", default="HEAD", show_default=True, help="Branch name reported in decisions.")
@click.option(
    "--ignored-authors",
    default=None,
    envvar="AUTHORGATE_IGNORED_AUTHORS",
    help="Comma-separated author emails to ignore.",
)
@click.option(
    "--allow-if-not-excluded/--no-allow-if-not-excluded",
    "allow_if_not_excluded",
    default=None,
    envvar="AUTHORGATE_ALLOW_IF_NOT_EXCLUDED",
    help="Build if any author is not ignored (--no-...: skip if any author is ignored).",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    envvar="AUTHORGATE_CONFIG",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with ignoredAuthors / allowBuildIfNotExcludedAuthor.",
)
@click.option("--exit-code", is_flag=True, help="Exit with status 1 when the build is skipped.")
def check(
    repo: str,
    current_rev: str,
    previous_rev: str | None,
    branch: str,
    ignored_authors: str | None,
    allow_if_not_excluded: bool | None,
    config_path: str | None,
    exit_code: bool,
) -> None:
    """Decide whether the commits in PREVIOUS..CURRENT of REPO should build."""
    from authorgate.models.config import PolicyConfig
    from authorgate.models.scm import Head, Revision, Source
    from authorgate.strategy.ignore_committer import NAME
    from authorgate.strategy.registry import default_registry

    console = get_console()
    try:
        config = PolicyConfig.from_file(config_path) if config_path else PolicyConfig()
        overrides: dict = {}
        if ignored_authors is not None:
            overrides["ignored_authors"] = ignored_authors
        if allow_if_not_excluded is not None:
            overrides["allow_build_if_not_excluded_author"] = allow_if_not_excluded
        if overrides:
            config = config.model_copy(update=overrides)
        strategy = default_registry().create(NAME, config)
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None

    head = Head(name=branch)
    current = Revision(head=head, hash=current_rev)
    previous = Revision(head=head, hash=previous_rev) if previous_rev else None

    decision = strategy.evaluate(Source(remote=repo), head, current, previous)
    format_decision(decision, console)

    if exit_code and not decision.build:
        raise SystemExit(1)
