"""Print the rewrite rule table in matching order."""

from __future__ import annotations

import djclick as click

from securelink.rewrite.registry import get_registry
from securelink.rewrite.rules import TOKEN_QUERY_VAR, assigns


@click.command()
@click.option(
    '--content-type',
    '-t',
    'content_type',
    default=None,
    help='Only show the rules of this content type',
)
@click.option(
    '--protected-only',
    is_flag=True,
    default=False,
    help='Only show the rules requiring a token',
    show_default=True,
)
def command(content_type: str | None, protected_only: bool) -> None:
    """Print the rewrite rules, token-requiring ones included."""
    registry = get_registry()
    if content_type is not None and content_type not in registry.routes:
        raise click.BadParameter(f'Unknown content type {content_type!r}', param_hint='--content-type')

    rules = registry.rules_for(content_type) if content_type else registry.build()
    if protected_only:
        rules = [rule for rule in rules if assigns(rule.redirect, TOKEN_QUERY_VAR)]

    for rule in rules:
        click.echo(str(rule))
    click.secho(f'{len(rules)} rules', fg='green')
