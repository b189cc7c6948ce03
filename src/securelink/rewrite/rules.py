"""Rewrite rules and the helpers that classify and expand them.

A rule pairs a URL regular expression with a redirect template, an internal
query string such as ``index.php?name=$matches[1]&page=$matches[2]`` whose
placeholders refer to the groups captured by the pattern. Both the
``$matches[N]`` and the ``\\N`` placeholder notations are understood.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

TOKEN_QUERY_VAR = 'secure_link_token'

# endpoints that never expose the canonical detail page
SYSTEM_QUERY_VARS = ('attachment', 'feed', 'embed', 'tb')

PLACEHOLDER_RE = re.compile(r'\$matches\[(\d+)\]|\\(\d+)')


@dataclass(frozen=True)
class PatternEntry:
    pattern: str
    redirect: str

    def __str__(self) -> str:
        return f'{self.pattern} => {self.redirect}'


def query_param_for(content_type: str) -> str:
    """Return the query variable naming a single item of `content_type`."""
    if content_type == 'post':
        return 'name'
    if content_type == 'page':
        return 'pagename'
    return content_type


def assigns(redirect: str, param: str) -> bool:
    """Check if the redirect template assigns the query variable `param`."""
    return re.search(rf'(?:^|[?&]){re.escape(param)}=', redirect) is not None


def is_detail_rule(entry: PatternEntry, content_type: str) -> bool:
    return assigns(entry.redirect, query_param_for(content_type))


def is_system_rule(entry: PatternEntry) -> bool:
    return any(assigns(entry.redirect, var) for var in SYSTEM_QUERY_VARS)


def select_detail_rules(content_type: str, rules: Iterable[PatternEntry]) -> list[PatternEntry]:
    """Return the rules resolving a single `content_type` item on its canonical URL."""
    return [entry for entry in rules if is_detail_rule(entry, content_type) and not is_system_rule(entry)]


def placeholder_indices(redirect: str) -> list[int]:
    return [int(m.group(1) or m.group(2)) for m in PLACEHOLDER_RE.finditer(redirect)]


def format_placeholder(index: int, redirect: str) -> str:
    """Write `index` in the placeholder notation `redirect` already uses."""
    if '$matches[' not in redirect and PLACEHOLDER_RE.search(redirect):
        return f'\\{index}'
    return f'$matches[{index}]'


def expand_redirect(redirect: str, groups: Sequence[str | None]) -> dict[str, str]:
    """Substitute the captured `groups` into the redirect template.

    Placeholders pointing to a group that did not participate in the match
    expand to an empty string.

    :return: the query variables of the redirect, in template order.
    """

    def substitute(match: re.Match) -> str:
        index = int(match.group(1) or match.group(2))
        if 1 <= index <= len(groups):
            return groups[index - 1] or ''
        return ''

    query = redirect.partition('?')[2] if '?' in redirect else redirect
    variables = {}
    for pair in query.split('&'):
        key, _, value = pair.partition('=')
        if key:
            variables[key] = PLACEHOLDER_RE.sub(substitute, value)
    return variables
