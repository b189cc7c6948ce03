"""Canonical rewrite rules of the content type routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from securelink.rewrite.rules import PatternEntry, query_param_for

FEEDS = '(feed|rdf|rss|rss2|atom)'


@dataclass(frozen=True)
class ContentTypeRoute:
    key: str
    base: str = ''
    hierarchical: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContentTypeRoute:
        return cls(
            key=data['key'],
            base=data.get('base', '').strip('/'),
            hierarchical=data.get('hierarchical', False),
        )

    @property
    def query_var(self) -> str:
        return query_param_for(self.key)

    @property
    def prefix(self) -> str:
        return f'^{self.base}/' if self.base else '^'

    def item_path(self, slug: str) -> str:
        """Return the canonical URL path of the item at `slug`."""
        if self.base:
            return f'/{self.base}/{slug}/'
        return f'/{slug}/'


def generate_rules(route: ContentTypeRoute) -> list[PatternEntry]:
    """Build the un-augmented rules of `route`, most specific first.

    A new list is returned on every call.
    """
    prefix = route.prefix
    qv = route.query_var
    slug = '(.?.+?)' if route.hierarchical else '([^/]+)'
    parent = '.?.+?' if route.hierarchical else '[^/]+'

    rules = []
    if route.base:
        rules += [
            PatternEntry(f'{prefix}?$', f'index.php?post_type={route.key}'),
            PatternEntry(f'{prefix}page/([0-9]{{1,}})/?$', f'index.php?post_type={route.key}&paged=$matches[1]'),
        ]
    rules += [
        PatternEntry(f'{prefix}{parent}/attachment/([^/]+)/?$', 'index.php?attachment=$matches[1]'),
        PatternEntry(f'{prefix}{parent}/attachment/([^/]+)/trackback/?$', 'index.php?attachment=$matches[1]&tb=1'),
        PatternEntry(f'{prefix}{slug}/trackback/?$', f'index.php?{qv}=$matches[1]&tb=1'),
        PatternEntry(f'{prefix}{slug}/feed/{FEEDS}/?$', f'index.php?{qv}=$matches[1]&feed=$matches[2]'),
        PatternEntry(f'{prefix}{slug}/{FEEDS}/?$', f'index.php?{qv}=$matches[1]&feed=$matches[2]'),
        PatternEntry(f'{prefix}{slug}/embed/?$', f'index.php?{qv}=$matches[1]&embed=true'),
        PatternEntry(f'{prefix}{slug}(?:/([0-9]+))?/?$', f'index.php?{qv}=$matches[1]&page=$matches[2]'),
    ]
    return rules
