"""The site rule table.

Each protected content type gets a filter closure, registered once when the
registry is created. The table is rebuilt from freshly generated canonical
rules every time, so rebuilding never augments a rule twice.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

from securelink.core.conf import SecureLinkConfig
from securelink.rewrite.permastructs import ContentTypeRoute, generate_rules
from securelink.rewrite.rules import SYSTEM_QUERY_VARS, TOKEN_QUERY_VAR, PatternEntry, expand_redirect
from securelink.rewrite.synthesizer import RuleSynthesizer

if TYPE_CHECKING:
    from securelink.core.models import ContentItem

logger = logging.getLogger(__name__)

RuleFilter = Callable[[Iterable[PatternEntry]], list[PatternEntry]]

BASE_QUERY_VARS = ('post_type', 'paged', 'page', *SYSTEM_QUERY_VARS, TOKEN_QUERY_VAR)


class RewriteRegistry:
    def __init__(self, config: SecureLinkConfig, routes: Iterable[ContentTypeRoute]) -> None:
        self.config = config
        self.routes = {route.key: route for route in routes}
        self.synthesizer = RuleSynthesizer(config)
        self.filters: dict[str, RuleFilter] = {
            key: functools.partial(self.synthesizer.synthesize, key) for key in config.content_types
        }
        for key in self.filters.keys() - self.routes.keys():
            logger.warning('Content type %s is protected but has no route', key)

    @functools.cached_property
    def query_vars(self) -> frozenset[str]:
        return frozenset(BASE_QUERY_VARS) | {route.query_var for route in self.routes.values()}

    def route(self, key: str) -> ContentTypeRoute:
        return self.routes[key]

    def route_for_query_var(self, query_var: str) -> ContentTypeRoute | None:
        for route in self.routes.values():
            if route.query_var == query_var:
                return route
        return None

    def rules_for(self, key: str) -> list[PatternEntry]:
        """Return the rules of one content type, augmented if it is protected."""
        rules = generate_rules(self.route(key))
        if rule_filter := self.filters.get(key):
            return rule_filter(rules)
        return rules

    def build(self) -> list[PatternEntry]:
        """Return the whole rule table, content types in route order."""
        table = []
        for key in self.routes:
            table.extend(self.rules_for(key))
        return table

    def parse(self, rule: PatternEntry, groups: Sequence[str | None]) -> dict[str, str]:
        """Expand a matched rule into its public query variables."""
        return {key: value for key, value in expand_redirect(rule.redirect, groups).items() if key in self.query_vars}

    def share_path(self, item: ContentItem, token: str) -> str:
        """Return the tokenized URL path of `item`."""
        return f'{self.route(item.content_type).item_path(item.slug)}{self.config.url_identifier}/{token}/'


@functools.lru_cache(maxsize=1)
def get_registry() -> RewriteRegistry:
    routes = [ContentTypeRoute.from_dict(route) for route in settings.SECURELINK_ROUTES]
    return RewriteRegistry(SecureLinkConfig.from_settings(), routes)


@receiver(setting_changed)
def reset_registry(setting: str, **kwargs: object) -> None:
    if setting.startswith('SECURELINK_'):
        get_registry.cache_clear()
