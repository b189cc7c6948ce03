"""Per-request access state.

The context decides which statuses the item lookup may return: protected
items are only visible to a single-item lookup whose matched rule captured a
non-empty token. Listings never see them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from securelink.core.models import ItemStatus
from securelink.rewrite.rules import TOKEN_QUERY_VAR

if TYPE_CHECKING:
    from securelink.core.models import ContentItem
    from securelink.rewrite.registry import RewriteRegistry

PUBLIC_STATUSES = (ItemStatus.PUBLISH.value,)


@dataclass(frozen=True)
class RequestAccessContext:
    supplied_token: str | None = None
    content_type: str | None = None
    slug: str | None = None
    statuses: tuple[str, ...] = PUBLIC_STATUSES
    single: bool = False
    endpoint: str = 'detail'
    matched_item_id: int | None = None
    matched_item_status: str | None = None

    @classmethod
    def from_query(cls, query: dict[str, str], registry: RewriteRegistry) -> RequestAccessContext:
        """Build the context of a request from the query variables of its matched rule."""
        token = query.get(TOKEN_QUERY_VAR) or None

        if 'post_type' in query and query['post_type'] in registry.routes:
            return cls(supplied_token=token, content_type=query['post_type'])

        for key, value in query.items():
            if (route := registry.route_for_query_var(key)) and value:
                slug = value.strip('/') if route.hierarchical else value
                if '/' in slug:
                    # items have no parent, nested paths resolve to nothing
                    return cls(supplied_token=token)
                statuses = PUBLIC_STATUSES
                if token:
                    statuses = (*PUBLIC_STATUSES, ItemStatus.PROTECTED.value)
                return cls(
                    supplied_token=token,
                    content_type=route.key,
                    slug=slug,
                    statuses=statuses,
                    single=True,
                    endpoint=cls._endpoint(query),
                )

        return cls(supplied_token=token)

    @staticmethod
    def _endpoint(query: dict[str, str]) -> str:
        if query.get('feed'):
            return 'feed'
        if query.get('embed'):
            return 'embed'
        if query.get('tb'):
            return 'trackback'
        return 'detail'

    @property
    def is_listing(self) -> bool:
        return self.content_type is not None and not self.single

    def resolved(self, item: ContentItem) -> RequestAccessContext:
        return replace(self, matched_item_id=item.pk, matched_item_status=item.status)
