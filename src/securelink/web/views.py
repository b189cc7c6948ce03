from __future__ import annotations

from typing import TYPE_CHECKING

from django.core.paginator import EmptyPage, PageNotAnInteger, Paginator
from django.http import Http404
from django.shortcuts import get_object_or_404, render

from securelink.access.context import RequestAccessContext
from securelink.access.gate import get_gate
from securelink.core.models import ContentItem
from securelink.rewrite.registry import get_registry

if TYPE_CHECKING:
    from django.http import HttpRequest, HttpResponse

    from securelink.rewrite.rules import PatternEntry

PAGE_SIZE = 10


def dispatch_rule(request: HttpRequest, *groups: str | None, rule: PatternEntry) -> HttpResponse:
    """Serve the request matched by a rewrite rule.

    URL: any path matched by the rule table.
    """
    registry = get_registry()
    query = registry.parse(rule, groups)
    context = RequestAccessContext.from_query(query, registry)

    if context.single:
        return item_detail(request, context)
    if context.is_listing:
        return item_list(request, context, query)
    raise Http404('Nothing to show')


def item_detail(request: HttpRequest, context: RequestAccessContext) -> HttpResponse:
    """Render a single item after the access gate has let the request through.

    Raises:
        Http404: If no item with an allowed status lives at the requested slug
        Unauthorized: If the item is protected and the token is missing or wrong

    """
    item = get_object_or_404(ContentItem.objects.single(context.content_type, context.slug, context.statuses))
    context = get_gate().check(context.resolved(item))
    return render(request, 'web/item_detail.html', {'item': item, 'endpoint': context.endpoint})


def item_list(request: HttpRequest, context: RequestAccessContext, query: dict[str, str]) -> HttpResponse:
    """Render the published items of a content type, never the protected ones."""
    route = get_registry().route(context.content_type)
    paginator = Paginator(ContentItem.objects.published().filter(content_type=context.content_type), PAGE_SIZE)
    try:
        page = paginator.page(query.get('paged') or 1)
    except (EmptyPage, PageNotAnInteger):
        raise Http404('No such page')

    entries = [(item, route.item_path(item.slug)) for item in page.object_list]
    return render(
        request,
        'web/item_list.html',
        {'content_type': route.key, 'archive': f'/{route.base}/', 'page': page, 'entries': entries},
    )
