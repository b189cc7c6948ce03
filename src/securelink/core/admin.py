import typing

from admin_extra_buttons.decorators import button
from admin_extra_buttons.mixins import ExtraButtonsMixin
from adminfilters.mixin import AdminFiltersMixin
from django.contrib import admin, messages
from django.contrib.admin import ModelAdmin
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse

from securelink.core.conf import SecureLinkConfig
from securelink.core.models import ContentItem, ItemMeta
from securelink.core.tokens import stored_token_lookup
from securelink.rewrite.registry import get_registry

if typing.TYPE_CHECKING:
    from django.http import HttpRequest, HttpResponse


class ItemMetaInline(admin.TabularInline):  # noqa: D101
    model = ItemMeta
    extra = 0


@admin.register(ContentItem)
class ContentItemAdmin(ExtraButtonsMixin, AdminFiltersMixin, ModelAdmin):
    search_fields = ('title', 'slug')
    list_display = ('title', 'content_type', 'slug', 'status', 'created')
    list_filter = ('content_type', 'status')
    prepopulated_fields = {'slug': ('title',)}
    inlines = [ItemMetaInline]

    @button(visible=lambda btn: bool(btn.original and btn.original.is_protected))
    def share_link(self, request: 'HttpRequest', pk: int) -> 'HttpResponse':
        item = get_object_or_404(ContentItem, pk=pk)
        token = stored_token_lookup(SecureLinkConfig.from_settings().meta_name)(item.pk)
        if token:
            url = request.build_absolute_uri(get_registry().share_path(item, token))
            self.message_user(request, url, messages.SUCCESS)
        else:
            self.message_user(request, 'No token stored for this item', messages.WARNING)
        return redirect(reverse('admin:core_contentitem_change', args=[pk]))
