from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from django.db import models
from django.utils.translation import gettext_lazy as _


class ItemStatus(models.TextChoices):
    """The visibility of a content item."""

    PUBLISH = 'publish', _('Published')
    DRAFT = 'draft', _('Draft')
    PROTECTED = 'protected', _('Protected')


class ContentItemQuerySet(models.QuerySet['ContentItem']):
    def published(self) -> Self:
        return self.filter(status=ItemStatus.PUBLISH)

    def single(self, content_type: str, slug: str, statuses: Iterable[str]) -> Self:
        """Select the item at `slug` if its status is one of `statuses`.

        :return: the filtered queryset, empty when nothing is visible.
        """
        return self.filter(content_type=content_type, slug=slug, status__in=list(statuses))


class ContentItem(models.Model):
    """A single piece of content reachable through its detail URL."""

    content_type = models.CharField(max_length=40, db_index=True)
    slug = models.SlugField(max_length=200)
    title = models.CharField(max_length=200)
    body = models.TextField(blank=True, default='')
    status = models.CharField(max_length=20, choices=ItemStatus.choices, default=ItemStatus.PUBLISH)
    created = models.DateTimeField(auto_now_add=True)

    objects = ContentItemQuerySet.as_manager()

    class Meta:
        ordering = ['-created', '-pk']
        constraints = [
            models.UniqueConstraint(fields=['content_type', 'slug'], name='unique_content_type_slug'),
        ]

    def __str__(self) -> str:
        return str(self.title)

    @property
    def is_protected(self) -> bool:
        return self.status == ItemStatus.PROTECTED


class ItemMeta(models.Model):
    """Free-form key/value data attached to a content item."""

    item = models.ForeignKey(ContentItem, on_delete=models.CASCADE, related_name='meta')
    key = models.CharField(max_length=255)
    value = models.TextField(blank=True, default='')

    class Meta:
        verbose_name = 'item meta'
        verbose_name_plural = 'item meta'
        constraints = [
            models.UniqueConstraint(fields=['item', 'key'], name='unique_item_meta_key'),
        ]

    def __str__(self) -> str:
        return f'{self.key}={self.value}'
