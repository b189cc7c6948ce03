"""Read access to the per-item secret token."""

from __future__ import annotations

import logging
from typing import Callable

from django.db import DatabaseError

from securelink.core.exceptions import StorageUnavailable
from securelink.core.models import ItemMeta

logger = logging.getLogger(__name__)

TokenLookup = Callable[[int], 'str | None']


def stored_token_lookup(meta_name: str) -> TokenLookup:
    """Return a function reading the token stored under `meta_name` for an item.

    The function returns `None` when the item has no token and raises
    `StorageUnavailable` when the database cannot be queried.
    """

    def get_stored_token(item_id: int) -> str | None:
        try:
            return (
                ItemMeta.objects.filter(item_id=item_id, key=meta_name)
                .values_list('value', flat=True)
                .first()
            )
        except DatabaseError as e:
            logger.exception(e)
            raise StorageUnavailable(f'Cannot read {meta_name} for item {item_id}') from e

    return get_stored_token
