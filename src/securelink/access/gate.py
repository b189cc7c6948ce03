from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.crypto import constant_time_compare

from securelink.core.conf import SecureLinkConfig
from securelink.core.exceptions import MissingToken, StorageUnavailable, TokenMismatch
from securelink.core.models import ItemStatus
from securelink.core.tokens import TokenLookup, stored_token_lookup

if TYPE_CHECKING:
    from securelink.access.context import RequestAccessContext

logger = logging.getLogger(__name__)


class AccessGate:
    """Reject requests reaching a protected item without its token.

    Runs once the single item of the request is resolved. A missing token and
    a wrong one raise different exceptions carrying the same status and
    message, so the response tells nothing about which check failed.
    """

    def __init__(self, config: SecureLinkConfig, get_stored_token: TokenLookup) -> None:
        self.config = config
        self.get_stored_token = get_stored_token

    def check(self, context: RequestAccessContext) -> RequestAccessContext:
        """Return `context` unchanged when access is granted.

        :raises MissingToken: the item is protected and no token was supplied.
        :raises TokenMismatch: the supplied token is not the stored one, or the
            stored token cannot be read.
        """
        if context.matched_item_status != ItemStatus.PROTECTED:
            return context

        item_id = context.matched_item_id
        message = self.config.unauthorized_message
        if not context.supplied_token:
            logger.info('Protected item %s requested without token', item_id)
            raise MissingToken(message, item_id)

        try:
            stored = self.get_stored_token(item_id)
        except StorageUnavailable:
            logger.warning('Token of protected item %s unavailable, denying access', item_id)
            raise TokenMismatch(message, item_id)

        if not stored or not constant_time_compare(context.supplied_token, stored):
            logger.info('Protected item %s requested with invalid token', item_id)
            raise TokenMismatch(message, item_id)

        return context


@lru_cache(maxsize=1)
def get_gate() -> AccessGate:
    config = SecureLinkConfig.from_settings()
    return AccessGate(config, stored_token_lookup(config.meta_name))


@receiver(setting_changed)
def reset_gate(setting: str, **kwargs: object) -> None:
    if setting.startswith('SECURELINK_'):
        get_gate.cache_clear()
