from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings


@dataclass(frozen=True)
class SecureLinkConfig:
    """Read-only configuration shared by the rule synthesizer and the access gate."""

    content_types: tuple[str, ...] = ('post', 'page')
    url_identifier: str = 'secure'
    meta_name: str = '_secure_link_token'
    unauthorized_message: str = 'Invalid access'

    @classmethod
    def from_settings(cls) -> SecureLinkConfig:
        return cls(
            content_types=tuple(settings.SECURELINK_CONTENT_TYPES),
            url_identifier=settings.SECURELINK_URL_IDENTIFIER,
            meta_name=settings.SECURELINK_META_NAME,
            unauthorized_message=settings.SECURELINK_UNAUTHORIZED_MESSAGE,
        )
