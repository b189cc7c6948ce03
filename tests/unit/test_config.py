import pytest

from securelink.config import DEFAULTS, env
from securelink.core.conf import SecureLinkConfig


def test_defaults():
    assert env('SECURELINK_URL_IDENTIFIER') == 'secure'
    assert env('SECURELINK_CONTENT_TYPES') == ['post', 'page']
    assert DEFAULTS['SECURELINK_META_NAME'] == (str, '_secure_link_token')


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('SECURELINK_CONTENT_TYPES', 'post,book')
    monkeypatch.setenv('SECURELINK_URL_IDENTIFIER', 'private')

    assert env('SECURELINK_CONTENT_TYPES') == ['post', 'book']
    assert env('SECURELINK_URL_IDENTIFIER') == 'private'


def test_config_from_settings(settings):
    settings.SECURELINK_CONTENT_TYPES = ['book']
    settings.SECURELINK_META_NAME = 'share_token'

    config = SecureLinkConfig.from_settings()

    assert config.content_types == ('book',)
    assert config.meta_name == 'share_token'


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        SecureLinkConfig().url_identifier = 'x'
