import sys
from pathlib import Path

import pytest

from securelink.core.conf import SecureLinkConfig


def pytest_configure(config):
    here = Path(__file__).parent
    sys.path.insert(0, str(here / '_extras'))


@pytest.fixture
def secure_config():
    return SecureLinkConfig(content_types=('post', 'page', 'book'), url_identifier='secure')


@pytest.fixture
def post(db):
    from testutils.factories import ContentItemFactory

    return ContentItemFactory(slug='hello-world', title='Hello world')


@pytest.fixture
def protected_post(db):
    from testutils.factories import ProtectedItemFactory

    return ProtectedItemFactory(slug='secret-post', title='Secret post', token='abc123')


@pytest.fixture
def protected_page(db):
    from testutils.factories import ProtectedItemFactory

    return ProtectedItemFactory(content_type='page', slug='about', title='About us', token='Pg7Token')
