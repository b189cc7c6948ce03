from django.utils.crypto import get_random_string
from environ import Env

DEFAULTS = {
    'ALLOWED_HOSTS': (list, ['localhost', '127.0.0.1']),
    'DATABASE_URL': (str, 'sqlite:///securelink.sqlite3'),
    'DEBUG': (bool, False),
    'SECRET_KEY': (str, get_random_string(length=50)),
    'LOG_LEVEL': (str, 'INFO'),

    'SENTRY_DSN': (str, ''),
    'SENTRY_DEBUG': (bool, False),
    'SENTRY_ENVIRONMENT': (str, 'local'),

    # content types whose detail URLs accept a token segment
    'SECURELINK_CONTENT_TYPES': (list, ['post', 'page']),
    'SECURELINK_URL_IDENTIFIER': (str, 'secure'),
    'SECURELINK_META_NAME': (str, '_secure_link_token'),
    'SECURELINK_UNAUTHORIZED_MESSAGE': (str, 'Invalid access'),
}

env = Env(**DEFAULTS)
