"""Django settings for securelink."""

from pathlib import Path

from securelink.config import env

BASE_DIR = Path(__file__).resolve().parent.parent

DEBUG = env('DEBUG')
SECRET_KEY = env('SECRET_KEY')
ALLOWED_HOSTS = env('ALLOWED_HOSTS')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'adminfilters',
    'admin_extra_buttons',
    'securelink',
    'securelink.core.apps.AppConfig',
    'securelink.web',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.locale.LocaleMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'securelink.access.middleware.SecureLinkMiddleware',
]

ROOT_URLCONF = 'securelink.config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'securelink.config.wsgi.application'

DATABASES = {
    'default': env.db('DATABASE_URL'),
}
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'

# the routing side: where each content type lives, in matching order
SECURELINK_ROUTES = [
    {'key': 'post', 'base': 'blog'},
    {'key': 'page', 'base': '', 'hierarchical': True},
]
SECURELINK_CONTENT_TYPES = env('SECURELINK_CONTENT_TYPES')
SECURELINK_URL_IDENTIFIER = env('SECURELINK_URL_IDENTIFIER')
SECURELINK_META_NAME = env('SECURELINK_META_NAME')
SECURELINK_UNAUTHORIZED_MESSAGE = env('SECURELINK_UNAUTHORIZED_MESSAGE')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(levelname)s %(asctime)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'securelink': {
            'handlers': ['console'],
            'level': env('LOG_LEVEL'),
            'propagate': False,
        },
    },
}

from .fragments.sentry import *  # noqa: E402, F403
