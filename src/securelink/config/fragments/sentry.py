import logging

from securelink.config import env as _env

# SENTRY
SENTRY_DSN = _env('SENTRY_DSN')
if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration
    from sentry_sdk.integrations.logging import LoggingIntegration

    import securelink

    sentry_logging = LoggingIntegration(
        level=logging.INFO,  # Capture info and above as breadcrumbs
        event_level=logging.ERROR  # Send errors as events
    )

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[
            DjangoIntegration(transaction_style='url'),
            sentry_logging,
        ],
        release=securelink.__version__,
        debug=_env('SENTRY_DEBUG'),
        environment=_env('SENTRY_ENVIRONMENT'),
        send_default_pii=False
    )
