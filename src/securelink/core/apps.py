from django.apps import AppConfig as BaseAppConfig


class AppConfig(BaseAppConfig):
    name = 'securelink.core'
    label = 'core'

    def ready(self) -> None:
        super().ready()

        from securelink.access import gate as _  # noqa
        from securelink.rewrite import registry as _  # noqa
