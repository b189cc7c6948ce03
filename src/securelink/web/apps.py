from django.apps import AppConfig as BaseAppConfig


class AppConfig(BaseAppConfig):
    name = 'securelink.web'
    label = 'web'
