from django.core.signals import setting_changed
from django.dispatch import receiver
from django.urls import clear_url_caches, re_path

from securelink.rewrite.registry import get_registry
from securelink.web.views import dispatch_rule


def rewrite_urlpatterns() -> list:
    return [re_path(rule.pattern, dispatch_rule, {'rule': rule}) for rule in get_registry().build()]


urlpatterns = rewrite_urlpatterns()


@receiver(setting_changed)
def rebuild_urlpatterns(setting: str, **kwargs: object) -> None:
    # the including resolver keeps a reference to this list, so it is refilled in place
    if setting.startswith('SECURELINK_'):
        urlpatterns[:] = rewrite_urlpatterns()
        clear_url_caches()
