import typing

from django.http import HttpRequest, HttpResponse
from django.utils.translation import gettext as _

from securelink.core.exceptions import Unauthorized

GetResponse = typing.Callable[[HttpRequest], HttpResponse]


class SecureLinkMiddleware:
    """Render `Unauthorized` as a bare 401 response."""

    def __init__(self, get_response: GetResponse) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        return self.get_response(request)

    def process_exception(self, request: HttpRequest, exception: Exception) -> HttpResponse | None:
        if isinstance(exception, Unauthorized):
            return HttpResponse(
                _(exception.message), status=exception.status_code, content_type='text/plain; charset=utf-8'
            )
        return None
