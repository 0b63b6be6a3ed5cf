from django.http import HttpResponse
from django.test import RequestFactory

from drf_remember.adapters import DjangoController


def build_controller(cookies=None, with_response=True, **kwargs):
    """A DjangoController over a GET request carrying ``cookies``."""
    request = RequestFactory().get("/")
    request.COOKIES.update(cookies or {})
    response = HttpResponse() if with_response else None
    return DjangoController(request, response, **kwargs)


class ReadOnlyJar:
    """A cookie jar without signing support."""

    def __init__(self, request, response=None):
        self.request = request

    def get(self, key):
        return self.request.COOKIES.get(key)
