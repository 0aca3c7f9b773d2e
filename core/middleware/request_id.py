import logging
import uuid
from threading import local

from django.utils.deprecation import MiddlewareMixin

# Request id of the request currently handled by this thread
_thread_locals = local()

REQUEST_ID_HEADER = "HTTP_X_REQUEST_ID"


class RequestIDMiddleware(MiddlewareMixin):
    """
    Tags every request with an id, echoes it in the X-Request-ID response
    header and exposes it to log records through RequestIDFilter.

    An incoming X-Request-ID header (set by a proxy) is reused as is.
    """

    def process_request(self, request):
        request_id = request.META.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.request_id = request_id
        _thread_locals.request_id = request_id
        return None

    def process_response(self, request, response):
        if hasattr(request, "request_id"):
            response["X-Request-ID"] = request.request_id
        _clear_request_id()
        return response

    def process_exception(self, request, exception):
        _clear_request_id()
        return None


def _clear_request_id():
    if hasattr(_thread_locals, "request_id"):
        delattr(_thread_locals, "request_id")


def get_request_id():
    """Return the current request id, or None outside a request."""
    return getattr(_thread_locals, "request_id", None)


class RequestIDFilter(logging.Filter):
    """Adds ``request_id`` to every log record."""

    def filter(self, record):
        record.request_id = get_request_id() or "-"
        return True
