import pytest
from django.contrib.messages.storage.fallback import FallbackStorage
from django.contrib.sessions.middleware import SessionMiddleware
from django.test import RequestFactory
from rest_framework.test import APIClient

from tests.factories import StaffUserFactory


@pytest.fixture
def api_client() -> APIClient:
    """Unauthenticated DRF APIClient."""
    return APIClient(enforce_csrf_checks=False)


@pytest.fixture
def staff_user(db):
    """A persisted staff/superuser."""
    return StaffUserFactory()


@pytest.fixture
def staff_api_client(api_client: APIClient, staff_user):
    api_client.force_authenticate(user=staff_user)
    return api_client


@pytest.fixture
def session_request(db):
    """
    Build GET requests carrying a session and message storage, as they look
    to a view after the session and message middleware ran.
    """
    factory = RequestFactory()

    def make(path="/", data=None):
        request = factory.get(path, data or {})
        SessionMiddleware(lambda r: None).process_request(request)
        request._messages = FallbackStorage(request)
        return request

    return make
