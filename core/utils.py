from __future__ import annotations

from django.http import HttpRequest
from django.urls import NoReverseMatch, reverse


def admin_prefix() -> str:
    try:
        return reverse("admin:index")
    except NoReverseMatch:
        return "/admin/"


def is_admin_request(request: HttpRequest) -> bool:
    """True for requests served by the Django admin."""
    return request.path_info.startswith(admin_prefix())
