# coupons/conf.py
"""
Coupon link settings, read once from Django settings.

    COUPON_LINKS_QUERY_VAR        query var / rewrite endpoint name ("coupon_code")
    COUPON_LINKS_REWRITE_ENABLED  shareable links use /<var>/<code> (True)
    COUPON_LINKS_BASE_URL         base of shareable links (SITE_URL)

Values are cached; the cache is dropped when Django reports a changed
setting (``override_settings`` in tests).
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed

DEFAULT_QUERY_VAR = "coupon_code"

WATCHED_SETTINGS = (
    "COUPON_LINKS_QUERY_VAR",
    "COUPON_LINKS_REWRITE_ENABLED",
    "COUPON_LINKS_BASE_URL",
    "SITE_URL",
)


@dataclass(frozen=True)
class CouponLinkSettings:
    query_var: str
    rewrite_enabled: bool
    base_url: str


@lru_cache(maxsize=None)
def get_settings() -> CouponLinkSettings:
    query_var = (getattr(settings, "COUPON_LINKS_QUERY_VAR", DEFAULT_QUERY_VAR) or "").strip()
    if not query_var:
        raise ImproperlyConfigured("COUPON_LINKS_QUERY_VAR must not be empty")

    base_url = getattr(settings, "COUPON_LINKS_BASE_URL", "") or getattr(settings, "SITE_URL", "")
    return CouponLinkSettings(
        query_var=query_var,
        rewrite_enabled=bool(getattr(settings, "COUPON_LINKS_REWRITE_ENABLED", True)),
        base_url=base_url.rstrip("/"),
    )


def reload_settings(*args, setting=None, **kwargs) -> None:
    if setting not in WATCHED_SETTINGS:
        return
    get_settings.cache_clear()

    # Keep the rewrite endpoint in step with the query var
    from .handlers import add_coupon_rewrite
    add_coupon_rewrite()


setting_changed.connect(reload_settings)
