# coupons/context.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.http import HttpRequest


@dataclass
class CouponLinkContext:
    """
    Coupon link state of one request.

    ``fallback_coupon`` holds the code captured from the content query before
    it was stripped; the coupon handlers read it later in the same request.
    ``apply_attempted`` records whether the apply step has run for the
    request, so unrouted (404) requests can still apply the coupon.
    A new context is attached to every request by CouponLinksMiddleware.
    """

    fallback_coupon: Optional[str] = None
    resolved_coupon: Optional[str] = None
    apply_attempted: bool = False


def get_context(request: HttpRequest) -> CouponLinkContext:
    context = getattr(request, "coupon_links", None)
    if context is None:
        context = CouponLinkContext()
        request.coupon_links = context
    return context
