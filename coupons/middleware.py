# coupons/middleware.py
from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

from .context import CouponLinkContext, get_context
from .handlers import apply_coupon_from_request, strip_coupon_query_arg


class CouponLinksMiddleware(MiddlewareMixin):
    """
    Applies coupon links.

    Must come after SessionMiddleware and ContentQueryMiddleware. Each
    request gets a fresh CouponLinkContext, so a captured coupon never
    outlives its request.

    The coupon is applied once the view is resolved. Django skips
    ``process_view`` when the URL does not resolve, so ``process_response``
    applies it for those requests; SessionMiddleware saves the session
    after this middleware's response step.
    """

    def process_request(self, request: HttpRequest) -> None:
        request.coupon_links = CouponLinkContext()
        strip_coupon_query_arg(request)
        return None

    def process_view(self, request: HttpRequest, view_func, view_args, view_kwargs) -> None:
        apply_coupon_from_request(request)
        return None

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        if not get_context(request).apply_attempted:
            apply_coupon_from_request(request)
        return response
