# coupons/handlers.py
"""
Request lifecycle handlers for coupon links.

    strip_coupon_query_arg     query vars parsed     (CouponLinksMiddleware.process_request)
    apply_coupon_from_request  request routed        (CouponLinksMiddleware.process_view)
    apply_coupon_on_cart_item_added  item added      (receivers.py)
    add_coupon_rewrite         startup               (CouponsConfig.ready)

The admin screen pieces live in admin.py.
"""
from __future__ import annotations

import logging
from typing import Optional

from django.http import HttpRequest

from core.utils import is_admin_request
from shop.cart import get_cart
from storefront.options import SHOW_PAGE, page_on_front, show_on_front
from storefront.query import ContentQuery
from storefront.rewrite import RewriteRules, rewrite_rules

from .conf import get_settings
from .context import CouponLinkContext, get_context
from .links import apply_coupon, render_coupon_url

logger = logging.getLogger(__name__)

# Coupon endpoint currently registered on the site-wide rules
_registered_endpoint: Optional[str] = None


def apply_coupon_from_request(request: HttpRequest) -> Optional[str]:
    """Apply the coupon named by this request (query string or captured fallback)."""
    if is_admin_request(request):
        return None

    query_var = get_settings().query_var
    context = get_context(request)
    context.apply_attempted = True
    code = apply_coupon(
        request.GET.get(query_var),
        context.fallback_coupon,
        get_cart(request),
    )
    if code:
        context.resolved_coupon = code
        logger.debug("Coupon link resolved %r", code)
    return code


def strip_coupon_query_arg_from(query: ContentQuery, context: CouponLinkContext, query_var: str) -> Optional[str]:
    """
    Move the coupon var out of ``query`` into ``context.fallback_coupon``.

    When nothing else is left in a root query and the site shows a static
    front page, the query is re-parsed to resolve that page instead of the page
    listing.
    """
    if not query.is_main_query():
        return None

    code = query.get(query_var)
    context.fallback_coupon = code
    if not code:
        return None

    query.set(query_var, None)
    if not query.query_vars and query.is_root() and show_on_front() == SHOW_PAGE:
        logger.debug("Coupon-only query, resolving front page %s", page_on_front())
        query.parse_query({"page_id": page_on_front()})
    return code


def strip_coupon_query_arg(request: HttpRequest) -> Optional[str]:
    if is_admin_request(request):
        return None

    query = getattr(request, "content_query", None)
    if query is None:
        return None
    return strip_coupon_query_arg_from(query, get_context(request), get_settings().query_var)


def add_coupon_rewrite(rules: Optional[RewriteRules] = None, replace: Optional[str] = None) -> None:
    """
    Register the coupon query var as a rewrite endpoint.

    On the site-wide rules the endpoint registered by the previous call is
    replaced, so a renamed query var never leaves the old endpoint behind.
    """
    global _registered_endpoint

    query_var = get_settings().query_var
    if rules is None:
        rules = rewrite_rules
        replace = replace or _registered_endpoint
        _registered_endpoint = query_var
    if replace and replace != query_var:
        rules.remove_endpoint(replace)
    rules.add_endpoint(query_var)


def coupon_url(code: str) -> str:
    """Shareable URL applying ``code``, built from the configured settings."""
    conf = get_settings()
    return render_coupon_url(conf.base_url, conf.query_var, conf.rewrite_enabled, code)
