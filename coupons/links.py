# coupons/links.py
from __future__ import annotations

import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

COUPON_PLACEHOLDER = "{coupon}"


class DiscountSet(Protocol):
    """What the applier needs from a cart."""

    def has_discount(self, code: str) -> bool: ...

    def add_discount(self, code: str) -> bool: ...

    def persist_session(self) -> bool: ...


def apply_coupon(
    request_coupon: Optional[str],
    fallback_coupon: Optional[str],
    cart: Optional[DiscountSet],
) -> Optional[str]:
    """
    Apply a coupon code to ``cart`` at most once.

    The code from the request wins over the fallback captured earlier in the
    request; with neither, or without a cart, nothing happens. The session is
    persisted whenever a code is found, even when it is already applied.
    The code is handed to the cart as is; the cart formats and validates it.

    Returns the code that was resolved, or None.
    """
    if cart is None:
        logger.debug("No cart available, skipping coupon link")
        return None

    code = request_coupon or fallback_coupon
    if not code:
        return None

    cart.persist_session()

    if not cart.has_discount(code):
        cart.add_discount(code)
    return code


def coupon_url_template(base_url: str, param_name: str, rewrite_enabled: bool) -> str:
    """Shareable coupon URL with a ``{coupon}`` placeholder for the code."""
    if rewrite_enabled:
        return f"{base_url}/{param_name}/{COUPON_PLACEHOLDER}"
    return f"{base_url}?{param_name}={COUPON_PLACEHOLDER}"


def render_coupon_url(base_url: str, param_name: str, rewrite_enabled: bool, coupon_title: str) -> str:
    template = coupon_url_template(base_url, param_name, rewrite_enabled)
    return template.replace(COUPON_PLACEHOLDER, coupon_title)
