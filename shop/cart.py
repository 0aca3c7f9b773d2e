# shop/cart.py
"""
Session-backed shopping cart.

Cart lines and applied coupon codes live in the Django session, so guests
keep their cart (and any coupon applied through a link) across pages.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set

from django.contrib import messages
from django.http import HttpRequest
from django.utils import timezone

from coupons.services import find_active_coupon, format_coupon_code
from .models import Product
from .signals import cart_item_added

logger = logging.getLogger(__name__)


def get_cart(request: HttpRequest) -> Optional["SessionCart"]:
    """
    Cart of the current request, or None when the request carries no
    session (e.g. the session middleware is not installed for it).
    """
    if getattr(request, "session", None) is None:
        return None
    cart = getattr(request, "_session_cart", None)
    if cart is None:
        cart = SessionCart(request)
        request._session_cart = cart
    return cart


class SessionCart:
    """
    Cart stored in ``request.session``.

    The applied coupon codes form the cart's discount set: codes are only
    ever appended, in application order, after being formatted and checked
    against active coupons.
    """

    # Session keys used for cart data
    ITEMS_KEY = "cart"
    COUPONS_KEY = "applied_coupons"
    ACTIVITY_KEY = "cart_last_activity"
    PERSIST_KEY = "cart_persist"

    def __init__(self, request: HttpRequest):
        self.request = request
        self.session = request.session
        # Codes rejected during this request; retries stay silent
        self._rejected_codes: Set[str] = set()

    # -- session ---------------------------------------------------------

    def ensure_session_exists(self) -> bool:
        """Make sure the session has a key, creating it if needed."""
        try:
            if not self.session.session_key:
                self.session.create()
                logger.debug("Created new session: %s", self.session.session_key)
            return True
        except Exception:
            logger.exception("Failed to ensure session exists")
            return False

    def persist_session(self) -> bool:
        """
        Keep the session (and its cookie) even while the cart is empty.

        Marking the session modified makes the session middleware send the
        cookie on this response.
        """
        if not self.ensure_session_exists():
            return False
        self.session[self.PERSIST_KEY] = True
        self.session.modified = True
        return True

    def _touch(self) -> None:
        self.session[self.ACTIVITY_KEY] = timezone.now().isoformat()
        self.session.modified = True

    # -- items -----------------------------------------------------------

    @property
    def items(self) -> List[Dict[str, Any]]:
        items = self.session.get(self.ITEMS_KEY, [])
        if not isinstance(items, list):
            return []
        return [dict(line) for line in items]

    def count(self) -> int:
        return sum(int(line.get("quantity", 0)) for line in self.items)

    def add_item(self, product: Product, quantity: int = 1) -> Dict[str, Any]:
        """Add ``quantity`` of ``product``, merging with an existing line."""
        quantity = max(1, int(quantity))
        items = self.items
        for line in items:
            if line.get("product_id") == product.pk:
                line["quantity"] = int(line.get("quantity", 0)) + quantity
                break
        else:
            line = {"product_id": product.pk, "quantity": quantity}
            items.append(line)

        self.ensure_session_exists()
        self.session[self.ITEMS_KEY] = items
        self._touch()
        logger.info("Added %s x product %s to cart", quantity, product.pk)

        cart_item_added.send(
            sender=self.__class__,
            request=self.request,
            cart=self,
            product=product,
            quantity=quantity,
        )
        return line

    def clear(self) -> None:
        for key in (self.ITEMS_KEY, self.COUPONS_KEY, self.ACTIVITY_KEY):
            self.session.pop(key, None)
        self.session.modified = True

    # -- discounts -------------------------------------------------------

    @property
    def applied_coupons(self) -> List[str]:
        codes = self.session.get(self.COUPONS_KEY, [])
        if not isinstance(codes, list):
            return []
        return list(codes)

    def has_discount(self, code: str) -> bool:
        return format_coupon_code(code) in self.applied_coupons

    def add_discount(self, code: str) -> bool:
        """
        Apply a coupon code to the cart.

        The code is formatted first; unknown, inactive or already applied
        codes are rejected with a message to the shopper, once per request
        for an unknown code. Returns whether the code was added.
        """
        code = format_coupon_code(code)
        if not code:
            return False

        if code in self.applied_coupons:
            messages.error(self.request, "Coupon code already applied!", fail_silently=True)
            return False

        if code in self._rejected_codes:
            return False

        coupon = find_active_coupon(code)
        if coupon is None:
            self._rejected_codes.add(code)
            logger.info("Rejected coupon %r: not found or inactive", code)
            messages.error(self.request, f'Coupon "{code}" does not exist!', fail_silently=True)
            return False

        self.ensure_session_exists()
        self.session[self.COUPONS_KEY] = self.applied_coupons + [code]
        self._touch()
        logger.info("Applied coupon %s to cart", code)
        messages.success(self.request, "Coupon code applied successfully.", fail_silently=True)
        return True
