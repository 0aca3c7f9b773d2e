# coupons/receivers.py
from __future__ import annotations

import logging
from typing import Any

from django.dispatch import receiver

from shop.signals import cart_item_added
from .handlers import apply_coupon_from_request

logger = logging.getLogger(__name__)


@receiver(cart_item_added)
def apply_coupon_on_cart_item_added(sender, request=None, **kwargs: Any) -> None:
    """Apply a linked coupon again once the cart has items."""
    if request is None:
        logger.debug("cart_item_added sent without a request, coupon link skipped")
        return
    apply_coupon_from_request(request)
