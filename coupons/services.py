from __future__ import annotations

import html
from typing import Optional

from django.utils.html import strip_tags

from .models import Coupon


def format_coupon_code(code: Optional[str]) -> str:
    """Normalise a coupon code as typed or linked: no markup, trimmed, lower case."""
    if not code:
        return ""
    return html.unescape(strip_tags(str(code))).strip().lower()


def find_active_coupon(code: Optional[str]) -> Optional[Coupon]:
    """Find a coupon that can be applied right now by its code."""
    code = format_coupon_code(code)
    if not code:
        return None

    coupon = Coupon.objects.filter(code__iexact=code, active=True).first()
    if coupon and coupon.is_valid_now():
        return coupon
    return None
