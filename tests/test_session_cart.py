from datetime import timedelta

import pytest
from django.contrib.messages import get_messages
from django.utils import timezone

from coupons.links import apply_coupon
from coupons.services import find_active_coupon, format_coupon_code
from shop.cart import SessionCart, get_cart
from shop.signals import cart_item_added
from tests.factories import CouponFactory, ProductFactory


@pytest.mark.parametrize("raw, expected", [
    ("SAVE10", "save10"),
    ("  Save10 ", "save10"),
    ("<b>SAVE10</b>", "save10"),
    ("fish&amp;chips", "fish&chips"),
    ("", ""),
    (None, ""),
])
def test_format_coupon_code(raw, expected):
    assert format_coupon_code(raw) == expected


@pytest.mark.django_db
def test_find_active_coupon_ignores_case_and_inactive():
    CouponFactory(code="SAVE10")
    CouponFactory(code="OLD", active=False)
    CouponFactory(code="LATER", valid_from=timezone.now() + timedelta(days=1))
    CouponFactory(code="USEDUP", max_uses=1, times_used=1)

    assert find_active_coupon("save10").code == "SAVE10"
    assert find_active_coupon("OLD") is None
    assert find_active_coupon("LATER") is None
    assert find_active_coupon("USEDUP") is None
    assert find_active_coupon("missing") is None


def test_get_cart_without_session():
    class Bare:
        pass

    assert get_cart(Bare()) is None


def test_get_cart_reused_within_request(session_request):
    request = session_request()
    assert get_cart(request) is get_cart(request)


def test_add_discount_applies_valid_coupon(session_request):
    CouponFactory(code="SAVE10")
    request = session_request()
    cart = SessionCart(request)

    assert cart.add_discount("SAVE10") is True
    assert cart.applied_coupons == ["save10"]
    assert cart.has_discount("Save10")
    assert [m.message for m in get_messages(request)] == ["Coupon code applied successfully."]


def test_add_discount_rejects_unknown_coupon(session_request):
    request = session_request()
    cart = SessionCart(request)

    assert cart.add_discount("NOPE") is False
    assert cart.applied_coupons == []
    assert [m.message for m in get_messages(request)] == ['Coupon "nope" does not exist!']


def test_add_discount_reports_unknown_coupon_once_per_request(session_request):
    request = session_request()
    cart = get_cart(request)

    assert cart.add_discount("NOPE") is False
    assert cart.add_discount(" nope ") is False

    assert cart.applied_coupons == []
    assert [m.message for m in get_messages(request)] == ['Coupon "nope" does not exist!']


def test_add_discount_rejects_duplicate(session_request):
    CouponFactory(code="SAVE10")
    cart = SessionCart(session_request())

    cart.add_discount("SAVE10")
    assert cart.add_discount("save10") is False
    assert cart.applied_coupons == ["save10"]


def test_applier_on_session_cart_is_idempotent(session_request):
    CouponFactory(code="SAVE10")
    request = session_request()
    cart = get_cart(request)

    apply_coupon("SAVE10", None, cart)
    apply_coupon("SAVE10", None, cart)

    assert cart.applied_coupons == ["save10"]
    assert request.session.session_key
    assert request.session["cart_persist"] is True


def test_applier_persists_session_for_invalid_coupon(session_request):
    request = session_request()
    cart = get_cart(request)

    apply_coupon("BOGUS", None, cart)

    assert cart.applied_coupons == []
    assert request.session.session_key


def test_add_item_merges_lines_and_sends_signal(session_request):
    product = ProductFactory()
    cart = SessionCart(session_request())
    received = []

    def listener(sender, **kwargs):
        received.append(kwargs)

    cart_item_added.connect(listener)
    try:
        cart.add_item(product, 2)
        cart.add_item(product)
    finally:
        cart_item_added.disconnect(listener)

    assert cart.items == [{"product_id": product.pk, "quantity": 3}]
    assert cart.count() == 3
    assert [kw["quantity"] for kw in received] == [2, 1]
    assert received[0]["product"] == product
    assert received[0]["cart"] is cart


def test_clear_drops_items_and_coupons(session_request):
    CouponFactory(code="SAVE10")
    cart = SessionCart(session_request())
    cart.add_item(ProductFactory())
    cart.add_discount("SAVE10")

    cart.clear()

    assert cart.items == []
    assert cart.applied_coupons == []
