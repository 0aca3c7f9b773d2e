import pytest
from django.urls import reverse

from tests.factories import CouponFactory

ASSET_JS = "coupons/admin/coupon-links.js"
ASSET_CSS = "coupons/admin/coupon-links.css"


@pytest.fixture
def staff_client(client, staff_user):
    client.force_login(staff_user)
    return client


@pytest.mark.django_db
def test_change_screen_shows_coupon_url(staff_client):
    coupon = CouponFactory(code="SAVE10")

    response = staff_client.get(reverse("admin:coupons_coupon_change", args=[coupon.pk]))
    html = response.content.decode()

    assert response.status_code == 200
    assert 'id="coupon-url"' in html
    assert "https://shop.test/coupon_code/SAVE10</span>" in html
    assert 'data-template="https://shop.test/coupon_code/{coupon}"' in html


@pytest.mark.django_db
def test_change_screen_without_rewrite(staff_client, settings):
    settings.COUPON_LINKS_REWRITE_ENABLED = False
    coupon = CouponFactory(code="SAVE10")

    response = staff_client.get(reverse("admin:coupons_coupon_change", args=[coupon.pk]))

    assert "https://shop.test?coupon_code=SAVE10</span>" in response.content.decode()


@pytest.mark.django_db
def test_add_screen_shows_url_template(staff_client):
    response = staff_client.get(reverse("admin:coupons_coupon_add"))
    html = response.content.decode()

    assert response.status_code == 200
    assert 'data-template="https://shop.test/coupon_code/{coupon}"' in html
    assert ASSET_JS in html


@pytest.mark.django_db
def test_assets_only_on_coupon_screen(staff_client):
    coupon = CouponFactory()

    change = staff_client.get(reverse("admin:coupons_coupon_change", args=[coupon.pk])).content.decode()
    changelist = staff_client.get(reverse("admin:coupons_coupon_changelist")).content.decode()
    products = staff_client.get(reverse("admin:shop_product_add")).content.decode()

    assert ASSET_JS in change and ASSET_CSS in change
    assert ASSET_JS not in changelist and ASSET_CSS not in changelist
    assert ASSET_JS not in products


@pytest.mark.django_db
def test_saving_coupon_rejects_case_insensitive_duplicate(staff_client):
    CouponFactory(code="SAVE10")

    response = staff_client.post(reverse("admin:coupons_coupon_add"), {
        "code": "save10",
        "description": "",
        "discount_type": "percent",
        "amount": "5.00",
        "active": "on",
    })

    assert response.status_code == 200
    assert "A coupon with this code already exists." in response.content.decode()
