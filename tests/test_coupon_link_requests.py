import pytest
from django.contrib.messages import get_messages
from django.test import Client
from django.urls import reverse

from tests.factories import CouponFactory, PageFactory, ProductFactory


@pytest.fixture
def client():
    return Client()


@pytest.fixture
def coupon(db):
    return CouponFactory(code="SAVE10")


def applied(client):
    return client.session.get("applied_coupons", [])


@pytest.mark.django_db
def test_query_param_applies_coupon(client, coupon):
    response = client.get("/", {"coupon_code": "SAVE10"})

    assert response.status_code == 200
    assert applied(client) == ["save10"]
    assert "shop_sessionid" in response.cookies


@pytest.mark.django_db
@pytest.mark.parametrize("url", ["/summer/sale/?coupon_code=SAVE10", "/summer/sale/coupon_code/SAVE10/"])
def test_coupon_applied_on_unresolved_path(client, coupon, url):
    response = client.get(url)

    assert response.status_code == 404
    assert response.wsgi_request.coupon_links.apply_attempted
    assert applied(client) == ["save10"]
    assert "shop_sessionid" in response.cookies


@pytest.mark.django_db
def test_repeated_visits_apply_once(client, coupon):
    client.get("/", {"coupon_code": "SAVE10"})
    client.get("/", {"coupon_code": "SAVE10"})
    client.get("/", {"coupon_code": "save10"})

    assert applied(client) == ["save10"]


@pytest.mark.django_db
def test_rewrite_endpoint_applies_coupon(client, coupon):
    response = client.get("/coupon_code/SAVE10/")

    assert response.status_code == 200
    assert applied(client) == ["save10"]


@pytest.mark.django_db
def test_rewrite_endpoint_on_page_path(client, coupon):
    page = PageFactory(slug="about", title="About us")

    response = client.get("/about/coupon_code/SAVE10/")

    assert response.status_code == 200
    assert response.context["page"] == page
    assert applied(client) == ["save10"]


@pytest.mark.django_db
def test_coupon_only_url_shows_static_front_page(client, coupon, settings):
    front = PageFactory(title="Welcome")
    PageFactory(title="Other")
    settings.SITE_SHOW_ON_FRONT = "page"
    settings.SITE_PAGE_ON_FRONT = front.pk

    for url in ("/?coupon_code=SAVE10", "/coupon_code/SAVE10/"):
        response = client.get(url)
        assert response.status_code == 200
        assert response.context["page"] == front
        assert response.context["is_front_page"] is True

    assert applied(client) == ["save10"]


@pytest.mark.django_db
def test_coupon_only_url_on_posts_front_lists_pages(client, coupon):
    PageFactory(title="First")

    response = client.get("/?coupon_code=SAVE10")

    assert response.status_code == 200
    assert "page_obj" in response.context


@pytest.mark.django_db
def test_no_coupon_no_session(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "shop_sessionid" not in response.cookies
    assert response.wsgi_request.coupon_links.fallback_coupon is None
    assert response.wsgi_request.coupon_links.resolved_coupon is None


@pytest.mark.django_db
def test_invalid_coupon_rejected_downstream(client):
    response = client.get("/", {"coupon_code": "BOGUS"})

    assert response.status_code == 200
    assert applied(client) == []
    assert b'Coupon &quot;bogus&quot; does not exist!' in response.content


@pytest.mark.django_db
def test_captured_coupon_does_not_leak_between_requests(client, coupon):
    first = client.get("/coupon_code/SAVE10/")
    second = client.get("/")

    assert first.wsgi_request.coupon_links.fallback_coupon == "SAVE10"
    assert second.wsgi_request.coupon_links.fallback_coupon is None
    assert second.wsgi_request.coupon_links is not first.wsgi_request.coupon_links


@pytest.mark.django_db
def test_add_to_cart_link_with_coupon(client, coupon):
    product = ProductFactory()
    url = reverse("shop:cart_add", args=[product.pk])

    response = client.get(url, {"coupon_code": "SAVE10"})

    assert response.status_code == 302
    assert client.session["cart"] == [{"product_id": product.pk, "quantity": 1}]
    assert applied(client) == ["save10"]

    cart_page = client.get(reverse("shop:cart"))
    assert b"Coupon: save10" in cart_page.content


@pytest.mark.django_db
def test_add_to_cart_rewrite_link_with_coupon(client, coupon):
    product = ProductFactory()

    response = client.post(f"/cart/add/{product.pk}/coupon_code/SAVE10/", {"quantity": 2})

    assert response.status_code == 302
    assert client.session["cart"] == [{"product_id": product.pk, "quantity": 2}]
    assert applied(client) == ["save10"]


@pytest.mark.django_db
def test_admin_requests_ignore_coupon_param(client, coupon, staff_user):
    client.force_login(staff_user)

    response = client.get("/admin/", {"coupon_code": "SAVE10"})

    assert response.status_code == 200
    assert applied(client) == []


@pytest.mark.django_db
def test_add_to_cart_with_invalid_coupon_reports_once(client):
    product = ProductFactory()
    url = reverse("shop:cart_add", args=[product.pk])

    response = client.get(url, {"coupon_code": "BOGUS"})

    assert response.status_code == 302
    assert client.session["cart"] == [{"product_id": product.pk, "quantity": 1}]
    assert applied(client) == []
    assert [m.message for m in get_messages(response.wsgi_request)] == ['Coupon "bogus" does not exist!']
