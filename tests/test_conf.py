from coupons.conf import get_settings
from storefront.rewrite import rewrite_rules


def test_defaults_from_settings():
    conf = get_settings()
    assert conf.query_var == "coupon_code"
    assert conf.rewrite_enabled is True
    assert conf.base_url == "https://shop.test"


def test_settings_read_once():
    assert get_settings() is get_settings()


def test_base_url_falls_back_to_site_url(settings):
    settings.COUPON_LINKS_BASE_URL = ""
    settings.SITE_URL = "https://other.test/"
    assert get_settings().base_url == "https://other.test"


def test_endpoint_follows_query_var(settings):
    settings.COUPON_LINKS_QUERY_VAR = "promo"

    assert "promo" in rewrite_rules.endpoints
    assert "coupon_code" not in rewrite_rules.endpoints
    assert rewrite_rules.match("/promo/SAVE10/") == ("/", {"promo": "SAVE10"})


def test_endpoint_replaced_when_settings_cache_is_cold(settings):
    get_settings.cache_clear()

    settings.COUPON_LINKS_QUERY_VAR = "promo"

    assert rewrite_rules.endpoints.count("promo") == 1
    assert "coupon_code" not in rewrite_rules.endpoints
