# couponlinks/settings/test.py
from .base import *

# -----------------------------------------------------------------------------
# Test Settings
# -----------------------------------------------------------------------------
DEBUG = False

SECRET_KEY = SECRET_KEY or "test-insecure-coupon-links-key"

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

SITE_URL = "https://shop.test"
COUPON_LINKS_QUERY_VAR = "coupon_code"
COUPON_LINKS_REWRITE_ENABLED = True
COUPON_LINKS_BASE_URL = SITE_URL

SITE_SHOW_ON_FRONT = "posts"
SITE_PAGE_ON_FRONT = None

SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
}

LOGGING["root"]["level"] = "CRITICAL"
for _name in ("django", "coupons", "shop", "storefront"):
    LOGGING["loggers"][_name]["level"] = "CRITICAL"
