# couponlinks/settings/development.py
from .base import *

# -----------------------------------------------------------------------------
# Development Settings
# -----------------------------------------------------------------------------
DEBUG = True

SECRET_KEY = SECRET_KEY or "dev-insecure-coupon-links-key"

ALLOWED_HOSTS = ["*"]

CSRF_TRUSTED_ORIGINS = [
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]

# Plain HTTP locally
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# No manifest needed when serving straight from app static dirs
STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
}

LOGGING["handlers"]["console"]["formatter"] = "verbose"
LOGGING["loggers"]["coupons"]["level"] = "DEBUG"
