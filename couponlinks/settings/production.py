# couponlinks/settings/production.py
from .base import *
import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration

# -----------------------------------------------------------------------------
# Production Settings
# -----------------------------------------------------------------------------
DEBUG = False

if not SECRET_KEY:
    raise ValueError("DJANGO_SECRET_KEY environment variable is required")

ALLOWED_HOSTS = _split_csv("DJANGO_ALLOWED_HOSTS")
if not ALLOWED_HOSTS:
    raise ValueError("DJANGO_ALLOWED_HOSTS must be set in production")

# -----------------------------------------------------------------------------
# Security Settings
# -----------------------------------------------------------------------------
SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

SECURE_HSTS_SECONDS = int(os.getenv("SECURE_HSTS_SECONDS", "31536000"))  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# -----------------------------------------------------------------------------
# Database Configuration
# -----------------------------------------------------------------------------
if not DATABASE_URL:
    raise ValueError("DATABASE_URL is required in production")

DATABASES["default"]["CONN_MAX_AGE"] = 600  # 10 minutes

# -----------------------------------------------------------------------------
# Logging (structured)
# -----------------------------------------------------------------------------
LOGGING["handlers"]["console"]["formatter"] = "json"
LOGGING["handlers"]["console"]["level"] = "INFO"

# -----------------------------------------------------------------------------
# Error Reporting
# -----------------------------------------------------------------------------
SENTRY_DSN = os.getenv("SENTRY_DSN", "")
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[DjangoIntegration()],
        traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
        send_default_pii=False,
        environment="production",
    )
