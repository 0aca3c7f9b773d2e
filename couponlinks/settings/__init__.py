# couponlinks/settings/__init__.py
"""
Django settings package for the coupon links site.

Environment-specific modules:
- development: local development with debug enabled
- test: used by the pytest suite (see pyproject.toml)
- production: hardened settings, requires secrets from the environment

The module is chosen by the ENVIRONMENT variable when
DJANGO_SETTINGS_MODULE points at this package.
"""

import os

ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()

VALID_ENVIRONMENTS = ["development", "test", "production"]
if ENVIRONMENT not in VALID_ENVIRONMENTS:
    raise ValueError(
        f"Invalid ENVIRONMENT '{ENVIRONMENT}'. "
        f"Must be one of: {', '.join(VALID_ENVIRONMENTS)}"
    )

if ENVIRONMENT == "production":
    from .production import *
elif ENVIRONMENT == "test":
    from .test import *
else:
    from .development import *
