# couponlinks/urls.py
from __future__ import annotations

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    # Django admin (coupon edit screen shows the shareable coupon URL)
    path("admin/", admin.site.urls),

    # Staff API
    path("api/coupons/", include("coupons.api_urls")),

    # Cart
    path("cart/", include(("shop.urls", "shop"), namespace="shop")),

    # Content pages at root; must stay last, it owns the catch-all slug route
    path("", include(("storefront.urls", "storefront"), namespace="storefront")),
]
