from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .api_views import CouponLinkViewSet

router = DefaultRouter()
router.register(r"links", CouponLinkViewSet, basename="coupon-link")

urlpatterns = [
    path("", include(router.urls)),
]
