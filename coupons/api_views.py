from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, viewsets
from rest_framework.permissions import IsAdminUser

from .api_serializers import CouponLinkSerializer
from .models import Coupon


class CouponLinkViewSet(viewsets.ReadOnlyModelViewSet):
    """Shareable coupon URLs, for staff."""

    queryset = Coupon.objects.all().order_by("-created_at")
    serializer_class = CouponLinkSerializer
    permission_classes = [IsAdminUser]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ["active"]
    search_fields = ["code", "description"]
    ordering_fields = ["created_at", "code"]
    ordering = ["-created_at"]
