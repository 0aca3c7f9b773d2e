from __future__ import annotations

from rest_framework import serializers
from .handlers import coupon_url
from .models import Coupon


class CouponLinkSerializer(serializers.ModelSerializer):
    url = serializers.SerializerMethodField()

    class Meta:
        model = Coupon
        fields = ["id", "code", "description", "active", "valid_to", "url"]
        read_only_fields = fields

    def get_url(self, obj: Coupon) -> str:
        return coupon_url(obj.code)
