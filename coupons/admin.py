from __future__ import annotations
from django import forms
from django.contrib import admin
from django.utils.html import format_html

from .conf import get_settings
from .links import coupon_url_template, render_coupon_url
from .models import Coupon

COUPON_URL_HELP = (
    "This field displays the URL that can be used to directly add this coupon. "
    "The URL will work in conjunction with other query string parameters, "
    "for example adding a product to the cart while applying the coupon."
)


class CouponAdminForm(forms.ModelForm):
    class Meta:
        model = Coupon
        fields = "__all__"

    class Media:
        # Form media is only rendered on the add/change screens
        js = ("coupons/admin/coupon-links.js",)
        css = {"all": ("coupons/admin/coupon-links.css",)}


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    form = CouponAdminForm
    list_display = ("code", "discount_type", "amount", "active", "valid_from", "valid_to", "times_used", "created_at")
    list_filter = ("active", "discount_type", "valid_from", "valid_to")
    search_fields = ("code", "description")
    readonly_fields = ("coupon_url", "times_used", "created_at", "updated_at")

    fieldsets = (
        (None, {"fields": ("code", "coupon_url", "description", "discount_type", "amount", "active")}),
        ("Validity", {"fields": ("valid_from", "valid_to", "max_uses")}),
        ("Usage", {"fields": ("times_used",)}),
        ("Meta", {"fields": ("created_at", "updated_at")}),
    )

    @admin.display(description="Coupon URL")
    def coupon_url(self, obj):
        conf = get_settings()
        template = coupon_url_template(conf.base_url, conf.query_var, conf.rewrite_enabled)
        code = getattr(obj, "code", "") or ""
        return format_html(
            '<span class="coupon_url_field">'
            '<span id="coupon-url" data-template="{}">{}</span> '
            '<span class="coupon-url-help" title="{}">?</span>'
            "</span>",
            template,
            render_coupon_url(conf.base_url, conf.query_var, conf.rewrite_enabled, code),
            COUPON_URL_HELP,
        )
