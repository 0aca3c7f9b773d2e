from django.apps import AppConfig


class CouponsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "coupons"
    verbose_name = "Coupons"

    def ready(self):
        from . import conf  # noqa: F401  (setting_changed receiver)
        from . import receivers  # noqa: F401
        from .handlers import add_coupon_rewrite

        add_coupon_rewrite()
