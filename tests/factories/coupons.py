import factory
from decimal import Decimal

from coupons.models import Coupon


class CouponFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Coupon
        django_get_or_create = ("code",)

    code = factory.Sequence(lambda n: f"CODE{n}")
    discount_type = "percent"
    amount = Decimal("10.00")
    active = True
