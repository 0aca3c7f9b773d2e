from .accounts import UserFactory, StaffUserFactory
from .coupons import CouponFactory
from .shop import ProductFactory
from .storefront import PageFactory

__all__ = [
    "UserFactory",
    "StaffUserFactory",
    "CouponFactory",
    "ProductFactory",
    "PageFactory",
]
