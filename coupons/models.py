from __future__ import annotations

from decimal import Decimal
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Coupon(models.Model):
    """A discount rule shoppers apply by code, typed in or through a link."""

    DISCOUNT_TYPE_CHOICES = [
        ("percent", "Percentage discount"),
        ("fixed_cart", "Fixed cart discount"),
    ]

    code = models.CharField(
        max_length=64,
        unique=True,
        help_text="Code shoppers enter or follow in a coupon link (case-insensitive)",
    )

    description = models.TextField(
        blank=True,
        max_length=500,
        help_text="Internal description",
    )

    discount_type = models.CharField(
        max_length=20,
        choices=DISCOUNT_TYPE_CHOICES,
        default="percent",
    )

    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Percentage or fixed amount, depending on the discount type",
    )

    active = models.BooleanField(
        default=True,
        help_text="Whether this coupon is currently active",
    )

    valid_from = models.DateTimeField(null=True, blank=True)
    valid_to = models.DateTimeField(null=True, blank=True)

    max_uses = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Maximum number of times this coupon can be used (total)",
    )

    times_used = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["active", "valid_from", "valid_to"], name="coupon_active_validity_idx"),
        ]

    def __str__(self) -> str:
        return self.code

    def clean(self):
        super().clean()
        self.code = (self.code or "").strip()
        if not self.code:
            raise ValidationError({"code": "Coupon code is required."})

        duplicates = Coupon.objects.filter(code__iexact=self.code).exclude(pk=self.pk)
        if duplicates.exists():
            raise ValidationError({"code": "A coupon with this code already exists."})

        if self.discount_type == "percent" and self.amount > Decimal("100"):
            raise ValidationError({"amount": "Percentage discounts cannot exceed 100."})

        if self.valid_from and self.valid_to and self.valid_from >= self.valid_to:
            raise ValidationError({"valid_to": "Valid to date must be after valid from date."})

    def is_valid_now(self) -> bool:
        if not self.active:
            return False

        now = timezone.now()
        if self.valid_from and now < self.valid_from:
            return False
        if self.valid_to and now > self.valid_to:
            return False

        if self.max_uses is not None and self.times_used >= self.max_uses:
            return False

        return True
