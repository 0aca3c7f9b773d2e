from decimal import Decimal

import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Coupon",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(help_text="Code shoppers enter or follow in a coupon link (case-insensitive)", max_length=64, unique=True)),
                ("description", models.TextField(blank=True, help_text="Internal description", max_length=500)),
                ("discount_type", models.CharField(choices=[("percent", "Percentage discount"), ("fixed_cart", "Fixed cart discount")], default="percent", max_length=20)),
                ("amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), help_text="Percentage or fixed amount, depending on the discount type", max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("active", models.BooleanField(default=True, help_text="Whether this coupon is currently active")),
                ("valid_from", models.DateTimeField(blank=True, null=True)),
                ("valid_to", models.DateTimeField(blank=True, null=True)),
                ("max_uses", models.PositiveIntegerField(blank=True, help_text="Maximum number of times this coupon can be used (total)", null=True)),
                ("times_used", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["active", "valid_from", "valid_to"], name="coupon_active_validity_idx")],
            },
        ),
    ]
