"""Product model.

Business rules implemented:
- RN-PRO-001: ``name`` and ``description`` are required text.
- RN-PRO-002: Price must be greater than zero (application + DB constraint).
- RN-PRO-003: Stock quantity is a positive integer.
- RN-PRO-004: ``id`` and ``created_at`` never change after the first save;
  ``updated_at`` is refreshed on every save (inherited from BaseModel).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root.

    No default ordering: listings come back in the store's natural order.
    """

    name = models.CharField(max_length=255)
    description = models.TextField()
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    stock_quantity = models.PositiveIntegerField()

    class Meta:
        db_table = "products"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        errors = {}
        if not (self.name or "").strip():
            errors["name"] = "Name must not be blank."
        if not (self.description or "").strip():
            errors["description"] = "Description must not be blank."
        if self.price is not None and self.price <= 0:
            errors["price"] = "Price must be greater than zero."
        if errors:
            raise ValidationError(errors)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
