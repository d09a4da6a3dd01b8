"""Product model with stock control.

Business rules implemented:
- RN-STK-001: ``id`` is an integer assigned at seed time and never changes.
- RN-STK-002: Quantity in stock cannot be negative.
- RN-STK-004: Quantity in stock cannot exceed ``MAX_QUANTITY_IN_STOCK``.
"""

from __future__ import annotations

import structlog

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator
from django.db import models

from modules.core.models import TimeStampedModel
from modules.products.constants import MAX_QUANTITY_IN_STOCK

logger = structlog.get_logger(__name__)


class Product(TimeStampedModel):
    """Product aggregate root.

    Only ``StockService`` mutates ``quantity_in_stock``; the model itself
    holds no stock logic beyond validating the quantity range.
    ``PositiveIntegerField`` also emits a ``CHECK (>= 0)`` at the DB level.
    """

    name = models.CharField(max_length=255)
    quantity_in_stock = models.PositiveIntegerField(
        default=0, validators=[MaxValueValidator(MAX_QUANTITY_IN_STOCK)]
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.quantity_in_stock is not None and self.quantity_in_stock < 0:
            raise ValidationError(
                {"quantity_in_stock": "Quantity in stock cannot be negative."}
            )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product.created",
                product_id=self.id,
                name=self.name,
                quantity_in_stock=self.quantity_in_stock,
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
