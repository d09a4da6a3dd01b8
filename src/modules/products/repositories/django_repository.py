"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a missing
entity into a domain error.
"""

from __future__ import annotations

from typing import ContextManager, List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError):
            return None

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.id,
            quantity_in_stock=entity.quantity_in_stock,
        )
        return entity

    def atomic(self) -> ContextManager[object]:
        return transaction.atomic()

    def get_for_update(self, id: int) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        The lock is held until the enclosing ``atomic()`` block exits.
        Backends without row locks (SQLite) ignore ``select_for_update``
        and serialize writers at the database level instead: the settings
        open SQLite transactions with ``BEGIN IMMEDIATE``.
        """
        try:
            return Product.objects.select_for_update().filter(id=id).first()
        except (ValueError, TypeError):
            return None
