"""In-memory implementation of the Product repository.

Keeps products in a process-local dict keyed by id.  Entities handed out
are detached copies: mutating a fetched ``Product`` changes nothing until
it is passed back to ``save``.  A single re-entrant lock serializes every
``atomic()`` unit, so read-modify-write sequences never interleave.
"""

from __future__ import annotations

import threading
from typing import ContextManager, Dict, Iterable, List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _detached_copy(product: Product) -> Product:
    return Product(
        id=product.id,
        name=product.name,
        quantity_in_stock=product.quantity_in_stock,
    )


class InMemoryProductRepository(IProductRepository):
    """Product repository backed by a dict, for seeded single-process use."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._lock = threading.RLock()
        self._products: Dict[int, Product] = {}
        for product in products:
            self.save(product)

    def get_by_id(self, id: int) -> Optional[Product]:
        with self._lock:
            product = self._products.get(id)
            return _detached_copy(product) if product is not None else None

    def list(self) -> List[Product]:
        with self._lock:
            return [_detached_copy(self._products[key]) for key in sorted(self._products)]

    def save(self, entity: Product) -> Product:
        """Store a copy of ``entity``, assigning the next id to new products."""
        with self._lock:
            if entity.id is None:
                entity.id = max(self._products, default=0) + 1
            self._products[entity.id] = _detached_copy(entity)
        logger.info(
            "product.saved",
            product_id=entity.id,
            quantity_in_stock=entity.quantity_in_stock,
            store="memory",
        )
        return entity

    def atomic(self) -> ContextManager[object]:
        """Hold the store-wide lock: units on different products also wait."""
        return self._lock

    def get_for_update(self, id: int) -> Optional[Product]:
        return self.get_by_id(id)
