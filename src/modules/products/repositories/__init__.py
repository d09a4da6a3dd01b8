"""Product repositories package.

``build_product_repository`` picks the backing store named by the
``PRODUCT_STORE`` setting:

- ``memory``: process-wide ``InMemoryProductRepository`` seeded on first use.
- ``django``: ``ProductDjangoRepository`` over the configured database.
"""

from __future__ import annotations

import threading
from typing import Optional

import structlog
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import InMemoryProductRepository
from modules.products.seed import build_seed_products

logger = structlog.get_logger(__name__)

STORE_MEMORY = "memory"
STORE_DJANGO = "django"

_memory_repository: Optional[InMemoryProductRepository] = None
_memory_lock = threading.Lock()


def get_memory_repository() -> InMemoryProductRepository:
    """Return the seeded process-wide in-memory repository."""
    global _memory_repository
    with _memory_lock:
        if _memory_repository is None:
            _memory_repository = InMemoryProductRepository(build_seed_products())
            logger.info("product_store.seeded", store=STORE_MEMORY)
        return _memory_repository


def reset_memory_repository() -> None:
    """Drop the in-memory store so the next access re-seeds it."""
    global _memory_repository
    with _memory_lock:
        _memory_repository = None


def build_product_repository() -> IProductRepository:
    store = getattr(settings, "PRODUCT_STORE", STORE_MEMORY)
    if store == STORE_MEMORY:
        return get_memory_repository()
    if store == STORE_DJANGO:
        return ProductDjangoRepository()
    raise ImproperlyConfigured(
        f"PRODUCT_STORE must be '{STORE_MEMORY}' or '{STORE_DJANGO}', got '{store}'."
    )


__all__ = [
    "IProductRepository",
    "InMemoryProductRepository",
    "ProductDjangoRepository",
    "build_product_repository",
    "get_memory_repository",
    "reset_memory_repository",
]
