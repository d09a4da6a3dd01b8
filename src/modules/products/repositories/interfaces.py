"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups required by the
stock read-modify-write sequence.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ContextManager, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def atomic(self) -> ContextManager[object]:
        """Return a context manager delimiting one read-modify-write unit.

        Writes made inside the block are committed together or not at all,
        and concurrent units touching the same product are serialized.
        Implementations may serialize more widely (a store-wide lock or a
        database write lock); they must never serialize less.
        """

    @abstractmethod
    def get_for_update(self, id: int) -> Optional["Product"]:
        """Retrieve a product that is about to be modified.

        Must be called inside ``atomic()``.  Returns ``None`` if the product
        does not exist.
        """
