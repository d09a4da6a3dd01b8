"""Stock service layer (Use Cases).

Applies validated quantity deltas to a single product, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- RN-STK-002: Stock cannot become negative. A removal larger than the
  quantity in stock is refused and nothing is persisted.
- RN-STK-003: Adding or removing zero units is a successful no-op.
- RN-STK-004: Stock cannot exceed ``MAX_QUANTITY_IN_STOCK``. An addition
  past that limit is refused and nothing is persisted.

Expected outcomes are returned as ``Result`` values instead of raised:
``Success(StockLevel)`` or ``Failure(StockError)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from returns.result import Failure, Result, Success

from modules.products.constants import MAX_QUANTITY_IN_STOCK
from modules.products.results import (
    InsufficientStock,
    ProductNotFound,
    StockError,
    StockLevel,
    StockLimitExceeded,
)

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}.")


class StockService:
    """Application service for stock use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Every mutation is one fetch/validate/mutate/save sequence run inside
    ``repository.atomic()``.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_stock(self, product_id: int, amount: int) -> Result[StockLevel, StockError]:
        """Increment the quantity in stock of a product by ``amount``.

        Returns:
            ``Success(StockLevel)`` with the new quantity,
            ``Failure(ProductNotFound)``, or ``Failure(StockLimitExceeded)``
            when the result would pass ``MAX_QUANTITY_IN_STOCK``.

        Raises:
            ValueError: if ``amount`` is negative.
        """
        _check_amount(amount)
        log = logger.bind(product_id=product_id, amount=amount)

        with self._repo.atomic():
            product = self._repo.get_for_update(product_id)
            if product is None:
                log.warning("stock.product_not_found")
                return Failure(ProductNotFound(product_id=product_id))

            resulting = product.quantity_in_stock + amount
            if resulting > MAX_QUANTITY_IN_STOCK:
                log.warning(
                    "stock.limit_exceeded",
                    quantity_in_stock=product.quantity_in_stock,
                )
                return Failure(
                    StockLimitExceeded(
                        product_id=product_id,
                        amount_requested=amount,
                        quantity_in_stock=product.quantity_in_stock,
                        max_quantity=MAX_QUANTITY_IN_STOCK,
                    )
                )

            product.quantity_in_stock = resulting
            product = self._repo.save(product)

        log.info("stock.added", quantity_in_stock=product.quantity_in_stock)
        return Success(
            StockLevel(product_id=product_id, quantity_in_stock=product.quantity_in_stock)
        )

    def remove_stock(
        self, product_id: int, amount: int
    ) -> Result[StockLevel, StockError]:
        """Decrement the quantity in stock of a product by ``amount``.

        Removing exactly the quantity in stock is legal and leaves zero.

        Returns:
            ``Success(StockLevel)`` with the new quantity,
            ``Failure(ProductNotFound)``, or ``Failure(InsufficientStock)``
            when the result would be negative (RN-STK-002).

        Raises:
            ValueError: if ``amount`` is negative.
        """
        _check_amount(amount)
        log = logger.bind(product_id=product_id, amount=amount)

        with self._repo.atomic():
            product = self._repo.get_for_update(product_id)
            if product is None:
                log.warning("stock.product_not_found")
                return Failure(ProductNotFound(product_id=product_id))

            resulting = product.quantity_in_stock - amount
            if resulting < 0:
                log.warning(
                    "stock.insufficient",
                    quantity_in_stock=product.quantity_in_stock,
                )
                return Failure(
                    InsufficientStock(
                        product_id=product_id,
                        amount_requested=amount,
                        quantity_in_stock=product.quantity_in_stock,
                    )
                )

            product.quantity_in_stock = resulting
            product = self._repo.save(product)

        log.info("stock.removed", quantity_in_stock=product.quantity_in_stock)
        return Success(
            StockLevel(product_id=product_id, quantity_in_stock=product.quantity_in_stock)
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product ordered by id."""
        return list(self._repo.list())

    def get_product(self, product_id: int) -> Result[Product, ProductNotFound]:
        """Retrieve a single product by id."""
        product = self._repo.get_by_id(product_id)
        if product is None:
            return Failure(ProductNotFound(product_id=product_id))
        return Success(product)
