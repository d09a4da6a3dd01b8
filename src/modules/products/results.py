"""Stock operation outcomes.

The stock service never raises for expected business outcomes.  Each
operation returns a ``returns.result.Result`` holding either a
``StockLevel`` or one of the domain errors below, so callers must handle
both branches explicitly.

- ``StockLevel``: successful outcome with the new quantity in stock.
- ``ProductNotFound``: the referenced product does not exist.
- ``InsufficientStock``: removing the requested amount would make the
  quantity negative.
- ``StockLimitExceeded``: adding the requested amount would push the
  quantity past ``MAX_QUANTITY_IN_STOCK``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class StockLevel:
    """Quantity in stock of a product after a successful operation."""

    product_id: int
    quantity_in_stock: int


@dataclass(frozen=True)
class ProductNotFound:
    """The requested product does not exist."""

    product_id: int

    @property
    def message(self) -> str:
        return f"Product {self.product_id} not found."


@dataclass(frozen=True)
class InsufficientStock:
    """Not enough stock to remove the requested amount (RN-STK-002)."""

    product_id: int
    amount_requested: int
    quantity_in_stock: int

    @property
    def message(self) -> str:
        return (
            f"Not enough stock for product {self.product_id}: "
            f"cannot remove {self.amount_requested}, "
            f"only {self.quantity_in_stock} in stock."
        )


@dataclass(frozen=True)
class StockLimitExceeded:
    """Adding the requested amount would exceed the largest storable quantity."""

    product_id: int
    amount_requested: int
    quantity_in_stock: int
    max_quantity: int

    @property
    def message(self) -> str:
        return (
            f"Cannot add {self.amount_requested} to product {self.product_id}: "
            f"{self.quantity_in_stock} in stock, at most {self.max_quantity} allowed."
        )


StockError = Union[ProductNotFound, InsufficientStock, StockLimitExceeded]
