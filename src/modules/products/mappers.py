"""Mapping from domain objects to API DTOs.

Plain functions, bundled in ``StockMappers`` and handed to the view
explicitly.  Swapping a projection means passing another bundle, not
registering a mapper somewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from modules.products.dtos import (
    NotEnoughStockDTO,
    ProductDetailsDTO,
    ProductNotFoundDTO,
    StockLevelDTO,
    StockLimitExceededDTO,
)
from modules.products.models import Product
from modules.products.results import (
    InsufficientStock,
    ProductNotFound,
    StockLevel,
    StockLimitExceeded,
)


def map_product_details(product: Product) -> ProductDetailsDTO:
    return ProductDetailsDTO(
        id=product.id,
        name=product.name,
        quantity_in_stock=product.quantity_in_stock,
    )


def map_stock_level(level: StockLevel) -> StockLevelDTO:
    return StockLevelDTO(quantity_in_stock=level.quantity_in_stock)


def map_product_not_found(error: ProductNotFound) -> ProductNotFoundDTO:
    return ProductNotFoundDTO(product_id=error.product_id, message=error.message)


def map_not_enough_stock(error: InsufficientStock) -> NotEnoughStockDTO:
    return NotEnoughStockDTO(
        amount_to_remove=error.amount_requested,
        quantity_in_stock=error.quantity_in_stock,
        message=error.message,
    )


def map_stock_limit_exceeded(error: StockLimitExceeded) -> StockLimitExceededDTO:
    return StockLimitExceededDTO(
        amount_to_add=error.amount_requested,
        quantity_in_stock=error.quantity_in_stock,
        max_quantity_in_stock=error.max_quantity,
        message=error.message,
    )


@dataclass(frozen=True)
class StockMappers:
    product_details: Callable[[Product], ProductDetailsDTO] = map_product_details
    stock_level: Callable[[StockLevel], StockLevelDTO] = map_stock_level
    product_not_found: Callable[[ProductNotFound], ProductNotFoundDTO] = (
        map_product_not_found
    )
    not_enough_stock: Callable[[InsufficientStock], NotEnoughStockDTO] = (
        map_not_enough_stock
    )
    stock_limit_exceeded: Callable[[StockLimitExceeded], StockLimitExceededDTO] = (
        map_stock_limit_exceeded
    )


DEFAULT_MAPPERS = StockMappers()
