"""Product DTOs for the API boundary.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the HTTP layer and the Service layer.
DTOs are immutable (``frozen=True``) and exposed with camelCase field
names on the wire.

- ``StockAmountDTO``: input for add/remove stock requests.
- ``ProductDetailsDTO``: one product in the listing.
- ``ProductListDTO``: the listing itself.
- ``StockLevelDTO``: quantity in stock after a successful operation.
- ``ProductNotFoundDTO``: 404 payload.
- ``NotEnoughStockDTO``: 409 payload for removals.
- ``StockLimitExceededDTO``: 409 payload for additions.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictInt, field_validator
from pydantic.alias_generators import to_camel

from modules.products.constants import MAX_QUANTITY_IN_STOCK


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_response(self) -> Dict[str, Any]:
        """Serialize with camelCase keys for a DRF ``Response``."""
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class StockAmountDTO(_WireModel):
    """Immutable DTO for add/remove stock requests.

    Validates:
    - ``amount`` is an integer (booleans, floats and strings are rejected).
    - ``amount`` is non-negative.
    - ``amount`` fits the stored quantity range (``MAX_QUANTITY_IN_STOCK``).
    """

    amount: StrictInt = Field(le=MAX_QUANTITY_IN_STOCK)

    @field_validator("amount")
    @classmethod
    def amount_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Amount cannot be negative.")
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductDetailsDTO(_WireModel):
    id: int
    name: str
    quantity_in_stock: int


class ProductListDTO(RootModel[List[ProductDetailsDTO]]):
    """``GET /products`` payload: a bare JSON array."""

    def to_response(self) -> List[Dict[str, Any]]:
        return self.model_dump(by_alias=True)


class StockLevelDTO(_WireModel):
    quantity_in_stock: int


class ProductNotFoundDTO(_WireModel):
    product_id: int
    message: str


class NotEnoughStockDTO(_WireModel):
    amount_to_remove: int
    quantity_in_stock: int
    message: str


class StockLimitExceededDTO(_WireModel):
    amount_to_add: int
    quantity_in_stock: int
    max_quantity_in_stock: int
    message: str
