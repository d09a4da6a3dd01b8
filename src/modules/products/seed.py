"""Seed catalogue loaded at startup."""

from __future__ import annotations

from typing import List, Tuple

from modules.products.models import Product

SEED_PRODUCTS: Tuple[Tuple[int, str, int], ...] = (
    (1, "Banana", 50),
    (2, "Apple", 20),
    (3, "Habanero Pepper", 10),
)


def build_seed_products() -> List[Product]:
    """Return fresh, unsaved ``Product`` instances for the seed catalogue."""
    return [
        Product(id=id, name=name, quantity_in_stock=quantity)
        for id, name, quantity in SEED_PRODUCTS
    ]
