"""Integration tests for the ``seed_products`` management command."""

from io import StringIO

import pytest

from django.core.management import call_command

from modules.products.models import Product

pytestmark = pytest.mark.integration


def _run(*args) -> str:
    out = StringIO()
    call_command("seed_products", *args, stdout=out)
    return out.getvalue()


class TestSeedProducts:
    def test_creates_starter_catalogue(self):
        output = _run()
        assert "created=3" in output
        assert list(Product.objects.values_list("id", "name", "quantity_in_stock")) == [
            (1, "Banana", 50),
            (2, "Apple", 20),
            (3, "Habanero Pepper", 10),
        ]

    def test_is_idempotent(self):
        _run()
        Product.objects.filter(id=1).update(quantity_in_stock=7)
        output = _run()
        assert "created=0" in output
        assert Product.objects.count() == 3
        assert Product.objects.get(id=1).quantity_in_stock == 7

    def test_reset_restores_quantities(self):
        _run()
        Product.objects.filter(id=1).update(quantity_in_stock=7)
        _run("--reset")
        assert Product.objects.get(id=1).quantity_in_stock == 50
