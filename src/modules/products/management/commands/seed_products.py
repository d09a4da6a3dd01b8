from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.models import Product
from modules.products.seed import SEED_PRODUCTS


class Command(BaseCommand):
    help = "Seed the database with the starter product catalogue."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Restore seed quantities on products that already exist.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        created = 0
        for id, name, quantity in SEED_PRODUCTS:
            product, was_created = Product.objects.get_or_create(
                id=id,
                defaults={"name": name, "quantity_in_stock": quantity},
            )
            if was_created:
                created += 1
            elif options["reset"]:
                product.name = name
                product.quantity_in_stock = quantity
                product.save(update_fields=["name", "quantity_in_stock"])

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={len(SEED_PRODUCTS)}, created={created}"
            )
        )
