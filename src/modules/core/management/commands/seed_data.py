from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.models import Category
from modules.products.models import Product

CATEGORIES = ["Books", "Electronics", "Computers"]

PC_DESCRIPTION = "Gaming desktop with dedicated graphics card."

# (name, description, price, category names)
CATALOG = [
    ("The Lord of the Rings", "Fantasy novel in three volumes.", Decimal("90.50"), ["Books"]),
    ("Smart TV", "55 inch 4K smart television.", Decimal("2190.00"), ["Electronics"]),
    ("Macbook Pro", "14 inch laptop.", Decimal("1250.00"), ["Electronics", "Computers"]),
    ("PC Gamer", PC_DESCRIPTION, Decimal("1200.00"), ["Computers"]),
    ("Rails for Dummies", "Introductory web development book.", Decimal("100.99"), ["Books"]),
    ("PC Gamer Ex", PC_DESCRIPTION, Decimal("1350.00"), ["Computers"]),
    ("PC Gamer X", PC_DESCRIPTION, Decimal("1350.00"), ["Computers"]),
    ("PC Gamer Alfa", PC_DESCRIPTION, Decimal("1850.00"), ["Computers"]),
    ("PC Gamer Tera", PC_DESCRIPTION, Decimal("1950.00"), ["Computers"]),
    ("PC Gamer Y", PC_DESCRIPTION, Decimal("1700.00"), ["Computers"]),
    ("PC Gamer Nitro", PC_DESCRIPTION, Decimal("1450.00"), ["Computers"]),
    ("PC Gamer Card", PC_DESCRIPTION, Decimal("1850.00"), ["Computers"]),
    ("PC Gamer Plus", PC_DESCRIPTION, Decimal("1350.00"), ["Computers"]),
    ("PC Gamer Hera", PC_DESCRIPTION, Decimal("2250.00"), ["Computers"]),
    ("PC Gamer Weed", PC_DESCRIPTION, Decimal("2200.00"), ["Computers"]),
    ("PC Gamer Max", PC_DESCRIPTION, Decimal("2099.00"), ["Computers"]),
    ("PC Gamer Turbo", PC_DESCRIPTION, Decimal("1280.00"), ["Computers"]),
    ("PC Gamer Hot", PC_DESCRIPTION, Decimal("1450.00"), ["Computers"]),
    ("PC Gamer Ez", PC_DESCRIPTION, Decimal("1750.00"), ["Computers"]),
    ("PC Gamer Tr", PC_DESCRIPTION, Decimal("1650.00"), ["Computers"]),
    ("PC Gamer Tx", PC_DESCRIPTION, Decimal("1680.00"), ["Computers"]),
    ("PC Gamer Er", PC_DESCRIPTION, Decimal("1850.00"), ["Computers"]),
    ("PC Gamer Min", PC_DESCRIPTION, Decimal("2250.00"), ["Computers"]),
    ("PC Gamer Boo", PC_DESCRIPTION, Decimal("2350.00"), ["Computers"]),
    ("PC Gamer Foo", PC_DESCRIPTION, Decimal("4170.00"), ["Computers"]),
]


class Command(BaseCommand):
    help = "Seed database with catalog development data."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog data...")

        categories = self._seed_categories()
        products = self._seed_products(categories)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={len(categories)}, "
                f"products={len(products)}"
            )
        )

    def _seed_categories(self) -> dict[str, Category]:
        self.stdout.write("Creating categories...")
        categories: dict[str, Category] = {}
        for name in CATEGORIES:
            category, _ = Category.objects.get_or_create(name=name)
            categories[name] = category
        self.stdout.write(self.style.SUCCESS("Creating categories... Done!"))
        return categories

    def _seed_products(self, categories: dict[str, Category]) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        for index, (name, description, price, category_names) in enumerate(CATALOG, start=1):
            product, created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "price": price,
                    "img_url": f"https://img.example.com/products/{index}-big.jpg",
                },
            )
            if created:
                product.categories.set([categories[c] for c in category_names])
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products
