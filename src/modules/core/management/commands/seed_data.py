from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management.base import BaseCommand

from modules.products.models import Product

SEED_PRODUCTS = [
    ("test", "description", Decimal("10.00"), 1),
    ("test2", "description2", Decimal("10.00"), 1),
    ("test3", "description3", Decimal("10.00"), 1),
]


class Command(BaseCommand):
    help = "Seed database with role groups, users and sample products."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        groups = self._seed_groups()
        users_created = self._seed_users(groups)
        products_created = self._seed_products()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"groups={len(groups)}, "
                f"users={users_created}, "
                f"products={products_created}"
            )
        )

    def _seed_groups(self) -> dict[str, Group]:
        groups = {}
        for role in settings.PRIVILEGED_ROLES:
            groups[role], _ = Group.objects.get_or_create(name=role)
        return groups

    def _seed_users(self, groups: dict[str, Group]) -> int:
        User = get_user_model()
        created = 0
        seed_users = [
            ("admin", "admin123", "ADMIN"),
            ("manager", "manager123", "MANAGER"),
            ("user", "user123", None),
        ]
        for username, password, role in seed_users:
            if User.objects.filter(username=username).exists():
                continue
            user = User.objects.create_user(username, password=password)
            if role in groups:
                user.groups.add(groups[role])
            created += 1
        return created

    def _seed_products(self) -> int:
        self.stdout.write("Creating products...")
        created = 0
        for name, description, price, stock in SEED_PRODUCTS:
            if Product.objects.filter(name=name).exists():
                continue
            Product(
                name=name,
                description=description,
                price=price,
                stock_quantity=stock,
            ).save()
            created += 1
        return created
