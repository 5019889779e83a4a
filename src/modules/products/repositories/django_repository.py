"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: ``get_by_id`` returns
``None`` instead of raising, including for ids that are not valid UUIDs,
so the Service Layer decides how to report a missing entity.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self) -> List[Product]:
        """Every stored product, in table order."""
        return list(Product.objects.all())

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        """Permanently remove a product."""
        product_id = str(entity.id)
        entity.delete()
        logger.info("product.deleted", product_id=product_id)
