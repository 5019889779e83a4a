"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository`` and conversions to the
injected ``ProductMapper``.

Operations return ``Ok`` / ``Err`` instead of raising: a missing product
comes back as ``Err(ProductNotFound)`` with the message
``"Product (<id>) not found."``, built in one place (``_find_by_id``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.core.results import Err, Ok, Result
from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ProductDTO, UpdateProductDTO
    from modules.products.mappers import ProductMapper
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives its collaborators via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository, mapper: ProductMapper) -> None:
        self._repo = repository
        self._mapper = mapper

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Result[ProductDTO, ProductNotFound]:
        """Persist a new product; the store assigns id and timestamps.

        No uniqueness rule applies: names and descriptions may repeat.
        """
        product = self._repo.save(self._mapper.to_entity(dto))
        logger.info("product.created", product_id=str(product.id))
        return Ok(self._mapper.to_dto(product))

    @transaction.atomic
    def update_product(self, dto: UpdateProductDTO) -> Result[ProductDTO, ProductNotFound]:
        """Replace name, description, price and stock of ``dto.id``.

        ``id`` and ``created_at`` are left untouched; ``updated_at`` is
        refreshed by the save.
        """
        found = self._find_by_id(dto.id)
        if isinstance(found, Err):
            return found
        product = found.value

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.stock_quantity = dto.stock_quantity

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(product.id))
        return Ok(self._mapper.to_dto(product))

    @transaction.atomic
    def delete_product(self, id: str) -> Result[None, ProductNotFound]:
        """Hard-delete a product after confirming it exists."""
        found = self._find_by_id(id)
        if isinstance(found, Err):
            return found
        self._repo.delete(found.value)
        logger.info("product.deleted", product_id=str(id))
        return Ok(None)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductDTO]:
        """Every stored product, mapped to its DTO (no ordering guarantee)."""
        return [self._mapper.to_dto(product) for product in self._repo.list()]

    def get_product(self, id: str) -> Result[ProductDTO, ProductNotFound]:
        """Retrieve a single product by ID."""
        found = self._find_by_id(id)
        if isinstance(found, Err):
            return found
        return Ok(self._mapper.to_dto(found.value))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_by_id(self, id: str) -> Result[Product, ProductNotFound]:
        product = self._repo.get_by_id(id)
        if product is None:
            return Err(ProductNotFound.for_id(id))
        return Ok(product)
