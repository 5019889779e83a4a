"""Pure conversions between the Product entity and its DTOs."""

from __future__ import annotations

from modules.products.dtos import CreateProductDTO, ProductDTO
from modules.products.models import Product


class ProductMapper:

    @staticmethod
    def to_dto(entity: Product) -> ProductDTO:
        """Entity → output DTO (timestamps are not exposed)."""
        return ProductDTO(
            id=str(entity.id),
            name=entity.name,
            description=entity.description,
            price=float(entity.price),
            stock_quantity=entity.stock_quantity,
        )

    @staticmethod
    def to_entity(dto: CreateProductDTO) -> Product:
        """Creation DTO → unsaved entity.

        ``id``, ``created_at`` and ``updated_at`` stay unset until the
        repository saves it.
        """
        return Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock_quantity=dto.stock_quantity,
        )
