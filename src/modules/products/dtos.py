"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``) and use camelCase on the wire
(``stockQuantity``) while exposing snake_case attributes.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product replacement, targeted by ``id``.
- ``ProductDTO``: client-visible output (no timestamps).

Every constraint is checked in one pass; see
``modules.core.validation.validate_payload``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from modules.core.validation import NotBlankStr, at_least

# Column limits: ``price`` is DECIMAL(10, 2), ``stock_quantity`` a positive
# 32-bit integer.
Price = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]
MAX_STOCK = 2_147_483_647
Stock = Annotated[int, Field(le=MAX_STOCK), at_least(1)]

_dto_config = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` and ``description`` are not blank.
    - ``price`` is at least 0.1.
    - ``stock_quantity`` is at least 1.
    """

    model_config = _dto_config

    name: NotBlankStr
    description: NotBlankStr
    price: Annotated[Price, at_least(Decimal("0.1"))]
    stock_quantity: Stock


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Every field is required: the product identified by ``id`` has its
    name, description, price and stock replaced.  Note the price floor is
    1, not the 0.1 accepted on creation.
    """

    model_config = _dto_config

    id: NotBlankStr
    name: NotBlankStr
    description: NotBlankStr
    price: Annotated[Price, at_least(1)]
    stock_quantity: Stock


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = _dto_config

    id: str
    name: str
    description: str
    price: float
    stock_quantity: int

    def to_response(self) -> dict:
        """Wire representation with camelCase keys."""
        return self.model_dump(by_alias=True)
