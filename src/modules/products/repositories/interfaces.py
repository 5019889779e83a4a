"""Product repository interface.

The Persistence Gateway consumed by ``ProductService``.  Extends
``IRepository[Product]`` without extra look-ups: products are only ever
addressed by id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""
