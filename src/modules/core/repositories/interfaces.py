"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None`` if absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """Return every stored entity in the store's natural order."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity.

        The first save assigns identity and timestamps; later saves
        refresh ``updated_at``.
        """

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove a previously loaded entity."""
