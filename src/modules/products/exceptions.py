"""Product domain failures.

Returned (not raised) by the Service Layer inside ``Err``.  The API
layer translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFoundError


class ProductNotFound(NotFoundError):
    """The requested product does not exist."""

    @classmethod
    def for_id(cls, id: str) -> ProductNotFound:
        return cls(f"Product ({id}) not found.")
