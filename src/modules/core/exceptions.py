"""Base domain failures shared across modules.

Services return these inside ``Err`` rather than raising them; the
error translator in ``modules.core.errors`` maps each kind to an HTTP
response.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected, client-recoverable failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """A referenced entity has no stored record."""
