"""Explicit success / failure values returned by the Service Layer.

Services never raise for expected outcomes (a missing entity, invalid
input).  They return ``Ok(value)`` or ``Err(error)`` and the API layer
pattern-matches on the variant::

    match service.get_product(pk):
        case Ok(dto):
            ...
        case Err(failure):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
