"""Explicit DTO validation that collects every violation.

Pydantic already gathers all field errors before giving up; this module
turns its ``ValidationError`` into a flat list of ``FieldViolation``
values and exposes the reusable constraints the DTOs are built from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, List, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from modules.core.results import Err, Ok, Result

M = TypeVar("M", bound=BaseModel)

MISSING_MESSAGE = "must not be null"
NOT_OBJECT_MESSAGE = "must be a JSON object"


@dataclass(frozen=True)
class FieldViolation:
    """A single constraint violation on an inbound field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


def _not_blank(value: str) -> str:
    if not value or not value.strip():
        raise PydanticCustomError("not_blank", "must not be blank")
    return value


NotBlankStr = Annotated[str, AfterValidator(_not_blank)]


def at_least(minimum: float) -> AfterValidator:
    """Inclusive lower bound reported as ``must be greater than or equal to N``."""

    def check(value):
        if value < minimum:
            raise PydanticCustomError(
                "greater_than_equal",
                f"must be greater than or equal to {minimum:g}",
            )
        return value

    return AfterValidator(check)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def validate_payload(dto_cls: Type[M], data: Any) -> Result[M, List[FieldViolation]]:
    """Build ``dto_cls`` from a request body.

    Returns ``Ok(dto)`` or ``Err(violations)`` with one entry per
    offending field; it never stops at the first failure.
    """
    if not isinstance(data, Mapping):
        return Err([FieldViolation("body", NOT_OBJECT_MESSAGE)])
    try:
        return Ok(dto_cls.model_validate(dict(data)))
    except ValidationError as exc:
        return Err([_to_violation(error) for error in exc.errors()])


def _to_violation(error: dict) -> FieldViolation:
    field = ".".join(str(part) for part in error["loc"]) or "body"
    if error["type"] == "missing":
        return FieldViolation(field, MISSING_MESSAGE)
    return FieldViolation(field, error["msg"])
