"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO / UpdateProductDTO: camelCase aliases, constraints,
  frozen immutability.
- validate_payload: every violation collected with its wire field name.
- ProductDTO: camelCase wire representation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.core.results import Err, Ok
from modules.core.validation import validate_payload
from modules.products.dtos import (
    MAX_STOCK,
    CreateProductDTO,
    ProductDTO,
    UpdateProductDTO,
)

pytestmark = pytest.mark.unit


def _create_payload(**overrides) -> dict:
    payload = {
        "name": "test",
        "description": "description",
        "price": 10.0,
        "stockQuantity": 1,
    }
    payload.update(overrides)
    return payload


def _update_payload(**overrides) -> dict:
    return {"id": "id1", **_create_payload(**overrides)}


def _messages(result) -> list[str]:
    assert isinstance(result, Err)
    return sorted(str(violation) for violation in result.error)


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTOValid:
    def test_accepts_camel_case_payload(self):
        dto = CreateProductDTO.model_validate(_create_payload())
        assert dto.name == "test"
        assert dto.description == "description"
        assert dto.price == 10.0
        assert dto.stock_quantity == 1

    def test_accepts_field_names(self):
        dto = CreateProductDTO(
            name="test", description="description", price=0.1, stock_quantity=1
        )
        assert dto.price == Decimal("0.1")

    def test_is_immutable(self):
        dto = CreateProductDTO.model_validate(_create_payload())
        with pytest.raises(ValidationError):
            dto.name = "Changed"


class TestCreateProductDTOValidation:
    def test_all_four_violations_reported_together(self):
        result = validate_payload(
            CreateProductDTO,
            _create_payload(name="", description="", price=-1, stockQuantity=-150),
        )
        assert _messages(result) == [
            "description: must not be blank",
            "name: must not be blank",
            "price: must be greater than or equal to 0.1",
            "stockQuantity: must be greater than or equal to 1",
        ]

    def test_whitespace_name_is_blank(self):
        result = validate_payload(CreateProductDTO, _create_payload(name="   "))
        assert _messages(result) == ["name: must not be blank"]

    @pytest.mark.parametrize("price", [0, 0.09, -5])
    def test_price_below_floor(self, price):
        result = validate_payload(CreateProductDTO, _create_payload(price=price))
        assert _messages(result) == ["price: must be greater than or equal to 0.1"]

    def test_zero_stock(self):
        result = validate_payload(CreateProductDTO, _create_payload(stockQuantity=0))
        assert _messages(result) == ["stockQuantity: must be greater than or equal to 1"]

    def test_missing_price(self):
        payload = _create_payload()
        del payload["price"]
        result = validate_payload(CreateProductDTO, payload)
        assert _messages(result) == ["price: must not be null"]

    def test_valid_payload_returns_ok(self):
        result = validate_payload(CreateProductDTO, _create_payload())
        assert isinstance(result, Ok)
        assert result.value.name == "test"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_valid_payload(self):
        result = validate_payload(UpdateProductDTO, _update_payload(price=150))
        assert isinstance(result, Ok)
        assert result.value.id == "id1"
        assert result.value.price == 150

    def test_price_floor_is_one(self):
        result = validate_payload(UpdateProductDTO, _update_payload(price=0.5))
        assert _messages(result) == ["price: must be greater than or equal to 1"]

    def test_blank_id_reported(self):
        result = validate_payload(UpdateProductDTO, _update_payload(id=""))
        assert _messages(result) == ["id: must not be blank"]

    def test_missing_id_reported(self):
        payload = _update_payload()
        del payload["id"]
        result = validate_payload(UpdateProductDTO, payload)
        assert _messages(result) == ["id: must not be null"]

    def test_is_immutable(self):
        dto = UpdateProductDTO.model_validate(_update_payload())
        with pytest.raises(ValidationError):
            dto.name = "Changed"


class TestColumnLimits:
    """Inputs the store cannot hold are rejected as violations."""

    @pytest.mark.parametrize(
        ("dto_cls", "payload"),
        [
            (CreateProductDTO, _create_payload),
            (UpdateProductDTO, _update_payload),
        ],
    )
    def test_more_than_two_decimal_places(self, dto_cls, payload):
        result = validate_payload(dto_cls, payload(price=10.555))
        assert _messages(result) == [
            "price: Decimal input should have no more than 2 decimal places"
        ]

    def test_price_with_two_decimal_places_kept_exactly(self):
        result = validate_payload(CreateProductDTO, _create_payload(price=10.55))
        assert result.value.price == Decimal("10.55")

    def test_price_too_large(self):
        result = validate_payload(CreateProductDTO, _create_payload(price=100_000_000))
        assert isinstance(result, Err)
        assert [v.field for v in result.error] == ["price"]

    def test_largest_storable_price(self):
        result = validate_payload(CreateProductDTO, _create_payload(price=99_999_999.99))
        assert result.value.price == Decimal("99999999.99")

    @pytest.mark.parametrize(
        ("dto_cls", "payload"),
        [
            (CreateProductDTO, _create_payload),
            (UpdateProductDTO, _update_payload),
        ],
    )
    def test_stock_above_column_maximum(self, dto_cls, payload):
        result = validate_payload(dto_cls, payload(stockQuantity=2**63))
        assert _messages(result) == [
            f"stockQuantity: Input should be less than or equal to {MAX_STOCK}"
        ]

    def test_stock_at_column_maximum(self):
        result = validate_payload(CreateProductDTO, _create_payload(stockQuantity=MAX_STOCK))
        assert result.value.stock_quantity == MAX_STOCK


# ===========================================================================
# ProductDTO
# ===========================================================================


class TestProductDTO:
    def test_to_response_uses_camel_case(self):
        dto = ProductDTO(
            id="id1",
            name="test",
            description="description",
            price=10.0,
            stock_quantity=1,
        )
        assert dto.to_response() == {
            "id": "id1",
            "name": "test",
            "description": "description",
            "price": 10.0,
            "stockQuantity": 1,
        }

    def test_equality_by_value(self):
        a = ProductDTO(id="id1", name="n", description="d", price=1.0, stock_quantity=1)
        b = ProductDTO(id="id1", name="n", description="d", price=1.0, stock_quantity=1)
        assert a == b
