"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Request
bodies are validated into DTOs before the service is called; every
``Err`` coming back from validation or the service goes through
``translate_failure`` so clients always receive the same error shape.
"""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.errors import translate_failure
from modules.core.results import Err, Ok
from modules.core.validation import validate_payload
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.permissions import HasPrivilegedRole
from modules.products.services import ProductService


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    The service is handed in by the URLconf through
    ``as_view(..., service=...)``; the view never builds its own.
    """

    service: ProductService | None = None

    def get_permissions(self):
        if self.action == "destroy":
            return [IsAuthenticated(), HasPrivilegedRole()]
        return [AllowAny()]

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        products = self.service.list_products()
        return Response([dto.to_response() for dto in products])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        match self.service.get_product(pk):
            case Ok(dto):
                return Response(dto.to_response())
            case Err(failure):
                return translate_failure(failure)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        match validate_payload(CreateProductDTO, request.data):
            case Err(violations):
                return translate_failure(violations)
            case Ok(dto):
                result = self.service.create_product(dto)

        match result:
            case Ok(product):
                location = reverse("product-detail", kwargs={"pk": product.id})
                return Response(
                    product.to_response(),
                    status=status.HTTP_201_CREATED,
                    headers={"Location": location},
                )
            case Err(failure):
                return translate_failure(failure)

    def update(self, request: Request) -> Response:
        """PUT /api/v1/products/ (target id in the body)"""
        match validate_payload(UpdateProductDTO, request.data):
            case Err(violations):
                return translate_failure(violations)
            case Ok(dto):
                result = self.service.update_product(dto)

        match result:
            case Ok(product):
                return Response(product.to_response())
            case Err(failure):
                return translate_failure(failure)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}"""
        match self.service.delete_product(pk):
            case Ok():
                return Response(status=status.HTTP_204_NO_CONTENT)
            case Err(failure):
                return translate_failure(failure)
