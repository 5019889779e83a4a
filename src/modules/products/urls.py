"""Product URL configuration.

Routes are declared explicitly because ``PUT`` targets the collection
path (the id travels in the body).  The service graph is built once,
when this module is imported at start-up.
"""

from __future__ import annotations

from django.urls import path

from modules.products.mappers import ProductMapper
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.products.views import ProductViewSet

product_service = ProductService(
    repository=ProductDjangoRepository(),
    mapper=ProductMapper(),
)

product_collection = ProductViewSet.as_view(
    {"get": "list", "post": "create", "put": "update"},
    service=product_service,
)
product_detail = ProductViewSet.as_view(
    {"get": "retrieve", "delete": "destroy"},
    service=product_service,
)

urlpatterns = [
    path("products/", product_collection, name="product-list"),
    path("products/<str:pk>", product_detail, name="product-detail"),
]
