"""Product API views.

Exposes the ``StockService`` via HTTP using a DRF ViewSet.
Service outcomes are ``Result`` values; the view maps each branch to a
status code through the explicit ``StockMappers`` bundle. The view never
swallows generic exceptions.
"""

from __future__ import annotations

from typing import Callable, ClassVar

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from returns.pipeline import is_successful
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import (
    NotEnoughStockDTO,
    ProductListDTO,
    ProductNotFoundDTO,
    StockAmountDTO,
    StockLevelDTO,
    StockLimitExceededDTO,
)
from modules.products.mappers import DEFAULT_MAPPERS, StockMappers
from modules.products.repositories import build_product_repository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.results import InsufficientStock, StockError, StockLimitExceeded
from modules.products.services import StockService


class ProductViewSet(ViewSet):
    """ViewSet for product listing and stock movements.

    Uses ``StockService`` over the repository returned by
    ``repository_factory`` (DIP).  Both ``repository_factory`` and
    ``mappers`` can be overridden through ``as_view(...)`` init kwargs.
    """

    lookup_value_regex = r"\d+"

    repository_factory: ClassVar[Callable[[], IProductRepository]] = staticmethod(
        build_product_repository
    )
    mappers: StockMappers = DEFAULT_MAPPERS

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = StockService(repository=self.repository_factory())

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    @extend_schema(responses={200: ProductListDTO})
    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        out = ProductListDTO([self.mappers.product_details(p) for p in products])
        return Response(out.to_response())

    # ------------------------------------------------------------------
    # Stock movements
    # ------------------------------------------------------------------

    @extend_schema(
        request=StockAmountDTO,
        responses={
            200: StockLevelDTO,
            404: ProductNotFoundDTO,
            409: StockLimitExceededDTO,
        },
    )
    @action(detail=True, methods=["post"], url_path="add-stocks")
    def add_stocks(self, request: Request, pk: str | None = None) -> Response:
        """POST /products/{pk}/add-stocks"""
        try:
            dto = StockAmountDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = self._service.add_stock(int(pk), dto.amount)
        if not is_successful(result):
            return self._error_response(result.failure())
        return Response(self.mappers.stock_level(result.unwrap()).to_response())

    @extend_schema(
        request=StockAmountDTO,
        responses={
            200: StockLevelDTO,
            404: ProductNotFoundDTO,
            409: NotEnoughStockDTO,
        },
    )
    @action(detail=True, methods=["post"], url_path="remove-stocks")
    def remove_stocks(self, request: Request, pk: str | None = None) -> Response:
        """POST /products/{pk}/remove-stocks"""
        try:
            dto = StockAmountDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = self._service.remove_stock(int(pk), dto.amount)
        if not is_successful(result):
            return self._error_response(result.failure())
        return Response(self.mappers.stock_level(result.unwrap()).to_response())

    # ------------------------------------------------------------------
    # Error mapping
    # ------------------------------------------------------------------

    def _error_response(self, error: StockError) -> Response:
        if isinstance(error, InsufficientStock):
            return Response(
                self.mappers.not_enough_stock(error).to_response(),
                status=status.HTTP_409_CONFLICT,
            )
        if isinstance(error, StockLimitExceeded):
            return Response(
                self.mappers.stock_limit_exceeded(error).to_response(),
                status=status.HTTP_409_CONFLICT,
            )
        return Response(
            self.mappers.product_not_found(error).to_response(),
            status=status.HTTP_404_NOT_FOUND,
        )
