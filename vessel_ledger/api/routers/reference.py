"""Reference data router exposing product conversion and contract sizing."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from vessel_ledger.domain import UnknownProductError, domain_parse_product
from vessel_ledger.reference import (
    reference_contract_size,
    reference_conversion_factor,
    reference_overcoverage,
    reference_price_unit,
    reference_supports_contracts,
    reference_volume_to_contracts,
)

_HTTP_UNPROCESSABLE = 422
# Largest accepted volume exponent (1e15 t).
_MAX_VOLUME_EXPONENT = 15


def api_create_reference_router() -> APIRouter:
    """Create router exposing per-product reference figures.

    Returns:
        APIRouter: Router exposing `/reference` endpoints.

    Raises:
        RuntimeError: This factory does not raise runtime errors.
    """

    router = APIRouter(prefix="/reference", tags=["reference"])

    @router.get("/products/{product}")
    def api_reference_product(product: str, volume: str | None = Query(default=None)) -> JSONResponse:
        """Return conversion factor, contract size, and price units for a product.

        When volume is supplied, the contract count needed to hedge it and the
        resulting overcoverage are included.

        Args:
            product: Product text value.
            volume: Optional volume in tonnes.

        Returns:
            JSONResponse: Reference payload or error envelope.

        Raises:
            RuntimeError: This handler maps invalid input to error responses.
        """

        try:
            resolved_product = domain_parse_product(product)
        except UnknownProductError as error:
            payload = {"status": "error", "code": "UNKNOWN_PRODUCT", "message": str(error)}
            return JSONResponse(content=payload, status_code=_HTTP_UNPROCESSABLE)

        payload: dict[str, object] = {
            "product": resolved_product.value,
            "conversion_factor": str(reference_conversion_factor(resolved_product)),
            "contract_size": str(reference_contract_size(resolved_product)),
            "supports_contracts": reference_supports_contracts(resolved_product),
            "price_units": {
                price_type: reference_price_unit(resolved_product, price_type)
                for price_type in ("premium", "flat", "futures")
            },
        }

        if volume is not None:
            try:
                resolved_volume = Decimal(volume.strip())
            except InvalidOperation:
                resolved_volume = None
            if (
                resolved_volume is None
                or not resolved_volume.is_finite()
                or resolved_volume < 0
                or resolved_volume.adjusted() > _MAX_VOLUME_EXPONENT
            ):
                return _api_reference_invalid_volume_response()

            try:
                contracts = reference_volume_to_contracts(resolved_volume, resolved_product)
                overcoverage = reference_overcoverage(resolved_volume, contracts, resolved_product)
            except ArithmeticError:
                return _api_reference_invalid_volume_response()
            payload["volume"] = str(resolved_volume)
            payload["contracts"] = contracts
            payload["overcoverage"] = str(overcoverage)

        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router


def _api_reference_invalid_volume_response() -> JSONResponse:
    payload = {
        "status": "error",
        "code": "INVALID_REQUEST",
        "message": "volume must be a non-negative decimal no larger than 1e15",
    }
    return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)
