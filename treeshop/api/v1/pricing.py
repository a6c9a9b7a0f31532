"""Quote pricing endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from treeshop.core.dependencies import get_pricing_service
from treeshop.core.exceptions import NotFoundError, ValidationError
from treeshop.schemas.pricing import (
    PackageResponse,
    PaymentScheduleRequest,
    PaymentScheduleResponse,
    QuoteCreateRequest,
    QuoteResponse,
)
from treeshop.services.pricing_service import PricingService, QuoteRequest

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/packages", response_model=list[PackageResponse])
def list_packages(pricing: PricingService = Depends(get_pricing_service)) -> list[PackageResponse]:
    return [PackageResponse.model_validate(package) for package in pricing.rates.packages]


@router.post("/quote", response_model=QuoteResponse)
def create_quote(
    payload: QuoteCreateRequest,
    pricing: PricingService = Depends(get_pricing_service),
) -> QuoteResponse:
    request = QuoteRequest(
        service_type=payload.service_type,
        acreage=payload.acreage,
        package_id=payload.package_id,
        include_hauling=payload.include_hauling,
    )
    try:
        result = pricing.quote(request)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    response = QuoteResponse.model_validate(result)
    return response.model_copy(update={"scope_of_work": pricing.build_scope_of_work(result)})


@router.post("/payment-schedule", response_model=PaymentScheduleResponse)
def payment_schedule(
    payload: PaymentScheduleRequest,
    pricing: PricingService = Depends(get_pricing_service),
) -> PaymentScheduleResponse:
    schedule = pricing.build_payment_schedule(payload.total, issued_on=payload.issued_on)
    return PaymentScheduleResponse.model_validate(schedule)
