"""
Payment API router (v2).
Serves transformed, cached payment records.
"""
from typing import List

from fastapi import APIRouter, Depends

from legacy_bridge.api.dependencies import get_payment_service
from legacy_bridge.models.schemas import DataResponse, ErrorResponse, Payment
from legacy_bridge.services.payment import PaymentService

router = APIRouter(prefix="/v2/payments", tags=["payments"])

_ERRORS = {
    500: {"model": ErrorResponse, "description": "Unexpected service failure"},
    503: {"model": ErrorResponse, "description": "Legacy system unavailable"},
}


@router.get(
    "",
    response_model=DataResponse[List[Payment]],
    summary="List Payments",
    responses=_ERRORS,
)
async def list_payments(
    service: PaymentService = Depends(get_payment_service),
) -> DataResponse[List[Payment]]:
    payments = await service.get_all_payments()
    return DataResponse[List[Payment]](data=payments)


@router.get(
    "/{payment_id}",
    response_model=DataResponse[Payment],
    summary="Get Payment",
    responses=_ERRORS,
)
async def get_payment(
    payment_id: str,
    service: PaymentService = Depends(get_payment_service),
) -> DataResponse[Payment]:
    payment = await service.get_payment_by_id(payment_id)
    return DataResponse[Payment](data=payment)
