"""
Customer API router (v2).
Serves transformed, cached customer records.
"""
from typing import List

from fastapi import APIRouter, Depends

from legacy_bridge.api.dependencies import get_customer_service
from legacy_bridge.models.schemas import Customer, DataResponse, ErrorResponse
from legacy_bridge.services.customer import CustomerService

router = APIRouter(prefix="/v2/customers", tags=["customers"])

_ERRORS = {
    500: {"model": ErrorResponse, "description": "Unexpected service failure"},
    503: {"model": ErrorResponse, "description": "Legacy system unavailable"},
}


@router.get(
    "",
    response_model=DataResponse[List[Customer]],
    summary="List Customers",
    responses=_ERRORS,
)
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> DataResponse[List[Customer]]:
    customers = await service.get_all_customers()
    return DataResponse[List[Customer]](data=customers)


@router.get(
    "/{customer_id}",
    response_model=DataResponse[Customer],
    summary="Get Customer",
    responses=_ERRORS,
)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> DataResponse[Customer]:
    customer = await service.get_customer_by_id(customer_id)
    return DataResponse[Customer](data=customer)
