"""
Legacy passthrough router (v1).
Returns upstream payloads untouched: no cache, no transformation.
Kept for clients that have not migrated to v2.
"""
from typing import Any

from fastapi import APIRouter, Depends

from legacy_bridge.api.dependencies import get_upstream_client
from legacy_bridge.clients.upstream import UpstreamClient
from legacy_bridge.models.schemas import DataResponse

router = APIRouter(prefix="/v1", tags=["v1 (passthrough)"])


@router.get("/customers", response_model=DataResponse[Any])
async def list_customers_raw(
    upstream: UpstreamClient = Depends(get_upstream_client),
) -> DataResponse[Any]:
    return DataResponse[Any](data=await upstream.fetch_customers())


@router.get("/customers/{customer_id}", response_model=DataResponse[Any])
async def get_customer_raw(
    customer_id: str,
    upstream: UpstreamClient = Depends(get_upstream_client),
) -> DataResponse[Any]:
    return DataResponse[Any](data=await upstream.fetch_customer_by_id(customer_id))


@router.get("/payments", response_model=DataResponse[Any])
async def list_payments_raw(
    upstream: UpstreamClient = Depends(get_upstream_client),
) -> DataResponse[Any]:
    return DataResponse[Any](data=await upstream.fetch_payments())


@router.get("/payments/{payment_id}", response_model=DataResponse[Any])
async def get_payment_raw(
    payment_id: str,
    upstream: UpstreamClient = Depends(get_upstream_client),
) -> DataResponse[Any]:
    return DataResponse[Any](data=await upstream.fetch_payment_by_id(payment_id))
