"""Customer reads backed by the legacy users endpoint."""
from typing import Any, List

from legacy_bridge.core.cache import CacheInterface
from legacy_bridge.models.interfaces import CustomerSource, ResourceId
from legacy_bridge.models.schemas import Customer
from legacy_bridge.services.resource import ResourceService
from legacy_bridge.transformers.customer import to_customer


class CustomerService(ResourceService):
    """Cache-aside access to customers (cache namespace ``customers``)."""

    namespace = "customers"
    resource_name = "customer"

    def __init__(self, source: CustomerSource, cache: CacheInterface[Any]) -> None:
        super().__init__(cache)
        self._source = source

    async def get_all_customers(self) -> List[Customer]:
        return await self._read_collection(self._source.fetch_customers, to_customer)

    async def get_customer_by_id(self, customer_id: ResourceId) -> Customer:
        return await self._read_item(
            customer_id, self._source.fetch_customer_by_id, to_customer
        )
