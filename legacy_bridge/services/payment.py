"""Payment reads backed by the legacy posts endpoint."""
from typing import Any, List

from legacy_bridge.core.cache import CacheInterface
from legacy_bridge.models.interfaces import PaymentSource, ResourceId
from legacy_bridge.models.schemas import Payment
from legacy_bridge.services.resource import ResourceService
from legacy_bridge.transformers.payment import to_payment


class PaymentService(ResourceService):
    """Cache-aside access to payments (cache namespace ``payments``)."""

    namespace = "payments"
    resource_name = "payment"

    def __init__(self, source: PaymentSource, cache: CacheInterface[Any]) -> None:
        super().__init__(cache)
        self._source = source

    async def get_all_payments(self) -> List[Payment]:
        return await self._read_collection(self._source.fetch_payments, to_payment)

    async def get_payment_by_id(self, payment_id: ResourceId) -> Payment:
        return await self._read_item(
            payment_id, self._source.fetch_payment_by_id, to_payment
        )
