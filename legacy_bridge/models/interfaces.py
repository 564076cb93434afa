"""
Upstream interfaces (abstractions).
Using Protocol for structural subtyping (duck typing with type hints).
Services depend on these rather than on the concrete HTTP client.
"""
from typing import Any, List, Protocol, Union, runtime_checkable

ResourceId = Union[str, int]


@runtime_checkable
class CustomerSource(Protocol):
    """
    Read access to legacy customer (user) records.
    Production: UpstreamClient over HTTP.
    Testing: AsyncMock or an UpstreamClient on httpx.MockTransport.
    """

    async def fetch_customers(self) -> List[Any]:
        """
        Fetch every legacy user record.

        Raises:
            UpstreamError: On any transport or response failure
        """
        ...

    async def fetch_customer_by_id(self, customer_id: ResourceId) -> Any:
        """
        Fetch one legacy user record.

        Args:
            customer_id: Legacy user identifier

        Raises:
            UpstreamError: On any transport or response failure
        """
        ...


@runtime_checkable
class PaymentSource(Protocol):
    """
    Read access to legacy payment (post) records.
    Production: UpstreamClient over HTTP.
    """

    async def fetch_payments(self) -> List[Any]:
        """
        Fetch every legacy post record.

        Raises:
            UpstreamError: On any transport or response failure
        """
        ...

    async def fetch_payment_by_id(self, payment_id: ResourceId) -> Any:
        """
        Fetch one legacy post record.

        Args:
            payment_id: Legacy post identifier

        Raises:
            UpstreamError: On any transport or response failure
        """
        ...
