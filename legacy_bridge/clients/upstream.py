"""
HTTP client for the legacy API.

Every read goes through the retry executor, and every failure - timeout,
refused connection, non-2xx status, undecodable body - surfaces as a single
UpstreamError carrying the endpoint and the original cause.
"""
import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from legacy_bridge.core.exceptions import UpstreamError
from legacy_bridge.core.retry import RetryExecutor, RetryPolicy
from legacy_bridge.models.interfaces import ResourceId

logger = logging.getLogger(__name__)

CUSTOMERS_PATH = "/users"
PAYMENTS_PATH = "/posts"


def _describe_failure(error: Exception) -> str:
    """Short, log-friendly description of an upstream failure."""
    if isinstance(error, httpx.HTTPStatusError):
        body = error.response.text[:200]
        return f"HTTP {error.response.status_code}: {body or error.response.reason_phrase}"
    if isinstance(error, httpx.TimeoutException):
        return f"timeout: {error}"
    if isinstance(error, ValueError):
        return f"invalid JSON payload: {error}"
    return str(error) or error.__class__.__name__


def _path_segment(resource_id: ResourceId) -> str:
    """Encode an id so it stays exactly one segment of the upstream path."""
    segment = quote(str(resource_id), safe="")
    # quote() leaves dots alone; bare dot segments get collapsed by URL normalization
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return segment


class UpstreamClient:
    """
    Read-only client for the legacy API.

    Usage:
        client = UpstreamClient(
            base_url="https://legacy.example.com",
            timeout_ms=5000,
            policy=RetryPolicy(max_attempts=3, delay_ms=1000),
        )
        users = await client.fetch_customers()
        await client.aclose()

    A pre-built ``httpx.AsyncClient`` may be injected (tests use one backed
    by ``httpx.MockTransport``); the caller then owns its lifecycle.
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int,
        policy: RetryPolicy,
        executor: Optional[RetryExecutor] = None,
        api_key: str = "",
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._policy = policy
        self._executor = executor or RetryExecutor()
        self._owns_client = http_client is None

        headers = {"Accept": "application/json"}
        if api_key:
            headers["X-API-Key"] = api_key

        self._client = http_client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_ms / 1000,
            headers=headers,
        )

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def fetch_resource(self, endpoint: str) -> Any:
        """
        GET endpoint with retries and return the decoded JSON body.

        The body is not inspected; shaping it is the transformer's job.

        Raises:
            UpstreamError: When every attempt failed
        """

        async def attempt() -> Any:
            try:
                response = await self._client.get(endpoint)
                response.raise_for_status()
                return response.json()
            except Exception as e:
                raise UpstreamError(
                    message=f"Legacy API Error ({endpoint}): {_describe_failure(e)}",
                    endpoint=endpoint,
                    cause=e,
                ) from e

        return await self._executor.run(attempt, self._policy)

    async def fetch_customers(self) -> List[Any]:
        return await self.fetch_resource(CUSTOMERS_PATH)

    async def fetch_customer_by_id(self, customer_id: ResourceId) -> Any:
        return await self.fetch_resource(f"{CUSTOMERS_PATH}/{_path_segment(customer_id)}")

    async def fetch_payments(self) -> List[Any]:
        return await self.fetch_resource(PAYMENTS_PATH)

    async def fetch_payment_by_id(self, payment_id: ResourceId) -> Any:
        return await self.fetch_resource(f"{PAYMENTS_PATH}/{_path_segment(payment_id)}")

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
            logger.debug("Legacy API client closed")
