"""
Cache-aside read path shared by every resource service.

check cache -> hit: return as stored
            -> miss: fetch upstream -> transform -> cache -> return
Failures never touch the cache. UpstreamError propagates unchanged; any
other exception becomes a ServiceError naming the operation.
"""
import logging
from typing import Any, Awaitable, Callable, List, Optional, TypeVar

from legacy_bridge.core.cache import CacheInterface, generate_cache_key
from legacy_bridge.core.exceptions import ServiceError, UpstreamError
from legacy_bridge.models.interfaces import ResourceId

logger = logging.getLogger(__name__)

T = TypeVar("T")

COLLECTION_KEY = "all"
ITEM_KEY_PREFIX = "id"


class ResourceService:
    """
    Base class binding a cache namespace to cache-aside reads.

    Subclasses set ``namespace`` and ``resource_name`` and expose the
    public read operations for their resource kind.

    No single-flight: two concurrent misses for one key both hit the
    upstream and the later write wins.
    """

    namespace: str = ""
    resource_name: str = "resource"

    def __init__(self, cache: CacheInterface[Any]) -> None:
        self._cache = cache

    def collection_key(self) -> str:
        """Cache key for the full listing."""
        return generate_cache_key(self.namespace, COLLECTION_KEY)

    def item_key(self, resource_id: ResourceId) -> str:
        """Cache key for one record; never equal to the collection key."""
        return generate_cache_key(self.namespace, ITEM_KEY_PREFIX, resource_id)

    async def _read_collection(
        self,
        fetch: Callable[[], Awaitable[List[Any]]],
        transform: Callable[[Any], T],
    ) -> List[T]:
        async def load() -> List[T]:
            raw_records = await fetch()
            if not isinstance(raw_records, list):
                raise TypeError(
                    f"expected a list of records, got {type(raw_records).__name__}"
                )
            return [transform(record) for record in raw_records]

        return await self._read_through(
            key=self.collection_key(),
            load=load,
            operation=f"fetch {self.resource_name}s",
        )

    async def _read_item(
        self,
        resource_id: ResourceId,
        fetch: Callable[[ResourceId], Awaitable[Any]],
        transform: Callable[[Any], T],
    ) -> T:
        async def load() -> T:
            return transform(await fetch(resource_id))

        return await self._read_through(
            key=self.item_key(resource_id),
            load=load,
            operation=f"fetch {self.resource_name} with id {resource_id}",
            resource_id=resource_id,
        )

    async def _read_through(
        self,
        key: str,
        load: Callable[[], Awaitable[T]],
        operation: str,
        resource_id: Optional[ResourceId] = None,
    ) -> T:
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {key}", extra={"cache_key": key})
            return cached

        logger.debug(f"Cache miss: {key}", extra={"cache_key": key})

        try:
            value = await load()
        except UpstreamError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error while trying to {operation}")
            raise ServiceError(
                operation=operation,
                reason=str(e) or e.__class__.__name__,
                resource_id=resource_id,
            ) from e

        self._cache.set(key, value)
        return value
