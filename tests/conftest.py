"""
Pytest configuration and fixtures.
"""
from collections import Counter
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from legacy_bridge.api.dependencies import get_cache, get_upstream_client
from legacy_bridge.clients.upstream import UpstreamClient
from legacy_bridge.core.cache import TTLCache
from legacy_bridge.core.retry import RetryExecutor, RetryPolicy
from legacy_bridge.main import app

LEGACY_BASE_URL = "http://legacy.test"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Async sleep replacement that records delays and advances a clock."""

    def __init__(self, clock: Optional[FakeClock] = None) -> None:
        self.delays: List[float] = []
        self._clock = clock

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        if self._clock is not None:
            self._clock.advance(seconds)


class FakeLegacyAPI:
    """
    In-process stand-in for the legacy JSON API (JSONPlaceholder shape).
    Served through httpx.MockTransport.
    """

    def __init__(self, users: List[Dict[str, Any]], posts: List[Dict[str, Any]]) -> None:
        self.users = users
        self.posts = posts
        self.calls: Counter = Counter()
        self.requests: List[httpx.Request] = []
        self.failure_status: Optional[int] = None
        self.overrides: Dict[str, Any] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls[path] += 1
        self.requests.append(request)

        if self.failure_status is not None:
            return httpx.Response(self.failure_status, json={"error": "legacy down"})
        if path in self.overrides:
            return httpx.Response(200, json=self.overrides[path])

        collection, _, record_id = path.strip("/").partition("/")
        records = {"users": self.users, "posts": self.posts}.get(collection)
        if records is None:
            return httpx.Response(404, json={})
        if not record_id:
            return httpx.Response(200, json=records)
        for record in records:
            if str(record["id"]) == record_id:
                return httpx.Response(200, json=record)
        return httpx.Response(404, json={})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def legacy_users() -> List[Dict[str, Any]]:
    """Legacy user records."""
    return [
        {
            "id": 1,
            "name": "Leanne Graham",
            "username": "Bret",
            "email": "Sincere@april.biz",
            "phone": "1-770-736-8031 x56442",
            "website": "hildegard.org",
            "address": {
                "street": "Kulas Light",
                "suite": "Apt. 556",
                "city": "Gwenborough",
                "zipcode": "92998-3874",
                "geo": {"lat": "-37.3159", "lng": "81.1496"},
            },
            "company": {
                "name": "Romaguera-Crona",
                "catchPhrase": "Multi-layered client-server neural-net",
                "bs": "harness real-time e-markets",
            },
        },
        {
            "id": 2,
            "name": "Ervin Howell",
            "username": "Antonette",
            "email": "Shanna@melissa.tv",
        },
    ]


@pytest.fixture
def legacy_posts() -> List[Dict[str, Any]]:
    """Legacy post records (reinterpreted as payments)."""
    return [
        {"id": 1, "userId": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
        {"id": 2, "userId": 1, "title": "qui est esse", "body": "est rerum tempore"},
        {"id": 3, "userId": 2, "title": "ea molestias", "body": "et iusto sed"},
    ]


@pytest.fixture
def legacy_api(legacy_users, legacy_posts) -> FakeLegacyAPI:
    """Fake legacy API with call counting."""
    return FakeLegacyAPI(users=legacy_users, posts=legacy_posts)


@pytest.fixture
def clock() -> FakeClock:
    """Deterministic clock for TTL and retry timing."""
    return FakeClock()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """Sleep that returns immediately and records requested delays."""
    return RecordingSleep()


@pytest.fixture
def clocked_sleep(clock) -> RecordingSleep:
    """Sleep that advances the fake clock instead of waiting."""
    return RecordingSleep(clock)


@pytest.fixture
def upstream_client(legacy_api, recording_sleep) -> UpstreamClient:
    """UpstreamClient talking to the fake legacy API, 3 attempts, 10ms delay."""
    http_client = httpx.AsyncClient(
        transport=legacy_api.transport(),
        base_url=LEGACY_BASE_URL,
    )
    return UpstreamClient(
        base_url=LEGACY_BASE_URL,
        timeout_ms=1000,
        policy=RetryPolicy(max_attempts=3, delay_ms=10),
        executor=RetryExecutor(sleep=recording_sleep),
        http_client=http_client,
    )


@pytest.fixture
def cache() -> TTLCache:
    """Fresh cache per test."""
    return TTLCache(max_size=100, ttl_seconds=300)


@pytest.fixture
def test_client(cache, upstream_client):
    """
    TestClient fixture with dependency overrides.
    Uses the fake legacy API and an isolated cache.
    """
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_upstream_client] = lambda: upstream_client

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
