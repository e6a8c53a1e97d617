"""Tests for the HTTP health provider adapter."""

import asyncio
import json
from datetime import date
from uuid import uuid4

import httpx
import pytest

from habit_tracker.adapters.health_client import HttpxHealthProvider
from habit_tracker.domain.health import HealthAuthorizationState
from habit_tracker.services.entries import InMemoryEntryRepository
from habit_tracker.services.health_sync import HealthSyncService
from habit_tracker.services.preferences import PreferencesService


def _provider(handler) -> HttpxHealthProvider:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxHealthProvider(
        base_url="https://health.example",
        http_client=httpx.AsyncClient(transport=transport),
        token="secret",
    )


def test_query_and_request_authorization() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "GET":
            return httpx.Response(200, json={"status": "not_determined"})
        return httpx.Response(200, json={"status": "authorized"})

    provider = _provider(handler)

    assert (
        asyncio.run(provider.query_authorization())
        == HealthAuthorizationState.NOT_DETERMINED
    )
    assert (
        asyncio.run(provider.request_authorization())
        == HealthAuthorizationState.AUTHORIZED
    )
    assert requests[0].headers["Authorization"] == "Bearer secret"
    assert json.loads(requests[1].content)["write"] == ["body_mass"]


def test_unrecognised_status_is_unknown() -> None:
    provider = _provider(lambda request: httpx.Response(200, json={"status": "?"}))

    assert (
        asyncio.run(provider.query_authorization()) == HealthAuthorizationState.UNKNOWN
    )


def test_fetch_steps() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/steps"
        assert request.url.params["date"] == "2025-06-10"
        return httpx.Response(200, json={"steps": 9312.0})

    provider = _provider(handler)

    assert asyncio.run(provider.fetch_steps(date(2025, 6, 10))) == 9312


def test_fetch_steps_missing_data() -> None:
    provider = _provider(lambda request: httpx.Response(200, json={"steps": None}))

    assert asyncio.run(provider.fetch_steps(date(2025, 6, 10))) is None


def test_save_weight() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content) == {"pounds": 181.2, "date": "2025-06-10"}
        return httpx.Response(201, json={"saved": True})

    provider = _provider(handler)

    assert asyncio.run(provider.save_weight(181.2, date(2025, 6, 10))) is True


def test_errors_degrade_to_defaults() -> None:
    provider = _provider(lambda request: httpx.Response(503, text="down"))

    assert (
        asyncio.run(provider.query_authorization())
        == HealthAuthorizationState.UNAVAILABLE
    )
    assert asyncio.run(provider.fetch_steps(date(2025, 6, 10))) is None
    assert asyncio.run(provider.save_weight(180.0, date(2025, 6, 10))) is False


def test_transport_and_payload_errors_degrade() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    offline = _provider(refuse)
    garbled = _provider(lambda request: httpx.Response(200, text="not json"))

    assert asyncio.run(offline.fetch_steps(date(2025, 6, 10))) is None
    assert asyncio.run(garbled.save_weight(180.0, date(2025, 6, 10))) is False


@pytest.mark.parametrize(
    "body", [b'{"steps": NaN}', b'{"steps": Infinity}', b'{"steps": -500}']
)
def test_unusable_step_counts_degrade(body: bytes) -> None:
    provider = _provider(lambda request: httpx.Response(200, content=body))

    assert asyncio.run(provider.fetch_steps(date(2025, 6, 10))) is None


def test_create_and_close() -> None:
    provider = HttpxHealthProvider.create("https://health.example/", token=None)

    assert provider.base_url == "https://health.example"
    asyncio.run(provider.close())


def test_sync_steps_with_non_finite_count_leaves_entry() -> None:
    repository = InMemoryEntryRepository()
    service = HealthSyncService(
        provider=_provider(
            lambda request: httpx.Response(200, content=b'{"steps": NaN}')
        ),
        repository=repository,
        preferences=PreferencesService(),
        state=HealthAuthorizationState.AUTHORIZED,
    )
    user_id = uuid4()

    assert asyncio.run(service.sync_steps(user_id, date(2025, 6, 10))) is None
    assert repository.get_or_create(user_id, date(2025, 6, 10)).steps == 0
