"""Test harness for unit, route and client tests.

Integration tests assume a PostgreSQL server is reachable with the
migrations applied. Settings are loaded from environment variables
(configure via .env or export).
"""

import asyncio
from collections.abc import Iterator
from dataclasses import dataclass

import httpx
import pytest
import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider
from fastapi import FastAPI
from fastapi.testclient import TestClient

from trip.client import MutationController, QueryCache, TripApiClient
from trip.domain.service import AuthService
from trip.domain.value import ItemType
from trip.interface.api.app import create_app
from trip.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_item(unit_env):
            service = await unit_env.get(ItemService)
            hotel = await service.create_item(ItemType.HOTEL, {"name": "Ace"})
            assert hotel.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def build_test_app(unmock: set[Component] | None = None) -> FastAPI:
    """Create the FastAPI app on a fresh test container.

    The container's in-memory repositories are APP-scoped, so data written by
    one request is visible to the next within a test.
    """
    container = build_test_container(unmock or set(), FastapiProvider())
    return create_app(container)


async def seed_user(app: FastAPI, name: str, pin: str) -> None:
    """Create a user with a hashed PIN in the app's container."""
    async with app.state.dishka_container() as request_container:
        auth_service = await request_container.get(AuthService)
        await auth_service.seed_user(name, pin)


def create_client_fixture(
    unmock: set[Component] | None = None, users: dict[str, str] | None = None
):
    """Factory for fixtures yielding a ``TestClient`` for a fresh app.

    Args:
        unmock: Components to use real implementations for
        users: Users to seed before the test, name -> PIN
    """

    @pytest.fixture
    def _test_client() -> Iterator[TestClient]:
        app = build_test_app(unmock)
        with TestClient(app) as client:
            for name, pin in (users or {}).items():
                client.portal.call(seed_user, app, name, pin)
            yield client

    return _test_client


class Gate:
    """Holds one request until released, so tests can look at in-flight state."""

    def __init__(self) -> None:
        self.arrived = asyncio.Event()
        self.released = asyncio.Event()

    def release(self) -> None:
        self.released.set()


class ControlledTransport(httpx.AsyncBaseTransport):
    """ASGI transport that can hold or fail selected requests.

    Gates and failures are keyed by ``(method, path)`` and apply to the next
    matching request only. ``hold`` stops a request before the app sees it;
    ``hold_response`` lets the app handle it and stops the response.
    """

    def __init__(self, app: FastAPI) -> None:
        self._inner = httpx.ASGITransport(app=app)
        self._gates: dict[tuple[str, str], Gate] = {}
        self._response_gates: dict[tuple[str, str], Gate] = {}
        self._failures: dict[tuple[str, str], int] = {}

    def hold(self, method: str, path: str) -> Gate:
        """Hold the next matching request until the gate is released."""
        gate = Gate()
        self._gates[(method, path)] = gate
        return gate

    def hold_response(self, method: str, path: str) -> Gate:
        """Handle the next matching request, then hold its response."""
        gate = Gate()
        self._response_gates[(method, path)] = gate
        return gate

    def fail(self, method: str, path: str, status_code: int) -> None:
        """Answer the next matching request with an error status."""
        self._failures[(method, path)] = status_code

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        key = (request.method, request.url.path)

        gate = self._gates.pop(key, None)
        if gate is not None:
            gate.arrived.set()
            await gate.released.wait()

        status_code = self._failures.pop(key, None)
        if status_code is not None:
            return httpx.Response(
                status_code, json={"detail": "Injected failure"}, request=request
            )

        response = await self._inner.handle_async_request(request)

        gate = self._response_gates.pop(key, None)
        if gate is not None:
            gate.arrived.set()
            await gate.released.wait()

        return response

    async def aclose(self) -> None:
        await self._inner.aclose()


@dataclass
class ClientEnv:
    """A trip client wired to an in-process app."""

    api: TripApiClient
    cache: QueryCache
    mutations: MutationController
    transport: ControlledTransport
    app: FastAPI


def create_trip_client_fixture(users: dict[str, str] | None = None):
    """Factory for fixtures yielding a ``ClientEnv`` against a fresh app.

    Args:
        users: Users to seed before the test, name -> PIN
    """

    @pytest_asyncio.fixture
    async def _trip_client():
        app = build_test_app()
        for name, pin in (users or {}).items():
            await seed_user(app, name, pin)

        transport = ControlledTransport(app)
        async with TripApiClient(base_url="http://testserver", transport=transport) as api:
            cache = QueryCache(api)
            yield ClientEnv(
                api=api,
                cache=cache,
                mutations=MutationController(api, cache),
                transport=transport,
                app=app,
            )

            for item_type in ItemType:
                await cache.cancel_refetch(item_type)

        await app.state.dishka_container.close()

    return _trip_client
