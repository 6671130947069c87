"""Pytest configuration and shared fixtures for the test suite."""

from __future__ import annotations

import json
import random
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

API = "https://pokeapi.test/api/v2"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every requested URL."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[str] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(str(request.url))
            return handler(request)

        super().__init__(_record)


def listing_payload(offset: int, *, count: int = 60, limit: int = 20) -> dict[str, Any]:
    nxt = f"{API}/location-area?offset={offset + limit}&limit={limit}" if offset + limit < count else None
    prev = f"{API}/location-area?offset={offset - limit}&limit={limit}" if offset > 0 else None
    return {
        "count": count,
        "next": nxt,
        "previous": prev,
        "results": [
            {"name": f"area-{i}", "url": f"{API}/location-area/{i + 1}/"} for i in range(offset, min(offset + limit, count))
        ],
    }


def area_payload(name: str, pokemon: list[str]) -> dict[str, Any]:
    return {
        "id": 1,
        "name": name,
        "pokemon_encounters": [
            {"pokemon": {"name": p, "url": f"{API}/pokemon/{p}/"}, "version_details": []} for p in pokemon
        ],
    }


def pokemon_payload(name: str, base_experience: int | None = 112) -> dict[str, Any]:
    return {
        "id": 25,
        "name": name,
        "base_experience": base_experience,
        "height": 4,
        "weight": 60,
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": ""}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": ""}},
        ],
        "types": [{"slot": 1, "type": {"name": "electric", "url": ""}}],
    }


def fake_api(request: httpx.Request) -> httpx.Response:
    """Minimal PokeAPI double: listing pages, two areas and a few Pokemon."""

    path = request.url.path.removeprefix("/api/v2")
    if path == "/location-area":
        offset = int(request.url.params.get("offset", "0"))
        return httpx.Response(200, json=listing_payload(offset))
    if path == "/location-area/canalave-city-area":
        return httpx.Response(200, json=area_payload("canalave-city-area", ["tentacool", "staryu"]))
    if path == "/location-area/empty-area":
        return httpx.Response(200, json=area_payload("empty-area", []))
    if path == "/pokemon/pikachu":
        return httpx.Response(200, json=pokemon_payload("pikachu"))
    if path == "/pokemon/missingno":
        return httpx.Response(200, content=b"<html>not json</html>")
    return httpx.Response(404, text="Not Found")


@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from any .env on the machine."""
    return AppSettings(
        _env_file=None,
        api_base_url=API,
        page_size=20,
        cache_ttl_seconds=5.0,
        throw_strength=380.0,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(fake_api)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def pikachu_bytes() -> bytes:
    return json.dumps(pokemon_payload("pikachu")).encode()
