"""Tests for the explorer service (paging, exploring, catching)."""

from __future__ import annotations

import random

import httpx
import pytest

from adapters.http_client import CachedFetcher, build_client
from adapters.pokeapi import location_areas_url
from conftest import API, FakeClock, RecordingTransport
from core.cache import TTLCache
from core.config import AppSettings
from core.domain.pagination import Direction, PaginationCursor
from core.domain.pokedex import Pokedex
from core.errors import DecodeError, NoSuchPageError, ProtocolError
from core.services.capture import CaptureEngine
from core.services.explorer import Explorer


@pytest.fixture
def cache(clock: FakeClock) -> TTLCache:
    return TTLCache(5.0, clock=clock)


def _explorer(
    settings: AppSettings,
    transport: RecordingTransport,
    cache: TTLCache,
    *,
    strength: float = 380.0,
    rng: random.Random | None = None,
) -> Explorer:
    return Explorer(
        fetcher=CachedFetcher(cache, build_client(settings, transport=transport)),
        cursor=PaginationCursor(forward=location_areas_url(settings)),
        engine=CaptureEngine(strength, rng=rng or random.Random(0)),
        pokedex=Pokedex(),
        settings=settings,
    )


class TestPaging:
    """map / mapb semantics."""

    def test_first_map_fetches_first_page(self, settings, transport, cache) -> None:
        explorer = _explorer(settings, transport, cache)

        page = explorer.page(Direction.FORWARD)

        assert page.results[0].name == "area-0"
        assert explorer.cursor.forward == f"{API}/location-area?offset=20&limit=20"
        assert explorer.cursor.backward is None

    def test_mapb_on_first_page_is_boundary_without_network(self, settings, transport, cache) -> None:
        """Going back from the first page signals the boundary and makes no call."""
        explorer = _explorer(settings, transport, cache)
        explorer.page(Direction.FORWARD)
        calls = len(transport.requests)

        with pytest.raises(NoSuchPageError):
            explorer.page(Direction.BACKWARD)

        assert len(transport.requests) == calls

    def test_forward_then_back_uses_cache(self, settings, transport, cache) -> None:
        """Re-visiting a page within the TTL is served from the cache."""
        explorer = _explorer(settings, transport, cache)
        explorer.page(Direction.FORWARD)
        second = explorer.page(Direction.FORWARD)
        assert second.results[0].name == "area-20"

        back = explorer.page(Direction.BACKWARD)

        assert back.results[0].name == "area-0"
        assert len(transport.requests) == 2

    def test_last_page_exhausts_forward(self, settings, transport, cache) -> None:
        explorer = _explorer(settings, transport, cache)
        for _ in range(3):
            explorer.page(Direction.FORWARD)

        with pytest.raises(NoSuchPageError):
            explorer.page(Direction.FORWARD)

    def test_failed_fetch_leaves_cursor_untouched(self, settings, cache) -> None:
        """The cursor only moves after a successful listing fetch."""
        transport = RecordingTransport(lambda r: httpx.Response(500))
        explorer = _explorer(settings, transport, cache)
        before = explorer.cursor.forward

        with pytest.raises(ProtocolError):
            explorer.page(Direction.FORWARD)

        assert explorer.cursor.forward == before


class TestExploreAndCatch:
    def test_explore_lists_pokemon(self, settings, transport, cache) -> None:
        area = _explorer(settings, transport, cache).explore("Canalave-City-Area")

        assert area.pokemon_names == ["tentacool", "staryu"]

    def test_explore_unknown_area(self, settings, transport, cache) -> None:
        with pytest.raises(ProtocolError) as excinfo:
            _explorer(settings, transport, cache).explore("nowhere")
        assert excinfo.value.not_found

    def test_successful_catch_goes_to_pokedex(self, settings, transport, cache) -> None:
        explorer = _explorer(settings, transport, cache, strength=1e12)

        outcome = explorer.catch("Pikachu")

        assert outcome.caught
        assert outcome.name == "pikachu"
        assert outcome.probability == pytest.approx(1.0)
        assert explorer.inspect("pikachu") is outcome.pokemon
        assert [p.name for p in explorer.caught()] == ["pikachu"]

    def test_failed_catch_keeps_pokedex_empty(self, settings, transport, cache) -> None:
        explorer = _explorer(settings, transport, cache, strength=0)

        outcome = explorer.catch("pikachu")

        assert not outcome.caught
        assert outcome.probability == 0.0
        assert explorer.inspect("pikachu") is None
        assert len(explorer.pokedex) == 0

    def test_already_caught_skips_fetch(self, settings, transport, cache) -> None:
        explorer = _explorer(settings, transport, cache, strength=1e12)
        explorer.catch("pikachu")
        calls = len(transport.requests)

        outcome = explorer.catch("pikachu")

        assert outcome.already_caught
        assert len(transport.requests) == calls

    def test_retry_after_escape_uses_cache(self, settings, transport, cache) -> None:
        """Repeated attempts within the TTL cost one network call."""
        explorer = _explorer(settings, transport, cache, strength=0)
        for _ in range(3):
            explorer.catch("pikachu")

        assert transport.requests == [f"{API}/pokemon/pikachu"]

    def test_malformed_record_is_decode_error(self, settings, transport, cache) -> None:
        with pytest.raises(DecodeError):
            _explorer(settings, transport, cache).catch("missingno")
