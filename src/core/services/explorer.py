"""Orquestación de los comandos de exploración.

La CLI delega aquí toda la lógica (paginación, exploración, captura) y se
queda solo con la presentación. Todas las dependencias (fetcher, cursor,
motor de captura, pokedex) se construyen una vez al arrancar y se inyectan,
lo que permite sustituirlas por fakes en tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.pokeapi import (
    decode_location_area,
    decode_location_area_page,
    decode_pokemon,
    location_area_url,
    normalize_name,
    pokemon_url,
)
from core.config import AppSettings
from core.domain.models import LocationArea, LocationAreaPage, Pokemon
from core.domain.pagination import Direction, PaginationCursor
from core.domain.pokedex import Pokedex
from core.interfaces.fetcher import ResourceFetcher
from core.services.capture import CaptureEngine, capture_probability

logger = logging.getLogger(__name__)


@dataclass
class CatchOutcome:
    """Resultado de un `catch`."""

    name: str
    pokemon: Pokemon | None = None
    caught: bool = False
    already_caught: bool = False
    probability: float | None = None


class Explorer:
    def __init__(
        self,
        *,
        fetcher: ResourceFetcher,
        cursor: PaginationCursor,
        engine: CaptureEngine,
        pokedex: Pokedex,
        settings: AppSettings,
    ) -> None:
        self._fetcher = fetcher
        self._cursor = cursor
        self._engine = engine
        self._pokedex = pokedex
        self._settings = settings

    @property
    def cursor(self) -> PaginationCursor:
        return self._cursor

    @property
    def pokedex(self) -> Pokedex:
        return self._pokedex

    def page(self, direction: Direction) -> LocationAreaPage:
        """Obtiene la página en `direction` y avanza el cursor.

        Lanza `NoSuchPageError` sin tocar la red si la dirección está agotada.
        El cursor solo cambia si fetch y decodificación tienen éxito.
        """

        locator = self._cursor.locator(direction)
        page = decode_location_area_page(self._fetcher.fetch(locator))
        self._cursor.update(page.next, page.previous)
        logger.debug("cursor now %r", self._cursor)
        return page

    def explore(self, area: str) -> LocationArea:
        payload = self._fetcher.fetch(location_area_url(self._settings, area))
        return decode_location_area(payload)

    def catch(self, name: str) -> CatchOutcome:
        """Intenta capturar `name`; si ya está en la pokedex no hace fetch."""

        key = normalize_name(name)
        existing = self._pokedex.get(key)
        if existing is not None:
            return CatchOutcome(name=key, pokemon=existing, already_caught=True)

        pokemon = decode_pokemon(self._fetcher.fetch(pokemon_url(self._settings, key)))
        probability = capture_probability(pokemon.difficulty, self._engine.strength)
        caught = self._engine.attempt(pokemon.difficulty)
        if caught:
            self._pokedex.add(pokemon)
            logger.info("caught %s (p=%.2f)", pokemon.name, probability)
        return CatchOutcome(name=pokemon.name, pokemon=pokemon, caught=caught, probability=probability)

    def inspect(self, name: str) -> Pokemon | None:
        return self._pokedex.get(normalize_name(name))

    def caught(self) -> list[Pokemon]:
        return list(self._pokedex)
