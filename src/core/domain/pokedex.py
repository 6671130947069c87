"""Colección en memoria de Pokemon capturados.

Vive lo que vive el proceso; no se persiste.
"""

from __future__ import annotations

from typing import Iterator

from core.domain.models import Pokemon


class Pokedex:
    def __init__(self) -> None:
        self._caught: dict[str, Pokemon] = {}

    def add(self, pokemon: Pokemon) -> None:
        self._caught[pokemon.name] = pokemon

    def get(self, name: str) -> Pokemon | None:
        return self._caught.get(name)

    def names(self) -> list[str]:
        return list(self._caught)

    def __contains__(self, name: object) -> bool:
        return name in self._caught

    def __len__(self) -> int:
        return len(self._caught)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(list(self._caught.values()))
