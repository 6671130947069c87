"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta del JSON de la API en el borde, sin acoplar el Core a
  `httpx`.
- Los campos que la CLI no usa se ignoran (`extra="ignore"`), así que
  cambios aditivos en la API no rompen la decodificación.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class NamedResource(BaseModel):
    """Referencia `{name, url}` que la API usa en listados y relaciones."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    url: str = Field(default="")


class LocationAreaPage(BaseModel):
    """Una página del listado de áreas (`/location-area?offset=&limit=`)."""

    model_config = ConfigDict(extra="ignore")

    count: int = Field(default=0, ge=0)
    next: str | None = Field(
        default=None,
        description="Locator de la página siguiente (None en la última).",
    )
    previous: str | None = Field(
        default=None,
        description="Locator de la página anterior (None en la primera).",
    )
    results: list[NamedResource] = Field(default_factory=list)


class PokemonEncounter(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pokemon: NamedResource


class LocationArea(BaseModel):
    """Detalle de un área: qué Pokemon aparecen en ella."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    pokemon_encounters: list[PokemonEncounter] = Field(default_factory=list)

    @property
    def pokemon_names(self) -> list[str]:
        return [encounter.pokemon.name for encounter in self.pokemon_encounters]


class PokemonStat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    base_stat: int
    stat: NamedResource


class PokemonType(BaseModel):
    model_config = ConfigDict(extra="ignore")

    slot: int = 0
    type: NamedResource


class Pokemon(BaseModel):
    """Registro detallado de un Pokemon.

    `base_experience` actúa como dificultad de captura. La API lo devuelve
    `null` para algunas formas; en ese caso vale 0 (captura trivial).
    """

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str = Field(..., min_length=1)
    base_experience: int | None = Field(
        default=None,
        description="Experiencia base; usada como dificultad de captura.",
    )
    height: int = Field(default=0, ge=0)
    weight: int = Field(default=0, ge=0)
    stats: list[PokemonStat] = Field(default_factory=list)
    types: list[PokemonType] = Field(default_factory=list)

    @property
    def difficulty(self) -> float:
        return float(self.base_experience or 0)
