"""Endpoints y decodificación de PokeAPI v2.

Estos helpers están en adapters porque conocen la forma concreta de la API:
cómo se construyen los locators y cómo se valida el JSON.
"""

from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from core.config import AppSettings
from core.domain.models import LocationArea, LocationAreaPage, Pokemon
from core.errors import DecodeError


def normalize_name(value: str) -> str:
    return value.strip().lower()


def _base(settings: AppSettings) -> str:
    return settings.api_base_url.rstrip("/")


def location_areas_url(settings: AppSettings) -> str:
    """Locator de la primera página del listado de áreas."""

    return f"{_base(settings)}/location-area?offset=0&limit={settings.page_size}"


def location_area_url(settings: AppSettings, name: str) -> str:
    return f"{_base(settings)}/location-area/{quote(normalize_name(name), safe='')}"


def pokemon_url(settings: AppSettings, name: str) -> str:
    return f"{_base(settings)}/pokemon/{quote(normalize_name(name), safe='')}"


def _decode(model: type[BaseModel], kind: str, payload: bytes):
    try:
        return model.model_validate_json(payload)
    except ValidationError as exc:
        raise DecodeError(kind, f"{exc.error_count()} validation error(s)") from exc


def decode_location_area_page(payload: bytes) -> LocationAreaPage:
    return _decode(LocationAreaPage, "location-area listing", payload)


def decode_location_area(payload: bytes) -> LocationArea:
    return _decode(LocationArea, "location-area", payload)


def decode_pokemon(payload: bytes) -> Pokemon:
    return _decode(Pokemon, "pokemon", payload)
