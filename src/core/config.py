"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/cache) y servicios lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.cache import divides_evenly

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pokedex-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pokedex-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pokedex-cli"
    return Path.home() / ".config" / "pokedex-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pokedex-cli user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Todos los valores se fijan al arrancar; no hay reconfiguración en caliente.
    """

    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        min_length=8,
        description="Base URL de la API remota (PokeAPI v2).",
    )
    page_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Número de áreas por página en `map`/`mapb`.",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="pokedex-cli/0.1",
        min_length=1,
        description="User-Agent para peticiones a la API.",
    )

    cache_ttl_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Edad máxima de una entrada de cache antes de ser reclamada.",
    )
    cache_reap_interval_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Periodo del barrido de reclamación (por defecto igual al TTL).",
    )

    throw_strength: float = Field(
        default=380.0,
        ge=0,
        description="Fuerza fija del lanzamiento usada en la probabilidad de captura.",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_reap_interval(self) -> "AppSettings":
        interval = self.cache_reap_interval_seconds
        if interval is not None and not divides_evenly(self.cache_ttl_seconds, interval):
            raise ValueError("cache_reap_interval_seconds must evenly divide cache_ttl_seconds")
        return self

    @property
    def reap_interval(self) -> float:
        """Periodo efectivo del barrido (cae al TTL si no se configuró)."""

        return self.cache_reap_interval_seconds or self.cache_ttl_seconds
