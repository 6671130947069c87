"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI distingue fallos de red, rechazos de la API, payloads inválidos y
  límites de paginación sin conocer `httpx` ni `pydantic`.
- Todos son recuperables: la sesión informa y sigue.
"""

from __future__ import annotations


class PokedexError(Exception):
    """Base de todos los errores de la aplicación."""


class FetchError(PokedexError):
    """La obtención remota de un locator falló."""

    def __init__(self, locator: str, message: str) -> None:
        super().__init__(message)
        self.locator = locator


class TransportError(FetchError):
    """Red inalcanzable, timeout, DNS o TLS."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(locator, f"could not reach {locator}: {reason}")
        self.reason = reason


class ProtocolError(FetchError):
    """La API respondió con un status no exitoso (p.ej. 404 por nombre desconocido)."""

    def __init__(self, locator: str, status_code: int) -> None:
        super().__init__(locator, f"{locator} answered HTTP {status_code}")
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class DecodeError(PokedexError):
    """El payload no tiene la forma esperada."""

    def __init__(self, kind: str, detail: str) -> None:
        super().__init__(f"malformed {kind} payload: {detail}")
        self.kind = kind


class NoSuchPageError(PokedexError):
    """No hay página en la dirección pedida (no implica llamada de red)."""

    def __init__(self, direction: str) -> None:
        super().__init__(f"no {direction} page")
        self.direction = direction
