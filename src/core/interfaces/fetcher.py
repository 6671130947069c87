"""Contratos de obtención remota y cache.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el servicio use el coordinador HTTP real o un fake en tests
  sin acoplar el Core a `httpx`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteCache(Protocol):
    """Almacén `locator -> bytes` usado por el coordinador."""

    def get(self, key: str) -> bytes | None:
        ...

    def put(self, key: str, payload: bytes) -> None:
        ...


@runtime_checkable
class ResourceFetcher(Protocol):
    """Contrato mínimo para obtener un recurso remoto.

    Reglas de diseño:
    - Devuelve los bytes crudos; decodificar es responsabilidad del llamador.
    - Los fallos se señalan con `core.errors.FetchError` (nunca se tragan).
    """

    def fetch(self, locator: str) -> bytes:
        """Devuelve el payload de `locator` (desde cache o red)."""

        ...
