"""Wrapper de httpx + coordinador de fetch con cache.

Por qué un wrapper:
- Estandariza timeouts, headers y la clasificación de errores de red.
- Facilita testeo: el `httpx.Client` se inyecta, así que un
  `httpx.MockTransport` sustituye a la red.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.errors import ProtocolError, TransportError
from core.interfaces.fetcher import ByteCache

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los comandos se comporten igual.
    - `transport` permite inyectar un `MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class CachedFetcher:
    """Sirve locators desde la cache y cae a la red en caso de miss.

    - Hit: cero llamadas de red, cero escrituras.
    - Miss con éxito: una llamada, una escritura (el body ya leído entero).
    - Miss con fallo: `TransportError` / `ProtocolError`, sin escritura ni
      reintento; el siguiente fetch vuelve a intentar la red.
    """

    def __init__(self, cache: ByteCache, client: httpx.Client) -> None:
        self._cache = cache
        self._client = client

    def fetch(self, locator: str) -> bytes:
        cached = self._cache.get(locator)
        if cached is not None:
            return cached

        logger.debug("cache miss, GET %s", locator)
        try:
            response = self._client.get(locator)
        except httpx.TimeoutException as exc:
            logger.warning("timeout fetching %s", locator)
            raise TransportError(locator, "timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("transport failure fetching %s: %s", locator, exc)
            raise TransportError(locator, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            logger.info("GET %s -> HTTP %d", locator, response.status_code)
            raise ProtocolError(locator, response.status_code)

        payload = response.content
        self._cache.put(locator, payload)
        return payload

    def close(self) -> None:
        self._client.close()
