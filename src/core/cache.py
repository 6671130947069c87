"""Cache en memoria con TTL y barrido periódico.

Por qué en el Core:
- Es una optimización pura (no hace I/O) compartida por todos los comandos.
- El coordinador HTTP la consume vía el contrato `ByteCache`.

Almacenamiento:
- `cachetools.TTLCache` guarda los payloads y sus caducidades; no es
  thread-safe, así que todo acceso pasa por un único `threading.Lock`.

Política de lectura:
- `get` no devuelve entradas caducadas (`cachetools` las oculta al leer),
  aunque sigan en memoria hasta el siguiente barrido. Una entrada caduca
  cuando su edad alcanza el TTL.
- El barrido (`reap`) las elimina físicamente. El periodo debe ser igual
  al TTL o dividirlo exactamente; el barrido toma el lock del mapa entero
  durante un `expire()`.
- `cachetools` también descarta caducadas al escribir; `reclaimed_count`
  solo cuenta las que retira el barrido.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Any, Callable

import cachetools

logger = logging.getLogger(__name__)


def divides_evenly(ttl: float, interval: float) -> bool:
    """True si `interval` cabe un número entero de veces en `ttl`."""

    ratio = ttl / interval
    return ratio >= 1 and math.isclose(ratio, round(ratio), rel_tol=1e-9)


class TTLCache:
    """Mapa `locator -> bytes` con reclamación en segundo plano.

    El hilo reaper se arranca con `start()` (o usando la cache como context
    manager) y se detiene con `close()`. En tests se invoca `reap()` a mano
    con un reloj inyectado.
    """

    def __init__(
        self,
        ttl: float,
        reap_interval: float | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        interval = ttl if reap_interval is None else reap_interval
        if interval <= 0 or not divides_evenly(ttl, interval):
            raise ValueError("reap_interval must be positive and evenly divide ttl")

        self._ttl = ttl
        self._interval = interval
        self._entries: cachetools.TTLCache[str, bytes] = cachetools.TTLCache(
            maxsize=math.inf, ttl=ttl, timer=clock
        )
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

        self._hit_count = 0
        self._miss_count = 0
        self._reclaimed_count = 0

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def reap_interval(self) -> float:
        return self._interval

    def put(self, key: str, payload: bytes) -> None:
        with self._lock:
            self._entries[key] = payload
        logger.debug("cache put %s (%d bytes)", key, len(payload))

    def get(self, key: str) -> bytes | None:
        """Devuelve el payload si la entrada existe y no ha caducado, o `None`."""

        with self._lock:
            payload = self._entries.get(key)
            if payload is None:
                self._miss_count += 1
                return None
            self._hit_count += 1
        logger.debug("cache hit %s", key)
        return payload

    def reap(self) -> int:
        """Un barrido: elimina las entradas caducadas y devuelve cuántas."""

        with self._lock:
            removed = len(self._entries.expire())
            self._reclaimed_count += removed

        if removed:
            logger.debug("cache reaped %d expired entries", removed)
        return removed

    def start(self) -> None:
        """Arranca el hilo reaper (idempotente)."""

        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="ttl-cache-reaper", daemon=True)
        self._thread.start()
        logger.info("cache reaper started (ttl=%ss, interval=%ss)", self._ttl, self._interval)

    def close(self, timeout: float | None = None) -> None:
        """Detiene el reaper y espera a que termine. Las entradas se conservan."""

        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None:
            thread.join(timeout)
            logger.info("cache reaper stopped")

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            self.reap()

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._entries),
                "hit_count": self._hit_count,
                "miss_count": self._miss_count,
                "reclaimed_count": self._reclaimed_count,
                "ttl_seconds": self._ttl,
                "reap_interval_seconds": self._interval,
            }

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> "TTLCache":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
