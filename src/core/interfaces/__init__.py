"""Contratos del Core (Protocol).

Los servicios dependen de estas abstracciones; `adapters/` aporta las
implementaciones concretas (HTTP + cache) y los tests aportan fakes.
"""

from core.interfaces.fetcher import ByteCache, ResourceFetcher

__all__ = ["ByteCache", "ResourceFetcher"]
