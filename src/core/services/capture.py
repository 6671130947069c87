"""Motor de captura.

Probabilidad de aceptación:

    p = strength / (strength + difficulty)   si difficulty > 0
    p = 1                                    si difficulty <= 0

acotada a [0, 1]. Es no creciente en `difficulty` y no decreciente en
`strength`; con `difficulty == strength` vale 0.5. Se evalúa como
`1 / (1 + difficulty / strength)`, equivalente pero sin desbordar la suma
con entradas enormes. Cada intento hace una única extracción uniforme en
[0, 1) y acepta si la muestra es < p.
"""

from __future__ import annotations

import logging
import math
import random

logger = logging.getLogger(__name__)


def capture_probability(difficulty: float, strength: float) -> float:
    """Probabilidad de captura en [0, 1]; nunca lanza para entradas numéricas."""

    if math.isnan(difficulty) or math.isnan(strength):
        return 0.0
    if difficulty <= 0:
        return 1.0

    if strength <= 0:
        return 0.0
    if math.isinf(strength):
        return 0.0 if math.isinf(difficulty) else 1.0

    p = 1.0 / (1.0 + difficulty / strength)
    return min(max(p, 0.0), 1.0)


class CaptureEngine:
    """Decide capturas con una fuerza de lanzamiento fija.

    El generador es propio de la instancia: sembrado desde el SO en
    producción, sembrable en tests.
    """

    def __init__(self, strength: float, rng: random.Random | None = None) -> None:
        self._strength = strength
        self._rng = rng or random.Random()

    @property
    def strength(self) -> float:
        return self._strength

    def attempt(self, difficulty: float, strength: float | None = None) -> bool:
        p = capture_probability(difficulty, self._strength if strength is None else strength)
        sample = self._rng.random()
        accepted = sample < p
        logger.debug("capture attempt difficulty=%s p=%.3f sample=%.3f accepted=%s", difficulty, p, sample, accepted)
        return accepted
