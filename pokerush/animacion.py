"""Time-based interpolation helpers for animations."""

from __future__ import annotations


def _progreso(tiempo_ms: int, comienzo_ms: int, fin_ms: int) -> float:
    return (tiempo_ms - comienzo_ms) / (fin_ms - comienzo_ms)


def linear(
    tiempo_ms: int, comienzo_ms: int, fin_ms: int, inicio: int, fin: int
) -> float:
    """Linear motion from inicio to fin with abrupt start and end."""
    if tiempo_ms < comienzo_ms:
        return float(inicio)
    if tiempo_ms > fin_ms or fin_ms == comienzo_ms:
        return float(fin)

    t = _progreso(tiempo_ms, comienzo_ms, fin_ms)
    return inicio + (fin - inicio) * t


def ease_in_out(
    tiempo_ms: int, comienzo_ms: int, fin_ms: int, inicio: int, fin: int
) -> int:
    """Non-linear motion with a smooth start and end."""
    if tiempo_ms < comienzo_ms:
        return inicio
    if tiempo_ms > fin_ms or fin_ms == comienzo_ms:
        return fin

    t = _progreso(tiempo_ms, comienzo_ms, fin_ms)
    p = 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) * (-2 * t + 2) / 2
    return int(inicio + (fin - inicio) * p)


def parpadeo(tiempo_ms: int, periodo_ms: int, inicio: int, fin: int) -> int:
    """Square wave alternating between inicio and fin every period."""
    return inicio if (tiempo_ms // periodo_ms) % 2 == 0 else fin