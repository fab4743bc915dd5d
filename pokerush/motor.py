"""Frame loop that runs a game on the terminal."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from pokerush.entrada import leer_caracter, terminal_sin_echo
from pokerush.estado import Estado, EstadoError
from pokerush.pantalla import Pantalla

T_DEBUG = ord("\t")


@dataclass(frozen=True)
class MotorConfig:
    """Screen size and frame rate a game asks the engine for."""

    ancho_pantalla: int
    alto_pantalla: int
    frames_por_segundo: int


class Juego(ABC):
    """Interface a game implements so the engine can run it."""

    @abstractmethod
    def config_motor(self) -> MotorConfig:
        """Engine configuration to use."""

    @abstractmethod
    def iniciar(self, configuracion: Any) -> None:
        """Create the game state; raise EstadoError on failure."""

    @abstractmethod
    def procesar_eventos(self, tecla: int, delta_tiempo_ms: int) -> Estado | None:
        """Handle input and time; return an Estado to stop, None to go on."""

    @abstractmethod
    def dibujar_graficos(self, pantalla: Pantalla) -> None:
        """Draw the current frame."""

    @abstractmethod
    def finalizar(self) -> None:
        """Release whatever the game holds."""


_METODOS = (
    "config_motor",
    "iniciar",
    "procesar_eventos",
    "dibujar_graficos",
    "finalizar",
)


def _juego_valido(juego: object) -> bool:
    return all(callable(getattr(juego, nombre, None)) for nombre in _METODOS)


def _ms_actuales() -> int:
    return time.monotonic_ns() // 1_000_000


def _sleep_ms(milisegundos: int) -> None:
    time.sleep(milisegundos / 1000)


def _bucle_principal(
    juego: Juego,
    pantalla: Pantalla,
    frames_por_segundo: int,
    leer: Callable[[], int] | None = None,
    reloj: Callable[[], int] | None = None,
    dormir: Callable[[int], None] | None = None,
) -> Estado:
    """Run frames one by one until the game asks to stop."""
    leer = leer if leer is not None else leer_caracter
    reloj = reloj if reloj is not None else _ms_actuales
    dormir = dormir if dormir is not None else _sleep_ms

    ms_por_frame = 1000 // frames_por_segundo
    tiempo_frame = 0
    debug = False

    while True:
        antes = reloj()

        tecla = leer()
        if tecla == T_DEBUG:
            debug = not debug

        estado = juego.procesar_eventos(tecla, tiempo_frame)
        if estado is not None:
            return Estado(estado)

        juego.dibujar_graficos(pantalla)
        if debug:
            pantalla.color_texto(127, 127, 127, 0.5)
            pantalla.color_fondo(0, 0, 0, 0.0)
            pantalla.estilo_texto(False, False, False)
            pantalla.texto(0, 0, f"Tiempo frame: {tiempo_frame} ms")
        pantalla.actualizar_frame()

        tiempo_frame = reloj() - antes
        if tiempo_frame < ms_por_frame:
            tiempo_muerto = ms_por_frame - tiempo_frame
            dormir(tiempo_muerto)
            tiempo_frame += tiempo_muerto


def ejecutar_juego(juego: Juego | None, config_juego: Any) -> Estado:
    """Load and run a game, then release it.

    Returns the state the game finished with; raises EstadoError when the
    game cannot be started or the run is interrupted.
    """
    if juego is None:
        raise EstadoError(Estado.PUNTERO_NULL)
    if not _juego_valido(juego):
        raise EstadoError(Estado.JUEGO_INVALIDO)

    config = juego.config_motor()
    if config.frames_por_segundo <= 0:
        raise EstadoError(Estado.CONFIGURACION_INVALIDA)

    juego.iniciar(config_juego)

    try:
        pantalla = Pantalla(config.ancho_pantalla, config.alto_pantalla)
    except EstadoError:
        juego.finalizar()
        raise

    try:
        with pantalla, terminal_sin_echo():
            return _bucle_principal(juego, pantalla, config.frames_por_segundo)
    except KeyboardInterrupt:
        raise EstadoError(Estado.SENIAL_INTERRUPCION) from None
    finally:
        juego.finalizar()