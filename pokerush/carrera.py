"""The race itself: both Pokémon run their obstacle tracks tick by tick."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pokerush.animacion import ease_in_out, linear
from pokerush.color import Color
from pokerush.constantes import (
    ALTO_PANTALLA,
    ANCHO_PANTALLA,
    B_CARRERA,
    C_NORMAL,
    C_TRANSPARENTE,
    OPACIDAD_FONDO,
    X_POKEMON,
)
from pokerush.escena import Contexto, Escena, NombreEscena
from pokerush.estado import Estado, EstadoError
from pokerush.pantalla import Pantalla
from pokerush.tp import TP, Jugador, Obstaculo

D_TICK = 500
C_TEXTO = (25, 25, 25)
B_SUMA_TIEMPO = Color(200, 100, 50)
B_TIEMPO_NORMAL = Color(255, 255, 255)

TICKS_END = 1

Y_POKE = 4
X_POKE1 = 8
X_POKE2 = 55

X_PISTA1 = X_POKE1 - X_POKEMON // 2
X_PISTA2 = X_POKE2 - X_POKEMON // 2

Y_TIEMPO = 2
X_TIEMPO1 = X_POKE1
X_TIEMPO2 = X_POKE2

FRAMES_PISTA = 4
D_FRAME_PISTA = D_TICK // 4

Y_OBSTACULO = 6
Y_DELTA_OBSTACULO = 18
X_DELTA_OBSTACULO = 10
X_OBSTACULO1 = 11
X_OBSTACULO2 = 58

CANTIDAD_COUNTDOWN = 3
TICKS_NUMERO_COUNTDOWN = 2
D_COUNTDOWN = D_TICK * TICKS_NUMERO_COUNTDOWN * CANTIDAD_COUNTDOWN
X_COUNTDOWN = ANCHO_PANTALLA // 2 - 16 // 2 + 2
Y_COUNTDOWN = ALTO_PANTALLA // 2 - 8 // 2 - 2

P_EFECTIVO1 = (X_TIEMPO1 - 6, Y_TIEMPO + 2)
P_EFECTIVO2 = (X_TIEMPO2 - 6, Y_TIEMPO + 2)
C_EFECTIVO = (100, 0, 100)
M_EFECTIVO = "Super efectivo!"

_F = Obstaculo.FUERZA.letra
_D = Obstaculo.DESTREZA.letra
_I = Obstaculo.INTELIGENCIA.letra


def _tiempos(valor: str | Iterable[Any] | None) -> list[int]:
    """Per-obstacle times from either a CSV string or a sequence of numbers."""
    if valor is None:
        return []
    if isinstance(valor, str):
        return [int(parte) for parte in valor.split(",") if parte.strip()]
    return [int(parte) for parte in valor]


@dataclass
class JugadorCarrera:
    """Progress of one player's Pokémon along its track."""

    pokemon: Any
    tiempos: list[int]
    obstaculos: str
    obstaculo_actual: int = -1
    tiempo_total: int = 0
    corriendo: bool = False
    finalizo: bool = False
    aumento_tiempo: bool = False
    super_efectivo: bool = False
    _: None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.tiempos) != len(self.obstaculos):
            raise ValueError("debe haber un tiempo por cada obstáculo")
        self.tiempos = list(self.tiempos)

    @property
    def cantidad_obstaculos(self) -> int:
        """Length of the track."""
        return len(self.obstaculos)

    @classmethod
    def desde_tp(
        cls, tp: TP, sprites: Mapping[str, Any], jugador: Jugador
    ) -> "JugadorCarrera":
        """Build a player from the track and Pokémon stored in the TP.

        Raises EstadoError if the player has no obstacles or no Pokémon.
        """
        obstaculos = "".join(tp.obstaculos_pista(jugador) or "")
        if not obstaculos:
            raise EstadoError(Estado.ERROR_CREACION_ESCENA, "la pista está vacía")

        pokemon = tp.pokemon_seleccionado(jugador)
        if pokemon is None:
            raise EstadoError(
                Estado.ERROR_CREACION_ESCENA, "el jugador no tiene pokemon"
            )

        tiempos = _tiempos(tp.tiempo_por_obstaculo(jugador))
        if len(tiempos) != len(obstaculos):
            raise EstadoError(
                Estado.ERROR_CREACION_ESCENA, "tiempos y obstáculos no coinciden"
            )

        return cls(pokemon=sprites.get(pokemon.nombre), tiempos=tiempos, obstaculos=obstaculos)

    def tick(self) -> None:
        """Advance one tick.

        On an obstacle the remaining time drops by one; at zero the Pokémon
        runs to the next one. After running it faces the next obstacle.
        Nothing happens once the track is finished.
        """
        i = self.obstaculo_actual
        self.super_efectivo = False

        if self.corriendo:
            self.aumento_tiempo = False
            self.corriendo = False
            if not self.finalizo and self.tiempos[i] == 0:
                self.corriendo = True
                self.super_efectivo = True
                self.obstaculo_actual += 1
                if i == self.cantidad_obstaculos - 1:
                    self.finalizo = True
            return

        if self.finalizo:
            return

        if i == -1:
            self.obstaculo_actual += 1
            self.corriendo = True
            return

        self.aumento_tiempo = True
        self.tiempo_total += 1
        self.tiempos[i] -= 1

        if self.tiempos[i] == 0:
            self.corriendo = True
            self.obstaculo_actual += 1
            if i == self.cantidad_obstaculos - 1:
                self.finalizo = True


class Carrera(Escena):
    """Countdown, then both tracks side by side until both Pokémon finish."""

    def __init__(self, contexto: Contexto) -> None:
        sprites = contexto.sprites
        self.jugador1 = JugadorCarrera.desde_tp(contexto.tp, sprites, Jugador.JUGADOR_1)
        self.jugador2 = JugadorCarrera.desde_tp(contexto.tp, sprites, Jugador.JUGADOR_2)
        self.tick_actual = 0

        self.pista = [sprites.get(f"pista{n}") for n in range(1, FRAMES_PISTA + 1)]
        self.countdown = [sprites.get(nombre) for nombre in ("three", "two", "one")]

        self.meta = sprites.get("meta")
        self.atravesados_back = {
            _F: sprites.get("escombros_back"),
            _D: sprites.get("tunel_back"),
            _I: sprites.get("puerta_abierta_back"),
        }
        self.actuales_back = {_F: None, _D: sprites.get("tunel_back"), _I: None}
        self.atravesados_front = {
            _F: sprites.get("escombros_front"),
            _D: sprites.get("tunel_front"),
            _I: sprites.get("puerta_abierta_front"),
        }
        self.actuales_front = {
            _F: sprites.get("pared"),
            _D: sprites.get("tunel_front"),
            _I: sprites.get("puerta_cerrada"),
        }

        self.finalizado = False
        self.tiempo_final = 0

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        t = contexto.tiempo_escena_ms
        j1, j2 = self.jugador1, self.jugador2

        if (
            not self.finalizado
            and j1.finalizo
            and j2.finalizo
            and not j1.corriendo
            and not j2.corriendo
        ):
            self.finalizado = True
            self.tiempo_final = t
        elif self.finalizado and t - self.tiempo_final > D_TICK * TICKS_END:
            return NombreEscena.GANADOR

        if t < D_COUNTDOWN:
            return NombreEscena.CARRERA

        tick_real = t // D_TICK - TICKS_NUMERO_COUNTDOWN * CANTIDAD_COUNTDOWN
        if tick_real == self.tick_actual:
            return NombreEscena.CARRERA

        self.tick_actual = tick_real
        j1.tick()
        j2.tick()
        return NombreEscena.CARRERA

    @staticmethod
    def _dibujar_timers(
        jugador: JugadorCarrera, pantalla: Pantalla, tiempo: int, pos_x: int, opacidad: float
    ) -> None:
        pantalla.color_texto(*C_TEXTO, opacidad)
        pantalla.estilo_texto(True, False, False)

        progreso = linear(tiempo % D_TICK, 0, D_TICK, 1, 0) if jugador.aumento_tiempo else 0.0
        color = B_SUMA_TIEMPO.mezcla(B_TIEMPO_NORMAL, progreso)
        pantalla.color_fondo(*color, opacidad)
        ancho = 5 + (1 if jugador.tiempo_total >= 10 else 0)
        pantalla.rect(pos_x - 2, Y_TIEMPO - 1, ancho, 3, " ")

        pantalla.color_fondo(*C_TRANSPARENTE)
        pantalla.texto(pos_x, Y_TIEMPO, str(jugador.tiempo_total))

    def _dibujar_pista(
        self, jugador: JugadorCarrera, pantalla: Pantalla, tiempo: int, pos_x: int, opacidad: float
    ) -> None:
        indice = (tiempo // D_FRAME_PISTA) % FRAMES_PISTA if jugador.corriendo else 0
        pantalla.sprite(pos_x, 0, self.pista[indice], opacidad)

    def _dibujar_obstaculos(
        self,
        jugador: JugadorCarrera,
        pantalla: Pantalla,
        tiempo: int,
        x_pos: int,
        opacidad: float,
        meta_atravesada: Any,
        atravesados: Mapping[str, Any],
        actuales: Mapping[str, Any],
    ) -> None:
        actual_idx = jugador.obstaculo_actual
        y_offset = int(linear(tiempo % D_TICK, 0, D_TICK, Y_DELTA_OBSTACULO, 0))
        x_offset = int(linear(tiempo % D_TICK, 0, D_TICK, X_DELTA_OBSTACULO, 0))

        if jugador.corriendo:
            if actual_idx == 0:
                atravesado = meta_atravesada
            else:
                atravesado = atravesados.get(jugador.obstaculos[actual_idx - 1])
            opacidad_atravesado = linear(tiempo % D_TICK, 0, D_TICK, 1, 0)
            pantalla.sprite(
                x_pos - x_offset,
                Y_OBSTACULO + (y_offset - Y_DELTA_OBSTACULO),
                atravesado,
                opacidad_atravesado,
            )

        if actual_idx == -1 or jugador.finalizo:
            actual = self.meta
        else:
            actual = actuales.get(jugador.obstaculos[actual_idx])

        if not jugador.corriendo:
            y_offset = 0
            x_offset = 0

        pantalla.sprite(
            x_pos - x_offset - X_DELTA_OBSTACULO, Y_OBSTACULO + y_offset, actual, opacidad
        )

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        t = contexto.tiempo_escena_ms
        opacidad = linear(t, 0, D_TICK * TICKS_NUMERO_COUNTDOWN, 0, 1)
        jugadores = (
            (self.jugador1, X_PISTA1, X_OBSTACULO1, X_POKE1, X_TIEMPO1),
            (self.jugador2, X_PISTA2, X_OBSTACULO2, X_POKE2, X_TIEMPO2),
        )

        pantalla.color_fondo(*B_CARRERA, OPACIDAD_FONDO / 100.0)
        pantalla.fondo()

        for jugador, x_pista, _, _, _ in jugadores:
            self._dibujar_pista(jugador, pantalla, t, x_pista, opacidad)

        for jugador, _, x_obstaculo, _, _ in jugadores:
            self._dibujar_obstaculos(
                jugador, pantalla, t, x_obstaculo, opacidad,
                self.meta, self.atravesados_back, self.actuales_back,
            )

        for jugador, _, _, x_poke, _ in jugadores:
            pantalla.sprite(x_poke, Y_POKE, jugador.pokemon, opacidad)

        for jugador, _, x_obstaculo, _, _ in jugadores:
            self._dibujar_obstaculos(
                jugador, pantalla, t, x_obstaculo, opacidad,
                None, self.atravesados_front, self.actuales_front,
            )

        if t < D_COUNTDOWN:
            indice = (t // D_TICK) // TICKS_NUMERO_COUNTDOWN
            pantalla.sprite(X_COUNTDOWN, Y_COUNTDOWN, self.countdown[indice], 1.0)

        for jugador, _, _, _, x_tiempo in jugadores:
            self._dibujar_timers(jugador, pantalla, t, x_tiempo, opacidad)

        opacidad_efectivo = linear(t % D_TICK, 0, D_TICK, 1, 0)
        pantalla.color_texto(*C_EFECTIVO, opacidad_efectivo)
        if self.jugador1.super_efectivo:
            pantalla.texto(*P_EFECTIVO1, M_EFECTIVO)
        if self.jugador2.super_efectivo:
            pantalla.texto(*P_EFECTIVO2, M_EFECTIVO)

        if self.finalizado and t > self.tiempo_final:
            mitad = ANCHO_PANTALLA // 2
            x_externo = ease_in_out(t - self.tiempo_final, 0, D_TICK * TICKS_END, 0, mitad)
            pantalla.color_fondo(*C_NORMAL, 1.0)
            pantalla.rect(mitad - x_externo, 0, 2 * x_externo, ALTO_PANTALLA, " ")