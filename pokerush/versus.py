"""Animation shown right before the race."""

from __future__ import annotations

from pokerush.animacion import ease_in_out, linear
from pokerush.constantes import (
    ALTO_PANTALLA,
    ANCHO_PANTALLA,
    B_CARRERA,
    B_PRINCIPAL,
    C_NOMBRE_1,
    C_NOMBRE_2,
    C_NORMAL,
    C_TRANSPARENTE,
    D_TRANSICION_FONDO,
    E_NOMBRE,
    E_NORMAL,
    M_DIFICIL,
    M_FACIL,
    M_IMPOSIBLE,
    M_MEDIO,
    M_VERSUS,
    OPACIDAD_FONDO,
    X_POKEMON,
    X_VERSUS,
    Y_NOMBRE_END,
    Y_NOMBRE_START,
)
from pokerush.escena import Contexto, Dificultad, Escena, NombreEscena
from pokerush.estado import Estado, EstadoError
from pokerush.pantalla import Pantalla
from pokerush.tp import Jugador

D_VERSUS = 1000
D_FAST1 = 1000
D_SLOW = 2000
D_FAST2 = 1500
D_RECT = 1000
D_TOTAL = D_FAST1 + D_FAST2 + D_SLOW + D_RECT

_OPONENTES = {
    Dificultad.FACIL: M_FACIL,
    Dificultad.MEDIO: M_MEDIO,
    Dificultad.DIFICIL: M_DIFICIL,
    Dificultad.IMPOSIBLE: M_IMPOSIBLE,
}


class Versus(Escena):
    """Shows both trainers and their Pokémon, then moves on to the race."""

    def __init__(self, contexto: Contexto) -> None:
        self.x_nombre1 = ANCHO_PANTALLA // 4 - len(contexto.nombre_entrenador) // 2
        self.x_nombre2 = ANCHO_PANTALLA * 3 // 4 - 2

        self.nombre2 = _OPONENTES[Dificultad(contexto.dificultad)]
        sprites = contexto.sprites
        self.sprite_entrenador2 = sprites.get(self.nombre2)
        self.sprite_entrenador1 = sprites.get("jugador")

        pokemon1 = contexto.tp.pokemon_seleccionado(Jugador.JUGADOR_1)
        pokemon2 = contexto.tp.pokemon_seleccionado(Jugador.JUGADOR_2)
        if pokemon1 is None or pokemon2 is None:
            raise EstadoError(
                Estado.ERROR_CREACION_ESCENA, "ambos jugadores necesitan un pokemon"
            )
        self.sprite_pokemon1 = sprites.get(pokemon1.nombre)
        self.sprite_pokemon2 = sprites.get(pokemon2.nombre)

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        if contexto.tiempo_escena_ms > D_TOTAL:
            return NombreEscena.CARRERA
        return NombreEscena.VERSUS

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        t = contexto.tiempo_escena_ms

        opacidad_fondo = (
            linear(t, 0, D_TRANSICION_FONDO, OPACIDAD_FONDO, 100)
            - linear(
                t,
                D_TRANSICION_FONDO,
                2 * D_TRANSICION_FONDO,
                0,
                (100 - OPACIDAD_FONDO) // 2,
            )
        ) / 100.0
        if t > D_FAST1 + D_SLOW + (D_FAST2 + D_RECT) // 2:
            pantalla.color_fondo(*B_CARRERA, opacidad_fondo)
        else:
            pantalla.color_fondo(*B_PRINCIPAL, opacidad_fondo)
        pantalla.fondo()

        # Names
        y_versus = ease_in_out(t, 0, D_FAST1, 0, Y_NOMBRE_END - Y_NOMBRE_START)
        if t < D_FAST1:
            x_extra = int(linear(t, 0, D_FAST1, 0, 15))
        elif t < D_FAST1 + D_SLOW:
            x_extra = int(linear(t, D_FAST1, D_FAST1 + D_SLOW, 15, 30))
        else:
            x_extra = ease_in_out(
                t, D_FAST1 + D_SLOW, D_FAST1 + D_SLOW + D_FAST2, 30, 100
            )

        pantalla.estilo_texto(*E_NOMBRE)
        pantalla.color_fondo(*C_TRANSPARENTE)
        pantalla.color_texto(*C_NOMBRE_1, 1.0)
        pantalla.texto(self.x_nombre1 + x_extra, Y_NOMBRE_START, contexto.nombre_entrenador)
        pantalla.color_texto(*C_NOMBRE_2, 1.0)
        pantalla.texto(
            self.x_nombre2 - x_extra, Y_NOMBRE_START + 2 * y_versus, self.nombre2
        )

        opacidad = linear(t, 0, D_FAST1 // 2, 1, 0)
        pantalla.estilo_texto(*E_NORMAL)
        pantalla.color_texto(*C_NORMAL, opacidad)
        pantalla.texto(X_VERSUS, Y_NOMBRE_START + y_versus, M_VERSUS)

        if t > D_FAST1 + D_FAST2 + D_SLOW:
            opacidad = linear(
                t, D_FAST1 + D_SLOW + D_FAST2, D_FAST1 + D_SLOW + D_FAST2 + D_RECT, 1, 0
            )
        else:
            opacidad = linear(t, D_FAST1, D_FAST1 + D_SLOW, 0, 1)

        # Pokémon and trainers
        if D_FAST1 < t < D_FAST1 + D_FAST2 + D_SLOW:
            pantalla.sprite(
                self.x_nombre1 + 3 * x_extra - X_POKEMON - 15,
                -1,
                self.sprite_entrenador1,
                opacidad / 4,
            )
            pantalla.sprite(
                self.x_nombre1 + 3 * x_extra - X_POKEMON - 60,
                -1,
                self.sprite_pokemon1,
                opacidad / 4,
            )
            pantalla.sprite(
                self.x_nombre2 - 3 * x_extra + 75,
                ALTO_PANTALLA // 2,
                self.sprite_pokemon2,
                opacidad / 4,
            )
            pantalla.sprite(
                self.x_nombre2 - 3 * x_extra + 30,
                ALTO_PANTALLA // 2,
                self.sprite_entrenador2,
                opacidad / 4,
            )

        # Sweeping diagonal rectangles
        pendiente = int(
            linear(
                t,
                D_FAST1 + D_SLOW,
                D_FAST1 + D_SLOW + D_FAST2 + D_RECT,
                ANCHO_PANTALLA,
                -ANCHO_PANTALLA,
            )
        )
        pantalla.color_fondo(*C_NORMAL, opacidad)
        for i in range(ALTO_PANTALLA):
            pantalla.rect(pendiente * (i - Y_NOMBRE_END), i, ANCHO_PANTALLA, 1, " ")