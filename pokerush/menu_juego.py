"""Choice of opponent, which sets the difficulty and the retries."""

from __future__ import annotations

from dataclasses import dataclass

from pokerush.constantes import (
    B_PRINCIPAL,
    B_SELECCION,
    C_CONTROL,
    C_NORMAL,
    C_SELECCION,
    C_TITULO,
    C_TRANSPARENTE,
    E_CONTROL,
    E_NORMAL,
    E_TITULO,
    M_ABAJO,
    M_ARRIBA,
    M_DIFICIL,
    M_ENTER,
    M_FACIL,
    M_IMPOSIBLE,
    M_MEDIO,
    M_VOLVER,
    P_TITULO,
    S_OPCION,
    T_SALIR,
    X_CONTROL_1,
    X_CONTROL_2,
    X_CONTROL_3,
    X_MARGEN,
    X_SALIR,
    Y_CONTROL,
)
from pokerush.entrada import FLECHA_ABAJO, FLECHA_ARRIBA, LINEFEED
from pokerush.escena import Contexto, Dificultad, Escena, NombreEscena, opacidad_fondo
from pokerush.pantalla import Pantalla
from pokerush.sprite import Sprite

REINTENTOS_FACIL = 6
REINTENTOS_MEDIO = 4
REINTENTOS_DIFICIL = 2
REINTENTOS_IMPOSIBLE = 0

M_OPCION_FACIL = "[F] Brock (facil)"
M_OPCION_MEDIO = "[M] Misty (medio)"
M_OPCION_DIFICIL = "[D] Red (dificil)"
M_OPCION_IMPOSIBLE = "[I] Cynthia (imposible)"

Y_OPCION_1 = 10
Y_SEPARACION = 2
M_TITULO = "OPONENTE"
P_SPRITE = (50, 4)


@dataclass(frozen=True)
class Opcion:
    """One opponent of the menu."""

    mensaje: str
    dificultad: Dificultad
    sprite: Sprite | None
    reintentos: int


_TECLAS = {
    ord("F"): 0,
    ord("M"): 1,
    ord("D"): 2,
    ord("I"): 3,
}


def _a_mayuscula(tecla: int) -> int:
    if 0 <= tecla < 128 and chr(tecla).isalpha():
        return ord(chr(tecla).upper())
    return tecla


class MenuJuego(Escena):
    """Lists the four opponents; picking one starts the race preparation."""

    def __init__(self, contexto: Contexto) -> None:
        sprites = contexto.sprites
        self.seleccion = 0
        self.opciones = (
            Opcion(M_OPCION_FACIL, Dificultad.FACIL, sprites.get(M_FACIL), REINTENTOS_FACIL),
            Opcion(M_OPCION_MEDIO, Dificultad.MEDIO, sprites.get(M_MEDIO), REINTENTOS_MEDIO),
            Opcion(
                M_OPCION_DIFICIL, Dificultad.DIFICIL, sprites.get(M_DIFICIL), REINTENTOS_DIFICIL
            ),
            Opcion(
                M_OPCION_IMPOSIBLE,
                Dificultad.IMPOSIBLE,
                sprites.get(M_IMPOSIBLE),
                REINTENTOS_IMPOSIBLE,
            ),
        )

    def _elegir(self, opcion: Opcion, contexto: Contexto) -> NombreEscena:
        contexto.dificultad = opcion.dificultad
        contexto.es_reintento = False
        contexto.intentos_restantes = opcion.reintentos
        return NombreEscena.PREPARACION

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        tecla = _a_mayuscula(tecla)
        ultima = len(self.opciones) - 1

        if tecla in _TECLAS:
            return self._elegir(self.opciones[_TECLAS[tecla]], contexto)
        if tecla == T_SALIR:
            return NombreEscena.MENU_PRINCIPAL
        if tecla == FLECHA_ARRIBA:
            if self.seleccion == -1:
                self.seleccion = ultima
            elif self.seleccion > 0:
                self.seleccion -= 1
        elif tecla == FLECHA_ABAJO:
            if self.seleccion == -1:
                self.seleccion = 0
            elif self.seleccion < ultima:
                self.seleccion += 1
        elif tecla == LINEFEED and self.seleccion != -1:
            return self._elegir(self.opciones[self.seleccion], contexto)

        return NombreEscena.MENU_JUEGO

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        pantalla.color_fondo(*B_PRINCIPAL, opacidad_fondo(contexto.tiempo_escena_ms))
        pantalla.fondo()
        pantalla.color_fondo(*C_TRANSPARENTE)

        pantalla.color_texto(*C_TITULO, 1.0)
        pantalla.estilo_texto(*E_TITULO)
        pantalla.texto(*P_TITULO, M_TITULO)

        pantalla.color_texto(*C_NORMAL, 1.0)
        pantalla.estilo_texto(*E_NORMAL)
        for i, opcion in enumerate(self.opciones):
            y = Y_OPCION_1 + Y_SEPARACION * i
            seleccionada = self.seleccion == i
            if seleccionada:
                pantalla.color_fondo(*B_SELECCION, 1.0)
                pantalla.color_texto(*C_SELECCION, 1.0)

            pantalla.texto(X_MARGEN, y, opcion.mensaje)

            if seleccionada:
                pantalla.color_fondo(*C_TRANSPARENTE)
                pantalla.color_texto(*B_SELECCION, 1.0)
                pantalla.texto(X_MARGEN - 2, y, S_OPCION)
                pantalla.color_texto(*C_NORMAL, 1.0)

        if self.seleccion != -1:
            pantalla.sprite(*P_SPRITE, self.opciones[self.seleccion].sprite, 1.0)

        pantalla.color_texto(*C_CONTROL, 1.0)
        pantalla.estilo_texto(*E_CONTROL)
        pantalla.texto(X_CONTROL_1, Y_CONTROL, M_ARRIBA)
        pantalla.texto(X_CONTROL_2, Y_CONTROL, M_ABAJO)
        if self.seleccion != -1:
            pantalla.texto(X_CONTROL_3, Y_CONTROL, M_ENTER)
        pantalla.texto(X_SALIR, Y_CONTROL, M_VOLVER)