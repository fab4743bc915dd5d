"""Main menu from which every part of the game is reached."""

from __future__ import annotations

from dataclasses import dataclass

from pokerush.animacion import linear
from pokerush.color import Color
from pokerush.constantes import (
    B_INICIAL,
    B_PRINCIPAL,
    B_SELECCION,
    C_CONTROL,
    C_NORMAL,
    C_SELECCION,
    C_TRANSPARENTE,
    E_CONTROL,
    E_NORMAL,
    M_ABAJO,
    M_ARRIBA,
    M_ENTER,
    M_SALIR,
    S_OPCION,
    T_SALIR,
    X_CONTROL_1,
    X_CONTROL_2,
    X_CONTROL_3,
    Y_CONTROL,
)
from pokerush.entrada import FLECHA_ABAJO, FLECHA_ARRIBA, LINEFEED
from pokerush.escena import Contexto, Escena, NombreEscena, opacidad_fondo
from pokerush.pantalla import Pantalla

M_JUGAR = "[J] Jugar"
M_POKEDEX = "[P] Pokedex"
M_INFORMACION = "[I] Informacion"
M_REGLAS = "[T] Tutorial"

X_OPCIONES = 38
Y_OPCION_1 = 16
Y_SEPARACION = 2

ARCHIVO_LOGO = "logo_front"
ARCHIVO_LOGO_BACK = "logo_back"
P_LOGO = (7, 4)

D_TRANSICION_COLOR_FONDO = 1000


@dataclass(frozen=True)
class _Opcion:
    mensaje: str
    escena: NombreEscena


OPCIONES = (
    _Opcion(M_JUGAR, NombreEscena.MENU_JUEGO),
    _Opcion(M_POKEDEX, NombreEscena.POKEDEX),
    _Opcion(M_REGLAS, NombreEscena.REGLAS),
    _Opcion(M_INFORMACION, NombreEscena.INFORMACION),
    _Opcion(M_SALIR, NombreEscena.CERRAR),
)

_ATAJOS = {
    ord("J"): NombreEscena.MENU_JUEGO,
    ord("P"): NombreEscena.POKEDEX,
    ord("I"): NombreEscena.INFORMACION,
    ord("T"): NombreEscena.REGLAS,
}


def _a_mayuscula(tecla: int) -> int:
    if 0 <= tecla < 128 and chr(tecla).isalpha():
        return ord(chr(tecla).upper())
    return tecla


class MenuPrincipal(Escena):
    """Options chosen by shortcut key or by arrows and enter."""

    def __init__(self, contexto: Contexto) -> None:
        self.seleccion = -1
        self.opciones = OPCIONES
        self.logo = contexto.sprites.get(ARCHIVO_LOGO)
        self.logo_back = contexto.sprites.get(ARCHIVO_LOGO_BACK)

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        tecla = _a_mayuscula(tecla)
        ultima = len(self.opciones) - 1

        if tecla in _ATAJOS:
            contexto.primera_vez_en_menu = False
            return _ATAJOS[tecla]
        if tecla == T_SALIR:
            return NombreEscena.CERRAR
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
            contexto.primera_vez_en_menu = False
            return self.opciones[self.seleccion].escena

        return NombreEscena.MENU_PRINCIPAL

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        t = contexto.tiempo_escena_ms

        progreso = (
            linear(t, 0, D_TRANSICION_COLOR_FONDO, 0, 1)
            if contexto.primera_vez_en_menu
            else 1.0
        )
        color = Color(*B_PRINCIPAL).mezcla(Color(*B_INICIAL), progreso)
        pantalla.color_fondo(*color, opacidad_fondo(t))
        pantalla.fondo()
        pantalla.color_fondo(*C_TRANSPARENTE)

        pantalla.color_texto(*C_NORMAL, 1.0)
        pantalla.estilo_texto(*E_NORMAL)
        for i, opcion in enumerate(self.opciones):
            y = Y_OPCION_1 + Y_SEPARACION * i
            seleccionada = self.seleccion == i
            if seleccionada:
                pantalla.color_fondo(*B_SELECCION, 1.0)
                pantalla.color_texto(*C_SELECCION, 1.0)

            pantalla.texto(X_OPCIONES, y, opcion.mensaje)

            if seleccionada:
                pantalla.color_fondo(*C_TRANSPARENTE)
                pantalla.color_texto(*B_SELECCION, 1.0)
                pantalla.texto(X_OPCIONES - 2, y, S_OPCION)
                pantalla.color_texto(*C_NORMAL, 1.0)

        pantalla.sprite(*P_LOGO, self.logo_back, 1.0)
        pantalla.sprite(*P_LOGO, self.logo, 1.0)

        pantalla.color_texto(*C_CONTROL, 1.0)
        pantalla.estilo_texto(*E_CONTROL)
        pantalla.texto(X_CONTROL_1, Y_CONTROL, M_ARRIBA)
        pantalla.texto(X_CONTROL_2, Y_CONTROL, M_ABAJO)
        if self.seleccion != -1:
            pantalla.texto(X_CONTROL_3, Y_CONTROL, M_ENTER)