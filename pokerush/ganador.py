"""Score screen with the option to retry the race."""

from __future__ import annotations

from pokerush.animacion import ease_in_out
from pokerush.constantes import (
    ALTO_PANTALLA,
    ANCHO_PANTALLA,
    B_PRINCIPAL,
    C_CONTROL,
    C_NOMBRE_1,
    C_NOMBRE_2,
    C_NORMAL,
    C_TITULO,
    C_TRANSPARENTE,
    E_CONTROL,
    E_NOMBRE,
    E_NORMAL,
    E_TITULO,
    M_DIFICIL,
    M_FACIL,
    M_IMPOSIBLE,
    M_MEDIO,
    M_VOLVER,
    P_TITULO,
    T_SALIR,
    X_CONTROL_1,
    X_MARGEN,
    X_SALIR,
    Y_CONTROL,
)
from pokerush.escena import Contexto, Dificultad, Escena, NombreEscena, opacidad_fondo
from pokerush.pantalla import Pantalla
from pokerush.tp import Jugador

M_TITULO = "PUNTAJE"
M_REINTENTAR = "[R] Reintentar"
T_REINTENTAR = ord("R")
C_HAY_INTENTOS = (50, 255, 50)
C_NO_HAY_INTENTOS = (255, 50, 50)
Y_INTENTOS = 23
M_HAY_INTENTOS = "Tenes {} reintento(s) disponible(s)"
M_NO_HAY_INTENTOS = "No tenes mas reintentos disponibles"

M_TIEMPO_DE = "Tiempo de "
X_TIEMPO1 = 25
X_TIEMPO2 = 55
Y_TIEMPO = 5

M_PUNTAJE = "Tu puntaje: {} / 100"
Y_PUNTAJE = 13
X_PUNTAJE = 37

D_TRANSICION = 500

_OPONENTES = {
    Dificultad.FACIL: M_FACIL,
    Dificultad.MEDIO: M_MEDIO,
    Dificultad.DIFICIL: M_DIFICIL,
    Dificultad.IMPOSIBLE: M_IMPOSIBLE,
}


def calcular_puntaje(tiempo1: int, tiempo2: int) -> int:
    """Score out of 100: the closer both times are, the higher."""
    if tiempo1 == 0 and tiempo2 == 0:
        return 100
    return 100 - 100 * abs(tiempo1 - tiempo2) // (tiempo1 + tiempo2)


def _a_mayuscula(tecla: int) -> int:
    if 0 <= tecla < 128 and chr(tecla).islower():
        return ord(chr(tecla).upper())
    return tecla


class Ganador(Escena):
    """Shows both times and the score; allows a retry while any are left."""

    def __init__(self, contexto: Contexto) -> None:
        self.tiempo1 = contexto.tp.calcular_tiempo_pista(Jugador.JUGADOR_1)
        self.tiempo2 = contexto.tp.calcular_tiempo_pista(Jugador.JUGADOR_2)
        self.puntaje = calcular_puntaje(self.tiempo1, self.tiempo2)
        self.nombre_cpu = _OPONENTES[Dificultad(contexto.dificultad)]

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        tecla = _a_mayuscula(tecla)
        if tecla == T_SALIR:
            return NombreEscena.MENU_PRINCIPAL
        if tecla == T_REINTENTAR and contexto.intentos_restantes > 0:
            contexto.intentos_restantes -= 1
            contexto.es_reintento = True
            return NombreEscena.PREPARACION
        return NombreEscena.GANADOR

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        t = contexto.tiempo_escena_ms

        pantalla.color_fondo(*B_PRINCIPAL, opacidad_fondo(t))
        pantalla.fondo()
        pantalla.color_fondo(*C_TRANSPARENTE)

        pantalla.color_texto(*C_TITULO, 1.0)
        pantalla.estilo_texto(*E_TITULO)
        pantalla.texto(*P_TITULO, M_TITULO)

        # Times and score
        pantalla.estilo_texto(*E_NORMAL)
        pantalla.texto(X_TIEMPO1, Y_TIEMPO, M_TIEMPO_DE)
        pantalla.texto(X_TIEMPO1 + 8, Y_TIEMPO + 2, str(self.tiempo1))
        pantalla.texto(X_TIEMPO2, Y_TIEMPO, M_TIEMPO_DE)
        pantalla.texto(X_TIEMPO2 + 8, Y_TIEMPO + 2, str(self.tiempo2))

        pantalla.estilo_texto(*E_TITULO)
        pantalla.texto(X_PUNTAJE, Y_PUNTAJE, M_PUNTAJE.format(self.puntaje))

        pantalla.estilo_texto(*E_NOMBRE)
        pantalla.color_texto(*C_NOMBRE_1, 1.0)
        pantalla.texto(
            X_TIEMPO1 + len(M_TIEMPO_DE), Y_TIEMPO, contexto.nombre_entrenador
        )
        pantalla.color_texto(*C_NOMBRE_2, 1.0)
        pantalla.texto(X_TIEMPO2 + len(M_TIEMPO_DE), Y_TIEMPO, self.nombre_cpu)

        # Retry message
        pantalla.estilo_texto(*E_NORMAL)
        if contexto.intentos_restantes > 0:
            pantalla.color_texto(*C_HAY_INTENTOS, 1.0)
            pantalla.texto(
                X_MARGEN, Y_INTENTOS, M_HAY_INTENTOS.format(contexto.intentos_restantes)
            )
        else:
            pantalla.color_texto(*C_NO_HAY_INTENTOS, 1.0)
            pantalla.texto(X_MARGEN, Y_INTENTOS, M_NO_HAY_INTENTOS)

        # Controls
        pantalla.color_texto(*C_CONTROL, 1.0)
        pantalla.estilo_texto(*E_CONTROL)
        if contexto.intentos_restantes > 0:
            pantalla.texto(X_CONTROL_1, Y_CONTROL, M_REINTENTAR)
        pantalla.texto(X_SALIR, Y_CONTROL, M_VOLVER)

        # Opening transition
        mitad = ANCHO_PANTALLA // 2
        pantalla.color_fondo(*C_NORMAL, 1.0)
        x = ease_in_out(t, 0, D_TRANSICION, 0, mitad)
        pantalla.rect(0, 0, mitad - x, ALTO_PANTALLA, " ")
        pantalla.rect(mitad + 1 + x, 0, ANCHO_PANTALLA, ALTO_PANTALLA, " ")