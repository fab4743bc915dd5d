"""Scene where the player types the trainer's name."""

from __future__ import annotations

from pokerush.animacion import parpadeo
from pokerush.constantes import (
    B_INICIAL,
    C_CONTROL,
    C_NOMBRE_1,
    C_NORMAL,
    C_TITULO,
    C_TRANSPARENTE,
    E_CONTROL,
    E_NOMBRE,
    E_NORMAL,
    E_TITULO,
    M_ENTER,
    P_TITULO,
    X_CONTROL_1,
    X_MARGEN,
    Y_CONTROL,
)
from pokerush.entrada import BACKSPACE, LINEFEED
from pokerush.escena import (
    LONGITUD_NOMBRE,
    Contexto,
    Escena,
    NombreEscena,
    opacidad_fondo,
)
from pokerush.pantalla import Pantalla

D_CURSOR_TEXTO = 500
M_TITULO = "ENTRENADOR/A"
M_INSTRUCCION = "Escribi tu nombre:"
Y_INSTRUCCION = 10
Y_SEPARACION = 2
P_SPRITE = (50, 5)


def _es_alfanumerico(tecla: int) -> bool:
    return 0 <= tecla < 128 and chr(tecla).isalnum()


class Entrenador(Escena):
    """Lets the player write a name of up to LONGITUD_NOMBRE - 1 characters."""

    def __init__(self, contexto: Contexto) -> None:
        self.letra_actual = 0
        self.sprite = contexto.sprites.get("jugador")

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        nombre = contexto.nombre_entrenador
        letra = self.letra_actual

        if _es_alfanumerico(tecla) and letra < LONGITUD_NOMBRE - 1:
            contexto.nombre_entrenador = nombre[:letra] + chr(tecla) + nombre[letra + 1 :]
            self.letra_actual += 1
        elif tecla == BACKSPACE and letra > 0:
            self.letra_actual -= 1
            contexto.nombre_entrenador = nombre[: self.letra_actual]
        elif tecla == LINEFEED and letra > 0:
            return NombreEscena.MENU_PRINCIPAL

        return NombreEscena.ENTRENADOR

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        t = contexto.tiempo_escena_ms

        pantalla.color_fondo(*B_INICIAL, opacidad_fondo(t))
        pantalla.fondo()

        pantalla.color_fondo(*C_TRANSPARENTE)
        pantalla.color_texto(*C_TITULO, 1.0)
        pantalla.estilo_texto(*E_TITULO)
        pantalla.texto(*P_TITULO, M_TITULO)

        pantalla.color_texto(*C_NORMAL, 1.0)
        pantalla.estilo_texto(*E_NORMAL)
        pantalla.texto(X_MARGEN, Y_INSTRUCCION, M_INSTRUCCION)

        y_nombre = Y_INSTRUCCION + Y_SEPARACION
        pantalla.color_texto(*C_NOMBRE_1, 1.0)
        pantalla.estilo_texto(*E_NOMBRE)
        pantalla.texto(X_MARGEN, y_nombre, contexto.nombre_entrenador)
        if parpadeo(t, D_CURSOR_TEXTO, False, True):
            pantalla.texto(X_MARGEN + self.letra_actual, y_nombre, "_")

        pantalla.sprite(*P_SPRITE, self.sprite, 1.0)

        if self.letra_actual > 0:
            pantalla.estilo_texto(*E_CONTROL)
            pantalla.color_texto(*C_CONTROL, 1.0)
            pantalla.texto(X_CONTROL_1, Y_CONTROL, M_ENTER)