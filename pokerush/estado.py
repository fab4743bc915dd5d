"""Termination states of the engine and their user-facing messages."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

TEXTO_ROJO = "\x1b[31m"
TEXTO_VERDE = "\x1b[32m"
TEXTO_NORMAL = "\x1b[0m"


class Estado(IntEnum):
    """Why the game ended."""

    FINALIZADO_POR_USUARIO = 0
    TERMINAL_MUY_CHICA = 1
    ERROR_MEMORIA = 2
    ERROR_STDOUT = 3
    ERROR_CREACION_JUEGO = 4
    JUEGO_INVALIDO = 5
    PUNTERO_NULL = 6
    CONFIGURACION_INVALIDA = 7
    ERROR_CREACION_TP = 8
    ERROR_ABRIR_BITMAP = 9
    ERROR_LEER_BITMAP = 10
    ERROR_BITMAP_INVALIDO = 11
    ERROR_RECORRIDO_DIRECTORIO = 12
    SENIAL_INTERRUPCION = 13
    ERROR_CREACION_ESCENA = 14


_MENSAJES = {
    Estado.FINALIZADO_POR_USUARIO: "Finalizado correctamente.",
    Estado.TERMINAL_MUY_CHICA: (
        "Terminal muy pequeña, agrandala (o hacé zoom hacia afuera) "
        "y probá de nuevo."
    ),
    Estado.ERROR_MEMORIA: "Error al malloc'ear! Hay poca memoria disponible?",
    Estado.ERROR_STDOUT: "Error al configurar stdout.",
    Estado.ERROR_CREACION_JUEGO: "Error al crear el juego :(",
    Estado.ERROR_CREACION_ESCENA: "Error al crear una escena del juego :(",
    Estado.JUEGO_INVALIDO: "El juego cargado no es válido.",
    Estado.PUNTERO_NULL: "Hay algún puntero importante en NULL.",
    Estado.CONFIGURACION_INVALIDA: "La configuración pasada es inválida.",
    Estado.ERROR_CREACION_TP: (
        "Error al crear el TP. Asegurate de que el archivo de "
        "pokemones.csv sea el correcto."
    ),
    Estado.ERROR_ABRIR_BITMAP: "Error al abrir una imagen Bitmap.",
    Estado.ERROR_LEER_BITMAP: "Error al leer una imagen Bitmap.",
    Estado.ERROR_BITMAP_INVALIDO: "Error al leer una imagen Bitmap.",
    Estado.ERROR_RECORRIDO_DIRECTORIO: "Error al recorrer archivos.",
    Estado.SENIAL_INTERRUPCION: "Señal de interrupción recibida.",
}


def mensaje_estado(estado: Estado) -> str:
    """The friendly message for a state."""
    return _MENSAJES[Estado(estado)]


def mostrar_estado(estado: Estado, salida: TextIO | None = None) -> None:
    """Write the coloured message for a state to salida (stdout by default)."""
    if salida is None:
        salida = sys.stdout
    estado = Estado(estado)
    if estado is Estado.FINALIZADO_POR_USUARIO:
        salida.write(f"{TEXTO_VERDE}{mensaje_estado(estado)}\n{TEXTO_NORMAL}")
    else:
        salida.write(
            f"{TEXTO_ROJO}Error: {mensaje_estado(estado)}\n{TEXTO_NORMAL}"
        )
    salida.flush()


class EstadoError(Exception):
    """Raised when the engine or the game fails; carries the Estado."""

    def __init__(self, estado: Estado, mensaje: str | None = None) -> None:
        self.estado = Estado(estado)
        super().__init__(mensaje if mensaje is not None else mensaje_estado(estado))