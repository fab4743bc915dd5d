"""The terminal as a grid of coloured character cells."""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, replace
from typing import TextIO

from pokerush.color import NEGRO, Color
from pokerush.estado import Estado, EstadoError
from pokerush.sprite import Sprite

ESC = "\x1b["
BACKGROUND_RGB_PREFIX = "48;2;"
FOREGROUND_RGB_PREFIX = "38;2;"
RESET_COLORES = "0m"
ENCENDER_NEGRITA = "1m"
RESETEAR_NEGRITA = "22m"
ENCENDER_ITALICO = "3m"
RESETEAR_ITALICO = "23m"
ENCENDER_SUBRAYO = "4m"
RESETEAR_SUBRAYO = "24m"
BORRAR_TODO = "2J"
HOME = "H"
OCULTAR_CURSOR = "?25l"
MOSTRAR_CURSOR = "?25h"

LONGITUD_MAXIMA_TEXTO = 127


@dataclass(slots=True)
class _Celda:
    caracter: str = " "
    fondo: Color = NEGRO
    texto: Color = NEGRO
    negrita: bool = False
    subrayado: bool = False
    italico: bool = False


@dataclass
class _Paleta:
    fondo: Color = NEGRO
    opacidad_fondo: float = 1.0
    texto: Color = NEGRO
    opacidad_texto: float = 1.0
    negrita: bool = False
    subrayado: bool = False
    italico: bool = False


def dimensiones_terminal() -> tuple[int, int]:
    """Terminal size as (columns, rows)."""
    try:
        tamanio = os.get_terminal_size(sys.stdin.fileno())
    except (OSError, ValueError, AttributeError):
        tamanio = shutil.get_terminal_size()
    return tamanio.columns, tamanio.lines


class Pantalla:
    """A centred viewport on the terminal that is drawn frame by frame."""

    def __init__(
        self,
        ancho: int,
        alto: int,
        salida: TextIO | None = None,
        dimensiones: tuple[int, int] | None = None,
    ) -> None:
        ancho_terminal, alto_terminal = (
            dimensiones if dimensiones is not None else dimensiones_terminal()
        )
        if ancho_terminal < ancho or alto_terminal < alto:
            raise EstadoError(Estado.TERMINAL_MUY_CHICA)

        self.ancho = ancho
        self.alto = alto
        self.x_origen = (ancho_terminal - ancho) // 2
        self.y_origen = (alto_terminal - alto) // 2
        self._salida = salida if salida is not None else sys.stdout
        self._celdas = [_Celda() for _ in range(ancho * alto)]
        self._paleta = _Paleta()
        self._cerrada = False

        self._emitir(ESC + OCULTAR_CURSOR + ESC + BORRAR_TODO)

    def __enter__(self) -> "Pantalla":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cerrar()

    def _emitir(self, texto: str) -> None:
        self._salida.write(texto)
        self._salida.flush()

    def _escribir(self, x: int, y: int, caracter: str) -> None:
        if not (0 <= x < self.ancho and 0 <= y < self.alto):
            return
        celda = self._celdas[y * self.ancho + x]
        paleta = self._paleta
        celda.caracter = caracter
        celda.negrita = paleta.negrita
        celda.subrayado = paleta.subrayado
        celda.italico = paleta.italico
        celda.fondo = paleta.fondo.mezcla(celda.fondo, paleta.opacidad_fondo)
        celda.texto = paleta.texto.mezcla(celda.fondo, paleta.opacidad_texto)

    def color_fondo(self, r: int, g: int, b: int, opacidad: float) -> None:
        """Background colour used by the following drawing calls."""
        self._paleta.fondo = Color(r, g, b)
        self._paleta.opacidad_fondo = opacidad

    def color_texto(self, r: int, g: int, b: int, opacidad: float) -> None:
        """Foreground colour used by the following drawing calls."""
        self._paleta.texto = Color(r, g, b)
        self._paleta.opacidad_texto = opacidad

    def estilo_texto(self, negrita: bool, subrayado: bool, italico: bool) -> None:
        """Text style used by the following drawing calls."""
        self._paleta.negrita = negrita
        self._paleta.subrayado = subrayado
        self._paleta.italico = italico

    def fondo(self) -> None:
        """Clear every cell, painting it with the current background."""
        for y in range(self.alto):
            for x in range(self.ancho):
                self._escribir(x, y, " ")

    def texto(self, x: int, y: int, texto: str) -> None:
        """Write text starting at (x, y); long texts are cut short."""
        if not 0 <= y < self.alto:
            return
        for i, caracter in enumerate(str(texto)[: LONGITUD_MAXIMA_TEXTO - 1]):
            self._escribir(x + i, y, caracter)

    def rect(
        self, x: int, y: int, ancho: int, alto: int, borde: str
    ) -> None:
        """Rectangle with its top-left corner at (x, y), edged with borde."""
        for j in range(alto):
            for i in range(ancho):
                en_borde = i in (0, ancho - 1) or j in (0, alto - 1)
                self._escribir(x + i, y + j, borde if en_borde else " ")

    def sprite(
        self, x: int, y: int, sprite: Sprite | None, opacidad: float
    ) -> None:
        """Paint the visible cells of a sprite with the given opacity."""
        if sprite is None:
            return
        original = replace(self._paleta)
        for j in range(sprite.alto):
            for i in range(sprite.ancho):
                color = sprite.color_en(i, j)
                if color is None:
                    continue
                self._paleta.opacidad_fondo = opacidad
                self._paleta.fondo = color
                self._escribir(x + i, y + j, " ")
        self._paleta = original

    def celda(self, x: int, y: int) -> _Celda:
        """A copy of the cell at (x, y)."""
        if not (0 <= x < self.ancho and 0 <= y < self.alto):
            raise IndexError(f"posición fuera de la pantalla: ({x}, {y})")
        return replace(self._celdas[y * self.ancho + x])

    def actualizar_frame(self) -> None:
        """Send the current frame to the terminal, emitting only style changes."""
        if not self._celdas:
            self._salida.flush()
            return

        partes: list[str] = []
        anterior = self._celdas[0]
        primero = True
        for y in range(self.alto):
            partes.append(f"{ESC}{self.y_origen + y};{self.x_origen}H")
            for celda in self._celdas[y * self.ancho : (y + 1) * self.ancho]:
                if primero or celda.negrita != anterior.negrita:
                    partes.append(
                        ESC + (ENCENDER_NEGRITA if celda.negrita else RESETEAR_NEGRITA)
                    )
                if primero or celda.subrayado != anterior.subrayado:
                    partes.append(
                        ESC
                        + (ENCENDER_SUBRAYO if celda.subrayado else RESETEAR_SUBRAYO)
                    )
                if primero or celda.italico != anterior.italico:
                    partes.append(
                        ESC + (ENCENDER_ITALICO if celda.italico else RESETEAR_ITALICO)
                    )
                if primero or celda.fondo != anterior.fondo:
                    r, g, b = celda.fondo
                    partes.append(f"{ESC}{BACKGROUND_RGB_PREFIX}{r};{g};{b}m")
                if primero or celda.texto != anterior.texto:
                    r, g, b = celda.texto
                    partes.append(f"{ESC}{FOREGROUND_RGB_PREFIX}{r};{g};{b}m")
                partes.append(celda.caracter)
                primero = False
                anterior = celda

        self._emitir("".join(partes))

    def cerrar(self) -> None:
        """Restore the cursor, colours and contents of the terminal."""
        if self._cerrada:
            return
        self._cerrada = True
        self._emitir(
            ESC + MOSTRAR_CURSOR + ESC + RESET_COLORES + ESC + BORRAR_TODO + ESC + HOME
        )