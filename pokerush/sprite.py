"""Sprites read from uncompressed 24-bit BMP images."""

from __future__ import annotations

import logging
import os
import struct
from dataclasses import dataclass
from typing import BinaryIO

from pokerush.color import Color
from pokerush.estado import Estado, EstadoError

logger = logging.getLogger(__name__)

FIRMA_BMP = 0x4D42
PANTALLA_VERDE = Color(0, 255, 0)
PROPORCION_X_Y = 2

_BMP_HEADER = struct.Struct("<HIHHI")
_DIB_HEADER = struct.Struct("<IiiHHIIiiII")
_PIXEL = struct.Struct("<BBB")


@dataclass(frozen=True)
class Sprite:
    """A grid of background colours; None marks a transparent cell."""

    ancho: int
    alto: int
    colores: tuple[Color | None, ...]

    def __post_init__(self) -> None:
        if len(self.colores) != self.ancho * self.alto:
            raise ValueError("la cantidad de colores no coincide con el tamaño")

    @property
    def mascara(self) -> tuple[bool, ...]:
        """True for every visible cell."""
        return tuple(color is not None for color in self.colores)

    def color_en(self, x: int, y: int) -> Color | None:
        """Colour of the cell at (x, y), None if transparent."""
        if not (0 <= x < self.ancho and 0 <= y < self.alto):
            raise IndexError(f"posición fuera del sprite: ({x}, {y})")
        return self.colores[y * self.ancho + x]


def _leer_exacto(archivo: BinaryIO, tamanio: int) -> bytes:
    datos = archivo.read(tamanio)
    if len(datos) != tamanio:
        raise EstadoError(Estado.ERROR_LEER_BITMAP)
    return datos


def leer_sprite(archivo: BinaryIO) -> Sprite:
    """Build a sprite from a 24-bit BMP; pure green becomes transparent.

    Each pixel is doubled horizontally so it looks square on a terminal.
    Raises EstadoError on a short read or an unsupported image.
    """
    firma, _, _, _, offset_pixeles = _BMP_HEADER.unpack(
        _leer_exacto(archivo, _BMP_HEADER.size)
    )
    (_, ancho, alto, _, bits_por_pixel, compresion, *_) = _DIB_HEADER.unpack(
        _leer_exacto(archivo, _DIB_HEADER.size)
    )

    if firma != FIRMA_BMP or compresion != 0 or bits_por_pixel != 24 or ancho < 0:
        raise EstadoError(Estado.ERROR_BITMAP_INVALIDO)

    logger.debug("Encabezado válido. Dimensiones: %d x %d", ancho, alto)
    alto = abs(alto)

    archivo.seek(offset_pixeles)
    bytes_fila = (ancho * _PIXEL.size * 8 + 31) // 32 * 4
    bytes_padding = bytes_fila - ancho * _PIXEL.size

    filas = []
    for _ in range(alto):
        filas.append(_leer_exacto(archivo, ancho * _PIXEL.size))
        archivo.seek(bytes_padding, os.SEEK_CUR)
    # Rows are stored bottom-up.
    filas.reverse()

    colores: list[Color | None] = []
    for fila in filas:
        for b, g, r in _PIXEL.iter_unpack(fila):
            color = Color(r, g, b)
            visible = None if color == PANTALLA_VERDE else color
            colores.extend([visible] * PROPORCION_X_Y)

    logger.debug("Lectura exitosa.")
    return Sprite(PROPORCION_X_Y * ancho, alto, tuple(colores))