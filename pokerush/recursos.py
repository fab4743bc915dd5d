"""Loading of the game's sprites and Pokémon list."""

from __future__ import annotations

import logging
import os
from os import PathLike

from pokerush.estado import Estado, EstadoError
from pokerush.sprite import Sprite, leer_sprite
from pokerush.tp import TP, PokemonInfo

logger = logging.getLogger(__name__)

LONGITUD_NOMBRE_ARCHIVO = 1023


def cargar_sprites(directorio: str | PathLike[str]) -> dict[str, Sprite]:
    """Read every BMP file in a directory, keyed by name without extension.

    Files that are not valid sprites are skipped. Raises EstadoError if the
    directory cannot be read.
    """
    try:
        entradas = sorted(os.scandir(directorio), key=lambda e: e.name)
    except OSError as error:
        raise EstadoError(Estado.ERROR_RECORRIDO_DIRECTORIO) from error

    sprites: dict[str, Sprite] = {}
    for entrada in entradas:
        try:
            if entrada.is_dir():
                continue
        except OSError:
            continue

        nombre = entrada.name.split(".", 1)[0]
        if len(nombre) > LONGITUD_NOMBRE_ARCHIVO:
            continue

        logger.debug("Añadiendo: %s", entrada.name)
        try:
            with open(entrada.path, "rb") as archivo:
                sprite = leer_sprite(archivo)
        except (OSError, EstadoError) as error:
            logger.debug("  No se pudo crear el sprite: %s", error)
            continue
        sprites[nombre] = sprite

    return sprites


def obtener_lista_pokemones(tp: TP) -> list[PokemonInfo]:
    """Every Pokémon of the TP in alphabetical order.

    Must be called before any player picks a Pokémon; raises EstadoError
    otherwise.
    """
    nombres_juntos = tp.nombres_disponibles()
    nombres = nombres_juntos.split(",") if nombres_juntos else []
    if len(nombres) != tp.cantidad_pokemon():
        raise EstadoError(Estado.ERROR_CREACION_JUEGO)

    pokemones = []
    for nombre in nombres:
        pokemon = tp.buscar_pokemon(nombre)
        if pokemon is None:
            raise EstadoError(Estado.ERROR_CREACION_JUEGO)
        pokemones.append(pokemon)
    return pokemones