"""A player's choice of Pokémon and obstacle track before a race."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from pokerush.tp import TP, Jugador, Obstaculo, PokemonInfo

OBSTACULOS_FACIL = 3
OBSTACULOS_MEDIO = 5
OBSTACULOS_DIFICIL = 7
OBSTACULOS_IMPOSIBLE = 9
NUM_ATRIBUTOS = 3

_ORDEN_AZAR = (Obstaculo.FUERZA, Obstaculo.INTELIGENCIA, Obstaculo.DESTREZA)


def _ocultos(ocultar: bool) -> list[bool]:
    return [ocultar and i % 2 != 0 for i in range(OBSTACULOS_IMPOSIBLE)]


@dataclass
class Seleccion:
    """Chosen Pokémon index plus a fixed set of obstacle slots.

    There are always OBSTACULOS_IMPOSIBLE slots; only the activated ones
    make up the track.
    """

    pokemon_idx: int = 0
    cantidad_obstaculos: int = 0
    obstaculos: list[Obstaculo] = field(
        default_factory=lambda: [Obstaculo.FUERZA] * OBSTACULOS_IMPOSIBLE
    )
    obstaculos_activados: list[bool] = field(
        default_factory=lambda: [False] * OBSTACULOS_IMPOSIBLE
    )
    ocultos: list[bool] = field(default_factory=lambda: _ocultos(False))

    def __post_init__(self) -> None:
        for nombre in ("obstaculos", "obstaculos_activados", "ocultos"):
            if len(getattr(self, nombre)) != OBSTACULOS_IMPOSIBLE:
                raise ValueError(f"{nombre} debe tener {OBSTACULOS_IMPOSIBLE} elementos")

    def es_valida(self) -> bool:
        """True when at least one obstacle is activated."""
        return any(self.obstaculos_activados)


def seleccion_azar(
    cantidad_pokemones: int,
    cantidad_obstaculos: int,
    ocultar: bool,
    rng: random.Random | None = None,
) -> Seleccion:
    """A random Pokémon and a random track of cantidad_obstaculos obstacles."""
    if rng is None:
        rng = random.Random()
    pokemon_idx = rng.randrange(cantidad_pokemones)
    obstaculos = [rng.choice(_ORDEN_AZAR) for _ in range(OBSTACULOS_IMPOSIBLE)]
    return Seleccion(
        pokemon_idx=pokemon_idx,
        cantidad_obstaculos=cantidad_obstaculos,
        obstaculos=obstaculos,
        obstaculos_activados=[i < cantidad_obstaculos for i in range(OBSTACULOS_IMPOSIBLE)],
        ocultos=_ocultos(ocultar),
    )


def seleccion_reintento(
    tp: TP, pokemones: Sequence[PokemonInfo], jugador: Jugador, ocultar: bool
) -> Seleccion:
    """The choice previously stored in the TP for a player.

    Raises ValueError if the player's Pokémon is not in pokemones or the
    stored track is longer than the available slots.
    """
    pokemon = tp.pokemon_seleccionado(jugador)
    indices = [i for i, candidato in enumerate(pokemones) if candidato == pokemon]
    if pokemon is None or not indices:
        raise ValueError("el jugador no tiene un pokemon de la lista seleccionado")

    letras = tp.obstaculos_pista(jugador)
    if len(letras) > OBSTACULOS_IMPOSIBLE:
        raise ValueError("la pista guardada tiene demasiados obstáculos")

    cantidad = len(letras)
    obstaculos = [Obstaculo.desde_letra(letra) for letra in letras]
    obstaculos += [Obstaculo.FUERZA] * (OBSTACULOS_IMPOSIBLE - cantidad)
    return Seleccion(
        pokemon_idx=indices[-1],
        cantidad_obstaculos=cantidad,
        obstaculos=obstaculos,
        obstaculos_activados=[i < cantidad for i in range(OBSTACULOS_IMPOSIBLE)],
        ocultos=_ocultos(ocultar),
    )


def guardar_seleccion_en_tp(
    tp: TP,
    pokemones: Sequence[PokemonInfo],
    seleccion1: Seleccion,
    seleccion2: Seleccion,
) -> None:
    """Store both players' Pokémon and tracks in the TP."""
    tp.seleccionar_pokemon(Jugador.JUGADOR_1, pokemones[seleccion1.pokemon_idx].nombre)
    tp.seleccionar_pokemon(Jugador.JUGADOR_2, pokemones[seleccion2.pokemon_idx].nombre)

    for i, (obstaculo, activado) in enumerate(
        zip(seleccion1.obstaculos, seleccion1.obstaculos_activados)
    ):
        if activado:
            tp.agregar_obstaculo(Jugador.JUGADOR_1, obstaculo, i)
    for i, obstaculo in enumerate(seleccion2.obstaculos[: seleccion2.cantidad_obstaculos]):
        tp.agregar_obstaculo(Jugador.JUGADOR_2, obstaculo, i)