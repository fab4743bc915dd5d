"""Pokémon roster loaded from a CSV file and the two players' obstacle tracks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from os import PathLike

TIEMPO_VALOR_BASE = 10
MAX_NOMBRE_POKEMON = 127

_LINEA_CSV = re.compile(
    r"([^, \t\n]{1,%d}),\s*([+-]?\d+),\s*([+-]?\d+),\s*([+-]?\d+)\s*"
    % MAX_NOMBRE_POKEMON
)

_MAYUSCULAS = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_MINUSCULAS = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class Jugador(IntEnum):
    """The two players of a race."""

    JUGADOR_1 = 0
    JUGADOR_2 = 1


class Obstaculo(IntEnum):
    """Obstacle kinds, each tied to one Pokémon attribute."""

    FUERZA = 0
    DESTREZA = 1
    INTELIGENCIA = 2

    @property
    def letra(self) -> str:
        """Single-letter identifier of the obstacle."""
        return _LETRAS[self]

    @classmethod
    def desde_letra(cls, letra: str) -> "Obstaculo":
        """Obstacle for an identifier letter; ValueError if unknown."""
        for obstaculo, identificador in _LETRAS.items():
            if identificador == letra:
                return obstaculo
        raise ValueError(f"identificador de obstáculo desconocido: {letra!r}")


_LETRAS = {
    Obstaculo.FUERZA: "F",
    Obstaculo.DESTREZA: "D",
    Obstaculo.INTELIGENCIA: "I",
}


@dataclass(frozen=True)
class PokemonInfo:
    """Name and attributes of one Pokémon."""

    nombre: str
    fuerza: int
    destreza: int
    inteligencia: int

    def atributo(self, obstaculo: Obstaculo) -> int:
        """The attribute that counts against the given obstacle."""
        if obstaculo is Obstaculo.FUERZA:
            return self.fuerza
        if obstaculo is Obstaculo.DESTREZA:
            return self.destreza
        return self.inteligencia


def normalizar_nombre(nombre: str) -> str:
    """First letter upper case and the rest lower case: "piKaCHU" -> "Pikachu"."""
    if not nombre:
        return nombre
    return nombre[0].translate(_MAYUSCULAS) + nombre[1:].translate(_MINUSCULAS)


@dataclass
class _EstadoJugador:
    pokemon: PokemonInfo | None = None
    obstaculos: list[Obstaculo] = field(default_factory=list)


def _leer_pokemones(nombre_archivo: str | PathLike[str]) -> dict[str, PokemonInfo]:
    with open(nombre_archivo, encoding="utf-8") as archivo:
        texto = archivo.read()

    pokemones: dict[str, PokemonInfo] = {}
    posicion = 0
    while posicion < len(texto):
        coincidencia = _LINEA_CSV.match(texto, posicion)
        if coincidencia is None:
            raise ValueError(
                f"línea inválida en {nombre_archivo!s} (posición {posicion})"
            )
        nombre, fuerza, destreza, inteligencia = coincidencia.groups()
        nombre = normalizar_nombre(nombre)
        pokemones[nombre] = PokemonInfo(
            nombre, int(fuerza), int(destreza), int(inteligencia)
        )
        posicion = coincidencia.end()
    return pokemones


class TP:
    """Pokémon collection plus each player's chosen Pokémon and track."""

    def __init__(self, nombre_archivo: str | PathLike[str]) -> None:
        self._pokemones = _leer_pokemones(nombre_archivo)
        self._jugadores = {
            Jugador.JUGADOR_1: _EstadoJugador(),
            Jugador.JUGADOR_2: _EstadoJugador(),
        }

    def _jugador(self, jugador: int) -> _EstadoJugador:
        return self._jugadores[Jugador(jugador)]

    def cantidad_pokemon(self) -> int:
        """Number of Pokémon loaded."""
        return len(self._pokemones)

    def buscar_pokemon(self, nombre: str) -> PokemonInfo | None:
        """Case-insensitive lookup by name; None if absent."""
        return self._pokemones.get(normalizar_nombre(nombre))

    def nombres_disponibles(self) -> str:
        """Comma-separated, sorted names not taken by either player."""
        ocupados = {
            estado.pokemon.nombre
            for estado in self._jugadores.values()
            if estado.pokemon is not None
        }
        return ",".join(
            sorted(nombre for nombre in self._pokemones if nombre not in ocupados)
        )

    def seleccionar_pokemon(self, jugador: int, nombre: str) -> bool:
        """Choose a Pokémon for a player; False if absent or taken by the rival."""
        actual = self._jugador(jugador)
        rival = self._jugador(1 - Jugador(jugador))
        pokemon = self._pokemones.get(nombre)
        if pokemon is None or pokemon is rival.pokemon:
            return False
        actual.pokemon = pokemon
        return True

    def pokemon_seleccionado(self, jugador: int) -> PokemonInfo | None:
        """The player's Pokémon, or None if none has been chosen."""
        return self._jugador(jugador).pokemon

    def agregar_obstaculo(
        self, jugador: int, obstaculo: int, posicion: int
    ) -> int:
        """Insert an obstacle (appended past the end); returns the track length."""
        if posicion < 0:
            raise ValueError("la posición no puede ser negativa")
        obstaculos = self._jugador(jugador).obstaculos
        obstaculos.insert(posicion, Obstaculo(obstaculo))
        return len(obstaculos)

    def quitar_obstaculo(self, jugador: int, posicion: int) -> int:
        """Remove the obstacle at a position (the last one past the end).

        Returns the remaining track length; IndexError if the track is empty.
        """
        if posicion < 0:
            raise ValueError("la posición no puede ser negativa")
        obstaculos = self._jugador(jugador).obstaculos
        if not obstaculos:
            raise IndexError("la pista no tiene obstáculos")
        del obstaculos[min(posicion, len(obstaculos) - 1)]
        return len(obstaculos)

    def obstaculos_pista(self, jugador: int) -> str:
        """The player's track as letters, in order."""
        return "".join(o.letra for o in self._jugador(jugador).obstaculos)

    def limpiar_pista(self, jugador: int) -> None:
        """Remove every obstacle from the player's track."""
        self._jugador(jugador).obstaculos.clear()

    def _tiempos(self, jugador: int) -> list[int] | None:
        estado = self._jugador(jugador)
        if estado.pokemon is None or not estado.obstaculos:
            return None

        tiempos = []
        anterior: Obstaculo | None = None
        valor_base = TIEMPO_VALOR_BASE
        for obstaculo in estado.obstaculos:
            if obstaculo == anterior:
                valor_base -= 1
            else:
                anterior = obstaculo
                valor_base = TIEMPO_VALOR_BASE
            tiempos.append(max(0, valor_base - estado.pokemon.atributo(obstaculo)))
        return tiempos

    def calcular_tiempo_pista(self, jugador: int) -> int:
        """Total time for the track; 0 without a Pokémon or obstacles."""
        tiempos = self._tiempos(jugador)
        return sum(tiempos) if tiempos else 0

    def tiempo_por_obstaculo(self, jugador: int) -> str | None:
        """Comma-separated time per obstacle; None without a Pokémon or obstacles."""
        tiempos = self._tiempos(jugador)
        if tiempos is None:
            return None
        return ",".join(str(t) for t in tiempos)