"""Scene names, the session-wide context and the scene interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum

from pokerush.animacion import linear
from pokerush.constantes import D_TRANSICION_FONDO, OPACIDAD_FONDO
from pokerush.pantalla import Pantalla
from pokerush.sprite import Sprite
from pokerush.tp import TP, PokemonInfo

LONGITUD_NOMBRE = 31


class NombreEscena(IntEnum):
    """Scene identifiers; CERRAR means the game must close."""

    CERRAR = -1
    SPLASH_SCREEN = 0
    ENTRENADOR = 1
    MENU_PRINCIPAL = 2
    MENU_JUEGO = 3
    PREPARACION = 4
    VERSUS = 5
    CARRERA = 6
    GANADOR = 7
    POKEDEX = 8
    INFORMACION = 9
    REGLAS = 10


class Dificultad(IntEnum):
    """Difficulty chosen before a race."""

    FACIL = 0
    MEDIO = 1
    DIFICIL = 2
    IMPOSIBLE = 3


@dataclass
class Contexto:
    """Data shared by every scene that lasts the whole session."""

    tp: TP
    sprites: dict[str, Sprite]
    pokemones: list[PokemonInfo] = field(default_factory=list)
    nombre_entrenador: str = ""
    tiempo_escena_ms: int = 0
    dificultad: Dificultad = Dificultad.FACIL
    primera_vez_en_menu: bool = True
    intentos_restantes: int = 0
    es_reintento: bool = False

    @property
    def cantidad_pokemones(self) -> int:
        """Number of Pokémon in the roster."""
        return len(self.pokemones)


def opacidad_fondo(tiempo_ms: int) -> float:
    """Background opacity of the fade shared by the menus."""
    return (
        linear(tiempo_ms, 0, D_TRANSICION_FONDO, OPACIDAD_FONDO, 100)
        - linear(
            tiempo_ms,
            D_TRANSICION_FONDO,
            2 * D_TRANSICION_FONDO,
            0,
            100 - OPACIDAD_FONDO,
        )
    ) / 100.0


class Escena(ABC):
    """A screen of the game; built from the context when it is entered.

    procesar_eventos returns the next scene; returning CERRAR ends the game
    as requested by the user. Failures raise EstadoError.
    """

    @abstractmethod
    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        """Handle a key and return the scene to show next."""

    @abstractmethod
    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        """Draw the scene for the current time."""