"""The Pokerush game: scene switching, shared context and entry point."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Callable, Sequence

from pokerush.carrera import Carrera
from pokerush.constantes import (
    ALTO_PANTALLA,
    ANCHO_PANTALLA,
    B_PRINCIPAL,
    C_CONTROL,
    C_NORMAL,
    C_TITULO,
    C_TRANSPARENTE,
    E_CONTROL,
    E_NORMAL,
    E_TITULO,
    FRAMES_POR_SEGUNDO,
    M_VOLVER,
    P_TITULO,
    T_SALIR,
    X_MARGEN,
    X_SALIR,
    Y_CONTROL,
)
from pokerush.entrenador import Entrenador
from pokerush.escena import Contexto, Escena, NombreEscena, opacidad_fondo
from pokerush.estado import Estado, EstadoError, mostrar_estado
from pokerush.ganador import Ganador
from pokerush.menu_juego import MenuJuego
from pokerush.menu_principal import MenuPrincipal
from pokerush.motor import Juego, MotorConfig, ejecutar_juego
from pokerush.pantalla import Pantalla
from pokerush.pokedex import Pokedex
from pokerush.preparacion import Preparacion
from pokerush.recursos import cargar_sprites, obtener_lista_pokemones
from pokerush.splash_screen import SplashScreen
from pokerush.tp import TP
from pokerush.versus import Versus

CSV_POKEMONES = "./pokemones_juego.csv"
DIR_SPRITES = "./sprites"


@dataclass(frozen=True)
class PrConfig:
    """Files the game is built from."""

    pokemones_csv: str | PathLike[str]
    sprites_dir: str | PathLike[str]


def _a_mayuscula(tecla: int) -> int:
    if 0 <= tecla < 128 and chr(tecla).isalpha():
        return ord(chr(tecla).upper())
    return tecla


class _PantallaDeTexto(Escena):
    """A page of static text that goes back to the main menu with Q."""

    titulo = ""
    lineas: tuple[tuple[int, str], ...] = ()
    propia = NombreEscena.INFORMACION

    def __init__(self, contexto: Contexto) -> None:
        pass

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        if _a_mayuscula(tecla) == T_SALIR:
            return NombreEscena.MENU_PRINCIPAL
        return self.propia

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        pantalla.color_fondo(*B_PRINCIPAL, opacidad_fondo(contexto.tiempo_escena_ms))
        pantalla.fondo()
        pantalla.color_fondo(*C_TRANSPARENTE)

        pantalla.color_texto(*C_TITULO, 1.0)
        pantalla.estilo_texto(*E_TITULO)
        pantalla.texto(*P_TITULO, self.titulo)

        pantalla.color_texto(*C_NORMAL, 1.0)
        pantalla.estilo_texto(*E_NORMAL)
        for y, linea in self.lineas:
            pantalla.texto(X_MARGEN, y, linea)

        pantalla.color_texto(*C_CONTROL, 1.0)
        pantalla.estilo_texto(*E_CONTROL)
        pantalla.texto(X_SALIR, Y_CONTROL, M_VOLVER)


class _Informacion(_PantallaDeTexto):
    titulo = "INFORMACION"
    propia = NombreEscena.INFORMACION
    lineas = (
        (7, "Este juego fue realizado como trabajo practico integrador"),
        (8, "de Algoritmos II."),
        (10, "Se reutilizaron trabajos practicos anteriores, asi como funciones"),
        (11, "de librerias estandar y algunas especificas al sistema"),
        (12, "operativo (se mantuvo la portabilidad a Windows y Linux)."),
        (14, "Muchas gracias por jugar!"),
    )


class _Reglas(_PantallaDeTexto):
    titulo = "TUTORIAL"
    propia = NombreEscena.REGLAS
    lineas = (
        (7, "Bienvenido/a a Pokerush!"),
        (9, "Al jugar estaras enfrentado a un oponente el cual armara"),
        (10, "una pista de obstaculos para su pokemon, al igual que vos."),
        (11, "No te confundas! Esto no es una carrera, sino un desafio"),
        (12, "amigable entre pokemones: deben llegar a la meta al mismo tiempo."),
        (14, "Cada obstaculo tiene un atributo (fuerza, inteligencia o destreza)"),
        (15, "el cual define cuan rapido tu pokemon lo atravesara."),
        (16, "Las rachas de obstaculos similares haran a tu pokemon"),
        (17, "mas efectivo contra los mismos!"),
        (19, "Revisa el pokedex para conocer mas sobre los pokemones."),
    )


ESCENAS: dict[NombreEscena, Callable[[Contexto], Escena]] = {
    NombreEscena.SPLASH_SCREEN: SplashScreen,
    NombreEscena.ENTRENADOR: Entrenador,
    NombreEscena.MENU_PRINCIPAL: MenuPrincipal,
    NombreEscena.MENU_JUEGO: MenuJuego,
    NombreEscena.PREPARACION: Preparacion,
    NombreEscena.VERSUS: Versus,
    NombreEscena.CARRERA: Carrera,
    NombreEscena.GANADOR: Ganador,
    NombreEscena.POKEDEX: Pokedex,
    NombreEscena.INFORMACION: _Informacion,
    NombreEscena.REGLAS: _Reglas,
}


class PokeRush(Juego):
    """Holds the context and the current scene, and switches between scenes."""

    def __init__(self) -> None:
        self.contexto: Contexto | None = None
        self.escenario: Escena | None = None
        self.escena_actual = NombreEscena.SPLASH_SCREEN

    def config_motor(self) -> MotorConfig:
        return MotorConfig(
            ancho_pantalla=ANCHO_PANTALLA,
            alto_pantalla=ALTO_PANTALLA,
            frames_por_segundo=FRAMES_POR_SEGUNDO,
        )

    def iniciar(self, configuracion: PrConfig | None) -> None:
        if configuracion is None:
            raise EstadoError(Estado.CONFIGURACION_INVALIDA)

        if not Path(configuracion.pokemones_csv).is_file():
            raise EstadoError(Estado.ERROR_CREACION_TP)
        try:
            tp = TP(str(configuracion.pokemones_csv))
        except EstadoError:
            raise
        except (OSError, ValueError) as error:
            raise EstadoError(Estado.ERROR_CREACION_TP) from error

        pokemones = obtener_lista_pokemones(tp)
        sprites = cargar_sprites(configuracion.sprites_dir)

        contexto = Contexto(tp=tp, sprites=sprites, pokemones=pokemones)
        escenario = SplashScreen(contexto)

        self.contexto = contexto
        self.escenario = escenario
        self.escena_actual = NombreEscena.SPLASH_SCREEN

    def _contexto(self) -> Contexto:
        if self.contexto is None:
            raise RuntimeError("el juego no fue iniciado")
        return self.contexto

    def procesar_eventos(self, tecla: int, delta_tiempo_ms: int) -> Estado | None:
        contexto = self._contexto()
        if self.escenario is None:
            return Estado.ERROR_CREACION_ESCENA

        contexto.tiempo_escena_ms += delta_tiempo_ms
        nuevo = self.escenario.procesar_eventos(tecla, contexto)
        if nuevo == self.escena_actual:
            return None

        self.escenario = None
        if nuevo == NombreEscena.CERRAR:
            return Estado.FINALIZADO_POR_USUARIO

        contexto.tiempo_escena_ms = 0
        self.escena_actual = nuevo
        try:
            self.escenario = ESCENAS[nuevo](contexto)
        except EstadoError:
            return Estado.ERROR_CREACION_ESCENA
        return None

    def dibujar_graficos(self, pantalla: Pantalla) -> None:
        contexto = self._contexto()
        if self.escenario is not None:
            self.escenario.dibujar_graficos(pantalla, contexto)

    def finalizar(self) -> None:
        self.escenario = None
        self.contexto = None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game and return the final state as the exit code."""
    parser = argparse.ArgumentParser(prog="pokerush")
    parser.add_argument("--pokemones", default=CSV_POKEMONES)
    parser.add_argument("--sprites", default=DIR_SPRITES)
    args = parser.parse_args(argv)

    config = PrConfig(pokemones_csv=args.pokemones, sprites_dir=args.sprites)
    try:
        estado = ejecutar_juego(PokeRush(), config)
    except EstadoError as error:
        estado = error.estado

    mostrar_estado(estado, sys.stdout)
    return int(estado)


if __name__ == "__main__":
    sys.exit(main())