"""List of every Pokémon with its sprite and attributes."""

from __future__ import annotations

from pokerush.constantes import (
    B_PRINCIPAL,
    B_SELECCION,
    C_CONTROL,
    C_DESTREZA,
    C_FUERZA,
    C_INTELIGENCIA,
    C_NORMAL,
    C_SELECCION,
    C_TITULO,
    E_CONTROL,
    E_NORMAL,
    E_TITULO,
    M_ABAJO,
    M_ARRIBA,
    M_DESTREZA,
    M_FUERZA,
    M_INTELIGENCIA,
    M_VOLVER,
    P_TITULO,
    S_OPCION,
    SPRITE_POKEMON_DEFAULT,
    T_SALIR,
    X_CONTROL_1,
    X_CONTROL_2,
    X_MARGEN,
    X_POKEMON,
    X_SALIR,
    Y_CONTROL,
    Y_POKEMON,
)
from pokerush.entrada import FLECHA_ABAJO, FLECHA_ARRIBA
from pokerush.escena import Contexto, Escena, NombreEscena, opacidad_fondo
from pokerush.pantalla import Pantalla

M_TITULO = "POKEDEX"
Y_NOMBRE_1 = 6
X_SPRITE = 50
Y_SPRITE = 2
Y_SEPARACION_ATRIBUTO = 2


def _a_mayuscula(tecla: int) -> int:
    if 0 <= tecla < 128 and chr(tecla).isalpha():
        return ord(chr(tecla).upper())
    return tecla


class Pokedex(Escena):
    """Browse the Pokémon with the arrows."""

    def __init__(self, contexto: Contexto) -> None:
        por_defecto = contexto.sprites.get(SPRITE_POKEMON_DEFAULT)
        self.sprites = [
            contexto.sprites.get(pokemon.nombre) or por_defecto
            for pokemon in contexto.pokemones
        ]
        self.seleccion = 0

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        tecla = _a_mayuscula(tecla)

        if tecla == T_SALIR:
            return NombreEscena.MENU_PRINCIPAL
        if tecla == FLECHA_ARRIBA and self.seleccion > 0:
            self.seleccion -= 1
        elif tecla == FLECHA_ABAJO and self.seleccion < contexto.cantidad_pokemones - 1:
            self.seleccion += 1

        return NombreEscena.POKEDEX

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        pantalla.color_fondo(*B_PRINCIPAL, opacidad_fondo(contexto.tiempo_escena_ms))
        pantalla.fondo()

        pantalla.color_texto(*C_TITULO, 1.0)
        pantalla.estilo_texto(*E_TITULO)
        pantalla.texto(*P_TITULO, M_TITULO)

        pantalla.color_texto(*C_NORMAL, 1.0)
        pantalla.estilo_texto(*E_NORMAL)
        for i, pokemon in enumerate(contexto.pokemones):
            y = Y_NOMBRE_1 + 2 * i
            seleccionado = self.seleccion == i
            if seleccionado:
                pantalla.color_fondo(*B_SELECCION, 1.0)
                pantalla.color_texto(*C_SELECCION, 1.0)

            pantalla.texto(X_MARGEN, y, pokemon.nombre)

            if seleccionado:
                pantalla.color_fondo(*B_PRINCIPAL, 1.0)
                pantalla.color_texto(*B_SELECCION, 1.0)
                pantalla.texto(X_MARGEN - 2, y, S_OPCION)
                pantalla.color_texto(*C_NORMAL, 1.0)

        if contexto.pokemones:
            pokemon = contexto.pokemones[self.seleccion]
            atributos = (
                (C_FUERZA, M_FUERZA, pokemon.fuerza),
                (C_DESTREZA, M_DESTREZA, pokemon.destreza),
                (C_INTELIGENCIA, M_INTELIGENCIA, pokemon.inteligencia),
            )
            y = Y_SPRITE + Y_POKEMON + Y_SEPARACION_ATRIBUTO
            for color, nombre, valor in atributos:
                pantalla.color_texto(*color, 1.0)
                pantalla.texto(X_SPRITE + 2, y, nombre)
                pantalla.texto(X_SPRITE + X_POKEMON - 4, y, str(valor))
                y += Y_SEPARACION_ATRIBUTO

            pantalla.sprite(X_SPRITE, Y_SPRITE, self.sprites[self.seleccion], 1.0)

        pantalla.color_texto(*C_CONTROL, 1.0)
        pantalla.estilo_texto(*E_CONTROL)
        pantalla.texto(X_CONTROL_1, Y_CONTROL, M_ARRIBA)
        pantalla.texto(X_CONTROL_2, Y_CONTROL, M_ABAJO)
        pantalla.texto(X_SALIR, Y_CONTROL, M_VOLVER)