"""Choice of Pokémon and obstacles before a race."""

from __future__ import annotations

from dataclasses import dataclass

from pokerush.color import Color
from pokerush.constantes import (
    ANCHO_PANTALLA,
    B_PRINCIPAL,
    B_SELECCION,
    C_CONTROL,
    C_DESTREZA,
    C_FUERZA,
    C_INTELIGENCIA,
    C_NOMBRE_1,
    C_NOMBRE_2,
    C_NORMAL,
    C_SELECCION,
    C_TRANSPARENTE,
    E_NOMBRE,
    E_NORMAL,
    M_ABAJO,
    M_ARRIBA,
    M_DERECHA,
    M_DIFICIL,
    M_ENTER,
    M_FACIL,
    M_IMPOSIBLE,
    M_IZQUIERDA,
    M_MEDIO,
    M_VERSUS,
    X_CONTROL_1,
    X_CONTROL_2,
    X_CONTROL_3,
    X_CONTROL_4,
    X_CONTROL_5,
    X_VERSUS,
    Y_CONTROL,
    Y_NOMBRE_START,
)
from pokerush.entrada import (
    FLECHA_ABAJO,
    FLECHA_ARRIBA,
    FLECHA_DERECHA,
    FLECHA_IZQUIERDA,
    LINEFEED,
)
from pokerush.escena import Contexto, Dificultad, Escena, NombreEscena, opacidad_fondo
from pokerush.estado import Estado, EstadoError
from pokerush.pantalla import Pantalla
from pokerush.seleccion import (
    NUM_ATRIBUTOS,
    OBSTACULOS_DIFICIL,
    OBSTACULOS_FACIL,
    OBSTACULOS_IMPOSIBLE,
    OBSTACULOS_MEDIO,
    Seleccion,
    guardar_seleccion_en_tp,
    seleccion_azar,
    seleccion_reintento,
)
from pokerush.tp import Jugador, Obstaculo

Y_SELECCION = 5
S_LEFT = "<"
S_RIGHT = ">"
M_ACLARACION = (
    "Recorda que el objetivo es que los pokemones terminen al mismo tiempo"
)
OBSTACULOS_REINTENTO_FALLIDO = 3

_OPONENTES = {
    Dificultad.FACIL: (OBSTACULOS_FACIL, M_FACIL),
    Dificultad.MEDIO: (OBSTACULOS_MEDIO, M_MEDIO),
    Dificultad.DIFICIL: (OBSTACULOS_DIFICIL, M_DIFICIL),
    Dificultad.IMPOSIBLE: (OBSTACULOS_IMPOSIBLE, M_IMPOSIBLE),
}

_COLORES = {
    Obstaculo.FUERZA: C_FUERZA,
    Obstaculo.DESTREZA: C_DESTREZA,
    Obstaculo.INTELIGENCIA: C_INTELIGENCIA,
}


@dataclass(frozen=True)
class _Atributo:
    letra: str
    color: Color


ATRIBUTOS = tuple(_Atributo(o.letra, Color(*_COLORES[o])) for o in Obstaculo)


class Preparacion(Escena):
    """The player picks a Pokémon and builds a track against the CPU's."""

    def __init__(self, contexto: Contexto) -> None:
        cantidad = contexto.cantidad_pokemones
        if cantidad < 2:
            raise EstadoError(
                Estado.ERROR_CREACION_ESCENA, "se necesitan al menos 2 pokemones"
            )

        self.x_nombre1 = ANCHO_PANTALLA // 4 - len(contexto.nombre_entrenador) // 2
        self.x_nombre2 = ANCHO_PANTALLA * 3 // 4 - 2
        obstaculos_cpu, self.nombre2 = _OPONENTES[Dificultad(contexto.dificultad)]
        self.atributos = ATRIBUTOS

        if contexto.es_reintento:
            self.seleccion2 = self._reintento(contexto, Jugador.JUGADOR_2, True)
            self.seleccion1 = self._reintento(contexto, Jugador.JUGADOR_1, False)
        else:
            self.seleccion2 = seleccion_azar(cantidad, obstaculos_cpu, True)
            self.seleccion1 = seleccion_azar(cantidad, obstaculos_cpu, False)

        self.modificando = 0 if contexto.es_reintento else -1

        if self.seleccion1.pokemon_idx == self.seleccion2.pokemon_idx:
            self.seleccion1.pokemon_idx = (self.seleccion1.pokemon_idx + 1) % cantidad

        contexto.tp.limpiar_pista(Jugador.JUGADOR_1)
        contexto.tp.limpiar_pista(Jugador.JUGADOR_2)

    @staticmethod
    def _reintento(contexto: Contexto, jugador: Jugador, ocultar: bool) -> Seleccion:
        try:
            return seleccion_reintento(contexto.tp, contexto.pokemones, jugador, ocultar)
        except ValueError:
            # Fall back to a fresh configuration rather than failing.
            return seleccion_azar(
                contexto.cantidad_pokemones, OBSTACULOS_REINTENTO_FALLIDO, False
            )

    def _siguiente(self, contexto: Contexto) -> None:
        seleccion = self.seleccion1
        m = self.modificando
        if m == -1:
            n = contexto.cantidad_pokemones
            paso = 2 if (seleccion.pokemon_idx + 1) % n == self.seleccion2.pokemon_idx else 1
            seleccion.pokemon_idx = (seleccion.pokemon_idx + paso) % n
        elif not seleccion.obstaculos_activados[m]:
            seleccion.obstaculos[m] = Obstaculo(0)
            seleccion.obstaculos_activados[m] = True
        elif seleccion.obstaculos[m] == NUM_ATRIBUTOS - 1:
            seleccion.obstaculos_activados[m] = False
        else:
            seleccion.obstaculos[m] = Obstaculo(seleccion.obstaculos[m] + 1)

    def _anterior(self, contexto: Contexto) -> None:
        seleccion = self.seleccion1
        m = self.modificando
        if m == -1:
            n = contexto.cantidad_pokemones
            paso = 2 if seleccion.pokemon_idx == (self.seleccion2.pokemon_idx + 1) % n else 1
            seleccion.pokemon_idx = (seleccion.pokemon_idx + n - paso) % n
        elif not seleccion.obstaculos_activados[m]:
            seleccion.obstaculos[m] = Obstaculo(NUM_ATRIBUTOS - 1)
            seleccion.obstaculos_activados[m] = True
        elif seleccion.obstaculos[m] == 0:
            seleccion.obstaculos_activados[m] = False
        else:
            seleccion.obstaculos[m] = Obstaculo(seleccion.obstaculos[m] - 1)

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        if tecla == FLECHA_ABAJO:
            if self.modificando < OBSTACULOS_IMPOSIBLE - 1:
                self.modificando += 1
        elif tecla == FLECHA_ARRIBA:
            if self.modificando > -1:
                self.modificando -= 1
                # The Pokémon cannot be changed on a retry.
                if contexto.es_reintento and self.modificando == -1:
                    self.modificando = 0
        elif tecla == FLECHA_DERECHA:
            self._siguiente(contexto)
        elif tecla == FLECHA_IZQUIERDA:
            self._anterior(contexto)
        elif tecla == LINEFEED and self.seleccion1.es_valida():
            guardar_seleccion_en_tp(
                contexto.tp, contexto.pokemones, self.seleccion1, self.seleccion2
            )
            return NombreEscena.VERSUS

        return NombreEscena.PREPARACION

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        pantalla.color_fondo(*B_PRINCIPAL, opacidad_fondo(contexto.tiempo_escena_ms))
        pantalla.fondo()

        # Names
        pantalla.estilo_texto(*E_NOMBRE)
        pantalla.color_texto(*C_NOMBRE_1, 1.0)
        pantalla.texto(self.x_nombre1, Y_NOMBRE_START, contexto.nombre_entrenador)
        pantalla.color_texto(*C_NOMBRE_2, 1.0)
        pantalla.texto(self.x_nombre2, Y_NOMBRE_START, self.nombre2)
        pantalla.estilo_texto(*E_NORMAL)
        pantalla.color_texto(*C_NORMAL, 1.0)
        pantalla.texto(X_VERSUS, Y_NOMBRE_START, M_VERSUS)

        # Player's Pokémon
        pokemon = contexto.pokemones[self.seleccion1.pokemon_idx]
        if self.modificando == -1:
            pantalla.color_texto(*C_SELECCION, 1.0)
            pantalla.color_fondo(*B_SELECCION, 1.0)
        else:
            pantalla.color_texto(*C_NORMAL, 1.0)
        pantalla.texto(self.x_nombre1, Y_SELECCION, pokemon.nombre)
        if self.modificando == -1:
            pantalla.color_fondo(*C_TRANSPARENTE)
            pantalla.color_texto(*B_SELECCION, 1.0)
            pantalla.texto(self.x_nombre1 - 5, Y_SELECCION, f"{S_LEFT}  {S_RIGHT}")

        # Player's obstacles
        seleccion = self.seleccion1
        for i, (obstaculo, activado) in enumerate(
            zip(seleccion.obstaculos, seleccion.obstaculos_activados)
        ):
            y = Y_SELECCION + 2 + 2 * i
            opacidad = 1.0 if self.modificando == i else 0.3
            for j, atributo in enumerate(self.atributos):
                if activado and int(obstaculo) == j:
                    pantalla.color_fondo(*atributo.color, 1.0)
                    pantalla.color_texto(*C_SELECCION, 1.0)
                else:
                    pantalla.color_fondo(*C_TRANSPARENTE)
                    pantalla.color_texto(*atributo.color, opacidad)
                pantalla.texto(self.x_nombre1 + 2 * j, y, atributo.letra)

            if self.modificando == i:
                pantalla.color_fondo(*C_TRANSPARENTE)
                pantalla.color_texto(*B_SELECCION, 1.0)
                pantalla.texto(self.x_nombre1 - 2, y, "<")
                pantalla.texto(self.x_nombre1 + 6, y, ">")

        pantalla.estilo_texto(*E_NORMAL)
        pantalla.color_fondo(*C_TRANSPARENTE)
        pantalla.color_texto(*C_NORMAL, 1.0)
        pantalla.texto(10, 25, M_ACLARACION)

        # Opponent
        rival = self.seleccion2
        pantalla.texto(
            self.x_nombre2, Y_SELECCION, contexto.pokemones[rival.pokemon_idx].nombre
        )
        for i in range(rival.cantidad_obstaculos):
            y = Y_SELECCION + 2 + 2 * i
            if rival.ocultos[i]:
                pantalla.color_texto(*C_NORMAL, 1.0)
                pantalla.texto(self.x_nombre2 + 2, y, "?")
            else:
                atributo = self.atributos[int(rival.obstaculos[i])]
                pantalla.color_texto(*atributo.color, 1.0)
                pantalla.texto(self.x_nombre2 + 2, y, atributo.letra)

        # Controls
        pantalla.color_texto(*C_CONTROL, 1.0)
        pantalla.texto(X_CONTROL_1, Y_CONTROL, M_ARRIBA)
        pantalla.texto(X_CONTROL_2, Y_CONTROL, M_ABAJO)
        pantalla.texto(X_CONTROL_3, Y_CONTROL, M_IZQUIERDA)
        pantalla.texto(X_CONTROL_4, Y_CONTROL, M_DERECHA)
        if self.seleccion1.es_valida():
            pantalla.texto(X_CONTROL_5, Y_CONTROL, M_ENTER)