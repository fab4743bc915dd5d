import io

import pytest

from pokerush.constantes import M_DIFICIL, P_TITULO
from pokerush.escena import Contexto, Dificultad, NombreEscena
from pokerush.ganador import (
    M_NO_HAY_INTENTOS,
    X_MARGEN,
    Y_INTENTOS,
    Ganador,
    calcular_puntaje,
)
from pokerush.pantalla import Pantalla
from pokerush.recursos import obtener_lista_pokemones
from pokerush.tp import TP, Jugador, Obstaculo


@pytest.fixture
def contexto(tmp_path):
    archivo = tmp_path / "pokemones.csv"
    archivo.write_text("Pikachu,3,5,2\nSquirtle,2,3,4\n", encoding="utf-8")
    tp = TP(archivo)
    pokemones = obtener_lista_pokemones(tp)
    tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Pikachu")
    tp.seleccionar_pokemon(Jugador.JUGADOR_2, "Squirtle")
    tp.agregar_obstaculo(Jugador.JUGADOR_1, Obstaculo.FUERZA, 0)
    tp.agregar_obstaculo(Jugador.JUGADOR_1, Obstaculo.DESTREZA, 1)
    tp.agregar_obstaculo(Jugador.JUGADOR_2, Obstaculo.INTELIGENCIA, 0)
    return Contexto(
        tp=tp,
        sprites={},
        pokemones=pokemones,
        nombre_entrenador="Ash",
        dificultad=Dificultad.DIFICIL,
        intentos_restantes=2,
    )


def test_puntaje_perfect_when_equal():
    assert calcular_puntaje(0, 0) == 100
    assert calcular_puntaje(7, 7) == 100


def test_puntaje_zero_when_one_is_zero():
    assert calcular_puntaje(10, 0) == 0


@pytest.mark.parametrize("t1,t2", [(1, 9), (4, 6), (12, 3), (20, 19)])
def test_puntaje_symmetric_and_bounded(t1, t2):
    puntaje = calcular_puntaje(t1, t2)
    assert puntaje == calcular_puntaje(t2, t1)
    assert 0 <= puntaje < 100


def test_init_reads_times(contexto):
    escena = Ganador(contexto)
    assert escena.tiempo1 == contexto.tp.calcular_tiempo_pista(Jugador.JUGADOR_1)
    assert escena.tiempo2 == contexto.tp.calcular_tiempo_pista(Jugador.JUGADOR_2)
    assert escena.puntaje == calcular_puntaje(escena.tiempo1, escena.tiempo2)
    assert escena.nombre_cpu == M_DIFICIL


def test_quit_goes_to_menu(contexto):
    escena = Ganador(contexto)
    assert escena.procesar_eventos(ord("q"), contexto) is NombreEscena.MENU_PRINCIPAL


def test_retry_consumes_an_attempt(contexto):
    escena = Ganador(contexto)
    assert escena.procesar_eventos(ord("r"), contexto) is NombreEscena.PREPARACION
    assert contexto.intentos_restantes == 1
    assert contexto.es_reintento is True


def test_retry_without_attempts(contexto):
    contexto.intentos_restantes = 0
    escena = Ganador(contexto)
    assert escena.procesar_eventos(ord("R"), contexto) is NombreEscena.GANADOR
    assert contexto.intentos_restantes == 0
    assert contexto.es_reintento is False


def test_draws_title_after_transition(contexto):
    contexto.intentos_restantes = 0
    escena = Ganador(contexto)
    pantalla = Pantalla(90, 30, salida=io.StringIO(), dimensiones=(90, 30))
    contexto.tiempo_escena_ms = 2000
    escena.dibujar_graficos(pantalla, contexto)
    titulo = "".join(pantalla.celda(P_TITULO[0] + i, P_TITULO[1]).caracter for i in range(7))
    assert titulo == "PUNTAJE"
    mensaje = "".join(
        pantalla.celda(X_MARGEN + i, Y_INTENTOS).caracter
        for i in range(len(M_NO_HAY_INTENTOS))
    )
    assert mensaje == M_NO_HAY_INTENTOS


def test_transition_covers_left_half_at_start(contexto):
    escena = Ganador(contexto)
    pantalla = Pantalla(90, 30, salida=io.StringIO(), dimensiones=(90, 30))
    contexto.tiempo_escena_ms = 0
    escena.dibujar_graficos(pantalla, contexto)
    assert pantalla.celda(*P_TITULO).caracter == " "