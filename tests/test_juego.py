import pytest

from pokerush.constantes import ALTO_PANTALLA, ANCHO_PANTALLA, FRAMES_POR_SEGUNDO
from pokerush.entrada import LINEFEED
from pokerush.escena import NombreEscena
from pokerush.estado import Estado, EstadoError
from pokerush.juego import PokeRush, PrConfig, main


def _config(tmp_path, contenido):
    csv = tmp_path / "pokemones.csv"
    csv.write_text(contenido)
    sprites = tmp_path / "sprites"
    sprites.mkdir()
    return PrConfig(pokemones_csv=str(csv), sprites_dir=str(sprites))


@pytest.fixture
def juego(tmp_path):
    juego = PokeRush()
    juego.iniciar(_config(tmp_path, "pikachu,2,3,4\nbulbasaur,3,3,3\n"))
    return juego


def _al_menu(juego):
    juego.procesar_eventos(ord("x"), 0)
    for letra in "Ash":
        juego.procesar_eventos(ord(letra), 0)
    return juego.procesar_eventos(LINEFEED, 0)


def test_config_motor():
    config = PokeRush().config_motor()
    assert config.ancho_pantalla == ANCHO_PANTALLA
    assert config.alto_pantalla == ALTO_PANTALLA
    assert config.frames_por_segundo == FRAMES_POR_SEGUNDO


def test_iniciar_empieza_en_splash(juego):
    assert juego.escena_actual == NombreEscena.SPLASH_SCREEN
    assert [p.nombre for p in juego.contexto.pokemones] == ["Bulbasaur", "Pikachu"]


def test_tiempo_de_escena_acumula_y_se_reinicia(juego):
    assert juego.procesar_eventos(0, 16) is None
    assert juego.procesar_eventos(0, 16) is None
    assert juego.contexto.tiempo_escena_ms == 32
    juego.procesar_eventos(ord("a"), 16)
    assert juego.escena_actual == NombreEscena.ENTRENADOR
    assert juego.contexto.tiempo_escena_ms == 0


def test_nombre_y_menu_principal(juego):
    assert _al_menu(juego) is None
    assert juego.escena_actual == NombreEscena.MENU_PRINCIPAL
    assert juego.contexto.nombre_entrenador == "Ash"


def test_salir_desde_menu(juego):
    _al_menu(juego)
    assert juego.procesar_eventos(ord("q"), 0) == Estado.FINALIZADO_POR_USUARIO


def test_informacion_y_volver(juego):
    _al_menu(juego)
    juego.procesar_eventos(ord("i"), 0)
    assert juego.escena_actual == NombreEscena.INFORMACION
    juego.procesar_eventos(ord("q"), 0)
    assert juego.escena_actual == NombreEscena.MENU_PRINCIPAL


def test_preparacion_con_un_pokemon_falla(tmp_path):
    juego = PokeRush()
    juego.iniciar(_config(tmp_path, "pikachu,2,3,4\n"))
    _al_menu(juego)
    juego.procesar_eventos(ord("j"), 0)
    assert juego.escena_actual == NombreEscena.MENU_JUEGO
    assert juego.procesar_eventos(ord("f"), 0) == Estado.ERROR_CREACION_ESCENA


def test_elegir_oponente_lleva_a_preparacion(juego):
    _al_menu(juego)
    juego.procesar_eventos(ord("j"), 0)
    assert juego.procesar_eventos(ord("m"), 0) is None
    assert juego.escena_actual == NombreEscena.PREPARACION
    assert juego.contexto.intentos_restantes == 4


def test_iniciar_sin_configuracion():
    with pytest.raises(EstadoError):
        PokeRush().iniciar(None)


def test_iniciar_sin_csv(tmp_path):
    config = PrConfig(pokemones_csv=str(tmp_path / "falta.csv"), sprites_dir=str(tmp_path))
    with pytest.raises(EstadoError):
        PokeRush().iniciar(config)


def test_main_sin_csv_devuelve_error_tp(tmp_path):
    resultado = main(["--pokemones", str(tmp_path / "falta.csv"), "--sprites", str(tmp_path)])
    assert resultado == int(Estado.ERROR_CREACION_TP)