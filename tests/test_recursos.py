import struct

import pytest

from pokerush.color import Color
from pokerush.estado import Estado, EstadoError
from pokerush.recursos import cargar_sprites, obtener_lista_pokemones
from pokerush.tp import TP, Jugador


def _bmp(filas):
    """24-bit BMP bytes from top-down rows of (r, g, b) tuples."""
    alto = len(filas)
    ancho = len(filas[0])
    bytes_fila = (ancho * 3 + 3) // 4 * 4
    cuerpo = b""
    for fila in reversed(filas):
        datos = bytes(canal for r, g, b in fila for canal in (b, g, r))
        cuerpo += datos + b"\x00" * (bytes_fila - len(datos))
    encabezado = struct.pack("<HIHHI", 0x4D42, 54 + len(cuerpo), 0, 0, 54)
    dib = struct.pack("<IiiHHIIiiII", 40, ancho, alto, 1, 24, 0, len(cuerpo), 0, 0, 0, 0)
    return encabezado + dib + cuerpo


def _tp(tmp_path, contenido):
    archivo = tmp_path / "pokemones.csv"
    archivo.write_text(contenido, encoding="utf-8")
    return TP(archivo)


def test_carga_sprites_por_nombre_sin_extension(tmp_path):
    (tmp_path / "pikachu.bmp").write_bytes(_bmp([[(255, 0, 0)]]))
    sprites = cargar_sprites(tmp_path)
    assert list(sprites) == ["pikachu"]
    assert sprites["pikachu"].ancho == 2
    assert sprites["pikachu"].color_en(0, 0) == Color(255, 0, 0)


def test_nombre_hasta_el_primer_punto(tmp_path):
    (tmp_path / "logo.front.bmp").write_bytes(_bmp([[(1, 2, 3)]]))
    assert set(cargar_sprites(tmp_path)) == {"logo"}


def test_omite_archivos_invalidos_y_directorios(tmp_path):
    (tmp_path / "bueno.bmp").write_bytes(_bmp([[(1, 2, 3), (4, 5, 6)]]))
    (tmp_path / "roto.bmp").write_bytes(b"no es una imagen")
    (tmp_path / "carpeta").mkdir()
    sprites = cargar_sprites(tmp_path)
    assert set(sprites) == {"bueno"}


def test_directorio_inexistente(tmp_path):
    with pytest.raises(EstadoError) as error:
        cargar_sprites(tmp_path / "no_existe")
    assert error.value.estado is Estado.ERROR_RECORRIDO_DIRECTORIO


def test_lista_pokemones_ordenada(tmp_path):
    tp = _tp(tmp_path, "pikachu,5,3,2\nbulbasaur,1,2,3\n")
    pokemones = obtener_lista_pokemones(tp)
    assert [p.nombre for p in pokemones] == ["Bulbasaur", "Pikachu"]
    assert pokemones[1] is tp.buscar_pokemon("pikachu")


def test_lista_pokemones_vacia(tmp_path):
    assert obtener_lista_pokemones(_tp(tmp_path, "")) == []


def test_lista_falla_si_ya_hay_seleccion(tmp_path):
    tp = _tp(tmp_path, "pikachu,5,3,2\nbulbasaur,1,2,3\n")
    assert tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Pikachu")
    with pytest.raises(EstadoError):
        obtener_lista_pokemones(tp)