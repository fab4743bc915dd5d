import io
import struct

import pytest

from pokerush.color import Color
from pokerush.estado import Estado, EstadoError
from pokerush.sprite import Sprite, leer_sprite

ROJO = Color(255, 0, 0)
AZUL = Color(0, 0, 255)
VERDE = Color(0, 255, 0)
GRIS = Color(10, 20, 30)


def _bmp_bytes(filas, alto=None, firma=b"BM", bits=24, compresion=0):
    """BMP with rows given in file order (bottom row first)."""
    ancho = len(filas[0]) if filas else 0
    alto = len(filas) if alto is None else alto
    relleno = (-ancho * 3) % 4
    pixeles = b"".join(
        b"".join(bytes((c.b, c.g, c.r)) for c in fila) + b"\0" * relleno
        for fila in filas
    )
    cabecera = firma + struct.pack("<IHHI", 54 + len(pixeles), 0, 0, 54)
    dib = struct.pack(
        "<IiiHHIIiiII", 40, ancho, alto, 1, bits, compresion, len(pixeles), 0, 0, 0, 0
    )
    return cabecera + dib + pixeles


def test_pixel_unico_se_duplica():
    sprite = leer_sprite(io.BytesIO(_bmp_bytes([[ROJO]])))
    assert sprite.ancho == 2
    assert sprite.alto == 1
    assert sprite.colores == (ROJO, ROJO)
    assert sprite.mascara == (True, True)


def test_verde_es_transparente():
    sprite = leer_sprite(io.BytesIO(_bmp_bytes([[VERDE, GRIS]])))
    assert sprite.colores == (None, None, GRIS, GRIS)
    assert sprite.mascara == (False, False, True, True)


def test_filas_invertidas():
    sprite = leer_sprite(io.BytesIO(_bmp_bytes([[ROJO], [AZUL]])))
    assert sprite.color_en(0, 0) == AZUL
    assert sprite.color_en(1, 1) == ROJO


def test_relleno_de_filas():
    filas = [[ROJO, AZUL], [GRIS, VERDE]]
    sprite = leer_sprite(io.BytesIO(_bmp_bytes(filas)))
    assert sprite.ancho == 4
    assert sprite.alto == 2
    assert sprite.colores == (GRIS, GRIS, None, None, ROJO, ROJO, AZUL, AZUL)


def test_alto_negativo_usa_valor_absoluto():
    sprite = leer_sprite(io.BytesIO(_bmp_bytes([[ROJO], [AZUL]], alto=-2)))
    assert sprite.alto == 2
    assert sprite.color_en(0, 0) == AZUL


def test_relleno_final_puede_faltar():
    datos = _bmp_bytes([[ROJO]])
    sprite = leer_sprite(io.BytesIO(datos[:-1]))
    assert sprite.colores == (ROJO, ROJO)


def test_firma_invalida():
    with pytest.raises(EstadoError) as error:
        leer_sprite(io.BytesIO(_bmp_bytes([[ROJO]], firma=b"XX")))
    assert error.value.estado is Estado.ERROR_BITMAP_INVALIDO


def test_bits_por_pixel_invalidos():
    with pytest.raises(EstadoError) as error:
        leer_sprite(io.BytesIO(_bmp_bytes([[ROJO]], bits=32)))
    assert error.value.estado is Estado.ERROR_BITMAP_INVALIDO


def test_compresion_invalida():
    with pytest.raises(EstadoError) as error:
        leer_sprite(io.BytesIO(_bmp_bytes([[ROJO]], compresion=1)))
    assert error.value.estado is Estado.ERROR_BITMAP_INVALIDO


def test_cabecera_truncada():
    with pytest.raises(EstadoError) as error:
        leer_sprite(io.BytesIO(b"BM\x00\x00"))
    assert error.value.estado is Estado.ERROR_LEER_BITMAP


def test_pixeles_truncados():
    datos = _bmp_bytes([[ROJO]])
    with pytest.raises(EstadoError) as error:
        leer_sprite(io.BytesIO(datos[:-2]))
    assert error.value.estado is Estado.ERROR_LEER_BITMAP


def test_sprite_tamanio_inconsistente():
    with pytest.raises(ValueError):
        Sprite(2, 2, (ROJO,))


def test_color_en_fuera_de_rango():
    sprite = Sprite(1, 1, (ROJO,))
    with pytest.raises(IndexError):
        sprite.color_en(1, 0)