import io
import os

from pokerush.entrada import leer_caracter, terminal_sin_echo


def test_lee_caracter_simple():
    assert leer_caracter(io.StringIO("a")) == ord("a")


def test_sin_datos_devuelve_cero():
    assert leer_caracter(io.StringIO("")) == 0


def test_consume_de_a_un_caracter():
    flujo = io.StringIO("xy")
    assert leer_caracter(flujo) == ord("x")
    assert leer_caracter(flujo) == ord("y")
    assert leer_caracter(flujo) == 0


def test_secuencia_de_escape_es_negativa():
    assert leer_caracter(io.StringIO("\x1b[A")) == -ord("A")


def test_secuencia_de_escape_en_bytes():
    assert leer_caracter(io.BytesIO(b"\x1b[D")) == -ord("D")


def test_escape_luego_caracter_normal():
    flujo = io.StringIO("\x1b[Bq")
    assert leer_caracter(flujo) == -ord("B")
    assert leer_caracter(flujo) == ord("q")


def test_lee_de_un_descriptor_real():
    lectura, escritura = os.pipe()
    try:
        os.write(escritura, b"z")
        with open(lectura, "rb", buffering=0, closefd=False) as flujo:
            assert leer_caracter(flujo) == ord("z")
    finally:
        os.close(lectura)
        os.close(escritura)


def test_terminal_sin_echo_entrega_el_flujo():
    flujo = io.StringIO("k")
    with terminal_sin_echo(flujo) as dentro:
        assert dentro is flujo
        assert leer_caracter(dentro) == ord("k")