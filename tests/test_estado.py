import io

import pytest

from pokerush.estado import Estado, EstadoError, mensaje_estado, mostrar_estado


def test_mensaje_terminal_chica():
    assert mensaje_estado(Estado.TERMINAL_MUY_CHICA) == (
        "Terminal muy pequeña, agrandala (o hacé zoom hacia afuera) y probá de nuevo."
    )


def test_mensaje_creacion_tp():
    assert mensaje_estado(Estado.ERROR_CREACION_TP) == (
        "Error al crear el TP. Asegurate de que el archivo de "
        "pokemones.csv sea el correcto."
    )


@pytest.mark.parametrize("estado", list(Estado))
def test_todo_estado_tiene_mensaje(estado):
    assert len(mensaje_estado(estado)) > 0


def test_bitmap_invalido_comparte_mensaje_con_lectura():
    assert mensaje_estado(Estado.ERROR_BITMAP_INVALIDO) == mensaje_estado(
        Estado.ERROR_LEER_BITMAP
    )


def test_mostrar_finalizado():
    salida = io.StringIO()
    mostrar_estado(Estado.FINALIZADO_POR_USUARIO, salida)
    assert salida.getvalue() == "\x1b[32mFinalizado correctamente.\n\x1b[0m"


def test_mostrar_error():
    salida = io.StringIO()
    mostrar_estado(Estado.SENIAL_INTERRUPCION, salida)
    assert salida.getvalue() == (
        "\x1b[31mError: Señal de interrupción recibida.\n\x1b[0m"
    )


def test_mostrar_por_defecto_en_stdout(capsys):
    mostrar_estado(Estado.ERROR_STDOUT)
    assert capsys.readouterr().out == (
        "\x1b[31mError: Error al configurar stdout.\n\x1b[0m"
    )


def test_estado_error_lleva_estado_y_mensaje():
    error = EstadoError(Estado.JUEGO_INVALIDO)
    assert error.estado is Estado.JUEGO_INVALIDO
    assert str(error) == "El juego cargado no es válido."


def test_estado_error_acepta_entero():
    error = EstadoError(Estado.ERROR_MEMORIA.value, "otro")
    assert error.estado is Estado.ERROR_MEMORIA
    assert str(error) == "otro"