import pytest

from pokerush.color import Color


def test_mezcla_completa_devuelve_el_primero():
    a = Color(10, 200, 30)
    b = Color(250, 5, 90)
    assert a.mezcla(b, 1.0) == a


def test_mezcla_nula_devuelve_el_segundo():
    a = Color(10, 200, 30)
    b = Color(250, 5, 90)
    assert a.mezcla(b, 0.0) == b


def test_mezcla_de_colores_iguales():
    c = Color(42, 43, 44)
    assert c.mezcla(c, 0.37) == c


def test_mezcla_a_mitad():
    assert Color(200, 100, 50).mezcla(Color(0, 0, 0), 0.5) == Color(100, 50, 25)


@pytest.mark.parametrize("porcentaje", [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0])
def test_mezcla_queda_entre_ambos(porcentaje):
    a = Color(255, 0, 120)
    b = Color(0, 255, 60)
    resultado = a.mezcla(b, porcentaje)
    for canal, x, y in zip(resultado, a, b):
        assert min(x, y) <= canal <= max(x, y)


def test_canal_fuera_de_rango():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_iguales_y_distintos():
    assert Color(1, 2, 3) == Color(1, 2, 3)
    assert not Color(1, 2, 3) == Color(1, 2, 4)


def test_iteracion_en_orden_rgb():
    assert list(Color(7, 8, 9)) == [7, 8, 9]