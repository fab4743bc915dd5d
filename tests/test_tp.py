import pytest

from pokerush.tp import (
    TIEMPO_VALOR_BASE,
    TP,
    Jugador,
    Obstaculo,
    PokemonInfo,
    normalizar_nombre,
)

CSV = "pikachu,3,5,2\nBULBASAUR,4,2,6\nCharmander,7,4,1\nsquirtle,2,6,5\n"


@pytest.fixture
def tp(tmp_path):
    ruta = tmp_path / "pokemones.csv"
    ruta.write_text(CSV)
    return TP(ruta)


def crear(tmp_path, contenido):
    ruta = tmp_path / "p.csv"
    ruta.write_text(contenido)
    return TP(ruta)


def test_normalizar_nombre():
    assert normalizar_nombre("piKaCHU") == "Pikachu"
    assert normalizar_nombre("") == ""


def test_cantidad_pokemon(tp):
    assert tp.cantidad_pokemon() == 4


def test_buscar_sin_importar_mayusculas(tp):
    a = tp.buscar_pokemon("pikachu")
    b = tp.buscar_pokemon("PIKACHU")
    assert a == b
    assert a == PokemonInfo("Pikachu", 3, 5, 2)


def test_buscar_inexistente(tp):
    assert tp.buscar_pokemon("Mew") is None


def test_duplicado_reemplaza(tmp_path):
    tp = crear(tmp_path, "pikachu,1,1,1\nPIKACHU,2,2,2\n")
    assert tp.cantidad_pokemon() == 1
    assert tp.buscar_pokemon("Pikachu").fuerza == 2


def test_archivo_vacio(tmp_path):
    assert crear(tmp_path, "").cantidad_pokemon() == 0


def test_linea_invalida(tmp_path):
    with pytest.raises(ValueError):
        crear(tmp_path, "pikachu,1,2\n")


def test_archivo_inexistente(tmp_path):
    with pytest.raises(FileNotFoundError):
        TP(tmp_path / "no_existe.csv")


def test_nombres_disponibles_ordenados(tp):
    nombres = tp.nombres_disponibles().split(",")
    assert nombres == sorted(nombres)
    assert set(nombres) == {"Pikachu", "Bulbasaur", "Charmander", "Squirtle"}


def test_nombres_disponibles_excluye_seleccionados(tp):
    assert tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Pikachu")
    assert tp.seleccionar_pokemon(Jugador.JUGADOR_2, "Squirtle")
    nombres = tp.nombres_disponibles().split(",")
    assert "Pikachu" not in nombres
    assert "Squirtle" not in nombres
    assert len(nombres) == 2


def test_seleccionar_pokemon(tp):
    assert tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Pikachu")
    assert tp.pokemon_seleccionado(Jugador.JUGADOR_1).nombre == "Pikachu"
    assert tp.pokemon_seleccionado(Jugador.JUGADOR_2) is None


def test_no_se_puede_elegir_el_del_rival(tp):
    assert tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Pikachu")
    assert not tp.seleccionar_pokemon(Jugador.JUGADOR_2, "Pikachu")
    assert tp.pokemon_seleccionado(Jugador.JUGADOR_2) is None


def test_seleccionar_inexistente_o_sin_normalizar(tp):
    assert not tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Mew")
    assert not tp.seleccionar_pokemon(Jugador.JUGADOR_1, "pikachu")


def test_reemplazar_seleccion(tp):
    tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Pikachu")
    tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Squirtle")
    assert tp.pokemon_seleccionado(Jugador.JUGADOR_1).nombre == "Squirtle"


def test_agregar_obstaculos_en_posicion(tp):
    j = Jugador.JUGADOR_1
    assert tp.agregar_obstaculo(j, Obstaculo.FUERZA, 0) == 1
    assert tp.agregar_obstaculo(j, Obstaculo.DESTREZA, 0) == 2
    assert tp.agregar_obstaculo(j, Obstaculo.INTELIGENCIA, 1) == 3
    assert tp.obstaculos_pista(j) == "DIF"


def test_agregar_mas_alla_del_final(tp):
    j = Jugador.JUGADOR_2
    tp.agregar_obstaculo(j, Obstaculo.FUERZA, 0)
    tp.agregar_obstaculo(j, Obstaculo.INTELIGENCIA, 50)
    assert tp.obstaculos_pista(j) == "FI"
    assert tp.obstaculos_pista(Jugador.JUGADOR_1) == ""


def test_quitar_obstaculo(tp):
    j = Jugador.JUGADOR_1
    for i, o in enumerate([Obstaculo.FUERZA, Obstaculo.DESTREZA, Obstaculo.INTELIGENCIA]):
        tp.agregar_obstaculo(j, o, i)
    assert tp.quitar_obstaculo(j, 0) == 2
    assert tp.obstaculos_pista(j) == "DI"
    assert tp.quitar_obstaculo(j, 99) == 1
    assert tp.obstaculos_pista(j) == "D"


def test_quitar_de_pista_vacia(tp):
    with pytest.raises(IndexError):
        tp.quitar_obstaculo(Jugador.JUGADOR_1, 0)


def test_limpiar_pista(tp):
    j = Jugador.JUGADOR_1
    tp.agregar_obstaculo(j, Obstaculo.FUERZA, 0)
    tp.agregar_obstaculo(j, Obstaculo.FUERZA, 1)
    tp.limpiar_pista(j)
    assert tp.obstaculos_pista(j) == ""


def test_tiempo_sin_pokemon_o_sin_obstaculos(tp):
    j = Jugador.JUGADOR_1
    tp.agregar_obstaculo(j, Obstaculo.FUERZA, 0)
    assert tp.calcular_tiempo_pista(j) == 0
    assert tp.tiempo_por_obstaculo(j) is None
    tp.limpiar_pista(j)
    tp.seleccionar_pokemon(j, "Pikachu")
    assert tp.calcular_tiempo_pista(j) == 0
    assert tp.tiempo_por_obstaculo(j) is None


def test_tiempo_base_con_atributo_cero(tmp_path):
    tp = crear(tmp_path, "Magikarp,0,0,0\n")
    j = Jugador.JUGADOR_1
    tp.seleccionar_pokemon(j, "Magikarp")
    tp.agregar_obstaculo(j, Obstaculo.DESTREZA, 0)
    assert tp.calcular_tiempo_pista(j) == TIEMPO_VALOR_BASE
    assert tp.tiempo_por_obstaculo(j) == str(TIEMPO_VALOR_BASE)


def test_racha_reduce_tiempo(tmp_path):
    tp = crear(tmp_path, "Magikarp,0,0,0\n")
    j = Jugador.JUGADOR_1
    tp.seleccionar_pokemon(j, "Magikarp")
    for i in range(3):
        tp.agregar_obstaculo(j, Obstaculo.FUERZA, i)
    tiempos = [int(t) for t in tp.tiempo_por_obstaculo(j).split(",")]
    assert tiempos[0] == TIEMPO_VALOR_BASE
    assert tiempos == sorted(tiempos, reverse=True)
    assert len(set(tiempos)) == 3


def test_tiempo_no_negativo(tmp_path):
    tp = crear(tmp_path, "Mewtwo,20,20,20\n")
    j = Jugador.JUGADOR_2
    tp.seleccionar_pokemon(j, "Mewtwo")
    tp.agregar_obstaculo(j, Obstaculo.FUERZA, 0)
    tp.agregar_obstaculo(j, Obstaculo.INTELIGENCIA, 1)
    assert tp.tiempo_por_obstaculo(j) == "0,0"
    assert tp.calcular_tiempo_pista(j) == 0


def test_total_es_suma_de_tiempos(tp):
    j = Jugador.JUGADOR_1
    tp.seleccionar_pokemon(j, "Charmander")
    pista = [Obstaculo.FUERZA, Obstaculo.FUERZA, Obstaculo.DESTREZA,
             Obstaculo.INTELIGENCIA, Obstaculo.INTELIGENCIA]
    for i, o in enumerate(pista):
        tp.agregar_obstaculo(j, o, i)
    tiempos = [int(t) for t in tp.tiempo_por_obstaculo(j).split(",")]
    assert len(tiempos) == len(pista)
    assert tp.calcular_tiempo_pista(j) == sum(tiempos)


def test_letras_de_obstaculos():
    assert Obstaculo.FUERZA.letra == "F"
    assert Obstaculo.DESTREZA.letra == "D"
    assert Obstaculo.INTELIGENCIA.letra == "I"
    for o in Obstaculo:
        assert Obstaculo.desde_letra(o.letra) is o
    with pytest.raises(ValueError):
        Obstaculo.desde_letra("?")


def test_jugador_invalido(tp):
    with pytest.raises(ValueError):
        tp.obstaculos_pista(5)
    with pytest.raises(ValueError):
        tp.pokemon_seleccionado(-1)